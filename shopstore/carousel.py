"""Rotating advertisement banner: index handling and arrow-button hit tests."""

from __future__ import annotations

BUTTON_WIDTH = 15
BUTTON_HEIGHT = 25
INTERVAL_MS = 4000


def _contains(rect: tuple[int, int, int, int], x: int, y: int) -> bool:
    left, top, width, height = rect
    return left <= x < left + width and top <= y < top + height


class Carousel:
    """Tracks which of ``count`` pictures is shown."""

    def __init__(self, count: int) -> None:
        if count < 1:
            raise ValueError("a carousel needs at least one picture")
        self.count = count
        self.index = 0

    def next(self) -> int:
        self.index = (self.index + 1) % self.count
        return self.index

    def previous(self) -> int:
        self.index = (self.index + self.count - 1) % self.count
        return self.index

    @staticmethod
    def _button_areas(width: int, height: int):
        top = int((height - BUTTON_HEIGHT) / 2)
        left = (0, top, BUTTON_WIDTH, BUTTON_HEIGHT)
        right = (width - BUTTON_WIDTH, top, BUTTON_WIDTH, BUTTON_HEIGHT)
        extra = BUTTON_WIDTH - 8
        round_left = (
            BUTTON_WIDTH - BUTTON_HEIGHT // 2 + 1,
            top,
            BUTTON_WIDTH + extra,
            BUTTON_HEIGHT,
        )
        round_right = (
            width - BUTTON_WIDTH - (BUTTON_WIDTH - 4),
            top,
            BUTTON_WIDTH + extra,
            BUTTON_HEIGHT,
        )
        return (left, round_left), (right, round_right)

    def click(self, x: int, y: int, width: int, height: int) -> int:
        """Handle a click in a banner of the given size; arrows step the picture."""
        left_areas, right_areas = self._button_areas(width, height)
        if any(_contains(area, x, y) for area in left_areas):
            return self.previous()
        if any(_contains(area, x, y) for area in right_areas):
            return self.next()
        return self.index