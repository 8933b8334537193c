"""Flash-sale and special-offer areas: countdown timer and rotating product strip."""

from __future__ import annotations

import json
from datetime import datetime, time
from pathlib import Path
from typing import Optional, Sequence, Union

TimeLike = Union[time, datetime]

VISIBLE_COUNT = 3


def _seconds_of_day(moment: TimeLike) -> int:
    if isinstance(moment, datetime):
        moment = moment.time()
    return moment.hour * 3600 + moment.minute * 60 + moment.second


def seconds_until(start: TimeLike, now: Optional[TimeLike] = None) -> int:
    """Absolute number of seconds between two times of day."""
    if now is None:
        now = datetime.now()
    return abs(_seconds_of_day(now) - _seconds_of_day(start))


def format_countdown(seconds: int) -> tuple[str, str, str]:
    """Split seconds into zero-padded hours, minutes and seconds; non-positive is all zero."""
    if seconds <= 0:
        hours = minutes = secs = 0
    else:
        hours, rest = divmod(seconds, 3600)
        minutes, secs = divmod(rest, 60)
    return f"{hours:02d}", f"{minutes:02d}", f"{secs:02d}"


def _format_price(value: float) -> str:
    return f"{value:.6g}"


def load_offers(path, base=None) -> list[tuple[str, str]]:
    """Read an offer file and return ``(picture_path, price)`` pairs.

    Picture paths in the file are relative to ``base``, which defaults to the
    file's own directory. Prices are formatted as short decimal text.
    """
    path = Path(path)
    base = path.parent if base is None else Path(base)
    with open(path, encoding="utf-8") as handle:
        document = json.load(handle)
    products = document.get("products") if isinstance(document, dict) else None
    offers: list[tuple[str, str]] = []
    for entry in products if isinstance(products, list) else []:
        if not isinstance(entry, dict):
            entry = {}
        picture = entry.get("picturePath")
        picture = picture if isinstance(picture, str) else ""
        price = entry.get("price")
        if isinstance(price, bool) or not isinstance(price, (int, float)):
            price = 0.0
        offers.append((str(base / picture.lstrip("/\\")), _format_price(float(price))))
    return offers


class Countdown:
    """Counts down, once per tick, the time between a session start and now."""

    def __init__(self, start: TimeLike, now: Optional[TimeLike] = None) -> None:
        self.start = start
        self.remaining = seconds_until(start, now)
        self.running = self.remaining > 0
        if not self.running:
            self.remaining = 0
        self.shown = self.tick()

    def tick(self) -> tuple[str, str, str]:
        """Show the current value, then count one second down; stops at zero."""
        shown = format_countdown(self.remaining)
        if self.remaining <= 0:
            self.running = False
        self.remaining = max(self.remaining - 1, 0)
        self.shown = shown
        return shown

    def display(self) -> tuple[str, str, str]:
        return format_countdown(self.remaining)


class ProductStrip:
    """Shows three consecutive products of a circular list."""

    def __init__(self, products: Sequence[tuple[str, str]]) -> None:
        self.products = list(products)
        if len(self.products) < VISIBLE_COUNT:
            raise ValueError(f"at least {VISIBLE_COUNT} products are needed")
        self.index = 0

    def visible(self) -> list[tuple[str, str]]:
        count = len(self.products)
        return [self.products[(self.index + offset) % count] for offset in range(VISIBLE_COUNT)]

    def step_left(self) -> list[tuple[str, str]]:
        self.index = (self.index + len(self.products) - 1) % len(self.products)
        return self.visible()

    def step_right(self) -> list[tuple[str, str]]:
        self.index = (self.index + 1) % len(self.products)
        return self.visible()