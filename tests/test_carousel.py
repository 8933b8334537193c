import pytest

from shopstore.carousel import Carousel

WIDTH, HEIGHT = 800, 300


def test_needs_a_picture():
    with pytest.raises(ValueError):
        Carousel(0)


def test_next_wraps_around():
    carousel = Carousel(3)
    seen = [carousel.next() for _ in range(3)]
    assert seen[-1] == 0
    assert sorted(seen) == [0, 1, 2]


def test_previous_undoes_next():
    carousel = Carousel(4)
    carousel.next()
    carousel.next()
    before = carousel.index
    carousel.next()
    assert carousel.previous() == before


def test_previous_from_start_goes_to_last():
    carousel = Carousel(5)
    assert carousel.previous() == 4


def test_click_left_arrow_goes_back():
    carousel = Carousel(5)
    assert carousel.click(0, HEIGHT // 2, WIDTH, HEIGHT) == 4


def test_click_right_arrow_goes_forward():
    carousel = Carousel(5)
    assert carousel.click(WIDTH - 1, HEIGHT // 2, WIDTH, HEIGHT) == 1


def test_click_elsewhere_keeps_index():
    carousel = Carousel(5)
    carousel.next()
    assert carousel.click(WIDTH // 2, HEIGHT // 2, WIDTH, HEIGHT) == 1
    assert carousel.click(0, 0, WIDTH, HEIGHT) == 1
    assert carousel.click(WIDTH - 1, HEIGHT - 1, WIDTH, HEIGHT) == 1


def test_single_picture_stays_put():
    carousel = Carousel(1)
    assert carousel.next() == 0
    assert carousel.click(0, HEIGHT // 2, WIDTH, HEIGHT) == 0