from __future__ import annotations

from config import Config

FULL_STAR = "★"
HALF_STAR = "⯨"
EMPTY_STAR = "☆"


def clamp_rating(rating: float, min_rating: float = 0.0, star_count: int = Config.STAR_COUNT) -> float:
    return max(min_rating, min(float(star_count), float(rating)))


def starting_rating(rating: float, star_count: int = Config.STAR_COUNT) -> float:
    # the picker minimum only applies to clicks, a stored 0.0 stays 0.0
    return clamp_rating(rating, 0.0, star_count)


def rating_from_click(
    index: int,
    x: float,
    width: float,
    min_rating: float = Config.MIN_PICKER_RATING,
    star_count: int = Config.STAR_COUNT,
    allow_half: bool = True,
) -> float:
    """Map a click on star ``index`` at offset ``x`` to a rating."""
    step = 0.5 if allow_half and width > 0 and x < width / 2 else 1.0
    return clamp_rating(index + step, min_rating, star_count)


def format_stars(rating: float, star_count: int = Config.STAR_COUNT) -> str:
    halves = int(round(clamp_rating(rating, 0.0, star_count) * 2))
    full, half = divmod(halves, 2)
    return FULL_STAR * full + HALF_STAR * half + EMPTY_STAR * (star_count - full - half)
