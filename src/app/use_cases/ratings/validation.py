import math
from typing import Optional

from libs.result import Error, Result, Return
from src.domain.entities.rating import MAX_RATING, MIN_RATING

_INVALID = Error("INVALID_RATING", f"Rating must be an integer between {MIN_RATING} and {MAX_RATING}")


def _as_integer(value) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
        return int(number) if number.is_integer() else None
    return None


def validate_rating(value) -> Result[int]:
    """Accept ints, integral floats and integral numeric strings within range"""
    rating = _as_integer(value)
    if rating is None or not MIN_RATING <= rating <= MAX_RATING:
        return Return.err(_INVALID)
    return Return.ok(rating)


def round_half_up(value: float, digits: int = 1) -> float:
    factor = 10**digits
    return math.floor(value * factor + 0.5) / factor
