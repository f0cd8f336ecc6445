"""How much ice cream is left at a given hour."""

from __future__ import annotations

_U16_MAX = 65535


def maybe_icecream(time_of_day: int) -> int | None:
    """Return 5 before 22:00, 0 until midnight, and None for hours past 23."""
    if not 0 <= time_of_day <= _U16_MAX:
        raise ValueError(f"time of day {time_of_day} is outside 0..=65535")
    if time_of_day < 22:
        return 5
    if time_of_day < 24:
        return 0
    return None