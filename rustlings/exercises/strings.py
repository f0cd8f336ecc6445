"""Small string operations."""

from __future__ import annotations

_COLOR_WORDS = frozenset({"green", "blue", "red"})


def current_favorite_color() -> str:
    return "blue"


def is_a_color_word(attempt: str) -> bool:
    """Return True for "green", "blue" or "red"."""
    return attempt in _COLOR_WORDS


def trim_me(text: str) -> str:
    """Remove whitespace from both ends."""
    return text.strip()


def compose_me(text: str) -> str:
    """Append " world!"."""
    return text + " world!"


def replace_me(text: str) -> str:
    """Replace every "cars" with "balloons"."""
    return text.replace("cars", "balloons")