"""Coloured status lines for the terminal."""

from __future__ import annotations

import os

from rich.console import Console
from rich.text import Text

_WARN_EMOJI = "⚠️ "
_WARN_PLAIN = "!"
_SUCCESS_EMOJI = "✅"
_SUCCESS_PLAIN = "✓"


def no_emoji() -> bool:
    """Return True when the NO_EMOJI environment variable is set."""
    return "NO_EMOJI" in os.environ


def _emit(symbol: str, fallback: str, message: str, style: str) -> None:
    marker = fallback if no_emoji() else symbol
    text = Text.assemble((marker, style), " ", (message, style))
    Console(highlight=False, soft_wrap=True, emoji=False).print(text)


def warn(message: str) -> None:
    """Print a red warning line."""
    _emit(_WARN_EMOJI, _WARN_PLAIN, message, "red")


def success(message: str) -> None:
    """Print a green success line."""
    _emit(_SUCCESS_EMOJI, _SUCCESS_PLAIN, message, "green")