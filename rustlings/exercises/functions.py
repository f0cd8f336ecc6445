"""Sale prices, parity and squares."""

from __future__ import annotations


def is_even(num: int) -> bool:
    """Return True if the number is even."""
    return num % 2 == 0


def sale_price(price: int) -> int:
    """Take 10 off an even price and 3 off an odd one."""
    if is_even(price):
        return price - 10
    return price - 3


def square(num: int) -> int:
    """Return the number multiplied by itself."""
    return num * num