"""Building and doubling lists of numbers."""

from __future__ import annotations


def array_and_vec() -> tuple[tuple[int, ...], list[int]]:
    """Return a fixed tuple and a list holding the same elements."""
    fixed = (10, 20, 30, 40)
    return fixed, [10, 20, 30, 40]


def vec_loop(values: list[int]) -> list[int]:
    """Double every element of the list in place and return it."""
    values[:] = [value * 2 for value in values]
    return values


def vec_map(values: list[int]) -> list[int]:
    """Return a new list with every element doubled."""
    return [value * 2 for value in values]