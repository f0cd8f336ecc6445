"""Name tags, token costs and strictly positive integers."""

from __future__ import annotations

from dataclasses import dataclass

_PROCESSING_FEE = 1
_COST_PER_ITEM = 5
_I32_MIN, _I32_MAX = -(2**31), 2**31 - 1
_I64_MIN, _I64_MAX = -(2**63), 2**63 - 1


def _parse_int(text: str, low: int, high: int) -> int:
    """Parse a decimal integer the strict way: optional sign, digits only."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    sign = 1
    digits = text
    if text[0] in "+-":
        sign = -1 if text[0] == "-" else 1
        digits = text[1:]
    if not digits or not all(char in "0123456789" for char in digits):
        raise ValueError("invalid digit found in string")
    value = sign * int(digits)
    if value > high:
        raise ValueError("number too large to fit in target type")
    if value < low:
        raise ValueError("number too small to fit in target type")
    return value


def generate_nametag_text(name: str) -> str:
    """Return the name tag text; raise ValueError for an empty name."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Return the token cost of the typed quantity; raise ValueError if it is not a number."""
    quantity = _parse_int(item_quantity, _I32_MIN, _I32_MAX)
    cost = quantity * _COST_PER_ITEM + _PROCESSING_FEE
    if not _I32_MIN <= cost <= _I32_MAX:
        raise OverflowError("total cost does not fit in a 32-bit integer")
    return cost


class CreationError(ValueError):
    """The value cannot be a positive nonzero integer."""


class NegativeError(CreationError):
    """The number is negative."""

    def __init__(self) -> None:
        super().__init__("number is negative")


class ZeroError(CreationError):
    """The number is zero."""

    def __init__(self) -> None:
        super().__init__("number is zero")


class ParsePosNonzeroError(ValueError):
    """Text could not be parsed into a positive nonzero integer.

    ``error`` holds the underlying problem: a CreationError, or the
    ValueError raised while parsing the integer.
    """

    def __init__(self, error: ValueError):
        super().__init__(str(error))
        self.error = error


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer that is strictly greater than zero."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise NegativeError()
        if self.value == 0:
            raise ZeroError()


def parse_pos_nonzero(text: str) -> PositiveNonzeroInteger:
    """Parse text into a PositiveNonzeroInteger; raise ParsePosNonzeroError otherwise."""
    try:
        value = _parse_int(text, _I64_MIN, _I64_MAX)
    except ValueError as exc:
        raise ParsePosNonzeroError(exc) from exc
    try:
        return PositiveNonzeroInteger(value)
    except CreationError as exc:
        raise ParsePosNonzeroError(exc) from exc