"""Capitalising words, exact division, factorials and progress counts."""

from __future__ import annotations

import enum
import math
from collections.abc import Iterable, Mapping

_U64_MAX = 2**64 - 1
_NUMBERS = (27, 297, 38502, 81)
_DIVISOR = 27


def capitalize_first(text: str) -> str:
    """Upper-case the first character: "hello" -> "Hello"."""
    if not text:
        return ""
    return text[0].upper() + text[1:]


def capitalize_words_vector(words: Iterable[str]) -> list[str]:
    """Capitalise every word and return the list of results."""
    return [capitalize_first(word) for word in words]


def capitalize_words_string(words: Iterable[str]) -> str:
    """Capitalise every word and join the results without a separator."""
    return "".join(capitalize_words_vector(words))


class DivisionError(ArithmeticError):
    """A division could not be carried out exactly."""


class NotDivisibleError(DivisionError):
    """The dividend is not evenly divisible by the divisor."""

    def __init__(self, dividend: int, divisor: int):
        super().__init__(f"{dividend} is not divisible by {divisor}")
        self.dividend = dividend
        self.divisor = divisor

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NotDivisibleError):
            return NotImplemented
        return (self.dividend, self.divisor) == (other.dividend, other.divisor)

    def __hash__(self) -> int:
        return hash((self.dividend, self.divisor))


class DivideByZeroError(DivisionError):
    """The divisor is zero."""

    def __init__(self) -> None:
        super().__init__("division by zero")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DivideByZeroError):
            return NotImplemented
        return True

    def __hash__(self) -> int:
        return hash(DivideByZeroError)


def divide(a: int, b: int) -> int:
    """Return a / b when a is evenly divisible by b; raise DivisionError otherwise."""
    if b == 0:
        raise DivideByZeroError()
    if a % b != 0:
        raise NotDivisibleError(a, b)
    return a // b


def result_with_list() -> list[int]:
    """Divide every number by 27; the first failure is raised."""
    return [divide(number, _DIVISOR) for number in _NUMBERS]


def _attempt(a: int, b: int) -> int | DivisionError:
    try:
        return divide(a, b)
    except DivisionError as exc:
        return exc


def list_of_results() -> list[int | DivisionError]:
    """Divide every number by 27, keeping each quotient or error in place."""
    return [_attempt(number, _DIVISOR) for number in _NUMBERS]


def factorial(num: int) -> int:
    """Return num! for an unsigned 64-bit num; raise if it does not fit."""
    if not 0 <= num <= _U64_MAX:
        raise ValueError(f"{num} is outside the unsigned 64-bit range")
    result = math.prod(range(1, num + 1))
    if result > _U64_MAX:
        raise OverflowError(f"{num}! does not fit in an unsigned 64-bit integer")
    return result


class Progress(enum.Enum):
    NONE = "none"
    SOME = "some"
    COMPLETE = "complete"


def count_for(mapping: Mapping[str, Progress], value: Progress) -> int:
    """Count the entries with the given progress using an explicit loop."""
    count = 0
    for progress in mapping.values():
        if progress == value:
            count += 1
    return count


def count_iterator(mapping: Mapping[str, Progress], value: Progress) -> int:
    """Count the entries with the given progress."""
    return sum(1 for progress in mapping.values() if progress == value)


def count_collection_for(
    collection: Iterable[Mapping[str, Progress]], value: Progress
) -> int:
    """Count matching entries across several mappings using explicit loops."""
    count = 0
    for mapping in collection:
        for progress in mapping.values():
            if progress == value:
                count += 1
    return count


def count_collection_iterator(
    collection: Iterable[Mapping[str, Progress]], value: Progress
) -> int:
    """Count matching entries across several mappings."""
    return sum(
        1
        for mapping in collection
        for progress in mapping.values()
        if progress == value
    )