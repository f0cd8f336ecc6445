"""Apple prices, a string-transforming machine and report cards."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Generic, TypeVar

_ACTIONS = ("uppercase", "trim", "append")

T = TypeVar("T")


def calculate_price_of_apples(quantity: int) -> int:
    """Two per apple, or one per apple when buying more than 40."""
    if not 0 <= quantity <= 255:
        raise ValueError(f"quantity {quantity} is outside 0..=255")
    if quantity <= 40:
        return 2 * quantity
    return quantity


@dataclass(frozen=True)
class Command:
    """A transformation: "uppercase", "trim", or "append" with a repeat count."""

    action: str
    times: int = 0

    def __post_init__(self) -> None:
        if self.action not in _ACTIONS:
            raise ValueError(f"unknown command: {self.action!r}")
        if self.times < 0:
            raise ValueError("repeat count must not be negative")


def transformer(items: Iterable[tuple[str, Command]]) -> list[str]:
    """Apply each command to its string and collect the results."""
    output = []
    for text, command in items:
        match command.action:
            case "uppercase":
                output.append(text.upper())
            case "trim":
                output.append(text.strip())
            case "append":
                output.append(text + "bar" * command.times)
    return output


@dataclass
class ReportCard(Generic[T]):
    """A student's report card with a grade of any printable kind."""

    grade: T
    student_name: str
    student_age: int

    def print(self) -> str:
        """Return the report card line."""
        return (
            f"{self.student_name} ({self.student_age}) - "
            f"achieved a grade of {self.grade}"
        )