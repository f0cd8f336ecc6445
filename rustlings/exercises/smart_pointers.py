"""A cons list and a copy-on-write sequence."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Cons:
    """One cell of a cons list; ``rest`` is None at the end of the list."""

    value: int
    rest: Cons | None = None


def create_empty_list() -> Cons | None:
    """Return the empty list."""
    return None


def create_non_empty_list() -> Cons:
    """Return a list holding the single value 1."""
    return Cons(1, None)


class Cow(Generic[T]):
    """A sequence that is only copied the first time it must be changed."""

    def __init__(self, data: Sequence[T], owned: bool):
        self.data: Sequence[T] = data
        self.is_owned = owned

    @classmethod
    def borrowed(cls, data: Sequence[T]) -> Cow[T]:
        """Wrap data without copying it; it is never modified in place."""
        return cls(data, owned=False)

    @classmethod
    def owned(cls, data: list[T]) -> Cow[T]:
        """Take the list as the Cow's own data."""
        return cls(data, owned=True)

    @property
    def is_borrowed(self) -> bool:
        return not self.is_owned

    def to_mut(self) -> list[T]:
        """Return a mutable list, copying borrowed data first."""
        if not self.is_owned:
            self.data = list(self.data)
            self.is_owned = True
        return self.data  # type: ignore[return-value]

    def __repr__(self) -> str:
        kind = "owned" if self.is_owned else "borrowed"
        return f"Cow.{kind}({self.data!r})"


def abs_all(cow: Cow[int]) -> Cow[int]:
    """Make every value non-negative, copying only if something changes."""
    for index, value in enumerate(cow.data):
        if value < 0:
            cow.to_mut()[index] = -value
    return cow