"""A person parsed from "name,age" text, leniently or strictly."""

from __future__ import annotations

from dataclasses import dataclass

_USIZE_MAX = 2**64 - 1


class ParsePersonError(ValueError):
    """The text does not describe a person."""


class EmptyInputError(ParsePersonError):
    """The input text is empty."""


class BadLenError(ParsePersonError):
    """The text does not have exactly two comma separated fields."""


class NoNameError(ParsePersonError):
    """The name field is empty."""


class ParseAgeError(ParsePersonError):
    """The age field is not an unsigned integer."""


def _parse_usize(text: str) -> int:
    if not text:
        raise ValueError("cannot parse integer from empty string")
    digits = text[1:] if text.startswith("+") else text
    if not digits or not all(char in "0123456789" for char in digits):
        raise ValueError("invalid digit found in string")
    value = int(digits)
    if value > _USIZE_MAX:
        raise ValueError("number too large to fit in target type")
    return value


@dataclass(frozen=True)
class Person:
    name: str
    age: int

    @classmethod
    def default(cls) -> Person:
        return cls(name="John", age=30)

    @classmethod
    def from_text(cls, text: str) -> Person:
        """Parse "name,age", falling back to the default person on any problem."""
        fields = text.split(",")
        if not text or len(fields) < 2 or not fields[0]:
            return cls.default()
        try:
            age = _parse_usize(fields[1])
        except ValueError:
            return cls.default()
        return cls(name=fields[0], age=age)

    @classmethod
    def parse(cls, text: str) -> Person:
        """Parse exactly "name,age"; raise a ParsePersonError otherwise."""
        if not text:
            raise EmptyInputError("empty input")
        fields = text.split(",")
        if len(fields) != 2:
            raise BadLenError(f"expected 2 fields, found {len(fields)}")
        name, age_text = fields
        if not name:
            raise NoNameError("empty name")
        try:
            age = _parse_usize(age_text)
        except ValueError as exc:
            raise ParseAgeError(str(exc)) from exc
        return cls(name=name, age=age)