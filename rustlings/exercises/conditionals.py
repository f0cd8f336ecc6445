"""Small decisions: the bigger number, fizz words and animal habitats."""

from __future__ import annotations

_IDENTIFIERS = {"crab": 1, "gopher": 2, "snake": 3}
_HABITATS = {1: "Beach", 2: "Burrow", 3: "Desert"}


def bigger(a: int, b: int) -> int:
    """Return the bigger of two numbers."""
    return b if a < b else a


def foo_if_fizz(fizzish: str) -> str:
    """Map "fizz" to "foo", "fuzz" to "bar" and anything else to "baz"."""
    if fizzish == "fizz":
        return "foo"
    if fizzish == "fuzz":
        return "bar"
    return "baz"


def animal_habitat(animal: str) -> str:
    """Return where the animal lives, or "Unknown"."""
    identifier = _IDENTIFIERS.get(animal, -1)
    return _HABITATS.get(identifier, "Unknown")