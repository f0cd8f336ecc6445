"""Appending "Bar" to things, and comparing licence information."""

from __future__ import annotations

from functools import singledispatch


@singledispatch
def append_bar(value):
    """Append "Bar" to a string or to a list of strings."""
    raise TypeError(f"cannot append Bar to {type(value).__name__}")


@append_bar.register
def _(value: str) -> str:
    return value + "Bar"


@append_bar.register
def _(value: list) -> list:
    return [*value, "Bar"]


class Licensed:
    """Something that carries licence information."""

    def licensing_info(self) -> str:
        return "some information"


class SomeSoftware(Licensed):
    pass


class OtherSoftware(Licensed):
    pass


def compare_license_types(software: Licensed, software_two: Licensed) -> bool:
    """Return True if both carry the same licence information."""
    return software.licensing_info() == software_two.licensing_info()