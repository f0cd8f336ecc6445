"""Packages to be shipped and their fees."""

from __future__ import annotations

from dataclasses import dataclass

_MIN_WEIGHT = 10


@dataclass(frozen=True)
class Package:
    """A package; it must weigh at least 10 grams."""

    sender_country: str
    recipient_country: str
    weight_in_grams: int

    def __post_init__(self) -> None:
        if self.weight_in_grams < _MIN_WEIGHT:
            raise ValueError("Can not ship a package with weight below 10 grams.")

    def is_international(self) -> bool:
        return self.sender_country != self.recipient_country

    def get_fees(self, cents_per_gram: int) -> int:
        return cents_per_gram * self.weight_in_grams