# -*- coding: utf-8 -*-
"""
Item model for the 0/1 knapsack.

In the city-rescue use case an item is a city: its weight is the length of
its name and its value is its population.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Sequence, Union

from .errors import InvalidItem


def _is_int(x: object) -> bool:
    # bool is an int subclass; True/False are not meaningful weights.
    return isinstance(x, int) and not isinstance(x, bool)


@dataclass(frozen=True)
class Item:
    """
    An item that can be chosen at most once.

    Attributes
    ----------
    name : str
        Display name (need not be unique).
    weight : int
        Nonnegative capacity consumption.
    value : int
        Nonnegative objective contribution if chosen.
    """
    name: str
    weight: int
    value: int

    def __post_init__(self) -> None:  # type: ignore[override]
        if not isinstance(self.name, str) or not self.name:
            raise InvalidItem(f"Item.name must be a non-empty string, got {self.name!r}.")
        if not _is_int(self.weight) or self.weight < 0:
            raise InvalidItem(f"Item[{self.name}] weight must be an integer >= 0, got {self.weight!r}.")
        if not _is_int(self.value) or self.value < 0:
            raise InvalidItem(f"Item[{self.name}] value must be an integer >= 0, got {self.value!r}.")

    @classmethod
    def from_record(cls, record: Union["Item", Sequence[object]]) -> "Item":
        """Build an Item from a (name, weight, value) triple; Items pass through."""
        if isinstance(record, Item):
            return record
        try:
            name, weight, value = record  # type: ignore[misc]
        except (TypeError, ValueError) as e:
            raise InvalidItem(f"Expected a (name, weight, value) record, got {record!r}.") from e
        return cls(name=name, weight=weight, value=value)  # type: ignore[arg-type]

    @classmethod
    def from_city(cls, name: str, population: int) -> "Item":
        """City item: weight is the character length of the name."""
        return cls(name=name, weight=len(name), value=population)
