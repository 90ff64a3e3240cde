# -*- coding: utf-8 -*-
"""
Input snapshot for a knapsack optimization run.

Notes
-----
- Business (timeless) entities live in `business_objects/`:
  * business_objects.items.Item
- The snapshot below is specific to executing a solve: it pins the item
  order and the capacity, and validates both before any table is built.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Sequence, Tuple, Union

from citysaver.business_objects.errors import InvalidCapacity
from citysaver.business_objects.items import Item

ItemLike = Union[Item, Sequence[object]]


@dataclass(frozen=True)
class ProblemState:
    """
    Immutable problem input for an optimization run.

    Attributes
    ----------
    items : tuple[Item, ...]
        All available items in input order (each can be chosen at most once).
        (name, weight, value) triples are coerced to Item.
    capacity : int
        Nonnegative weight bound.
    """
    items: Tuple[Item, ...]
    capacity: int

    def __post_init__(self) -> None:  # type: ignore[override]
        cap = self.capacity
        if not isinstance(cap, int) or isinstance(cap, bool):
            raise InvalidCapacity(f"Capacity must be an integer, got {cap!r}.")
        if cap < 0:
            raise InvalidCapacity(f"Capacity must be >= 0, got {cap}.")
        # Coerce every record up front so a bad one fails before any work starts.
        object.__setattr__(self, "items", tuple(Item.from_record(r) for r in self.items))

    @classmethod
    def build(cls, items: Iterable[ItemLike], capacity: int) -> "ProblemState":
        return cls(items=tuple(items), capacity=capacity)
