# -*- coding: utf-8 -*-
"""
Solution model for knapsack optimization results.

This data class defines the shape of outputs produced by the DP solver
and consumed by the metrics/reporting layers.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Tuple

from citysaver.business_objects.items import Item


@dataclass(frozen=True)
class Solution:
    """
    Optimal selection for a single run.

    Attributes
    ----------
    best_value : int
        Total value of the chosen items (the optimum).
    chosen : tuple[Item, ...]
        Chosen items, in their original relative input order.
    best_capacity : int
        Smallest capacity level at which the optimum is reached.
    capacity : int
        Capacity bound the run was solved under.
    chosen_indices : tuple[int, ...]
        Input positions of the chosen items, ascending (parallel to `chosen`).
    """
    best_value: int
    chosen: Tuple[Item, ...]
    best_capacity: int
    capacity: int
    chosen_indices: Tuple[int, ...] = ()

    @property
    def chosen_names(self) -> List[str]:
        return [it.name for it in self.chosen]

    @property
    def used_weight(self) -> int:
        return sum(it.weight for it in self.chosen)

    @property
    def remaining(self) -> int:
        return self.capacity - self.used_weight
