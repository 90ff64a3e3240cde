# -*- coding: utf-8 -*-
"""
Exact 0/1 knapsack solver (weight-indexed dynamic program with traceback).

Pipeline per call:
  1) Validate the whole input (ProblemState) before any table is allocated.
  2) Forward pass: one dp row of size capacity+1, updated item by item with
     capacity levels visited from high to low, so each item is counted at
     most once. Every strict improvement is recorded in a per-item trace.
  3) Pick the winning capacity level: the smallest index holding max(dp).
  4) Backward pass: replay the trace over items in reverse order to recover
     the exact chosen set. No re-optimization happens here.

The dp row and the trace are local to a call; nothing is shared between calls.

Complexity
----------
  time  : O(len(items) * capacity)
  space : O(len(items) * capacity) bytes for the trace
"""

from __future__ import annotations
import logging
from typing import Iterable, List, Tuple

from citysaver.business_objects.items import Item
from citysaver.planning.state import ItemLike, ProblemState
from citysaver.planning.solution import Solution

logger = logging.getLogger(__name__)


def _forward_pass(items: Tuple[Item, ...], capacity: int) -> Tuple[List[int], List[bytearray]]:
    dp: List[int] = [0] * (capacity + 1)
    trace: List[bytearray] = []

    for it in items:
        used = bytearray(capacity + 1)
        w, v = it.weight, it.value
        # Descending c: dp[c - w] still holds the value from before this item.
        for c in range(capacity, w - 1, -1):
            candidate = dp[c - w] + v
            if candidate > dp[c]:
                dp[c] = candidate
                used[c] = 1
        trace.append(used)

    return dp, trace


def _best_capacity(dp: List[int]) -> int:
    # Strict '>' keeps the first (smallest) index on ties.
    best = 0
    for c in range(1, len(dp)):
        if dp[c] > dp[best]:
            best = c
    return best


def _traceback(items: Tuple[Item, ...], trace: List[bytearray], start: int) -> List[int]:
    taken: List[int] = []
    remaining = start
    for i in range(len(items) - 1, -1, -1):
        it = items[i]
        if remaining >= it.weight and trace[i][remaining]:
            taken.append(i)
            remaining -= it.weight
    # Collected back-to-front; report in original relative input order.
    taken.reverse()
    return taken


def solve(state: ProblemState) -> Solution:
    """
    Solve a validated problem snapshot.

    Parameters
    ----------
    state : ProblemState
        Items (in input order) and the capacity bound.

    Returns
    -------
    Solution
        Optimal value, the chosen items and the winning capacity level.
    """
    items, capacity = state.items, state.capacity
    logger.debug("DP solve: %d items, capacity %d", len(items), capacity)

    dp, trace = _forward_pass(items, capacity)
    best = _best_capacity(dp)
    chosen = _traceback(items, trace, best)

    logger.debug("DP solve: best value %d at capacity %d, %d items chosen", dp[best], best, len(chosen))
    return Solution(
        best_value=dp[best],
        chosen=tuple(items[i] for i in chosen),
        best_capacity=best,
        capacity=capacity,
        chosen_indices=tuple(chosen),
    )


def optimize(items: Iterable[ItemLike], capacity: int) -> Solution:
    """
    Find the value-maximizing subset of `items` whose total weight fits `capacity`.

    Items may be Item instances or (name, weight, value) triples. Items heavier
    than `capacity` are accepted and simply never chosen.

    Raises
    ------
    InvalidCapacity
        If `capacity` is negative (or not an integer).
    InvalidItem
        If any item has a negative (or non-integer) weight or value.
    """
    return solve(ProblemState.build(items, capacity))
