# -*- coding: utf-8 -*-
"""
Run orchestrator: Policy -> DP solver -> (optional) Tracker.

- Truncates the item list to Policy.max_items
- Rejects capacities above Policy.max_capacity before anything is allocated
- Calls the pure solver to obtain the optimal Solution
- Optionally writes CSV artifacts if a Tracker is provided
"""

from __future__ import annotations
import logging
from typing import Iterable, Optional

from citysaver.business_objects.errors import InvalidCapacity
from citysaver.planning.policy import Policy
from citysaver.planning.solution import Solution
from citysaver.planning.state import ItemLike, ProblemState
from citysaver.planning.solvers.dp import solve
from citysaver.planning.tracker import Tracker

logger = logging.getLogger(__name__)


def run_optimization(
    items: Iterable[ItemLike],
    policy: Policy,
    tracker: Optional[Tracker] = None,
) -> Solution:
    """
    Execute one optimization run.

    Parameters
    ----------
    items : iterable of Item or (name, weight, value)
        Candidate items in input order.
    policy : Policy
        Provides capacity, max_items and max_capacity.
    tracker : Tracker | None
        If provided, writes items.csv, selection.csv and problem_summary.csv
        into tracker.out_dir.

    Returns
    -------
    Solution
        The optimal selection.
    """
    candidates = list(items)
    if len(candidates) > policy.max_items:
        logger.info("Truncating %d items to the first %d", len(candidates), policy.max_items)
        candidates = candidates[: policy.max_items]

    # Validates the capacity type and sign before it is compared to the guard.
    state = ProblemState.build(candidates, policy.capacity)
    if state.capacity > policy.max_capacity:
        raise InvalidCapacity(
            f"Capacity {state.capacity} exceeds the configured maximum {policy.max_capacity}."
        )

    solution = solve(state)
    logger.info(
        "Optimized %d items under capacity %d: value %d from %d items",
        len(state.items), state.capacity, solution.best_value, len(solution.chosen),
    )

    if tracker is not None:
        tracker.write_all(state.items, solution)

    return solution
