# -*- coding: utf-8 -*-
"""
Policy (configuration knobs) for a city-rescue optimization run.

  - capacity:     weight bound handed to the optimizer (total name length).
  - max_items:    only the first `max_items` input records are considered.
  - max_capacity: caller-side guard; the choice trace needs
                  items x (capacity + 1) bytes, so absurd capacities are
                  rejected before the optimizer allocates anything.
"""

from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class Policy:
    """
    Run knobs (pure data holder).

    Attributes
    ----------
    capacity : int
        Knapsack weight bound.
    max_items : int
        Truncation limit for the input item list.
    max_capacity : int
        Largest capacity the orchestrator will accept.
    """
    capacity: int = 100
    max_items: int = 100
    max_capacity: int = 1_000_000
