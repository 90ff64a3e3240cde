# -*- coding: utf-8 -*-
"""
Planning layer public API for the city-rescue pipeline.

This module exposes the core planning-time data contracts:
  - ProblemState (validated input snapshot)
  - Policy configuration
  - Solution model

Other planning modules (solvers, orchestrator, tracker) are intentionally
not exported here to avoid import cycles. They should be imported
explicitly when needed.
"""

from .state import ProblemState
from .policy import Policy
from .solution import Solution

__all__ = [
    "ProblemState",
    "Policy",
    "Solution",
]
