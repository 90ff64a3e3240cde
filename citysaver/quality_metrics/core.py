# -*- coding: utf-8 -*-
"""
quality_metrics/core.py

Pure helpers to compute run-level KPIs for a knapsack solution.
- No side effects
- No external dependencies
- Works off the input items and a Solution

Public API:
  - compute_global_metrics(items, solution) -> Dict[str, float]
  - cumulative_selection(solution) -> List[Dict]
"""

from __future__ import annotations
from typing import Any, Dict, List, Sequence

from citysaver.business_objects.items import Item
from citysaver.planning import Solution


def _pct(num: float, den: float) -> float:
    if den == 0:
        return 0.0
    return 100.0 * num / den


# ---------------------------------------------------------------------------
# 1) Global metrics
# ---------------------------------------------------------------------------
def compute_global_metrics(items: Sequence[Item], solution: Solution) -> Dict[str, float]:
    """
    Returns:
      {
        "Total Value": ...,
        "Used Weight": ...,
        "Remaining Capacity": ...,
        "Utilization": ...,          # percent (0..100) of capacity used
        "Chosen Items": ...,
        "Total Items": ...,
        "Total Possible Value": ...,
        "Value Share": ...           # percent (0..100) of all value captured
      }
    """
    used = solution.used_weight
    total_possible = sum(it.value for it in items)
    return {
        "Total Value": solution.best_value,
        "Used Weight": used,
        "Remaining Capacity": solution.capacity - used,
        "Utilization": _pct(used, solution.capacity),
        "Chosen Items": len(solution.chosen),
        "Total Items": len(items),
        "Total Possible Value": total_possible,
        "Value Share": _pct(solution.best_value, total_possible),
    }


# ---------------------------------------------------------------------------
# 2) Running totals over the chosen set
# ---------------------------------------------------------------------------
def cumulative_selection(solution: Solution) -> List[Dict[str, Any]]:
    """Per chosen item: its fields plus running weight/value totals, in report order."""
    rows: List[Dict[str, Any]] = []
    cum_w = 0
    cum_v = 0
    for idx, it in enumerate(solution.chosen):
        cum_w += it.weight
        cum_v += it.value
        rows.append({
            "order_index": idx,
            "name": it.name,
            "weight": it.weight,
            "value": it.value,
            "cumulative_weight": cum_w,
            "cumulative_value": cum_v,
        })
    return rows
