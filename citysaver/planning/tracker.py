# -*- coding: utf-8 -*-
"""
Planning tracker: CSV artifacts for an optimization run.

Files produced (when Tracker is used):
  - items.csv            (every input item with its chosen flag)
  - selection.csv        (chosen items with running weight/value totals)
  - problem_summary.csv  (global KPIs)

Notes
-----
- Callers decide when to invoke these writers; the orchestrator calls
  write_all() at the end of a run.
"""

from __future__ import annotations
import csv
import logging
import os
from dataclasses import dataclass
from typing import List, Sequence

from citysaver.business_objects.items import Item
from citysaver.planning import Solution
from citysaver.quality_metrics.core import compute_global_metrics, cumulative_selection

logger = logging.getLogger(__name__)


@dataclass
class Tracker:
    """
    Thin, opt-in artifact writer. Callers control when/where to dump.
    """
    out_dir: str

    def __post_init__(self) -> None:  # type: ignore[override]
        os.makedirs(self.out_dir, exist_ok=True)

    def write_items_csv(
        self,
        items: Sequence[Item],
        solution: Solution,
        filename: str = "items.csv",
    ) -> str:
        """
        Columns:
          item_index, name, weight, value, chosen (0/1)
        """
        path = os.path.join(self.out_dir, filename)
        chosen_idx = set(solution.chosen_indices)

        with open(path, "w", newline="", encoding="utf-8") as f:
            w = csv.writer(f)
            w.writerow(["item_index", "name", "weight", "value", "chosen"])
            for idx, it in enumerate(items):
                w.writerow([idx, it.name, it.weight, it.value, 1 if idx in chosen_idx else 0])

        return path

    def write_selection_csv(
        self,
        solution: Solution,
        filename: str = "selection.csv",
    ) -> str:
        """
        Columns:
          order_index, name, weight, value, cumulative_weight, cumulative_value
        """
        path = os.path.join(self.out_dir, filename)
        cols = ["order_index", "name", "weight", "value", "cumulative_weight", "cumulative_value"]

        with open(path, "w", newline="", encoding="utf-8") as f:
            w = csv.DictWriter(f, fieldnames=cols)
            w.writeheader()
            w.writerows(cumulative_selection(solution))

        return path

    def write_problem_summary_csv(
        self,
        items: Sequence[Item],
        solution: Solution,
        filename: str = "problem_summary.csv",
    ) -> str:
        """
        Columns:
          metric, value
        """
        path = os.path.join(self.out_dir, filename)
        metrics = compute_global_metrics(items, solution)

        with open(path, "w", newline="", encoding="utf-8") as f:
            w = csv.writer(f)
            w.writerow(["metric", "value"])
            for k, v in metrics.items():
                w.writerow([k, round(v, 4) if isinstance(v, float) else v])

        return path

    def write_all(self, items: Sequence[Item], solution: Solution) -> List[str]:
        paths = [
            self.write_items_csv(items, solution),
            self.write_selection_csv(solution),
            self.write_problem_summary_csv(items, solution),
        ]
        logger.info("Wrote %d artifacts under %s", len(paths), self.out_dir)
        return paths
