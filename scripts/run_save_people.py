#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Pick the cities to rescue from the largest U.S. cities.

Reads the first MAX_CITIES rows of CITIES_PATH and finds the subset whose
total name length is <= CAPACITY characters and whose total population is
maximal (0/1 knapsack).

This version does NOT use argparse.
Just set the variables at the top of the file and run:

    python scripts/run_save_people.py

Outputs under OUT_DIR (when WRITE_ARTIFACTS is True):
  - items.csv            (all loaded cities with chosen flag)
  - selection.csv        (saved cities with running totals)
  - problem_summary.csv  (global KPIs)
"""

from __future__ import annotations
import logging
from typing import List, Optional

# ====== CONFIGURATION ======
CITIES_PATH = "uscities.csv"
OUT_DIR = "reports/save_people"
WRITE_ARTIFACTS = False

CAPACITY = 100      # total characters of city names
MAX_CITIES = 100    # rows read from the CSV
# ===========================

from citysaver.business_objects.items import Item
from citysaver.planning import Policy, Solution
from citysaver.planning.orchestrator import run_optimization
from citysaver.planning.tracker import Tracker
from citysaver.utils.read_csv import read_cities_csv

logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
logger = logging.getLogger(__name__)


def main() -> None:
    # Load cities as items (weight = name length, value = population)
    cities: List[Item] = read_cities_csv(CITIES_PATH, limit=MAX_CITIES)

    policy = Policy(capacity=CAPACITY, max_items=MAX_CITIES)
    tracker: Optional[Tracker] = Tracker(out_dir=OUT_DIR) if WRITE_ARTIFACTS else None

    solution: Solution = run_optimization(cities, policy, tracker=tracker)

    print(f"Total rescued population: {solution.best_value}")
    print("Cities saved:")
    for name in solution.chosen_names:
        print(f"- {name}")

    if tracker is not None:
        logger.info("Artifacts written under %s", OUT_DIR)


if __name__ == "__main__":
    main()
