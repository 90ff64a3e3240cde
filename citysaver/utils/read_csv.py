# -*- coding: utf-8 -*-
"""
I/O helpers for loading knapsack items from CSV.

Two layouts are supported:

- City export (uscities.csv style), read by `read_cities_csv`:
    header row, then one city per row; column 2 is the city name and
    column 9 the population (thousands separators allowed, e.g. "8,804,190").
    Each city becomes Item(name, weight=len(name), value=population).

- Explicit items, read by `read_items_csv`:
    header "name,weight,value", one item per row.
"""

from __future__ import annotations
import csv
import logging
from typing import List

from citysaver.business_objects.errors import SchemaError, StateValidationError
from citysaver.business_objects.items import Item

logger = logging.getLogger(__name__)

NAME_COLUMN = 1
POPULATION_COLUMN = 8
DEFAULT_CITY_LIMIT = 100


def _parse_count(text: str) -> int:
    s = text.strip().replace(",", "")
    if not s.isdigit():
        raise ValueError(f"expected a non-negative integer, got {text!r}")
    return int(s)


def read_cities_csv(path: str, limit: int = DEFAULT_CITY_LIMIT) -> List[Item]:
    """
    Load up to `limit` cities (in file order) as knapsack items.

    Raises
    ------
    SchemaError
        If the file cannot be read, `limit` < 1, or a row is short, has an
        empty name or a non-numeric population.
    """
    if limit < 1:
        raise SchemaError(f"{path}: limit must be >= 1, got {limit}")

    items: List[Item] = []
    try:
        with open(path, "r", newline="", encoding="utf-8") as f:
            reader = csv.reader(f)
            next(reader, None)  # header
            for row in reader:
                if len(items) >= limit:
                    break
                line = reader.line_num
                if not row:
                    continue
                if len(row) <= POPULATION_COLUMN:
                    raise SchemaError(
                        f"{path}:{line}: expected at least {POPULATION_COLUMN + 1} columns, got {len(row)}"
                    )
                name = row[NAME_COLUMN].strip()
                try:
                    population = _parse_count(row[POPULATION_COLUMN])
                    items.append(Item.from_city(name, population))
                except (ValueError, StateValidationError) as e:
                    raise SchemaError(f"{path}:{line}: {e}") from e
    except OSError as e:
        raise SchemaError(f"{path}: failed to read CSV: {e}") from e

    logger.info("Loaded %d cities from %s", len(items), path)
    return items


def read_items_csv(path: str) -> List[Item]:
    """
    Load items from a CSV file with a `name,weight,value` header.
    """
    items: List[Item] = []
    try:
        with open(path, "r", newline="", encoding="utf-8") as f:
            reader = csv.DictReader(f)
            missing = {"name", "weight", "value"} - set(reader.fieldnames or [])
            if missing:
                raise SchemaError(f"{path}: missing required columns {sorted(missing)}")
            for row in reader:
                try:
                    items.append(Item(
                        name=(row["name"] or "").strip(),
                        weight=_parse_count(row["weight"] or ""),
                        value=_parse_count(row["value"] or ""),
                    ))
                except (ValueError, StateValidationError) as e:
                    raise SchemaError(f"{path}:{reader.line_num}: {e}") from e
    except OSError as e:
        raise SchemaError(f"{path}: failed to read CSV: {e}") from e

    logger.info("Loaded %d items from %s", len(items), path)
    return items
