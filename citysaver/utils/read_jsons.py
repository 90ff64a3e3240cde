# -*- coding: utf-8 -*-
"""
I/O helpers for loading explicit item lists from JSON.

JSON format:
- items.json : [{"name": "...", "weight": <int>, "value": <int>}, ...]

This maps directly to business_objects.items.Item.
"""

from __future__ import annotations
import json
import logging
from typing import List

from citysaver.business_objects.errors import SchemaError, StateValidationError
from citysaver.business_objects.items import Item

logger = logging.getLogger(__name__)


def _require(obj: dict, key: str, path: str) -> object:
    if key not in obj:
        raise SchemaError(f"{path}: missing required key '{key}' in object {obj}")
    return obj[key]


def _as_int(x: object, key: str) -> int:
    # Ints pass through untouched; going via float would lose digits past 2**53.
    if isinstance(x, bool):
        raise SchemaError(f"'{key}' must be an integer, got {x!r}")
    if isinstance(x, int):
        return x
    try:
        if isinstance(x, float) and x.is_integer():
            return int(x)
        if isinstance(x, str):
            return int(x.strip())
    except (ValueError, OverflowError) as e:
        raise SchemaError(f"'{key}' must be an integer, got {x!r}") from e
    raise SchemaError(f"'{key}' must be an integer, got {x!r}")


def read_items_json(path: str) -> List[Item]:
    """
    Load items from a JSON array. Each element must have:
      - name (str)
      - weight (integer)
      - value (integer)
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        raise SchemaError(f"{path}: failed to read/parse JSON: {e}") from e

    if not isinstance(data, list):
        raise SchemaError(f"{path}: expected a JSON array.")

    items: List[Item] = []
    for idx, obj in enumerate(data, start=1):
        if not isinstance(obj, dict):
            raise SchemaError(f"{path}[{idx}]: expected an object.")
        try:
            name = str(_require(obj, "name", path))
            weight = _as_int(_require(obj, "weight", path), "weight")
            value = _as_int(_require(obj, "value", path), "value")
            items.append(Item(name=name, weight=weight, value=value))
        except (SchemaError, StateValidationError) as e:
            raise SchemaError(f"{path}[{idx}]: {e}") from e

    logger.info("Loaded %d items from %s", len(items), path)
    return items
