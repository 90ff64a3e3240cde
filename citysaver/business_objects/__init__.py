# -*- coding: utf-8 -*-
"""
Public exports for the business objects layer.
"""

from .errors import SchemaError, StateValidationError, InvalidCapacity, InvalidItem
from .items import Item

__all__ = [
    # errors
    "SchemaError",
    "StateValidationError",
    "InvalidCapacity",
    "InvalidItem",
    # core models
    "Item",
]
