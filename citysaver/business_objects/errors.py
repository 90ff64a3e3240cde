# -*- coding: utf-8 -*-
"""
Common exceptions for the business objects layer.
"""


class SchemaError(ValueError):
    """Raised when an input file (CSV/JSON) violates the expected schema."""


class StateValidationError(ValueError):
    """Raised when the in-memory state violates domain constraints."""


class InvalidCapacity(StateValidationError):
    """Raised when a knapsack capacity is negative or not an integer."""


class InvalidItem(StateValidationError):
    """Raised when an item has an empty name, or a negative/non-integer weight or value."""
