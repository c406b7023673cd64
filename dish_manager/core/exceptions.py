# dish_manager/core/exceptions.py
from __future__ import annotations


class SelectionError(Exception):
    """Base class for errors resolving a user's dish selection."""

class DishNotFoundError(SelectionError, LookupError):
    """A dish id that the collection does not know."""

class SelectionLimitError(SelectionError, ValueError):
    """Too many dishes selected for one shopping list."""
