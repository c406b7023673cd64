from __future__ import annotations

# Selection errors are raised by the pure core and re-exported for the service layer
from dish_manager.core.exceptions import DishNotFoundError, SelectionError, SelectionLimitError

class ServiceError(RuntimeError):
    """Base class for service-layer errors."""

class RepoError(ServiceError):
    """Errors from repositories (I/O, parse, schema)."""

__all__ = ["ServiceError", "RepoError", "SelectionError", "DishNotFoundError", "SelectionLimitError"]
