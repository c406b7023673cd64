# dish_manager/core/categories.py
from __future__ import annotations

from enum import Enum
from typing import Tuple


class Category(str, Enum):
    """Store sections an ingredient is bought from. Order is display order."""
    FRUIT_SHOP = "Fruit shop"
    BUTCHERY = "Butchery"
    SUPERMARKET = "Supermarket"


# Single source of iteration order for validation, consolidation and formatting.
CATEGORIES: Tuple[Category, ...] = tuple(Category)

# Field name used by the fixed-shape per-category records in models.py
FIELD_BY_CATEGORY = {
    Category.FRUIT_SHOP: "fruit_shop",
    Category.BUTCHERY: "butchery",
    Category.SUPERMARKET: "supermarket",
}

MAX_SELECTED_DISHES = 10
