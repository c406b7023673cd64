# dish_manager/core/selection.py
from __future__ import annotations

from typing import Iterable, List, Sequence

from .categories import MAX_SELECTED_DISHES
from .exceptions import DishNotFoundError, SelectionLimitError
from .models import Dish


def filter_dishes(dishes: Iterable[Dish], query: str = "") -> List[Dish]:
    """Case-insensitive substring search on dish names. Blank query keeps everything."""
    needle = query.strip().lower()
    if not needle:
        return list(dishes)
    return [d for d in dishes if needle in d.name.lower()]


def select_dishes(
    dishes: Sequence[Dish],
    dish_ids: Iterable[str],
    limit: int = MAX_SELECTED_DISHES,
) -> List[Dish]:
    """
    Resolve the ids a user ticked into dishes, in collection order.

    Repeated ids count once. More than `limit` distinct ids raises
    SelectionLimitError; an id with no dish raises DishNotFoundError.
    """
    wanted: List[str] = []
    for dish_id in dish_ids:
        if dish_id not in wanted:
            wanted.append(dish_id)

    if len(wanted) > limit:
        raise SelectionLimitError(f"You can select a maximum of {limit} dishes")

    known = {d.id for d in dishes}
    missing = [dish_id for dish_id in wanted if dish_id not in known]
    if missing:
        raise DishNotFoundError(f"Unknown dish id(s): {', '.join(missing)}")

    chosen = set(wanted)
    return [d for d in dishes if d.id in chosen]
