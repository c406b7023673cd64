# dish_manager/core/suggestions.py
from __future__ import annotations

from typing import Iterable, List

from .categories import Category
from .models import KnownIngredients

DEFAULT_SUGGESTION_LIMIT = 10


def get_suggestions(
    known: KnownIngredients,
    category: Category,
    query: str,
    limit: int = DEFAULT_SUGGESTION_LIMIT,
) -> List[str]:
    """Known names of `category` starting with `query` (case-insensitive), stored order."""
    prefix = query.strip().lower()
    if not prefix:
        return []
    matches = [name for name in known[category] if name.lower().startswith(prefix)]
    return matches[:limit]


def new_ingredients(known: KnownIngredients, category: Category, candidates: Iterable[str]) -> List[str]:
    """Candidates not yet known for `category`, blanks and repeats dropped."""
    seen = {name.lower() for name in known[category]}
    fresh: List[str] = []
    for candidate in candidates:
        name = candidate.strip()
        if not name or name.lower() in seen:
            continue
        seen.add(name.lower())
        fresh.append(name)
    return fresh
