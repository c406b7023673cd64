# dish_manager/core/consolidation.py
from __future__ import annotations

from typing import Dict, Iterable, List

from .categories import CATEGORIES, FIELD_BY_CATEGORY
from .models import ConsolidatedIngredient, ConsolidatedList, Dish


def canonical_ingredient(raw: str) -> str:
    """Dedup key: trimmed and lowercased. Blank input gives ''."""
    return raw.strip().lower()


def format_display(name: str, count: int) -> str:
    """'x' for one, then one '+' per extra occurrence: 'x +', 'x ++', ..."""
    if count == 1:
        return name
    return f"{name} {'+' * (count - 1)}"


def consolidate_ingredients(dishes: Iterable[Dish]) -> ConsolidatedList:
    """
    Aggregate the ingredients of `dishes` into a deduplicated shopping list.

    Rules:
    - Each category is counted on its own; the same string in two categories
      yields two separate entries.
    - "Apple", " apple " and "APPLE" share the key "apple".
    - Blank entries are skipped.
    - Entries are sorted by name; every category is present, possibly empty.
    """
    dishes = list(dishes)
    slots: Dict[str, List[ConsolidatedIngredient]] = {}

    for category in CATEGORIES:
        counts: Dict[str, int] = {}
        for dish in dishes:
            for raw in dish.ingredients[category]:
                key = canonical_ingredient(raw)
                if key:
                    counts[key] = counts.get(key, 0) + 1

        entries = [
            ConsolidatedIngredient(name=name, count=count, display=format_display(name, count))
            for name, count in counts.items()
        ]
        # Keys are already lowercase; casefold keeps non-ASCII comparisons consistent
        entries.sort(key=lambda entry: (entry.name.casefold(), entry.name))
        slots[FIELD_BY_CATEGORY[category]] = entries

    return ConsolidatedList(**slots)


def format_consolidated_list_for_clipboard(consolidated: ConsolidatedList) -> str:
    """
    Render as plain text, e.g.

        Fruit shop:
          - apple ++
          - pear

        Supermarket:
          - rice

    Empty categories are left out entirely; no trailing newline.
    """
    sections: List[str] = []
    for category, entries in consolidated.by_category():
        if not entries:
            continue
        lines = "\n".join(f"  - {entry.display}" for entry in entries)
        sections.append(f"{category.value}:\n{lines}")
    return "\n\n".join(sections)
