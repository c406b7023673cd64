# dish_manager/core/validation.py
from __future__ import annotations

from typing import Iterable, List, Mapping, Optional, Sequence, Union

from .categories import CATEGORIES, Category
from .models import CategoryIngredients, Dish, ValidationError

NAME_REQUIRED = "Dish name is required"
NAME_TAKEN = "A dish with this name already exists"
INGREDIENTS_REQUIRED = "At least one ingredient is required"

# Either the pydantic record or a plain {"Fruit shop": [...], ...} mapping
IngredientsLike = Union[CategoryIngredients, Mapping[str, Sequence[str]]]


def _normalize_name(name: str) -> str:
    return name.strip().lower()


def _entries(ingredients: IngredientsLike, category: Category) -> Sequence[str]:
    if isinstance(ingredients, CategoryIngredients):
        return ingredients[category]
    return ingredients[category.value]


def validate_dish_name(
    name: str,
    existing_dishes: Iterable[Dish],
    editing_id: Optional[str] = None,
) -> Optional[ValidationError]:
    """
    Check that `name` is non-blank and not already used by another dish.

    Comparison is case-insensitive on trimmed names. The dish whose id equals
    `editing_id` is ignored so an edited dish may keep its own name; an id that
    matches nothing exempts nothing.
    """
    trimmed = name.strip()
    if not trimmed:
        return ValidationError(field="name", message=NAME_REQUIRED)

    wanted = trimmed.lower()
    for dish in existing_dishes:
        if editing_id is not None and dish.id == editing_id:
            continue
        if _normalize_name(dish.name) == wanted:
            return ValidationError(field="name", message=NAME_TAKEN)
    return None


def validate_ingredients(ingredients: IngredientsLike) -> Optional[ValidationError]:
    """One non-blank entry in any category is enough."""
    for category in CATEGORIES:
        if any(entry.strip() for entry in _entries(ingredients, category)):
            return None
    return ValidationError(field="ingredients", message=INGREDIENTS_REQUIRED)


def validate_dish(
    name: str,
    ingredients: IngredientsLike,
    existing_dishes: Iterable[Dish],
    editing_id: Optional[str] = None,
) -> List[ValidationError]:
    errors: List[ValidationError] = []

    name_error = validate_dish_name(name, existing_dishes, editing_id)
    if name_error:
        errors.append(name_error)

    ingredients_error = validate_ingredients(ingredients)
    if ingredients_error:
        errors.append(ingredients_error)

    return errors


def clean_ingredients(ingredients: IngredientsLike) -> CategoryIngredients:
    """Trim every entry and drop blank placeholders, keeping entry order."""
    cleaned = {
        category.value: [entry.strip() for entry in _entries(ingredients, category) if entry.strip()]
        for category in CATEGORIES
    }
    return CategoryIngredients.model_validate(cleaned)
