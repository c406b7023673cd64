from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from dish_manager.config import Settings
from dish_manager.core.models import CategoryIngredients, Dish, DishDraft, DishEvent
from dish_manager.core.selection import filter_dishes
from dish_manager.core.validation import clean_ingredients, validate_dish
from dish_manager.services.exceptions import DishNotFoundError, RepoError
from dish_manager.services.repo.json_repo import JSONDishRepo, JSONEventRepo, JSONIngredientRepo

router = APIRouter(tags=["dishes"])
logger = logging.getLogger(__name__)

# ---- DI helpers --------------------------------------------------------------

def get_settings() -> Settings:
    return Settings()

def get_repos(settings: Settings = Depends(get_settings)):
    return JSONDishRepo(settings), JSONIngredientRepo(settings), JSONEventRepo(settings)

# ---- Helpers -----------------------------------------------------------------

def _validated_or_422(draft: DishDraft, existing: List[Dish], editing_id: str | None = None) -> CategoryIngredients:
    """Return cleaned ingredients, or raise 422 carrying the field errors."""
    ingredients = clean_ingredients(draft.ingredients)
    errors = validate_dish(draft.name, ingredients, existing, editing_id)
    if errors:
        raise HTTPException(
            status_code=422,
            detail={"errors": [e.model_dump() for e in errors]},
        )
    return ingredients


def _remember_ingredients(ingredient_repo: JSONIngredientRepo, ingredients: CategoryIngredients) -> None:
    # best-effort: autocomplete data must not block saving a dish
    try:
        for category, names in ingredients.by_category():
            ingredient_repo.add(category, names)
    except RepoError as e:
        logger.warning("Could not record ingredient suggestions: %s", e)


def _log_event(event_repo: JSONEventRepo, event: DishEvent) -> None:
    try:
        event_repo.append(event)
    except RepoError as e:
        logger.warning("Could not append %s event: %s", event.type, e)

# ---- Routes ------------------------------------------------------------------

@router.get("/api/v1/dishes", response_model=List[Dish])
def list_dishes(q: str = "", repos = Depends(get_repos)):
    dish_repo, _ingredient_repo, _event_repo = repos
    try:
        return filter_dishes(dish_repo.load(), q)
    except RepoError as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/api/v1/dishes/{dish_id}", response_model=Dish)
def get_dish(dish_id: str, repos = Depends(get_repos)):
    dish_repo, _ingredient_repo, _event_repo = repos
    try:
        dish = dish_repo.get(dish_id)
    except RepoError as e:
        raise HTTPException(status_code=500, detail=str(e))
    if dish is None:
        raise HTTPException(status_code=404, detail="Dish not found")
    return dish


@router.post("/api/v1/dishes", response_model=Dish, status_code=status.HTTP_201_CREATED)
def create_dish(draft: DishDraft, repos = Depends(get_repos)):
    dish_repo, ingredient_repo, event_repo = repos
    try:
        existing = dish_repo.load()
        ingredients = _validated_or_422(draft, existing)
        dish = dish_repo.create(draft.name.strip(), ingredients)
    except RepoError as e:
        raise HTTPException(status_code=500, detail=str(e))

    _remember_ingredients(ingredient_repo, dish.ingredients)
    _log_event(event_repo, DishEvent(type="create", payload={"id": dish.id, "name": dish.name}))
    return dish


@router.put("/api/v1/dishes/{dish_id}", response_model=Dish)
def update_dish(dish_id: str, draft: DishDraft, repos = Depends(get_repos)):
    dish_repo, ingredient_repo, event_repo = repos
    try:
        existing = dish_repo.load()
        if not any(d.id == dish_id for d in existing):
            raise HTTPException(status_code=404, detail="Dish not found")
        ingredients = _validated_or_422(draft, existing, editing_id=dish_id)
        dish = dish_repo.update(dish_id, draft.name.strip(), ingredients)
    except DishNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except RepoError as e:
        raise HTTPException(status_code=500, detail=str(e))

    _remember_ingredients(ingredient_repo, dish.ingredients)
    _log_event(event_repo, DishEvent(type="update", payload={"id": dish.id, "name": dish.name}))
    return dish


@router.delete("/api/v1/dishes/{dish_id}")
def delete_dish(dish_id: str, repos = Depends(get_repos)):
    dish_repo, _ingredient_repo, event_repo = repos
    try:
        removed = dish_repo.delete(dish_id)
    except RepoError as e:
        raise HTTPException(status_code=500, detail=str(e))
    if not removed:
        raise HTTPException(status_code=404, detail="Dish not found")

    _log_event(event_repo, DishEvent(type="delete", payload={"id": dish_id}))
    return {"ok": True}


@router.post("/api/v1/dishes/import")
def import_dishes(dishes: List[Dish], repos = Depends(get_repos)):
    """Bulk import (e.g. a previous export). Dishes whose id already exists are skipped."""
    dish_repo, _ingredient_repo, event_repo = repos
    cleaned = [
        d.model_copy(update={"name": d.name.strip(), "ingredients": clean_ingredients(d.ingredients)})
        for d in dishes
    ]
    try:
        imported = dish_repo.import_dishes(cleaned)
    except RepoError as e:
        raise HTTPException(status_code=500, detail=str(e))

    _log_event(event_repo, DishEvent(type="import", payload={"received": len(dishes), "imported": imported}))
    return {"imported": imported}
