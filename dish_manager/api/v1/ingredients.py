from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from dish_manager.config import Settings
from dish_manager.core.categories import Category
from dish_manager.core.models import KnownIngredients
from dish_manager.core.suggestions import get_suggestions
from dish_manager.services.exceptions import RepoError
from dish_manager.services.repo.json_repo import JSONIngredientRepo

router = APIRouter(tags=["ingredients"])

# ---- Dependencies ------------------------------------------------------------

def get_settings() -> Settings:
    return Settings()

def get_ingredient_repo(settings: Settings = Depends(get_settings)) -> JSONIngredientRepo:
    return JSONIngredientRepo(settings)

# ---- Routes ------------------------------------------------------------------

@router.get("/api/v1/ingredients", response_model=KnownIngredients)
def list_known_ingredients(repo: JSONIngredientRepo = Depends(get_ingredient_repo)):
    try:
        return repo.load()
    except RepoError as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/api/v1/ingredients/suggestions", response_model=List[str])
def suggest_ingredients(
    category: Category,
    q: str = "",
    limit: Optional[int] = Query(None, ge=1),
    settings: Settings = Depends(get_settings),
    repo: JSONIngredientRepo = Depends(get_ingredient_repo),
):
    try:
        known = repo.load()
    except RepoError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return get_suggestions(known, category, q, limit or settings.suggestion_limit)
