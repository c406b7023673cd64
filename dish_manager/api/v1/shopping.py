from __future__ import annotations

import logging
import time

from fastapi import APIRouter, Depends, HTTPException, Request

from dish_manager.config import Settings
from dish_manager.core.consolidation import consolidate_ingredients, format_consolidated_list_for_clipboard
from dish_manager.core.models import DishEvent, ShoppingListRequest, ShoppingListResponse
from dish_manager.core.selection import select_dishes
from dish_manager.services.exceptions import DishNotFoundError, RepoError, SelectionLimitError
from dish_manager.services.metrics import MetricsLogger
from dish_manager.services.repo.json_repo import JSONDishRepo, JSONEventRepo

router = APIRouter(tags=["shopping"])
logger = logging.getLogger(__name__)

# ---- Dependencies ------------------------------------------------------------

def get_settings() -> Settings:
    return Settings()

def get_repos(settings: Settings = Depends(get_settings)):
    return JSONDishRepo(settings), JSONEventRepo(settings)

# ---- Route ------------------------------------------------------------------

@router.post("/api/v1/shopping-list", response_model=ShoppingListResponse)
def build_shopping_list(
    selection: ShoppingListRequest,
    settings: Settings = Depends(get_settings),
    repos = Depends(get_repos),
    request: Request = None,
):
    dish_repo, event_repo = repos
    try:
        dishes = dish_repo.load()
    except RepoError as e:
        raise HTTPException(status_code=500, detail=str(e))

    try:
        selected = select_dishes(dishes, selection.dish_ids, limit=settings.max_selected_dishes)
    except SelectionLimitError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except DishNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    t0 = time.perf_counter()
    consolidated = consolidate_ingredients(selected)
    text = "" if consolidated.is_empty() else format_consolidated_list_for_clipboard(consolidated)
    dt_ms = (time.perf_counter() - t0) * 1000.0

    # best-effort latency log
    corr_id = request.headers.get("X-Correlation-Id") if request else None
    MetricsLogger(settings).log_latency(
        name="shopping_list",
        duration_ms=dt_ms,
        extra={"dishes": len(selected)},
        corr_id=corr_id,
    )

    try:
        event_repo.append(DishEvent(type="shopping_list", payload={"dish_ids": [d.id for d in selected]}))
    except RepoError as e:
        # Don't fail the request on log errors
        logger.warning("Could not append shopping_list event: %s", e)

    return ShoppingListResponse(
        dishes=[d.name for d in selected],
        consolidated=consolidated,
        text=text,
    )
