# dish_manager/core/models.py
from __future__ import annotations

from datetime import datetime, timezone
from typing import Iterator, List, Literal, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

from .categories import CATEGORIES, FIELD_BY_CATEGORY, Category


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


# ---------- Per-category records ----------

class _CategoryRecord(BaseModel):
    """
    Fixed-shape record with one field per Category.
    JSON keys are the category names ("Fruit shop", ...), attributes are snake_case.
    Index with a Category (or its string value); unknown names raise ValueError.
    Unknown keys in input are rejected rather than dropped.
    """
    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    def __getitem__(self, category: Union[Category, str]):
        return getattr(self, FIELD_BY_CATEGORY[Category(category)])

    def by_category(self) -> Iterator[Tuple[Category, list]]:
        for category in CATEGORIES:
            yield category, self[category]

    def replace(self, category: Union[Category, str], values: list):
        """Return a copy with one category's list swapped out."""
        return self.model_copy(update={FIELD_BY_CATEGORY[Category(category)]: list(values)})


class CategoryIngredients(_CategoryRecord):
    fruit_shop: List[str] = Field(default_factory=list, alias="Fruit shop")
    butchery: List[str] = Field(default_factory=list, alias="Butchery")
    supermarket: List[str] = Field(default_factory=list, alias="Supermarket")


# Known ingredient names per category, used for autocomplete
KnownIngredients = CategoryIngredients


# ---------- Dishes ----------

class Dish(BaseModel):
    """A named recipe with its ingredients split by store category."""
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., description="Opaque id assigned by the store")
    name: str
    ingredients: CategoryIngredients = Field(default_factory=CategoryIngredients)
    created_at: str = Field(default_factory=utc_now_iso, alias="createdAt")


class DishDraft(BaseModel):
    """Create/update payload. Not validated here: see core.validation."""
    name: str = ""
    ingredients: CategoryIngredients = Field(default_factory=CategoryIngredients)


class ValidationError(BaseModel):
    """A field-level validation failure returned as data, never raised."""
    field: str
    message: str


# ---------- Shopping list ----------

class ConsolidatedIngredient(BaseModel):
    name: str = Field(..., description="Trimmed, lowercased ingredient name")
    count: int = Field(..., ge=1)
    display: str


class ConsolidatedList(_CategoryRecord):
    fruit_shop: List[ConsolidatedIngredient] = Field(default_factory=list, alias="Fruit shop")
    butchery: List[ConsolidatedIngredient] = Field(default_factory=list, alias="Butchery")
    supermarket: List[ConsolidatedIngredient] = Field(default_factory=list, alias="Supermarket")

    def is_empty(self) -> bool:
        return not any(entries for _category, entries in self.by_category())


class ShoppingListRequest(BaseModel):
    dish_ids: List[str] = Field(default_factory=list)


class ShoppingListResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    dishes: List[str] = Field(default_factory=list, description="Names of the selected dishes")
    consolidated: ConsolidatedList = Field(..., alias="list")
    text: str = Field("", description="Plain-text rendering for the clipboard")


# ---------- Auditing / events ----------

class DishEvent(BaseModel):
    ts: str = Field(default_factory=utc_now_iso)
    type: Literal["create", "update", "delete", "import", "shopping_list"]
    payload: dict
    schema_version: int = 1
