from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Iterable, List, Optional
from dish_manager.core.categories import Category
from dish_manager.core.models import CategoryIngredients, Dish, DishEvent, KnownIngredients

class DishRepo(ABC):
    @abstractmethod
    def load(self) -> List[Dish]: ...
    @abstractmethod
    def get(self, dish_id: str) -> Optional[Dish]: ...
    @abstractmethod
    def create(self, name: str, ingredients: CategoryIngredients) -> Dish: ...
    @abstractmethod
    def update(self, dish_id: str, name: str, ingredients: CategoryIngredients) -> Dish: ...
    @abstractmethod
    def delete(self, dish_id: str) -> bool: ...
    @abstractmethod
    def import_dishes(self, dishes: Iterable[Dish]) -> int: ...

class IngredientRepo(ABC):
    @abstractmethod
    def load(self) -> KnownIngredients: ...
    @abstractmethod
    def add(self, category: Category, names: Iterable[str]) -> List[str]: ...

class EventRepo(ABC):
    @abstractmethod
    def append(self, event: DishEvent) -> None: ...
