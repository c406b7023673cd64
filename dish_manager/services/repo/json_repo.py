from __future__ import annotations

import io
import json
import logging
import os
import tempfile
from contextlib import contextmanager
from typing import Iterable, Iterator, List, Optional
from uuid import uuid4

from dish_manager.config import Settings
from dish_manager.core.categories import Category
from dish_manager.core.models import CategoryIngredients, Dish, DishEvent, KnownIngredients, utc_now_iso
from dish_manager.core.suggestions import new_ingredients
from dish_manager.services.exceptions import DishNotFoundError, RepoError
from dish_manager.services.repo.base import DishRepo, EventRepo, IngredientRepo

logger = logging.getLogger(__name__)


# Cross-platform file lock (fcntl for *nix; msvcrt for Windows)
@contextmanager
def _locked(path: str) -> Iterator[io.FileIO]:
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    f = open(path, "a+b")  # create if missing
    locker = None
    try:
        try:
            import fcntl  # type: ignore
            fcntl.flock(f.fileno(), fcntl.LOCK_EX)
            locker = "fcntl"
        except ImportError:
            try:
                import msvcrt  # type: ignore
                msvcrt.locking(f.fileno(), msvcrt.LK_LOCK, 1)
                locker = "msvcrt"
            except Exception as e:
                raise RepoError(f"Could not lock file {path}: {e}") from e
        yield f
    finally:
        try:
            if locker == "fcntl":
                import fcntl  # type: ignore
                fcntl.flock(f.fileno(), fcntl.LOCK_UN)
            elif locker == "msvcrt":
                import msvcrt  # type: ignore
                f.seek(0)
                msvcrt.locking(f.fileno(), msvcrt.LK_UNLCK, 1)
        except OSError:
            logger.warning("Could not unlock %s", path)
        f.close()


def _atomic_write(path: str, data: bytes) -> None:
    d = os.path.dirname(path) or "."
    os.makedirs(d, exist_ok=True)
    fd, tmp = tempfile.mkstemp(prefix=".tmp-", dir=d)
    try:
        with os.fdopen(fd, "wb") as w:
            w.write(data)
            w.flush()
            os.fsync(w.fileno())
        os.replace(tmp, path)
    except Exception as e:
        try:
            os.remove(tmp)
        except OSError:
            pass
        raise RepoError(f"Atomic write failed for {path}: {e}") from e


def _read_json(path: str) -> dict:
    if not os.path.exists(path):
        return {}
    with _locked(path) as f:
        f.seek(0)
        raw = f.read() or b"{}"
    return json.loads(raw.decode("utf-8"))


def _dump(obj: dict) -> bytes:
    return json.dumps(obj, ensure_ascii=False, separators=(",", ":")).encode("utf-8")


class JSONDishRepo(DishRepo):
    """All dishes in one JSON document: {"dishes": [...]}, in creation order."""

    def __init__(self, settings: Settings):
        self.path = settings.dishes_file

    def load(self) -> List[Dish]:
        try:
            obj = _read_json(self.path)
            return [Dish.model_validate(d) for d in obj.get("dishes", [])]
        except Exception as e:
            logger.error("Failed to load dishes from %s: %s", self.path, e)
            raise RepoError(f"Failed to load dishes from {self.path}: {e}") from e

    def save(self, dishes: List[Dish]) -> None:
        try:
            payload = _dump({"dishes": [d.model_dump(by_alias=True) for d in dishes]})
            _atomic_write(self.path, payload)
        except Exception as e:
            logger.error("Failed to save dishes to %s: %s", self.path, e)
            raise RepoError(f"Failed to save dishes to {self.path}: {e}") from e

    def get(self, dish_id: str) -> Optional[Dish]:
        return next((d for d in self.load() if d.id == dish_id), None)

    def create(self, name: str, ingredients: CategoryIngredients) -> Dish:
        dish = Dish(id=uuid4().hex, name=name, ingredients=ingredients, created_at=utc_now_iso())
        dishes = self.load()
        dishes.append(dish)
        self.save(dishes)
        logger.info("Created dish %s (%s)", dish.id, dish.name)
        return dish

    def update(self, dish_id: str, name: str, ingredients: CategoryIngredients) -> Dish:
        """Replace name and ingredients; id and createdAt never change."""
        dishes = self.load()
        for i, current in enumerate(dishes):
            if current.id == dish_id:
                updated = current.model_copy(update={"name": name, "ingredients": ingredients})
                dishes[i] = updated
                self.save(dishes)
                logger.info("Updated dish %s", dish_id)
                return updated
        raise DishNotFoundError(f"Dish {dish_id} not found")

    def delete(self, dish_id: str) -> bool:
        dishes = self.load()
        kept = [d for d in dishes if d.id != dish_id]
        if len(kept) == len(dishes):
            return False
        self.save(kept)
        logger.info("Deleted dish %s", dish_id)
        return True

    def import_dishes(self, dishes: Iterable[Dish]) -> int:
        """Append dishes whose id is not stored yet. Returns how many were added."""
        current = self.load()
        existing_ids = {d.id for d in current}
        added = 0
        for dish in dishes:
            if dish.id in existing_ids:
                continue
            existing_ids.add(dish.id)
            current.append(dish)
            added += 1
        if added:
            self.save(current)
        logger.info("Imported %d dish(es)", added)
        return added


class JSONIngredientRepo(IngredientRepo):
    """Known ingredient names per category: {"Fruit shop": [...], ...}."""

    def __init__(self, settings: Settings):
        self.path = settings.ingredients_file

    def load(self) -> KnownIngredients:
        try:
            return KnownIngredients.model_validate(_read_json(self.path))
        except Exception as e:
            logger.error("Failed to load ingredients from %s: %s", self.path, e)
            raise RepoError(f"Failed to load ingredients from {self.path}: {e}") from e

    def add(self, category: Category, names: Iterable[str]) -> List[str]:
        known = self.load()
        fresh = new_ingredients(known, category, names)
        if not fresh:
            return []
        updated = known.replace(category, list(known[category]) + fresh)
        try:
            _atomic_write(self.path, _dump(updated.model_dump(by_alias=True)))
        except Exception as e:
            logger.error("Failed to save ingredients to %s: %s", self.path, e)
            raise RepoError(f"Failed to save ingredients to {self.path}: {e}") from e
        return fresh


class JSONEventRepo(EventRepo):
    def __init__(self, settings: Settings):
        self.path = settings.events_file

    def append(self, event: DishEvent) -> None:
        try:
            line = (json.dumps(event.model_dump(), ensure_ascii=False, separators=(",", ":"), default=str) + "\n").encode("utf-8")
            with _locked(self.path) as f:
                f.seek(0, os.SEEK_END)
                f.write(line)
                f.flush()
                os.fsync(f.fileno())
        except Exception as e:
            raise RepoError(f"Failed to append event to {self.path}: {e}") from e
