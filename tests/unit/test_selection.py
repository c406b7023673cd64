# tests/unit/test_selection.py
import pytest
from dish_manager.core.models import Dish
from dish_manager.core.selection import filter_dishes, select_dishes
from dish_manager.core.exceptions import DishNotFoundError, SelectionLimitError

DISHES = [Dish(id=str(i), name=n) for i, n in enumerate(["Pasta Bake", "Beef Stew", "pasta salad", "Curry"])]


def test_blank_query_keeps_everything():
    assert filter_dishes(DISHES, "  ") == DISHES


def test_query_is_case_insensitive_substring():
    assert [d.name for d in filter_dishes(DISHES, "PASTA")] == ["Pasta Bake", "pasta salad"]


def test_select_keeps_collection_order_and_ignores_repeats():
    out = select_dishes(DISHES, ["3", "0", "3"])
    assert [d.id for d in out] == ["0", "3"]


def test_select_rejects_unknown_ids():
    with pytest.raises(DishNotFoundError):
        select_dishes(DISHES, ["0", "nope"])


def test_select_enforces_limit():
    with pytest.raises(SelectionLimitError):
        select_dishes(DISHES, ["0", "1", "2"], limit=2)
    assert len(select_dishes(DISHES, ["0", "1"], limit=2)) == 2


def test_selection_errors_are_core_owned():
    # callers outside the service layer can catch them as plain lookup/value errors
    assert issubclass(DishNotFoundError, LookupError)
    assert issubclass(SelectionLimitError, ValueError)
