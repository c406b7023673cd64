# tests/unit/test_validation.py
import pytest
from dish_manager.core.models import CategoryIngredients, Dish
from dish_manager.core.validation import (
    clean_ingredients,
    validate_dish,
    validate_dish_name,
    validate_ingredients,
)

EXISTING = [
    Dish(id="a", name="pasta"),
    Dish(id="b", name="  Chicken Curry "),
]


@pytest.mark.parametrize("name", ["", "   ", "\t", "\n", " \t\n "])
def test_blank_name_is_required(name):
    err = validate_dish_name(name, EXISTING)
    assert err is not None
    assert err.field == "name"
    assert err.message == "Dish name is required"


def test_new_name_is_valid():
    assert validate_dish_name("Lasagne", EXISTING) is None


@pytest.mark.parametrize("name", ["PASTA", "pasta", "  Pasta  ", "chicken curry"])
def test_duplicate_check_ignores_case_and_whitespace(name):
    err = validate_dish_name(name, EXISTING)
    assert err is not None
    assert err.message == "A dish with this name already exists"


def test_editing_dish_may_keep_its_own_name():
    assert validate_dish_name("pasta", EXISTING, editing_id="a") is None


def test_editing_dish_cannot_take_another_dish_name():
    err = validate_dish_name("Chicken curry", EXISTING, editing_id="a")
    assert err is not None and err.field == "name"


def test_unknown_editing_id_grants_no_exemption():
    assert validate_dish_name("pasta", EXISTING, editing_id="zzz") is not None


def test_ingredients_required_when_all_blank():
    err = validate_ingredients(CategoryIngredients(fruit_shop=["", "  "], supermarket=["\t"]))
    assert err is not None
    assert err.field == "ingredients"
    assert err.message == "At least one ingredient is required"


def test_single_ingredient_anywhere_is_enough():
    assert validate_ingredients(CategoryIngredients(butchery=["", "Mince"])) is None


def test_plain_mapping_is_accepted():
    assert validate_ingredients({"Fruit shop": [], "Butchery": [], "Supermarket": ["salt"]}) is None
    assert validate_ingredients({"Fruit shop": [""], "Butchery": [], "Supermarket": []}) is not None


def test_validate_dish_orders_name_error_first():
    errors = validate_dish(" ", CategoryIngredients(), EXISTING)
    assert [e.field for e in errors] == ["name", "ingredients"]


def test_validate_dish_valid_is_empty():
    assert validate_dish("Soup", CategoryIngredients(fruit_shop=["Leek"]), EXISTING) == []


def test_clean_ingredients_trims_and_drops_placeholders():
    out = clean_ingredients(CategoryIngredients(fruit_shop=[" Apple ", "", "Pear"], butchery=["  "]))
    assert out.fruit_shop == ["Apple", "Pear"]
    assert out.butchery == []
    assert out.supermarket == []
