# tests/unit/test_suggestions.py
from dish_manager.core.categories import Category
from dish_manager.core.models import KnownIngredients
from dish_manager.core.suggestions import get_suggestions, new_ingredients

KNOWN = KnownIngredients(fruit_shop=["Apple", "apricot", "Banana", "Avocado"], butchery=["Ham"])


def test_prefix_match_is_case_insensitive_and_ordered():
    assert get_suggestions(KNOWN, Category.FRUIT_SHOP, " A") == ["Apple", "apricot", "Avocado"]


def test_blank_query_suggests_nothing():
    assert get_suggestions(KNOWN, Category.FRUIT_SHOP, "  ") == []


def test_suggestions_respect_limit_and_category():
    assert get_suggestions(KNOWN, Category.FRUIT_SHOP, "a", limit=2) == ["Apple", "apricot"]
    assert get_suggestions(KNOWN, Category.SUPERMARKET, "a") == []


def test_new_ingredients_skips_known_blank_and_repeats():
    fresh = new_ingredients(KNOWN, Category.FRUIT_SHOP, ["apple", "Kiwi", " ", "kiwi", "Lime "])
    assert fresh == ["Kiwi", "Lime"]
