"""Tests for catalog lookups and quantity scaling."""

from types import SimpleNamespace

import pytest

from core.exceptions import NotFoundError
from services.food_catalog import FoodCatalog, calories_for_quantity, nutrients_for_quantity


def test_quantity_calories_round_half_up():
    assert calories_for_quantity(SimpleNamespace(calories=165.0), 50) == 83
    assert calories_for_quantity(SimpleNamespace(calories=89.0), 50) == 45
    assert calories_for_quantity(SimpleNamespace(calories=165.0), 200) == 330


def test_nutrients_scale_with_quantity():
    food = SimpleNamespace(protein=31.0, carbs=0.0, fat=3.6)
    assert nutrients_for_quantity(food, 150) == {"protein": 46.5, "carbs": 0.0, "fat": 5.4}


def test_search_by_translation(db):
    foods = FoodCatalog(db).search("saumon", language="fr")
    assert [food.fdc_id for food in foods] == [173705]
    assert FoodCatalog(db).search("saumon") == []


def test_unknown_fdc_id(db):
    with pytest.raises(NotFoundError) as exc_info:
        FoodCatalog(db).get_by_fdc_id(1)
    assert exc_info.value.details == {"resource": "Food", "id": 1}
