"""Common-food catalog lookups.

Foods carry nutrition per 100 g; logging a catalog food scales those
figures by the logged quantity.
"""

import json
from typing import Dict, List, Optional
from sqlalchemy.orm import Session

from core.exceptions import NotFoundError
from core.logger import get_logger
from database import models
from services.nutrition_calculator import round_half_up

logger = get_logger("services.food_catalog")

SUPPORTED_LANGUAGES = ("en", "es", "fr", "pt")


def food_translations(food: models.Food) -> Dict[str, str]:
    if not food.translations:
        return {}
    try:
        return json.loads(food.translations)
    except ValueError:
        logger.warning("Food %s has unreadable translations: %r", food.fdc_id, food.translations)
        return {}


def translated_name(food: models.Food, language: str = "en") -> str:
    """Food name in the requested language, English when no translation exists."""
    if language == "en":
        return food.name
    return food_translations(food).get(language) or food.name


def calories_for_quantity(food: models.Food, quantity_g: float) -> int:
    """Calories in ``quantity_g`` grams of a catalog food, rounded half-up."""
    return round_half_up(food.calories * quantity_g / 100)


def nutrients_for_quantity(food: models.Food, quantity_g: float) -> Dict[str, float]:
    factor = quantity_g / 100
    return {
        "protein": round(food.protein * factor, 1),
        "carbs": round(food.carbs * factor, 1),
        "fat": round(food.fat * factor, 1),
    }


class FoodCatalog:
    """Search and fetch catalog foods."""

    def __init__(self, session: Session):
        self.session = session

    def search(self, query: Optional[str] = None, language: str = "en") -> List[models.Food]:
        """Case-insensitive substring match on the English or translated name.

        An empty query returns the whole catalog ordered by name.
        """
        foods = self.session.query(models.Food).order_by(models.Food.name).all()
        needle = (query or "").strip().lower()
        if not needle:
            return foods
        return [
            food for food in foods
            if needle in food.name.lower()
            or (language != "en" and needle in translated_name(food, language).lower())
        ]

    def get_by_fdc_id(self, fdc_id: int) -> models.Food:
        food = self.session.query(models.Food).filter(models.Food.fdc_id == fdc_id).first()
        if food is None:
            raise NotFoundError("Food", fdc_id)
        return food

    def get(self, food_id: int) -> models.Food:
        food = self.session.get(models.Food, food_id)
        if food is None:
            raise NotFoundError("Food", food_id)
        return food
