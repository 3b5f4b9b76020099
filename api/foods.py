"""Food catalog API router."""

from typing import List, Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from database.deps import get_db_read
from database import models
from services.food_catalog import SUPPORTED_LANGUAGES, FoodCatalog, food_translations, translated_name
from schemas.food_schema import FoodResponse

router = APIRouter(prefix="/api", tags=["foods"])

LANGUAGE_PATTERN = "^(%s)$" % "|".join(SUPPORTED_LANGUAGES)


def _to_response(food: models.Food, language: str) -> FoodResponse:
    return FoodResponse(
        id=food.id,
        fdc_id=food.fdc_id,
        name=food.name,
        display_name=translated_name(food, language),
        category=food.category or "",
        calories=food.calories,
        protein=food.protein,
        carbs=food.carbs,
        fat=food.fat,
        translations=food_translations(food),
    )


@router.get("/foods", response_model=List[FoodResponse])
def search_foods(
    q: Optional[str] = Query(None, description="Substring of the food name"),
    lang: str = Query("en", pattern=LANGUAGE_PATTERN),
    db: Session = Depends(get_db_read),
):
    """Search the catalog by English or translated name; values per 100 g."""
    return [_to_response(food, lang) for food in FoodCatalog(db).search(q, lang)]


@router.get("/foods/{fdc_id}", response_model=FoodResponse)
def get_food(fdc_id: int, lang: str = Query("en", pattern=LANGUAGE_PATTERN), db: Session = Depends(get_db_read)):
    return _to_response(FoodCatalog(db).get_by_fdc_id(fdc_id), lang)
