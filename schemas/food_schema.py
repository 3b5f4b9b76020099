"""Schemas for the food catalog."""

from pydantic import BaseModel
from typing import Dict


class FoodResponse(BaseModel):
    """Catalog food; nutrition values are per 100 g."""

    id: int
    fdc_id: int
    name: str
    display_name: str
    category: str
    calories: float
    protein: float
    carbs: float
    fat: float
    translations: Dict[str, str]
