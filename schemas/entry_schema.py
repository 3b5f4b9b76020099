"""Schemas for food entries and custom calorie entries."""

from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Literal, Optional

MealType = Literal["breakfast", "lunch", "dinner", "snack"]


def to_local_naive(value: Optional[datetime]) -> Optional[datetime]:
    """Convert an offset-aware timestamp to naive server-local time.

    Entry dates are stored naive and bucketed into days by server local
    time, so an offset must be applied before it is dropped.
    """
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)


class FoodEntryCreate(BaseModel):
    """Payload for logging a food.

    Either ``calories`` or a catalog ``food_id`` (with ``quantity_g``) is
    needed. ``is_included_in_calories`` defaults to True.
    """

    description: Optional[str] = Field(None, min_length=1, examples=["Chicken breast"])
    meal_type: MealType = Field(..., examples=["lunch"])
    calories: Optional[int] = Field(None, ge=0, le=5000, examples=[330])
    food_id: Optional[int] = Field(None, examples=[1], description="Catalog food id")
    quantity_g: Optional[float] = Field(None, gt=0, le=5000, examples=[200])
    protein: Optional[float] = Field(None, ge=0)
    carbs: Optional[float] = Field(None, ge=0)
    fat: Optional[float] = Field(None, ge=0)
    is_included_in_calories: bool = Field(True, description="Whether the entry counts toward the daily total")
    date: Optional[datetime] = Field(None, description="When the food was eaten; defaults to now")

    local_date = field_validator("date")(to_local_naive)


class FoodEntryUpdate(BaseModel):
    description: Optional[str] = Field(None, min_length=1)
    meal_type: Optional[MealType] = None
    calories: Optional[int] = Field(None, ge=0, le=5000)
    is_included_in_calories: Optional[bool] = None
    date: Optional[datetime] = None

    local_date = field_validator("date")(to_local_naive)


class FoodEntryCaloriesUpdate(BaseModel):
    """Trainer correction of the counted calories."""

    calories: int = Field(..., ge=0, le=5000, examples=[450])


class FoodEntryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    client_id: int
    food_id: Optional[int] = None
    description: str
    meal_type: str
    quantity_g: Optional[float] = None
    calories: Optional[int] = None
    original_calories: Optional[int] = None
    protein: Optional[float] = None
    carbs: Optional[float] = None
    fat: Optional[float] = None
    is_included_in_calories: bool
    date: datetime


class CustomCalorieEntryCreate(BaseModel):
    description: str = Field(..., min_length=1, examples=["Protein bar"])
    calories: int = Field(..., gt=0, le=5000, examples=[200])
    meal_type: Optional[MealType] = Field(None, examples=["snack"])
    notes: Optional[str] = None
    date: Optional[datetime] = Field(None, description="Defaults to now")

    local_date = field_validator("date")(to_local_naive)


class CustomCalorieEntryUpdate(BaseModel):
    description: Optional[str] = Field(None, min_length=1)
    calories: Optional[int] = Field(None, gt=0, le=5000)
    meal_type: Optional[MealType] = None
    notes: Optional[str] = None
    date: Optional[datetime] = None

    local_date = field_validator("date")(to_local_naive)


class CustomCalorieEntryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    client_id: int
    description: str
    calories: int
    meal_type: Optional[str] = None
    notes: Optional[str] = None
    date: datetime
