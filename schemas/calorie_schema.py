"""Schemas for calorie goals and the daily calorie summary."""

from datetime import date, datetime
from pydantic import BaseModel, Field
from typing import List, Literal, Optional


class CalorieGoalUpdate(BaseModel):
    """Manual calorie goal override for a client."""

    goal: int = Field(..., gt=0, le=10000, examples=[2200], description="Daily calories (1-10000)")


class CalorieGoalResponse(BaseModel):
    """Effective goal plus the stored override it may have come from."""

    goal: int
    override: Optional[int] = None


class CalorieBreakdown(BaseModel):
    food_entries: int
    custom_entries: int


class CalorieSummaryItem(BaseModel):
    type: Literal["food", "custom"]
    id: int
    description: str
    calories: int
    meal_type: Optional[str] = None
    is_included_in_calories: Optional[bool] = None
    date: datetime


class CalorieSummaryResponse(BaseModel):
    """Totals for one calendar day; ``remaining`` is never negative."""

    date: date
    goal: int
    total: int
    remaining: int
    breakdown: CalorieBreakdown
    items: List[CalorieSummaryItem]
