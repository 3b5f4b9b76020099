"""Schemas for training, meal and supplement plans and their assignments."""

from datetime import date, datetime
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


class TrainingPlanCreate(BaseModel):
    trainer_id: int = Field(..., examples=[1])
    name: str = Field(..., min_length=1, examples=["Hypertrophy block A"])
    description: Optional[str] = None
    duration_weeks: Optional[int] = Field(None, gt=0, le=104, examples=[8])
    daily_calories: Optional[int] = Field(
        None, ge=0, le=10000, examples=[1800],
        description="When set, becomes the calorie goal of every client on this plan"
    )


class TrainingPlanUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    duration_weeks: Optional[int] = Field(None, gt=0, le=104)
    daily_calories: Optional[int] = Field(None, ge=0, le=10000)


class TrainingPlanResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    trainer_id: int
    name: str
    description: Optional[str] = None
    duration_weeks: Optional[int] = None
    daily_calories: Optional[int] = None
    created_at: datetime


class MealPlanCreate(BaseModel):
    """Meal plan; calories can be given directly or derived from a base figure.

    With ``base_calories`` (usually a client's TDEE) and
    ``adjustment_percentage`` the plan's calories are the adjusted base.
    Macro grams are filled from the goal's recommended split when omitted.
    """

    trainer_id: int = Field(..., examples=[1])
    name: str = Field(..., min_length=1, examples=["Cut - 4 weeks"])
    description: Optional[str] = None
    goal: Optional[str] = Field(None, examples=["weight_loss"])
    daily_calories: Optional[int] = Field(None, gt=0, le=10000)
    base_calories: Optional[int] = Field(None, gt=0, le=10000, examples=[2400])
    adjustment_percentage: float = Field(0, ge=-100, le=100, examples=[-20])
    protein_g: Optional[int] = Field(None, ge=0)
    carbs_g: Optional[int] = Field(None, ge=0)
    fat_g: Optional[int] = Field(None, ge=0)


class MealPlanResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    trainer_id: int
    name: str
    description: Optional[str] = None
    goal: Optional[str] = None
    daily_calories: Optional[int] = None
    protein_g: Optional[int] = None
    carbs_g: Optional[int] = None
    fat_g: Optional[int] = None
    created_at: datetime


class SupplementPlanCreate(BaseModel):
    trainer_id: int = Field(..., examples=[1])
    name: str = Field(..., min_length=1, examples=["Recovery stack"])
    description: Optional[str] = None


class SupplementPlanResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    trainer_id: int
    name: str
    description: Optional[str] = None
    created_at: datetime


class PlanAssignmentRequest(BaseModel):
    plan_id: int = Field(..., examples=[1])
    start_date: Optional[date] = None
    notes: Optional[str] = None


class PlanAssignmentResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    client_id: int
    plan_id: int
    is_active: bool
    start_date: Optional[date] = None
    notes: Optional[str] = None
    created_at: datetime


class ActiveTrainingPlanResponse(BaseModel):
    assignment: Optional[PlanAssignmentResponse] = None
    plan: Optional[TrainingPlanResponse] = None


class ActiveMealPlanResponse(BaseModel):
    assignment: Optional[PlanAssignmentResponse] = None
    plan: Optional[MealPlanResponse] = None


class ActiveSupplementPlanResponse(BaseModel):
    assignment: Optional[PlanAssignmentResponse] = None
    plan: Optional[SupplementPlanResponse] = None
