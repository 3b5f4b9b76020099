"""Schemas for the nutrition calculator endpoints.

Biometric fields are optional at the schema level so that missing or
non-positive values reach the calculator and come back as a 400 listing
what is missing.
"""

from pydantic import BaseModel, Field
from typing import Dict, List, Optional


class BMRRequest(BaseModel):
    """Biometric inputs for a BMR calculation."""

    weight: Optional[float] = Field(None, examples=[70], description="Body weight in kilograms")
    height: Optional[float] = Field(None, examples=[175], description="Height in centimeters")
    age: Optional[int] = Field(None, examples=[30], description="Age in years")
    gender: Optional[str] = Field(None, examples=["male"], description="male or female")


class TDEERequest(BMRRequest):
    """Biometric inputs plus an activity label."""

    activity_level: Optional[str] = Field(
        None,
        examples=["light"],
        description="sedentary, light, moderate, active, very_active (or lightly_active, moderately_active, extra_active)",
    )


class BMRResponse(BaseModel):
    bmr: int


class TDEEResponse(BaseModel):
    bmr: int
    tdee: int
    activity_level: str
    multiplier: float


class MacroDistribution(BaseModel):
    """Share of calories per macronutrient, each between 0 and 1."""

    protein: float = Field(..., ge=0, le=1, examples=[0.3])
    carbs: float = Field(..., ge=0, le=1, examples=[0.4])
    fat: float = Field(..., ge=0, le=1, examples=[0.3])


class MacrosRequest(BaseModel):
    """Calories to split, with either an explicit distribution or a goal label."""

    calories: float = Field(..., examples=[2000], description="Daily calories to allocate")
    distribution: Optional[MacroDistribution] = Field(None, description="Explicit split; overrides goal")
    goal: Optional[str] = Field(None, examples=["muscle_gain"], description="Goal label used to pick a recommended split")


class MacrosResponse(BaseModel):
    protein_g: int
    carbs_g: int
    fat_g: int
    distribution: MacroDistribution


class CaloricAdjustmentRequest(BaseModel):
    tdee: float = Field(..., gt=0, examples=[2400])
    weight_goal: str = Field("maintain", examples=["loss"], description="loss, gain or maintain")
    rate: str = Field("moderate", examples=["moderate"], description="slow, moderate or fast")


class CaloricAdjustmentResponse(BaseModel):
    tdee: float
    weight_goal: str
    rate: str
    calories: int


class NutritionValidationResponse(BaseModel):
    valid: bool
    missing_fields: List[str]


class MacroDistributionResponse(BaseModel):
    goal: str
    distribution: Dict[str, float]
