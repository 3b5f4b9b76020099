"""Nutrition calculator API router.

Thin HTTP layer over `NutritionCalculator`: BMR, TDEE, macro allocation,
recommended splits and calorie adjustments. Bad or missing biometric input
surfaces as a 400 from the calculator itself.
"""

from fastapi import APIRouter
from core.logger import get_logger
from services.nutrition_calculator import nutrition_calculator
from schemas.nutrition_schema import (
    BMRRequest,
    BMRResponse,
    CaloricAdjustmentRequest,
    CaloricAdjustmentResponse,
    MacroDistributionResponse,
    MacrosRequest,
    MacrosResponse,
    NutritionValidationResponse,
    TDEERequest,
    TDEEResponse,
)

logger = get_logger("api.nutrition")
router = APIRouter(prefix="/api", tags=["nutrition"])


@router.post("/calculate-tdee", response_model=TDEEResponse)
def calculate_tdee(payload: TDEERequest):
    """Return BMR, TDEE and the multiplier used for an activity level.

    Raises:
        InvalidInputError: If a biometric field is missing or non-positive.
    """
    bmr = nutrition_calculator.calculate_bmr(payload.weight, payload.height, payload.age, payload.gender)
    activity_level = payload.activity_level or "moderate"
    tdee = nutrition_calculator.tdee_from_bmr(bmr, activity_level)
    logger.info("TDEE requested: level=%s bmr=%s tdee=%s", activity_level, bmr, tdee)
    return TDEEResponse(
        bmr=bmr,
        tdee=tdee,
        activity_level=activity_level,
        multiplier=nutrition_calculator.get_activity_multiplier(activity_level),
    )


@router.post("/nutrition/bmr", response_model=BMRResponse)
def calculate_bmr(payload: BMRRequest):
    return BMRResponse(
        bmr=nutrition_calculator.calculate_bmr(payload.weight, payload.height, payload.age, payload.gender)
    )


@router.post("/nutrition/macros", response_model=MacrosResponse)
def calculate_macros(payload: MacrosRequest):
    """Split calories into macro grams.

    An explicit ``distribution`` wins over ``goal``; with neither the
    maintenance split is used.
    """
    if payload.distribution is not None:
        ratios = payload.distribution.model_dump()
    else:
        ratios = nutrition_calculator.get_recommended_macro_distribution(payload.goal)
    macros = nutrition_calculator.calculate_macros(payload.calories, ratios)
    return MacrosResponse(**macros, distribution=ratios)


@router.get("/nutrition/macro-distribution/{goal}", response_model=MacroDistributionResponse)
def macro_distribution(goal: str):
    return MacroDistributionResponse(
        goal=goal,
        distribution=nutrition_calculator.get_recommended_macro_distribution(goal),
    )


@router.post("/nutrition/caloric-adjustment", response_model=CaloricAdjustmentResponse)
def caloric_adjustment(payload: CaloricAdjustmentRequest):
    calories = nutrition_calculator.calculate_caloric_adjustment(payload.tdee, payload.weight_goal, payload.rate)
    return CaloricAdjustmentResponse(
        tdee=payload.tdee,
        weight_goal=payload.weight_goal,
        rate=payload.rate,
        calories=calories,
    )


@router.post("/nutrition/validate", response_model=NutritionValidationResponse)
def validate_nutrition(payload: BMRRequest):
    """Report missing biometric fields without raising."""
    return nutrition_calculator.validate_nutrition_data(payload.model_dump())
