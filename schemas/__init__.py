"""Pydantic schema package for request and response models."""

from .calorie_schema import CalorieGoalResponse, CalorieGoalUpdate, CalorieSummaryResponse
from .client_schema import ClientRegisterRequest, ClientResponse, TrainerCreate, TrainerResponse
from .entry_schema import (
    CustomCalorieEntryCreate,
    CustomCalorieEntryResponse,
    FoodEntryCreate,
    FoodEntryResponse,
)
from .nutrition_schema import MacrosRequest, MacrosResponse, TDEERequest, TDEEResponse

__all__ = [
    "CalorieGoalResponse",
    "CalorieGoalUpdate",
    "CalorieSummaryResponse",
    "ClientRegisterRequest",
    "ClientResponse",
    "CustomCalorieEntryCreate",
    "CustomCalorieEntryResponse",
    "FoodEntryCreate",
    "FoodEntryResponse",
    "MacrosRequest",
    "MacrosResponse",
    "TDEERequest",
    "TDEEResponse",
    "TrainerCreate",
    "TrainerResponse",
]
