"""Food entry and custom calorie entry API router."""

from datetime import date
from typing import List, Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from database.deps import get_db_read, get_db_write
from core.auth import get_current_client_id
from services.calorie_entries import CalorieEntryService
from schemas.entry_schema import (
    CustomCalorieEntryCreate,
    CustomCalorieEntryResponse,
    CustomCalorieEntryUpdate,
    FoodEntryCaloriesUpdate,
    FoodEntryCreate,
    FoodEntryResponse,
    FoodEntryUpdate,
)

router = APIRouter(prefix="/api", tags=["entries"])


@router.post("/food-entries", response_model=FoodEntryResponse, status_code=201)
def create_food_entry(
    payload: FoodEntryCreate,
    client_id: int = Depends(get_current_client_id),
    db: Session = Depends(get_db_write),
):
    """Log a food for the calling client.

    Raises:
        ValidationError: If neither ``calories`` nor ``food_id`` is given.
        NotFoundError: If ``food_id`` is not in the catalog.
    """
    return CalorieEntryService(db).create_food_entry(client_id, payload.model_dump(exclude_none=True))


@router.get("/client/food-entries", response_model=List[FoodEntryResponse])
def list_food_entries(
    day: Optional[date] = Query(None, alias="date"),
    client_id: int = Depends(get_current_client_id),
    db: Session = Depends(get_db_read),
):
    """List the caller's food entries, excluded ones included; optionally one day."""
    return CalorieEntryService(db).list_food_entries(client_id, day)


@router.patch("/food-entries/{entry_id}", response_model=FoodEntryResponse)
def update_food_entry(
    entry_id: int,
    payload: FoodEntryUpdate,
    client_id: int = Depends(get_current_client_id),
    db: Session = Depends(get_db_write),
):
    return CalorieEntryService(db).update_food_entry(client_id, entry_id, payload.model_dump(exclude_unset=True))


@router.patch("/food-entries/{entry_id}/calories", response_model=FoodEntryResponse)
def override_food_entry_calories(
    entry_id: int,
    payload: FoodEntryCaloriesUpdate,
    client_id: int = Depends(get_current_client_id),
    db: Session = Depends(get_db_write),
):
    return CalorieEntryService(db).override_food_calories(client_id, entry_id, payload.calories)


@router.delete("/food-entries/{entry_id}", status_code=204)
def delete_food_entry(
    entry_id: int,
    client_id: int = Depends(get_current_client_id),
    db: Session = Depends(get_db_write),
):
    CalorieEntryService(db).delete_food_entry(client_id, entry_id)


@router.post("/custom-calories", response_model=CustomCalorieEntryResponse, status_code=201)
def create_custom_entry(
    payload: CustomCalorieEntryCreate,
    client_id: int = Depends(get_current_client_id),
    db: Session = Depends(get_db_write),
):
    return CalorieEntryService(db).create_custom_entry(client_id, payload.model_dump(exclude_none=True))


@router.get("/custom-calories/{day}", response_model=List[CustomCalorieEntryResponse])
def list_custom_entries(
    day: date,
    client_id: int = Depends(get_current_client_id),
    db: Session = Depends(get_db_read),
):
    return CalorieEntryService(db).list_custom_entries(client_id, day)


@router.put("/custom-calories/{entry_id}", response_model=CustomCalorieEntryResponse)
def update_custom_entry(
    entry_id: int,
    payload: CustomCalorieEntryUpdate,
    client_id: int = Depends(get_current_client_id),
    db: Session = Depends(get_db_write),
):
    return CalorieEntryService(db).update_custom_entry(client_id, entry_id, payload.model_dump(exclude_unset=True))


@router.delete("/custom-calories/{entry_id}", status_code=204)
def delete_custom_entry(
    entry_id: int,
    client_id: int = Depends(get_current_client_id),
    db: Session = Depends(get_db_write),
):
    CalorieEntryService(db).delete_custom_entry(client_id, entry_id)
