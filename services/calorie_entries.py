"""Food and custom calorie entry writes.

Entries always belong to one client; an entry id that exists but belongs to
somebody else is reported as not found. ``is_included_in_calories`` defaults
to True whenever a caller leaves it out.
"""

from datetime import date, datetime
from typing import Any, Dict, List, Optional
from sqlalchemy.orm import Session

from core.exceptions import ClientNotFoundError, NotFoundError, ValidationError
from core.logger import get_logger
from core.repository import BaseRepository
from database import models
from services.calorie_tracker import day_bounds
from services.food_catalog import FoodCatalog, calories_for_quantity, nutrients_for_quantity

logger = get_logger("services.calorie_entries")

FOOD_REQUIRED = ("description", "meal_type", "is_included_in_calories", "date")
CUSTOM_REQUIRED = ("description", "calories", "date")


def _without_null(changes: Dict[str, Any], required) -> Dict[str, Any]:
    return {k: v for k, v in changes.items() if v is not None or k not in required}


class CalorieEntryService:
    """Create, list, update and delete a client's calorie entries."""

    def __init__(self, session: Session):
        self.session = session
        self.food_entries = BaseRepository(models.FoodEntry, session)
        self.custom_entries = BaseRepository(models.CustomCalorieEntry, session)
        self.catalog = FoodCatalog(session)

    def _require_client(self, client_id: int) -> None:
        if self.session.get(models.Client, client_id) is None:
            raise ClientNotFoundError(client_id)

    def _owned(self, repo: BaseRepository, client_id: int, entry_id: int):
        entry = repo.get_by_id(entry_id)
        if entry is None or entry.client_id != client_id:
            raise NotFoundError(repo.model.__name__, entry_id)
        return entry

    def _for_day(self, model, client_id: int, day: Optional[date]) -> List:
        query = self.session.query(model).filter(model.client_id == client_id)
        if day is not None:
            start, end = day_bounds(day)
            query = query.filter(model.date >= start, model.date <= end)
        return query.order_by(model.date.desc(), model.id).all()

    # Food entries

    def create_food_entry(self, client_id: int, data: Dict[str, Any]) -> models.FoodEntry:
        """Log a food entry.

        Calories come from ``data["calories"]`` when given, otherwise from the
        catalog food (``food_id``) scaled by ``quantity_g``.

        Raises:
            ClientNotFoundError: If the client does not exist.
            NotFoundError: If ``food_id`` is not in the catalog.
            ValidationError: If neither calories nor a catalog food is given.
        """
        self._require_client(client_id)
        values = dict(data)
        food_id = values.get("food_id")
        if food_id is not None:
            food = self.catalog.get(food_id)
            quantity = values.get("quantity_g") or 100
            values["quantity_g"] = quantity
            values.setdefault("description", food.name)
            if values.get("calories") is None:
                values["calories"] = calories_for_quantity(food, quantity)
            for nutrient, amount in nutrients_for_quantity(food, quantity).items():
                if values.get(nutrient) is None:
                    values[nutrient] = amount
        elif values.get("calories") is None:
            raise ValidationError("Either calories or food_id is required", field="calories")
        if not values.get("description"):
            raise ValidationError("A description is required for entries without a catalog food", field="description")

        if values.get("is_included_in_calories") is None:
            values["is_included_in_calories"] = True
        if values.get("date") is None:
            values["date"] = datetime.now()
        values["original_calories"] = values["calories"]

        entry = self.food_entries.create(models.FoodEntry(client_id=client_id, **values))
        logger.info("Food entry %s logged for client %s (%s kcal)", entry.id, client_id, entry.calories)
        return entry

    def list_food_entries(self, client_id: int, day: Optional[date] = None) -> List[models.FoodEntry]:
        """All of a client's food entries, or one day's, newest first (excluded ones too)."""
        return self._for_day(models.FoodEntry, client_id, day)

    def get_food_entry(self, client_id: int, entry_id: int) -> models.FoodEntry:
        return self._owned(self.food_entries, client_id, entry_id)

    def update_food_entry(self, client_id: int, entry_id: int, changes: Dict[str, Any]) -> models.FoodEntry:
        """Apply a partial update; ``None`` never clears a required column."""
        entry = self._owned(self.food_entries, client_id, entry_id)
        return self.food_entries.update_fields(entry, _without_null(changes, FOOD_REQUIRED))

    def override_food_calories(self, client_id: int, entry_id: int, calories: int) -> models.FoodEntry:
        """Correct the counted calories while keeping ``original_calories``."""
        entry = self._owned(self.food_entries, client_id, entry_id)
        logger.info("Food entry %s calories %s -> %s", entry_id, entry.calories, calories)
        return self.food_entries.update_fields(entry, {"calories": calories})

    def delete_food_entry(self, client_id: int, entry_id: int) -> None:
        self.food_entries.delete(self._owned(self.food_entries, client_id, entry_id))

    # Custom calorie entries

    def create_custom_entry(self, client_id: int, data: Dict[str, Any]) -> models.CustomCalorieEntry:
        """Store a manual calorie entry (always counted in the daily total)."""
        self._require_client(client_id)
        values = dict(data)
        if values.get("date") is None:
            values["date"] = datetime.now()
        entry = self.custom_entries.create(models.CustomCalorieEntry(client_id=client_id, **values))
        logger.info("Custom calorie entry %s logged for client %s (%s kcal)", entry.id, client_id, entry.calories)
        return entry

    def list_custom_entries(self, client_id: int, day: Optional[date] = None) -> List[models.CustomCalorieEntry]:
        return self._for_day(models.CustomCalorieEntry, client_id, day)

    def update_custom_entry(self, client_id: int, entry_id: int, changes: Dict[str, Any]) -> models.CustomCalorieEntry:
        entry = self._owned(self.custom_entries, client_id, entry_id)
        return self.custom_entries.update_fields(entry, _without_null(changes, CUSTOM_REQUIRED))

    def delete_custom_entry(self, client_id: int, entry_id: int) -> None:
        self.custom_entries.delete(self._owned(self.custom_entries, client_id, entry_id))
