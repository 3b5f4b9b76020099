"""Calorie goal resolution and daily calorie aggregation.

The effective daily goal for a client comes from an ordered list of goal
sources; the first one that yields a value wins:

1. ``daily_calories`` of the client's active training plan (when > 0)
2. the client's manual ``calorie_goal_override`` (when > 0)
3. ``DEFAULT_CALORIE_GOAL``

The daily summary adds included food entries and all custom calorie entries
logged within the calendar day (local server time) and reports what is left
of the goal. ``compute_remaining`` is the only place that arithmetic lives;
routers and clients read ``remaining`` instead of recomputing it.
"""

from datetime import date, datetime, time
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple, Union
from sqlalchemy.orm import Session

from core.exceptions import ClientNotFoundError
from core.logger import get_logger
from database import models
from services.plan_assignments import AssignmentRepository

logger = get_logger("services.calorie_tracker")

DEFAULT_CALORIE_GOAL = 2000


def day_bounds(day: Union[date, datetime]) -> Tuple[datetime, datetime]:
    """Return fresh ``(start, end)`` datetimes covering the whole calendar day.

    Both ends are inclusive: ``00:00:00.000000`` and ``23:59:59.999999``.
    """
    if isinstance(day, datetime):
        day = day.date()
    return datetime.combine(day, time.min), datetime.combine(day, time.max)


def compute_remaining(goal: int, total: int) -> int:
    """Calories left for the day; never negative."""
    return max(0, goal - total)


def _positive(value: Optional[int]) -> Optional[int]:
    return value if value is not None and value > 0 else None


class CalorieTracker:
    """Resolve calorie goals and build daily summaries for a DB session.

    Attributes:
        session: SQLAlchemy session used for every read and write.
        goal_sources: Ordered callables ``(client) -> Optional[int]``.
    """

    def __init__(self, session: Session):
        self.session = session
        self.training_assignments = AssignmentRepository(models.ClientPlan, session)
        self.goal_sources: Sequence[Callable[[models.Client], Optional[int]]] = (
            self._goal_from_active_plan,
            self._goal_from_override,
        )

    def get_client(self, client_id: int) -> models.Client:
        """Return the client or raise `ClientNotFoundError`."""
        client = self.session.get(models.Client, client_id)
        if client is None:
            raise ClientNotFoundError(client_id)
        return client

    def _goal_from_active_plan(self, client: models.Client) -> Optional[int]:
        assignment = self.training_assignments.get_active_for_client(client.id)
        if assignment is None:
            return None
        plan = self.session.get(models.TrainingPlan, assignment.plan_id)
        return _positive(plan.daily_calories) if plan is not None else None

    def _goal_from_override(self, client: models.Client) -> Optional[int]:
        return _positive(client.calorie_goal_override)

    def get_calorie_goal(self, client_id: int) -> int:
        """Return the effective daily calorie goal for a client.

        Raises:
            ClientNotFoundError: If the client id does not resolve.
        """
        client = self.get_client(client_id)
        for source in self.goal_sources:
            goal = source(client)
            if goal is not None:
                return goal
        return DEFAULT_CALORIE_GOAL

    def set_calorie_goal(self, client_id: int, goal: int) -> models.Client:
        """Store a manual goal override on the client record.

        The override never touches a training plan's ``daily_calories``; it is
        only consulted when no active plan supplies a goal.

        Raises:
            ClientNotFoundError: If the client id does not resolve.
        """
        client = self.get_client(client_id)
        client.calorie_goal_override = goal
        client.updated_at = datetime.utcnow()
        self.session.commit()
        self.session.refresh(client)
        logger.info("Calorie goal override for client %s set to %s", client_id, goal)
        return client

    def _included_food_entries(self, client_id: int, start: datetime, end: datetime) -> List[models.FoodEntry]:
        return (
            self.session.query(models.FoodEntry)
            .filter(
                models.FoodEntry.client_id == client_id,
                models.FoodEntry.date >= start,
                models.FoodEntry.date <= end,
                models.FoodEntry.is_included_in_calories.is_(True),
            )
            .order_by(models.FoodEntry.date.desc(), models.FoodEntry.id)
            .all()
        )

    def _custom_entries(self, client_id: int, start: datetime, end: datetime) -> List[models.CustomCalorieEntry]:
        return (
            self.session.query(models.CustomCalorieEntry)
            .filter(
                models.CustomCalorieEntry.client_id == client_id,
                models.CustomCalorieEntry.date >= start,
                models.CustomCalorieEntry.date <= end,
            )
            .order_by(models.CustomCalorieEntry.date.desc(), models.CustomCalorieEntry.id)
            .all()
        )

    def get_calorie_summary_by_date(self, client_id: int, day: Union[date, datetime]) -> Dict[str, Any]:
        """Aggregate one calendar day of calorie entries against the goal.

        Args:
            client_id: Client whose entries are summed.
            day: Calendar day; a datetime is truncated to its date.

        Returns:
            Dict with ``goal``, ``total``, ``remaining``, ``breakdown``
            (``food_entries``/``custom_entries`` sums) and ``items``, newest
            first.

        Raises:
            ClientNotFoundError: If the client id does not resolve.
        """
        goal = self.get_calorie_goal(client_id)
        start, end = day_bounds(day)

        food_results = self._included_food_entries(client_id, start, end)
        custom_results = self._custom_entries(client_id, start, end)

        food_calories = sum(entry.calories or 0 for entry in food_results)
        custom_calories = sum(entry.calories for entry in custom_results)
        total = food_calories + custom_calories

        dated_items = [
            (entry.date, {
                "type": "food",
                "id": entry.id,
                "description": entry.description,
                "calories": entry.calories or 0,
                "meal_type": entry.meal_type,
                "is_included_in_calories": entry.is_included_in_calories,
                "date": entry.date,
            })
            for entry in food_results
        ] + [
            (entry.date, {
                "type": "custom",
                "id": entry.id,
                "description": entry.description,
                "calories": entry.calories,
                "meal_type": entry.meal_type,
                "date": entry.date,
            })
            for entry in custom_results
        ]
        # sorted() is stable, equal timestamps keep fetch order
        dated_items = sorted(dated_items, key=lambda pair: pair[0], reverse=True)

        logger.debug(
            "Calorie summary client=%s day=%s goal=%s total=%s",
            client_id, start.date(), goal, total
        )
        return {
            "goal": goal,
            "total": total,
            "remaining": compute_remaining(goal, total),
            "breakdown": {
                "food_entries": food_calories,
                "custom_entries": custom_calories,
            },
            "items": [item for _, item in dated_items],
        }
