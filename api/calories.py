"""Calorie goal and daily summary API router.

Client-scoped routes read the caller from the ``X-Client-Id`` header; the
trainer view addresses a client by path id. ``remaining`` always comes from
the tracker, never recomputed here.
"""

from datetime import date
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from database.deps import get_db_read, get_db_write
from core.auth import get_current_client_id
from services.calorie_tracker import CalorieTracker
from schemas.calorie_schema import CalorieGoalResponse, CalorieGoalUpdate, CalorieSummaryResponse

router = APIRouter(prefix="/api", tags=["calories"])


def _summary(db: Session, client_id: int, day: date) -> CalorieSummaryResponse:
    summary = CalorieTracker(db).get_calorie_summary_by_date(client_id, day)
    return CalorieSummaryResponse(date=day, **summary)


@router.get("/calories/summary/{day}", response_model=CalorieSummaryResponse)
def get_calorie_summary(
    day: date,
    client_id: int = Depends(get_current_client_id),
    db: Session = Depends(get_db_read),
):
    """Return goal, total, remaining and items for one calendar day.

    Raises:
        ClientNotFoundError: If the caller's client record does not exist.
    """
    return _summary(db, client_id, day)


@router.get("/clients/{client_id}/calories/summary/{day}", response_model=CalorieSummaryResponse)
def get_client_calorie_summary(client_id: int, day: date, db: Session = Depends(get_db_read)):
    """Trainer view of a client's daily summary."""
    return _summary(db, client_id, day)


@router.get("/calories/goal", response_model=CalorieGoalResponse)
def get_calorie_goal(
    client_id: int = Depends(get_current_client_id),
    db: Session = Depends(get_db_read),
):
    tracker = CalorieTracker(db)
    goal = tracker.get_calorie_goal(client_id)
    return CalorieGoalResponse(goal=goal, override=tracker.get_client(client_id).calorie_goal_override)


@router.put("/calories/goal", response_model=CalorieGoalResponse)
def set_calorie_goal(
    payload: CalorieGoalUpdate,
    client_id: int = Depends(get_current_client_id),
    db: Session = Depends(get_db_write),
):
    """Store a manual goal override.

    The response carries the effective goal, which stays the active training
    plan's calories when one is assigned.
    """
    tracker = CalorieTracker(db)
    client = tracker.set_calorie_goal(client_id, payload.goal)
    return CalorieGoalResponse(goal=tracker.get_calorie_goal(client_id), override=client.calorie_goal_override)
