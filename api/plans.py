"""Training, meal and supplement plan API router.

Plan CRUD is trainer-facing. Assigning a plan replaces whatever plan of the
same kind the client had, so each client holds at most one assignment per
kind; the active training plan's ``daily_calories`` becomes the client's
calorie goal.
"""

from typing import List, Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from database.deps import get_db_read, get_db_write
from database import models
from core.logger import get_logger
from core.repository import BaseRepository, save
from services.nutrition_calculator import nutrition_calculator
from services.plan_assignments import PlanAssignmentService
from schemas.plan_schema import (
    ActiveMealPlanResponse,
    ActiveSupplementPlanResponse,
    ActiveTrainingPlanResponse,
    MealPlanCreate,
    MealPlanResponse,
    PlanAssignmentRequest,
    PlanAssignmentResponse,
    SupplementPlanCreate,
    SupplementPlanResponse,
    TrainingPlanCreate,
    TrainingPlanResponse,
    TrainingPlanUpdate,
)

logger = get_logger("api.plans")
router = APIRouter(prefix="/api", tags=["plans"])


def _list_for_trainer(db: Session, model, trainer_id: Optional[int]):
    repo = BaseRepository(model, db)
    if trainer_id is None:
        return repo.list_by(order_by=model.id)
    return repo.list_by(order_by=model.id, trainer_id=trainer_id)


# Training plans

@router.post("/training-plans", response_model=TrainingPlanResponse, status_code=201)
def create_training_plan(payload: TrainingPlanCreate, db: Session = Depends(get_db_write)):
    BaseRepository(models.Trainer, db).get_or_404(payload.trainer_id)
    plan = save(db, models.TrainingPlan(**payload.model_dump()))
    logger.info("Training plan %s created by trainer %s", plan.id, plan.trainer_id)
    return plan


@router.get("/training-plans", response_model=List[TrainingPlanResponse])
def list_training_plans(trainer_id: Optional[int] = Query(None), db: Session = Depends(get_db_read)):
    return _list_for_trainer(db, models.TrainingPlan, trainer_id)


@router.get("/training-plans/{plan_id}", response_model=TrainingPlanResponse)
def get_training_plan(plan_id: int, db: Session = Depends(get_db_read)):
    return BaseRepository(models.TrainingPlan, db).get_or_404(plan_id)


@router.patch("/training-plans/{plan_id}", response_model=TrainingPlanResponse)
def update_training_plan(plan_id: int, payload: TrainingPlanUpdate, db: Session = Depends(get_db_write)):
    """Partial update; sending ``daily_calories: null`` removes the plan's goal."""
    repo = BaseRepository(models.TrainingPlan, db)
    changes = payload.model_dump(exclude_unset=True)
    if changes.get("name") is None:
        changes.pop("name", None)
    return repo.update_fields(repo.get_or_404(plan_id), changes)


# Meal plans

@router.post("/meal-plans", response_model=MealPlanResponse, status_code=201)
def create_meal_plan(payload: MealPlanCreate, db: Session = Depends(get_db_write)):
    """Create a meal plan, deriving calories and macros where omitted.

    Raises:
        InvalidDistributionError: If macros have to be derived from
            non-positive calories.
    """
    BaseRepository(models.Trainer, db).get_or_404(payload.trainer_id)
    daily_calories = payload.daily_calories
    if daily_calories is None and payload.base_calories is not None:
        daily_calories = nutrition_calculator.apply_adjustment_percentage(
            payload.base_calories, payload.adjustment_percentage
        )

    macros = {"protein_g": payload.protein_g, "carbs_g": payload.carbs_g, "fat_g": payload.fat_g}
    if daily_calories is not None and None in macros.values():
        split = nutrition_calculator.get_recommended_macro_distribution(payload.goal)
        derived = nutrition_calculator.calculate_macros(daily_calories, split)
        macros = {key: value if value is not None else derived[key] for key, value in macros.items()}

    plan = save(db, models.MealPlan(
        trainer_id=payload.trainer_id,
        name=payload.name,
        description=payload.description,
        goal=payload.goal,
        daily_calories=daily_calories,
        **macros,
    ))
    logger.info("Meal plan %s created (%s kcal)", plan.id, plan.daily_calories)
    return plan


@router.get("/meal-plans", response_model=List[MealPlanResponse])
def list_meal_plans(trainer_id: Optional[int] = Query(None), db: Session = Depends(get_db_read)):
    return _list_for_trainer(db, models.MealPlan, trainer_id)


@router.get("/meal-plans/{plan_id}", response_model=MealPlanResponse)
def get_meal_plan(plan_id: int, db: Session = Depends(get_db_read)):
    return BaseRepository(models.MealPlan, db).get_or_404(plan_id)


# Supplement plans

@router.post("/supplement-plans", response_model=SupplementPlanResponse, status_code=201)
def create_supplement_plan(payload: SupplementPlanCreate, db: Session = Depends(get_db_write)):
    BaseRepository(models.Trainer, db).get_or_404(payload.trainer_id)
    return save(db, models.SupplementPlan(**payload.model_dump()))


@router.get("/supplement-plans", response_model=List[SupplementPlanResponse])
def list_supplement_plans(trainer_id: Optional[int] = Query(None), db: Session = Depends(get_db_read)):
    return _list_for_trainer(db, models.SupplementPlan, trainer_id)


@router.get("/supplement-plans/{plan_id}", response_model=SupplementPlanResponse)
def get_supplement_plan(plan_id: int, db: Session = Depends(get_db_read)):
    return BaseRepository(models.SupplementPlan, db).get_or_404(plan_id)


# Client assignments

def _assign(db: Session, kind: str, client_id: int, payload: PlanAssignmentRequest):
    return PlanAssignmentService(db, kind).assign(
        client_id, payload.plan_id, start_date=payload.start_date, notes=payload.notes
    )


def _active(db: Session, kind: str, client_id: int, response_model, plan_model):
    assignment, plan = PlanAssignmentService(db, kind).active_plan(client_id)
    if assignment is None:
        return response_model()
    return response_model(
        assignment=PlanAssignmentResponse.model_validate(assignment),
        plan=plan_model.model_validate(plan) if plan is not None else None,
    )


@router.post("/clients/{client_id}/training-plan", response_model=PlanAssignmentResponse, status_code=201)
def assign_training_plan(client_id: int, payload: PlanAssignmentRequest, db: Session = Depends(get_db_write)):
    """Replace the client's training plan; its calories become the client's goal."""
    return _assign(db, "training", client_id, payload)


@router.get("/clients/{client_id}/training-plan", response_model=List[PlanAssignmentResponse])
def list_training_plan_assignments(client_id: int, db: Session = Depends(get_db_read)):
    return PlanAssignmentService(db, "training").history(client_id)


@router.get("/clients/{client_id}/training-plan/active", response_model=ActiveTrainingPlanResponse)
def get_active_training_plan(client_id: int, db: Session = Depends(get_db_read)):
    return _active(db, "training", client_id, ActiveTrainingPlanResponse, TrainingPlanResponse)


@router.delete("/clients/{client_id}/training-plan", status_code=204)
def unassign_training_plan(client_id: int, db: Session = Depends(get_db_write)):
    PlanAssignmentService(db, "training").unassign(client_id)


@router.post("/clients/{client_id}/meal-plan", response_model=PlanAssignmentResponse, status_code=201)
def assign_meal_plan(client_id: int, payload: PlanAssignmentRequest, db: Session = Depends(get_db_write)):
    return _assign(db, "meal", client_id, payload)


@router.get("/clients/{client_id}/meal-plan", response_model=List[PlanAssignmentResponse])
def list_meal_plan_assignments(client_id: int, db: Session = Depends(get_db_read)):
    return PlanAssignmentService(db, "meal").history(client_id)


@router.get("/clients/{client_id}/meal-plan/active", response_model=ActiveMealPlanResponse)
def get_active_meal_plan(client_id: int, db: Session = Depends(get_db_read)):
    return _active(db, "meal", client_id, ActiveMealPlanResponse, MealPlanResponse)


@router.delete("/clients/{client_id}/meal-plan", status_code=204)
def unassign_meal_plan(client_id: int, db: Session = Depends(get_db_write)):
    PlanAssignmentService(db, "meal").unassign(client_id)


@router.post("/clients/{client_id}/supplement-plan", response_model=PlanAssignmentResponse, status_code=201)
def assign_supplement_plan(client_id: int, payload: PlanAssignmentRequest, db: Session = Depends(get_db_write)):
    return _assign(db, "supplement", client_id, payload)


@router.get("/clients/{client_id}/supplement-plan", response_model=List[PlanAssignmentResponse])
def list_supplement_plan_assignments(client_id: int, db: Session = Depends(get_db_read)):
    return PlanAssignmentService(db, "supplement").history(client_id)


@router.get("/clients/{client_id}/supplement-plan/active", response_model=ActiveSupplementPlanResponse)
def get_active_supplement_plan(client_id: int, db: Session = Depends(get_db_read)):
    return _active(db, "supplement", client_id, ActiveSupplementPlanResponse, SupplementPlanResponse)


@router.delete("/clients/{client_id}/supplement-plan", status_code=204)
def unassign_supplement_plan(client_id: int, db: Session = Depends(get_db_write)):
    PlanAssignmentService(db, "supplement").unassign(client_id)
