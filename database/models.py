"""SQLAlchemy ORM models for the FitCoach service.

Trainers own clients and plans; clients own their food and custom calorie
entries. Plan assignments live in one table per plan kind and hold at most
one row per client at a time. Models stay behavior-free; calorie rules live
in `services.calorie_tracker`.
"""

from sqlalchemy import (
    Boolean,
    Column,
    Date,
    DateTime,
    Float,
    ForeignKey,
    Integer,
    String,
    Text,
    true,
)
from sqlalchemy.orm import declarative_base
from datetime import datetime

Base = declarative_base()


class Trainer(Base):
    """ORM model representing a coach who owns clients and plans."""

    __tablename__ = "trainers"
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    email = Column(String, nullable=False, unique=True)
    referral_code = Column(String, nullable=False, unique=True, index=True)
    status = Column(String, nullable=False, default="active")
    created_at = Column(DateTime, default=datetime.utcnow)


class Client(Base):
    """ORM model representing a coached client.

    Biometric columns feed the nutrition calculator. ``calorie_goal_override``
    is the manual goal consulted only when no active training plan supplies
    one. Clients are never deleted; ``status`` flips to ``inactive``.
    """

    __tablename__ = "clients"
    id = Column(Integer, primary_key=True, index=True)
    trainer_id = Column(Integer, ForeignKey('trainers.id'), nullable=False, index=True)
    name = Column(String, nullable=False)
    email = Column(String, nullable=False, unique=True)
    weight = Column(Float, nullable=True)
    height = Column(Float, nullable=True)
    age = Column(Integer, nullable=True)
    gender = Column(String, nullable=True)
    activity_level = Column(String, nullable=True)
    fitness_goal = Column(String, nullable=True)
    calorie_goal_override = Column(Integer, nullable=True)
    status = Column(String, nullable=False, default="active")
    referral_source = Column(String, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow)


class TrainingPlan(Base):
    """Trainer-authored training plan; ``daily_calories`` drives the client goal."""

    __tablename__ = "training_plans"
    id = Column(Integer, primary_key=True, index=True)
    trainer_id = Column(Integer, ForeignKey('trainers.id'), nullable=False, index=True)
    name = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    duration_weeks = Column(Integer, nullable=True)
    daily_calories = Column(Integer, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow)


class ClientPlan(Base):
    """Assignment of a training plan to a client."""

    __tablename__ = "client_plans"
    id = Column(Integer, primary_key=True, index=True)
    client_id = Column(Integer, ForeignKey('clients.id'), nullable=False, index=True)
    plan_id = Column(Integer, ForeignKey('training_plans.id'), nullable=False)
    is_active = Column(Boolean, nullable=False, default=True)
    start_date = Column(Date, nullable=True)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)


class MealPlan(Base):
    """Trainer-authored nutrition plan with calorie and macro targets."""

    __tablename__ = "meal_plans"
    id = Column(Integer, primary_key=True, index=True)
    trainer_id = Column(Integer, ForeignKey('trainers.id'), nullable=False, index=True)
    name = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    goal = Column(String, nullable=True)
    daily_calories = Column(Integer, nullable=True)
    protein_g = Column(Integer, nullable=True)
    carbs_g = Column(Integer, nullable=True)
    fat_g = Column(Integer, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow)


class MealPlanAssignment(Base):
    """Assignment of a meal plan to a client."""

    __tablename__ = "meal_plan_assignments"
    id = Column(Integer, primary_key=True, index=True)
    client_id = Column(Integer, ForeignKey('clients.id'), nullable=False, index=True)
    plan_id = Column(Integer, ForeignKey('meal_plans.id'), nullable=False)
    is_active = Column(Boolean, nullable=False, default=True)
    start_date = Column(Date, nullable=True)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)


class SupplementPlan(Base):
    """Trainer-authored supplement protocol."""

    __tablename__ = "supplement_plans"
    id = Column(Integer, primary_key=True, index=True)
    trainer_id = Column(Integer, ForeignKey('trainers.id'), nullable=False, index=True)
    name = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow)


class SupplementPlanAssignment(Base):
    """Assignment of a supplement plan to a client."""

    __tablename__ = "supplement_plan_assignments"
    id = Column(Integer, primary_key=True, index=True)
    client_id = Column(Integer, ForeignKey('clients.id'), nullable=False, index=True)
    plan_id = Column(Integer, ForeignKey('supplement_plans.id'), nullable=False)
    is_active = Column(Boolean, nullable=False, default=True)
    start_date = Column(Date, nullable=True)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)


class Food(Base):
    """Catalog food with nutrition per 100 g.

    Translations are stored as a JSON-encoded ``{"es", "fr", "pt"}`` string.
    """

    __tablename__ = "foods"
    id = Column(Integer, primary_key=True, index=True)
    fdc_id = Column(Integer, nullable=False, unique=True, index=True)
    name = Column(String, nullable=False)
    category = Column(String, nullable=True)
    calories = Column(Float, nullable=False)
    protein = Column(Float, nullable=False, default=0)
    carbs = Column(Float, nullable=False, default=0)
    fat = Column(Float, nullable=False, default=0)
    translations = Column(Text, nullable=True)


class FoodEntry(Base):
    """A logged food item for a client on a given date and time.

    ``calories`` is the value that counts toward the daily total and may be
    corrected by a trainer; ``original_calories`` keeps what was logged.
    """

    __tablename__ = "food_entries"
    id = Column(Integer, primary_key=True, index=True)
    client_id = Column(Integer, ForeignKey('clients.id'), nullable=False, index=True)
    food_id = Column(Integer, ForeignKey('foods.id'), nullable=True)
    description = Column(String, nullable=False)
    meal_type = Column(String, nullable=False)
    quantity_g = Column(Float, nullable=True)
    calories = Column(Integer, nullable=True)
    original_calories = Column(Integer, nullable=True)
    protein = Column(Float, nullable=True)
    carbs = Column(Float, nullable=True)
    fat = Column(Float, nullable=True)
    is_included_in_calories = Column(Boolean, nullable=False, default=True, server_default=true())
    date = Column(DateTime, nullable=False, default=datetime.now, index=True)
    created_at = Column(DateTime, default=datetime.utcnow)


class CustomCalorieEntry(Base):
    """A manually entered calorie record; always counted in the daily total."""

    __tablename__ = "custom_calorie_entries"
    id = Column(Integer, primary_key=True, index=True)
    client_id = Column(Integer, ForeignKey('clients.id'), nullable=False, index=True)
    description = Column(String, nullable=False)
    calories = Column(Integer, nullable=False)
    meal_type = Column(String, nullable=True)
    notes = Column(Text, nullable=True)
    date = Column(DateTime, nullable=False, default=datetime.now, index=True)
    created_at = Column(DateTime, default=datetime.utcnow)
