"""Database helpers: engines, session factories and DB initialization.

Provides read/write session factories and an `init_db` helper that creates
tables and seeds the common-food catalog when it is empty.
"""

import os
import json
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from .models import Base, Food
from data.foods_dataset import FOODS_DATA

# Read/Write partitioning pattern
# In production, set WRITE_DATABASE_URL and READ_DATABASE_URL to different DB instances.
# For SQLite/demo this defaults to the same file but the interfaces are separated.
WRITE_DATABASE_URL = os.getenv("WRITE_DATABASE_URL", "sqlite:///fitcoach.db")
READ_DATABASE_URL = os.getenv("READ_DATABASE_URL", WRITE_DATABASE_URL)


def _connect_args(url: str) -> dict:
    # SQLite connections are shared across FastAPI's worker threads
    return {"check_same_thread": False} if url.startswith("sqlite") else {}


# Engines
write_engine = create_engine(WRITE_DATABASE_URL, connect_args=_connect_args(WRITE_DATABASE_URL))
read_engine = create_engine(READ_DATABASE_URL, connect_args=_connect_args(READ_DATABASE_URL))

# Session factories
WriteSessionLocal = sessionmaker(bind=write_engine)
ReadSessionLocal = sessionmaker(bind=read_engine)


def seed_foods(session) -> int:
    """Insert the built-in food catalog if the foods table is empty.

    Args:
        session: SQLAlchemy session to write with.

    Returns:
        Number of foods inserted (0 when the catalog already has rows).
    """
    if session.query(Food).count():
        return 0
    for item in FOODS_DATA:
        session.add(Food(
            fdc_id=item['fdc_id'],
            name=item['name'],
            category=item['category'],
            calories=item['calories'],
            protein=item['protein'],
            carbs=item['carbs'],
            fat=item['fat'],
            translations=json.dumps(item.get('translations', {}), ensure_ascii=False),
        ))
    session.commit()
    return len(FOODS_DATA)


def init_db(engine=None):
    """Initialize database schema and seed the food catalog.

    Creates all tables using SQLAlchemy models and populates the foods
    table with the default catalog if it is empty.
    """
    engine = engine or write_engine
    Base.metadata.create_all(bind=engine)
    session = sessionmaker(bind=engine)()
    try:
        seed_foods(session)
    finally:
        session.close()


# Convenience generators for dependency injection
def get_write_session():
    """Yield a write-enabled SQLAlchemy session for the request scope.

    Use this generator as a FastAPI dependency to ensure the session is
    properly closed after the request completes.
    """
    db = WriteSessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_read_session():
    """Yield a read-only SQLAlchemy session for the request scope.

    Used for read endpoints where routing reads to a replica may be desired.
    """
    db = ReadSessionLocal()
    try:
        yield db
    finally:
        db.close()
