"""Shared fixtures: an in-memory SQLite database per test and an API client.

The app's lifespan is not run; the read/write session dependencies are
overridden to point at the test engine instead.
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from core.repository import save
from database import models, seed_foods
from database.deps import get_db_read, get_db_write
from database.models import Base


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db(engine):
    session = sessionmaker(bind=engine)()
    seed_foods(session)
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def trainer(db):
    return save(db, models.Trainer(name="Alex Coach", email="alex@example.com", referral_code="TRAINER1"))


@pytest.fixture
def client_record(db, trainer):
    return save(db, models.Client(
        trainer_id=trainer.id,
        name="Sam Client",
        email="sam@example.com",
        weight=70,
        height=175,
        age=30,
        gender="male",
        activity_level="light",
    ))


@pytest.fixture
def api(engine, db):
    from main import app

    factory = sessionmaker(bind=engine)

    def override_session():
        session = factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db_read] = override_session
    app.dependency_overrides[get_db_write] = override_session
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
