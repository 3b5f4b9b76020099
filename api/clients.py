"""Trainer and client API router.

Trainers get a referral code on creation; clients register through that
code and are attached to the trainer who owns it. Clients are never
deleted, only suspended and reactivated.
"""

import time
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from database.deps import get_db_read, get_db_write
from database import models
from core.exceptions import InvalidInputError, ValidationError
from core.logger import get_logger
from core.repository import BaseRepository, save
from services.nutrition_calculator import REQUIRED_BIOMETRIC_FIELDS, nutrition_calculator
from schemas.client_schema import (
    ClientRegisterRequest,
    ClientResponse,
    ClientTDEEResponse,
    ClientUpdate,
    TrainerClientsResponse,
    TrainerCreate,
    TrainerResponse,
)

logger = get_logger("api.clients")
router = APIRouter(prefix="/api", tags=["clients"])


def _new_referral_code(db: Session) -> str:
    code = "TRAINER%d" % int(time.time() * 1000)
    suffix = 1
    candidate = code
    while db.query(models.Trainer).filter(models.Trainer.referral_code == candidate).first() is not None:
        candidate = "%s%d" % (code, suffix)
        suffix += 1
    return candidate


@router.post("/trainers", response_model=TrainerResponse, status_code=201)
def create_trainer(payload: TrainerCreate, db: Session = Depends(get_db_write)):
    """Create a trainer with a fresh ``TRAINER<timestamp>`` referral code."""
    trainer = save(db, models.Trainer(
        name=payload.name,
        email=payload.email,
        referral_code=_new_referral_code(db),
    ))
    logger.info("Trainer %s created with referral code %s", trainer.id, trainer.referral_code)
    return trainer


@router.get("/trainers/{trainer_id}", response_model=TrainerResponse)
def get_trainer(trainer_id: int, db: Session = Depends(get_db_read)):
    return BaseRepository(models.Trainer, db).get_or_404(trainer_id)


@router.get("/trainers/{trainer_id}/clients", response_model=TrainerClientsResponse)
def list_trainer_clients(trainer_id: int, db: Session = Depends(get_db_read)):
    BaseRepository(models.Trainer, db).get_or_404(trainer_id)
    clients = BaseRepository(models.Client, db).list_by(order_by=models.Client.id, trainer_id=trainer_id)
    return TrainerClientsResponse(total_clients=len(clients), clients=clients)


@router.post("/clients/register", response_model=ClientResponse, status_code=201)
def register_client(payload: ClientRegisterRequest, db: Session = Depends(get_db_write)):
    """Register a client under the trainer owning ``referral_code``.

    Raises:
        ValidationError: If the referral code matches no active trainer.
    """
    trainer = (
        db.query(models.Trainer)
        .filter(models.Trainer.referral_code == payload.referral_code, models.Trainer.status == "active")
        .first()
    )
    if trainer is None:
        raise ValidationError("Invalid referral code", field="referral_code")

    values = payload.model_dump(exclude={"referral_code"})
    client = save(db, models.Client(trainer_id=trainer.id, referral_source=payload.referral_code, **values))
    logger.info("Client %s registered under trainer %s", client.id, trainer.id)
    return client


@router.get("/clients/{client_id}", response_model=ClientResponse)
def get_client(client_id: int, db: Session = Depends(get_db_read)):
    return BaseRepository(models.Client, db).get_or_404(client_id)


@router.patch("/clients/{client_id}", response_model=ClientResponse)
def update_client(client_id: int, payload: ClientUpdate, db: Session = Depends(get_db_write)):
    repo = BaseRepository(models.Client, db)
    client = repo.get_or_404(client_id)
    return repo.update_fields(client, payload.model_dump(exclude_none=True))


def _set_status(db: Session, client_id: int, status: str) -> models.Client:
    repo = BaseRepository(models.Client, db)
    client = repo.update_fields(repo.get_or_404(client_id), {"status": status})
    logger.info("Client %s is now %s", client_id, status)
    return client


@router.post("/clients/{client_id}/suspend", response_model=ClientResponse)
def suspend_client(client_id: int, db: Session = Depends(get_db_write)):
    return _set_status(db, client_id, "inactive")


@router.post("/clients/{client_id}/reactivate", response_model=ClientResponse)
def reactivate_client(client_id: int, db: Session = Depends(get_db_write)):
    return _set_status(db, client_id, "active")


@router.get("/clients/{client_id}/tdee", response_model=ClientTDEEResponse)
def get_client_tdee(client_id: int, db: Session = Depends(get_db_read)):
    """Compute BMR and TDEE from the stored profile.

    Raises:
        NotFoundError: If the client does not exist.
        InvalidInputError: If the profile lacks weight, height, age or gender.
    """
    client = BaseRepository(models.Client, db).get_or_404(client_id)
    result = nutrition_calculator.calculate_tdee_from_client(client)
    if result is None:
        missing = [field for field in REQUIRED_BIOMETRIC_FIELDS if not getattr(client, field)]
        raise InvalidInputError("Client profile is incomplete for TDEE calculation", missing_fields=missing)
    return ClientTDEEResponse(client_id=client_id, **result)
