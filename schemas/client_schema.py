"""Schemas for trainers and clients."""

from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Literal, Optional

Gender = Literal["male", "female"]


class TrainerCreate(BaseModel):
    name: str = Field(..., min_length=1, examples=["Alex Coach"])
    email: str = Field(..., min_length=3, examples=["alex@example.com"])


class TrainerResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    referral_code: str
    status: str
    created_at: datetime


class ClientProfileFields(BaseModel):
    """Biometric and goal fields shared by registration and updates."""

    weight: Optional[float] = Field(None, gt=0, le=400, examples=[70], description="Weight in kilograms")
    height: Optional[float] = Field(None, gt=0, le=260, examples=[175], description="Height in centimeters")
    age: Optional[int] = Field(None, gt=0, le=120, examples=[30])
    gender: Optional[Gender] = Field(None, examples=["male"])
    activity_level: Optional[str] = Field(None, examples=["moderate"])
    fitness_goal: Optional[str] = Field(None, examples=["weight_loss"])


class ClientRegisterRequest(ClientProfileFields):
    """Client sign-up through a trainer's referral code."""

    referral_code: str = Field(..., min_length=1, examples=["TRAINER1700000000000"])
    name: str = Field(..., min_length=1, examples=["Sam Client"])
    email: str = Field(..., min_length=3, examples=["sam@example.com"])


class ClientUpdate(ClientProfileFields):
    name: Optional[str] = Field(None, min_length=1)
    email: Optional[str] = Field(None, min_length=3)


class ClientResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    trainer_id: int
    name: str
    email: str
    weight: Optional[float] = None
    height: Optional[float] = None
    age: Optional[int] = None
    gender: Optional[str] = None
    activity_level: Optional[str] = None
    fitness_goal: Optional[str] = None
    calorie_goal_override: Optional[int] = None
    status: str
    created_at: datetime


class ClientTDEEResponse(BaseModel):
    client_id: int
    bmr: int
    tdee: int
    activity_level: str


class TrainerClientsResponse(BaseModel):
    total_clients: int
    clients: List[ClientResponse]
