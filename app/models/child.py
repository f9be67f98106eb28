"""Pydantic models for enrolled children."""

from datetime import date, datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class Gender(str, Enum):
    MALE = "MALE"
    FEMALE = "FEMALE"
    OTHER = "OTHER"


class ChildBase(BaseModel):
    full_name: str = Field(..., min_length=1, max_length=120)
    date_of_birth: date
    gender: Optional[Gender] = None
    organization_name: Optional[str] = Field(None, max_length=120)
    room_name: Optional[str] = Field(None, max_length=120)
    caregiver_name: Optional[str] = Field(None, max_length=120)


class ChildCreate(ChildBase):
    """Payload to register a child."""
    pass


class ChildUpdate(BaseModel):
    """Payload to update a child (all fields optional)."""
    full_name: Optional[str] = Field(None, min_length=1, max_length=120)
    date_of_birth: Optional[date] = None
    gender: Optional[Gender] = None
    organization_name: Optional[str] = Field(None, max_length=120)
    room_name: Optional[str] = Field(None, max_length=120)
    caregiver_name: Optional[str] = Field(None, max_length=120)


class Child(ChildBase):
    """Full model returned from the database."""
    id: int
    created_at: datetime

    model_config = {"from_attributes": True}
