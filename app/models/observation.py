"""Pydantic models for caregiver daily observations.

Categorical fields with a known domain are closed enums; mood and health
status stay free text because caregivers type them in.
"""

from datetime import date, datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class EngagementLevel(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Cooperation(str, Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    NEEDS_REMINDERS = "needs_reminders"


class EnergyLevel(str, Enum):
    HIGH = "high"
    NORMAL = "normal"
    LOW = "low"


class EatingHabits(str, Enum):
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"


class MealStatus(str, Enum):
    EATEN = "eaten"
    PARTIAL = "partial"
    SKIPPED = "skipped"


class SleepQuality(str, Enum):
    RESTFUL = "restful"
    LIGHT = "light"
    TROUBLED = "troubled"



class ObservationBase(BaseModel):
    child_id: int
    observation_date: date
    activities: list[str] = []
    engagement_level: Optional[EngagementLevel] = None
    skill_notes: Optional[str] = Field(None, max_length=1000)
    mood: Optional[str] = Field(None, max_length=100)
    cooperation: Optional[Cooperation] = None
    social_notes: Optional[str] = Field(None, max_length=1000)
    health_status: Optional[str] = Field(None, max_length=100)
    hygiene_notes: Optional[str] = Field(None, max_length=1000)
    energy_level: Optional[EnergyLevel] = None
    eating_habits: Optional[EatingHabits] = None
    breakfast_status: Optional[MealStatus] = None
    lunch_status: Optional[MealStatus] = None
    snack_status: Optional[MealStatus] = None
    nap_start_time: Optional[datetime] = None
    nap_duration: Optional[int] = Field(None, ge=0, description="Nap length in minutes")
    sleep_quality: Optional[SleepQuality] = None
    teacher_notes: Optional[str] = Field(None, max_length=1000)


class ObservationCreate(ObservationBase):
    """Payload to record one day of observations for a child."""
    pass


class ObservationUpdate(BaseModel):
    """Payload to update an observation (all fields optional)."""
    observation_date: Optional[date] = None
    activities: Optional[list[str]] = None
    engagement_level: Optional[EngagementLevel] = None
    skill_notes: Optional[str] = Field(None, max_length=1000)
    mood: Optional[str] = Field(None, max_length=100)
    cooperation: Optional[Cooperation] = None
    social_notes: Optional[str] = Field(None, max_length=1000)
    health_status: Optional[str] = Field(None, max_length=100)
    hygiene_notes: Optional[str] = Field(None, max_length=1000)
    energy_level: Optional[EnergyLevel] = None
    eating_habits: Optional[EatingHabits] = None
    breakfast_status: Optional[MealStatus] = None
    lunch_status: Optional[MealStatus] = None
    snack_status: Optional[MealStatus] = None
    nap_start_time: Optional[datetime] = None
    nap_duration: Optional[int] = Field(None, ge=0)
    sleep_quality: Optional[SleepQuality] = None
    teacher_notes: Optional[str] = Field(None, max_length=1000)


class DailyObservation(ObservationBase):
    """Full observation record returned from the database."""
    id: int
    created_at: datetime

    model_config = {"from_attributes": True}
