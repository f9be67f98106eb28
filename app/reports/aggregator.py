"""Collapse a period's observations into per-category collections."""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from app.models.attendance import Attendance
from app.models.observation import DailyObservation, MealStatus

_PRESENT_STATUSES = {"present", "late"}


@dataclass
class PeriodAggregate:
    """
    Flat per-field collections for one child over one period.

    Missing values (None, blank strings) are dropped, so every list only
    holds what a caregiver actually recorded, in input order.
    """

    observation_count: int = 0
    activities: list[str] = field(default_factory=list)  # unique, first appearance first
    engagement_levels: list[str] = field(default_factory=list)
    skill_notes: list[str] = field(default_factory=list)
    moods: list[str] = field(default_factory=list)
    cooperations: list[str] = field(default_factory=list)
    social_notes: list[str] = field(default_factory=list)
    health_statuses: list[str] = field(default_factory=list)
    hygiene_notes: list[str] = field(default_factory=list)
    energy_levels: list[str] = field(default_factory=list)
    eating_habits: list[str] = field(default_factory=list)
    nap_durations: list[int] = field(default_factory=list)
    sleep_qualities: list[str] = field(default_factory=list)
    teacher_notes: list[str] = field(default_factory=list)
    breakfast_eaten: int = 0
    lunch_eaten: int = 0
    snack_eaten: int = 0
    skipped_meal_days: int = 0
    # Attendance is collected but not scored yet
    attendance_count: int = 0
    days_present: int = 0

    @property
    def meals_eaten(self) -> int:
        return self.breakfast_eaten + self.lunch_eaten + self.snack_eaten

    @property
    def has_observations(self) -> bool:
        return self.observation_count > 0


def _clean(value: Any) -> Optional[str]:
    """Return the recorded text of a field, or None when nothing was recorded."""
    if value is None:
        return None
    if isinstance(value, Enum):
        value = value.value
    text = str(value).strip()
    return text or None


def _collect(observations: Sequence[DailyObservation], attr: str) -> list[str]:
    values = (_clean(getattr(o, attr, None)) for o in observations)
    return [v for v in values if v is not None]


def _collect_notes(observations: Sequence[DailyObservation], attr: str) -> list[str]:
    """Free-text notes exactly as entered, skipping blank ones."""
    values = (getattr(o, attr, None) for o in observations)
    return [v for v in values if v and v.strip()]


def _unique_activities(observations: Iterable[DailyObservation]) -> list[str]:
    seen: dict[str, None] = {}
    for o in observations:
        for tag in o.activities or []:
            tag = tag.strip()
            if tag:
                seen.setdefault(tag, None)
    return list(seen)


def _status_is(value: Optional[MealStatus], status: MealStatus) -> bool:
    return _clean(value) == status.value


def aggregate(
    observations: Sequence[DailyObservation],
    attendances: Sequence[Attendance] = (),
) -> PeriodAggregate:
    """Build a PeriodAggregate from the observations (and attendances) of one period."""
    eaten, skipped = MealStatus.EATEN, MealStatus.SKIPPED

    skipped_days = sum(
        1
        for o in observations
        if any(_status_is(s, skipped) for s in (o.breakfast_status, o.lunch_status, o.snack_status))
    )

    return PeriodAggregate(
        observation_count=len(observations),
        activities=_unique_activities(observations),
        engagement_levels=_collect(observations, "engagement_level"),
        skill_notes=_collect_notes(observations, "skill_notes"),
        moods=_collect(observations, "mood"),
        cooperations=_collect(observations, "cooperation"),
        social_notes=_collect_notes(observations, "social_notes"),
        health_statuses=_collect(observations, "health_status"),
        hygiene_notes=_collect_notes(observations, "hygiene_notes"),
        energy_levels=_collect(observations, "energy_level"),
        eating_habits=_collect(observations, "eating_habits"),
        nap_durations=[o.nap_duration for o in observations if o.nap_duration is not None],
        sleep_qualities=_collect(observations, "sleep_quality"),
        teacher_notes=_collect_notes(observations, "teacher_notes"),
        breakfast_eaten=sum(1 for o in observations if _status_is(o.breakfast_status, eaten)),
        lunch_eaten=sum(1 for o in observations if _status_is(o.lunch_status, eaten)),
        snack_eaten=sum(1 for o in observations if _status_is(o.snack_status, eaten)),
        skipped_meal_days=skipped_days,
        attendance_count=len(attendances),
        days_present=sum(1 for a in attendances if a.status in _PRESENT_STATUSES),
    )
