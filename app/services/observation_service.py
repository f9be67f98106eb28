"""Async CRUD operations for daily observations."""

import json
from datetime import date, datetime
from enum import Enum
from typing import Any

import aiosqlite

from app.models.observation import DailyObservation, ObservationCreate, ObservationUpdate

# Columns stored as-is (enums as their value); activities and dates are handled separately
_PLAIN_COLUMNS = (
    "engagement_level", "skill_notes", "mood", "cooperation", "social_notes",
    "health_status", "hygiene_notes", "energy_level", "eating_habits",
    "breakfast_status", "lunch_status", "snack_status", "nap_duration",
    "sleep_quality", "teacher_notes",
)


def _to_db(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    return value


def _row_to_observation(row: aiosqlite.Row) -> DailyObservation:
    return DailyObservation(
        id=row["id"],
        child_id=row["child_id"],
        observation_date=date.fromisoformat(row["observation_date"]),
        activities=json.loads(row["activities_json"] or "[]"),
        nap_start_time=datetime.fromisoformat(row["nap_start_time"]) if row["nap_start_time"] else None,
        created_at=datetime.fromisoformat(row["created_at"]),
        **{col: row[col] for col in _PLAIN_COLUMNS},
    )


async def add_observation(db: aiosqlite.Connection, obs: ObservationCreate) -> DailyObservation:
    """Record one day of observations and return the full record.

    Raises aiosqlite.IntegrityError when the child already has an observation
    for that date.
    """
    columns = ("child_id", "observation_date", "activities_json", "nap_start_time", *_PLAIN_COLUMNS)
    values = (
        obs.child_id,
        obs.observation_date.isoformat(),
        json.dumps(obs.activities),
        _to_db(obs.nap_start_time),
        *(_to_db(getattr(obs, col)) for col in _PLAIN_COLUMNS),
    )
    placeholders = ", ".join("?" for _ in columns)
    try:
        cursor = await db.execute(
            f"INSERT INTO daily_observations ({', '.join(columns)}) VALUES ({placeholders})",
            values,
        )
    except aiosqlite.IntegrityError:
        await db.rollback()
        raise
    await db.commit()
    rows = await db.execute_fetchall(
        "SELECT * FROM daily_observations WHERE id = ?", (cursor.lastrowid,)
    )
    return _row_to_observation(rows[0])


async def get_observation(db: aiosqlite.Connection, observation_id: int) -> DailyObservation | None:
    """Return an observation by id, or None."""
    async with db.execute(
        "SELECT * FROM daily_observations WHERE id = ?", (observation_id,)
    ) as cur:
        row = await cur.fetchone()
    return _row_to_observation(row) if row else None


async def get_observations_by_child(db: aiosqlite.Connection, child_id: int) -> list[DailyObservation]:
    """Return all observations for a child, most recent first."""
    rows = await db.execute_fetchall(
        """SELECT * FROM daily_observations
           WHERE child_id = ?
           ORDER BY observation_date DESC, id DESC""",
        (child_id,),
    )
    return [_row_to_observation(r) for r in rows]


async def get_observations_by_range(
    db: aiosqlite.Connection, child_id: int, start: date, end: date
) -> list[DailyObservation]:
    """Return observations between start and end (inclusive), in chronological order."""
    rows = await db.execute_fetchall(
        """SELECT * FROM daily_observations
           WHERE child_id = ?
             AND observation_date >= ?
             AND observation_date <= ?
           ORDER BY observation_date, id""",
        (child_id, start.isoformat(), end.isoformat()),
    )
    return [_row_to_observation(r) for r in rows]


async def update_observation(
    db: aiosqlite.Connection, observation_id: int, data: ObservationUpdate
) -> DailyObservation | None:
    """Update provided fields and return the updated observation, or None."""
    # Explicit nulls clear optional fields, but the date is mandatory
    updates = data.model_dump(exclude_unset=True)
    if updates.get("observation_date", date.min) is None:
        del updates["observation_date"]
    if not updates:
        return await get_observation(db, observation_id)

    if "activities" in updates:
        updates["activities_json"] = json.dumps(updates.pop("activities") or [])
    updates = {k: _to_db(v) for k, v in updates.items()}

    cols = ", ".join(f"{k} = ?" for k in updates)
    values = list(updates.values()) + [observation_id]
    try:
        await db.execute(f"UPDATE daily_observations SET {cols} WHERE id = ?", values)
    except aiosqlite.IntegrityError:
        await db.rollback()
        raise
    await db.commit()
    return await get_observation(db, observation_id)


async def delete_observation(db: aiosqlite.Connection, observation_id: int) -> bool:
    """Delete an observation. Returns True if deleted."""
    cursor = await db.execute(
        "DELETE FROM daily_observations WHERE id = ?", (observation_id,)
    )
    await db.commit()
    return cursor.rowcount > 0
