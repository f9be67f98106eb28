"""SQLite initialization and async connection management via aiosqlite."""

import os
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import aiosqlite

DATABASE_URL = os.getenv("DATABASE_URL", "data/daycare.db")

__all__ = [
    "DATABASE_URL", "create_tables", "get_db",
    "_CREATE_CHILDREN", "_CREATE_ATTENDANCES", "_CREATE_OBSERVATIONS", "_CREATE_REPORTS",
]

_CREATE_CHILDREN = """
CREATE TABLE IF NOT EXISTS children (
    id                  INTEGER PRIMARY KEY AUTOINCREMENT,
    full_name           TEXT    NOT NULL,
    date_of_birth       TEXT    NOT NULL,
    gender              TEXT    CHECK(gender IN ('MALE', 'FEMALE', 'OTHER')),
    organization_name   TEXT,
    room_name           TEXT,
    caregiver_name      TEXT,
    created_at          TEXT    NOT NULL DEFAULT (datetime('now'))
)
"""

_CREATE_ATTENDANCES = """
CREATE TABLE IF NOT EXISTS attendances (
    id              INTEGER PRIMARY KEY AUTOINCREMENT,
    child_id        INTEGER NOT NULL REFERENCES children(id) ON DELETE CASCADE,
    status          TEXT    NOT NULL CHECK(status IN ('present', 'late', 'absent', 'excused')),
    check_in_time   TEXT,
    check_out_time  TEXT,
    created_at      TEXT    NOT NULL DEFAULT (datetime('now'))
)
"""

_CREATE_OBSERVATIONS = """
CREATE TABLE IF NOT EXISTS daily_observations (
    id                INTEGER PRIMARY KEY AUTOINCREMENT,
    child_id          INTEGER NOT NULL REFERENCES children(id) ON DELETE CASCADE,
    observation_date  TEXT    NOT NULL,
    activities_json   TEXT    NOT NULL DEFAULT '[]',
    engagement_level  TEXT,
    skill_notes       TEXT,
    mood              TEXT,
    cooperation       TEXT,
    social_notes      TEXT,
    health_status     TEXT,
    hygiene_notes     TEXT,
    energy_level      TEXT,
    eating_habits     TEXT,
    breakfast_status  TEXT,
    lunch_status      TEXT,
    snack_status      TEXT,
    nap_start_time    TEXT,
    nap_duration      INTEGER CHECK(nap_duration IS NULL OR nap_duration >= 0),
    sleep_quality     TEXT,
    teacher_notes     TEXT,
    created_at        TEXT    NOT NULL DEFAULT (datetime('now')),
    UNIQUE (child_id, observation_date)
)
"""

_CREATE_REPORTS = """
CREATE TABLE IF NOT EXISTS reports (
    id            INTEGER PRIMARY KEY AUTOINCREMENT,
    child_id      INTEGER NOT NULL REFERENCES children(id) ON DELETE CASCADE,
    title         TEXT    NOT NULL,
    content       TEXT    NOT NULL,
    report_type   TEXT    NOT NULL CHECK(report_type IN ('daily', 'weekly', 'monthly')),
    period_start  TEXT    NOT NULL,
    period_end    TEXT    NOT NULL,
    created_at    TEXT    NOT NULL DEFAULT (datetime('now'))
)
"""

ALL_TABLES = (_CREATE_CHILDREN, _CREATE_ATTENDANCES, _CREATE_OBSERVATIONS, _CREATE_REPORTS)


async def create_tables(db_url: str = DATABASE_URL) -> None:
    """Create all application tables if they don't exist."""
    os.makedirs(os.path.dirname(db_url) if os.path.dirname(db_url) else ".", exist_ok=True)
    async with aiosqlite.connect(db_url) as db:
        await db.execute("PRAGMA foreign_keys = ON")
        for ddl in ALL_TABLES:
            await db.execute(ddl)
        await db.commit()


@asynccontextmanager
async def get_db(db_url: str = DATABASE_URL) -> AsyncGenerator[aiosqlite.Connection, None]:
    """Context manager that provides a SQLite connection with foreign keys enabled."""
    async with aiosqlite.connect(db_url) as db:
        db.row_factory = aiosqlite.Row
        await db.execute("PRAGMA foreign_keys = ON")
        yield db
