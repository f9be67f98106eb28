"""Shared fixtures: in-memory SQLite and report inputs."""

import itertools
from datetime import date, datetime, timedelta

import aiosqlite
import pytest
import pytest_asyncio

from app.models.attendance import Attendance
from app.models.child import Child, Gender
from app.models.observation import DailyObservation
from app.models.report import ReportRequest
from app.services.database import ALL_TABLES

FIXED_NOW = datetime(2026, 10, 18, 9, 30, 0)
WEEK_START = date(2026, 10, 5)
WEEK_END = date(2026, 10, 11)


@pytest.fixture(scope="session")
def anyio_backend():
    return "asyncio"


@pytest_asyncio.fixture
async def db():
    """In-memory SQLite connection with all tables, discarded after each test."""
    async with aiosqlite.connect(":memory:") as conn:
        conn.row_factory = aiosqlite.Row
        await conn.execute("PRAGMA foreign_keys = ON")
        for ddl in ALL_TABLES:
            await conn.execute(ddl)
        await conn.commit()
        yield conn


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_NOW


@pytest.fixture
def make_child():
    def _make(name: str = "Abebe", gender: Gender | None = Gender.MALE, dob: date = date(2023, 3, 1)) -> Child:
        return Child(
            id=1,
            full_name=name,
            date_of_birth=dob,
            gender=gender,
            created_at=datetime(2025, 9, 1, 8, 0, 0),
        )
    return _make


@pytest.fixture
def child(make_child) -> Child:
    return make_child()


@pytest.fixture
def make_observation():
    """Build DailyObservations on consecutive days starting at WEEK_START."""
    counter = itertools.count()

    def _make(**fields) -> DailyObservation:
        i = next(counter)
        day = WEEK_START + timedelta(days=i)
        return DailyObservation(
            id=i + 1,
            child_id=1,
            observation_date=day,
            created_at=datetime(day.year, day.month, day.day, 17, 0, 0),
            **fields,
        )
    return _make


@pytest.fixture
def make_request(child):
    def _make(
        observations: list[DailyObservation] | None = None,
        attendances: list[Attendance] | None = None,
        label: str | None = "Weekly",
        report_child: Child | None = None,
        start: date = WEEK_START,
        end: date = WEEK_END,
    ) -> ReportRequest:
        return ReportRequest(
            child=report_child or child,
            observations=observations or [],
            attendances=attendances or [],
            period_start=start,
            period_end=end,
            period_label=label,
        )
    return _make
