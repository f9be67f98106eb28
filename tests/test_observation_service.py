"""Unit tests for observation_service and attendance_service."""

from datetime import date, datetime, timedelta, timezone

import aiosqlite
import pytest

from app.models.attendance import AttendanceCreate
from app.models.child import ChildCreate, Gender
from app.models.observation import EngagementLevel, MealStatus, ObservationCreate, ObservationUpdate
from app.services.attendance_service import (
    add_attendance,
    get_attendances_by_child,
    get_attendances_by_range,
)
from app.services.child_service import create_child, delete_child
from app.services.observation_service import (
    add_observation,
    delete_observation,
    get_observation,
    get_observations_by_child,
    get_observations_by_range,
    update_observation,
)

pytestmark = pytest.mark.asyncio


async def _make_child(db):
    return await create_child(
        db, ChildCreate(full_name="Abebe", date_of_birth=date(2023, 3, 1), gender=Gender.MALE)
    )


def _obs(child_id: int, day: date, **fields) -> ObservationCreate:
    return ObservationCreate(child_id=child_id, observation_date=day, **fields)


async def test_add_observation_round_trips_fields(db):
    child = await _make_child(db)
    obs = await add_observation(
        db,
        _obs(
            child.id,
            date(2026, 10, 6),
            activities=["Painting", "Music"],
            engagement_level="high",
            mood="Happy",
            breakfast_status="eaten",
            nap_start_time=datetime(2026, 10, 6, 12, 30),
            nap_duration=75,
            teacher_notes="Great focus during circle time",
        ),
    )
    assert obs.id is not None
    assert obs.activities == ["Painting", "Music"]
    assert obs.engagement_level == EngagementLevel.HIGH
    assert obs.breakfast_status == MealStatus.EATEN
    assert obs.lunch_status is None
    assert obs.nap_start_time == datetime(2026, 10, 6, 12, 30)
    assert obs.nap_duration == 75

    fetched = await get_observation(db, obs.id)
    assert fetched == obs


async def test_get_observation_not_found(db):
    assert await get_observation(db, 9999) is None


async def test_observations_by_child_most_recent_first(db):
    child = await _make_child(db)
    for day in (5, 7, 6):
        await add_observation(db, _obs(child.id, date(2026, 10, day)))
    days = [o.observation_date.day for o in await get_observations_by_child(db, child.id)]
    assert days == [7, 6, 5]


async def test_observations_by_range_inclusive_and_chronological(db):
    child = await _make_child(db)
    for day in (4, 7, 5, 11, 12):
        await add_observation(db, _obs(child.id, date(2026, 10, day)))
    obs = await get_observations_by_range(db, child.id, date(2026, 10, 5), date(2026, 10, 11))
    assert [o.observation_date.day for o in obs] == [5, 7, 11]


async def test_update_observation(db):
    child = await _make_child(db)
    obs = await add_observation(db, _obs(child.id, date(2026, 10, 6), mood="Tired", activities=["Music"]))
    updated = await update_observation(
        db, obs.id, ObservationUpdate(mood="Happy", activities=["Music", "Dance"], sleep_quality="light")
    )
    assert updated is not None
    assert updated.mood == "Happy"
    assert updated.activities == ["Music", "Dance"]
    assert updated.sleep_quality.value == "light"
    assert updated.observation_date == date(2026, 10, 6)


async def test_update_observation_clears_field_but_keeps_date(db):
    child = await _make_child(db)
    obs = await add_observation(db, _obs(child.id, date(2026, 10, 6), mood="Tired"))
    updated = await update_observation(db, obs.id, ObservationUpdate(mood=None, observation_date=None))
    assert updated.mood is None
    assert updated.observation_date == date(2026, 10, 6)


async def test_one_observation_per_child_per_day(db):
    child = await _make_child(db)
    await add_observation(db, _obs(child.id, date(2026, 10, 5), breakfast_status="eaten"))
    with pytest.raises(aiosqlite.IntegrityError):
        await add_observation(db, _obs(child.id, date(2026, 10, 5), breakfast_status="eaten"))

    rows = await get_observations_by_range(db, child.id, date(2026, 10, 5), date(2026, 10, 5))
    assert len(rows) == 1
    # the connection stays usable after the rejected insert
    await add_observation(db, _obs(child.id, date(2026, 10, 6)))


async def test_same_date_allowed_for_different_children(db):
    abebe = await _make_child(db)
    almaz = await create_child(db, ChildCreate(full_name="Almaz", date_of_birth=date(2023, 5, 1)))
    await add_observation(db, _obs(abebe.id, date(2026, 10, 5)))
    await add_observation(db, _obs(almaz.id, date(2026, 10, 5)))
    assert len(await get_observations_by_child(db, almaz.id)) == 1


async def test_update_observation_onto_taken_date(db):
    child = await _make_child(db)
    await add_observation(db, _obs(child.id, date(2026, 10, 5)))
    moved = await add_observation(db, _obs(child.id, date(2026, 10, 6), mood="Calm"))
    with pytest.raises(aiosqlite.IntegrityError):
        await update_observation(db, moved.id, ObservationUpdate(observation_date=date(2026, 10, 5)))

    unchanged = await get_observation(db, moved.id)
    assert unchanged.observation_date == date(2026, 10, 6)
    assert unchanged.mood == "Calm"


async def test_update_observation_not_found(db):
    assert await update_observation(db, 9999, ObservationUpdate(mood="Calm")) is None


async def test_delete_observation(db):
    child = await _make_child(db)
    obs = await add_observation(db, _obs(child.id, date(2026, 10, 6)))
    assert await delete_observation(db, obs.id) is True
    assert await get_observation(db, obs.id) is None
    assert await delete_observation(db, obs.id) is False


async def test_cascade_delete_on_child_delete(db):
    child = await _make_child(db)
    await add_observation(db, _obs(child.id, date(2026, 10, 6)))
    await add_attendance(db, AttendanceCreate(child_id=child.id, check_in_time=datetime(2026, 10, 6, 8)))
    await delete_child(db, child.id)
    assert await get_observations_by_child(db, child.id) == []
    assert await get_attendances_by_child(db, child.id) == []


async def test_attendances_by_range_use_check_in_date(db):
    child = await _make_child(db)
    for day, status in ((4, "present"), (6, "late"), (9, "present"), (13, "present")):
        await add_attendance(
            db,
            AttendanceCreate(
                child_id=child.id,
                status=status,
                check_in_time=datetime(2026, 10, day, 8, 15),
                check_out_time=datetime(2026, 10, day, 16, 0),
            ),
        )
    records = await get_attendances_by_range(db, child.id, date(2026, 10, 5), date(2026, 10, 11))
    assert [a.check_in_time.day for a in records] == [6, 9]
    assert records[0].status == "late"
    assert records[0].check_out_time == datetime(2026, 10, 6, 16, 0)


async def test_attendance_range_ignores_utc_offset(db):
    child = await _make_child(db)
    east_africa = timezone(timedelta(hours=3))
    await add_attendance(
        db,
        AttendanceCreate(child_id=child.id, check_in_time=datetime(2026, 10, 5, 1, 0, tzinfo=east_africa)),
    )
    records = await get_attendances_by_range(db, child.id, date(2026, 10, 5), date(2026, 10, 5))
    assert len(records) == 1
    assert records[0].check_in_time == datetime(2026, 10, 5, 1, 0, tzinfo=east_africa)
    assert await get_attendances_by_range(db, child.id, date(2026, 10, 4), date(2026, 10, 4)) == []
