"""Unit tests for child_service."""

from datetime import date

import pytest

from app.models.child import ChildCreate, ChildUpdate, Gender
from app.services.child_service import (
    create_child,
    delete_child,
    get_all_children,
    get_child,
    update_child,
)

pytestmark = pytest.mark.asyncio


_CHILD = ChildCreate(
    full_name="Abebe Kebede",
    date_of_birth=date(2023, 3, 1),
    gender=Gender.MALE,
    room_name="Sunflowers",
)


async def test_create_child(db):
    child = await create_child(db, _CHILD)
    assert child.id is not None
    assert child.full_name == "Abebe Kebede"
    assert child.gender == Gender.MALE
    assert child.room_name == "Sunflowers"
    assert child.caregiver_name is None
    assert child.created_at is not None


async def test_create_child_without_gender(db):
    child = await create_child(db, ChildCreate(full_name="Kidus", date_of_birth=date(2022, 5, 2)))
    assert child.gender is None


async def test_get_child(db):
    created = await create_child(db, _CHILD)
    fetched = await get_child(db, created.id)
    assert fetched is not None
    assert fetched.date_of_birth == date(2023, 3, 1)


async def test_get_child_not_found(db):
    assert await get_child(db, 9999) is None


async def test_get_all_children(db):
    assert await get_all_children(db) == []
    await create_child(db, _CHILD)
    await create_child(db, ChildCreate(full_name="Almaz", date_of_birth=date(2022, 1, 1), gender=Gender.FEMALE))
    names = [c.full_name for c in await get_all_children(db)]
    assert names == ["Abebe Kebede", "Almaz"]


async def test_update_child(db):
    child = await create_child(db, _CHILD)
    updated = await update_child(db, child.id, ChildUpdate(gender=Gender.OTHER, caregiver_name="Tigist"))
    assert updated is not None
    assert updated.gender == Gender.OTHER
    assert updated.caregiver_name == "Tigist"
    assert updated.room_name == "Sunflowers"  # unchanged


async def test_update_child_no_fields(db):
    child = await create_child(db, _CHILD)
    updated = await update_child(db, child.id, ChildUpdate())
    assert updated == child


async def test_update_child_not_found(db):
    assert await update_child(db, 9999, ChildUpdate(full_name="X")) is None


async def test_delete_child(db):
    child = await create_child(db, _CHILD)
    assert await delete_child(db, child.id) is True
    assert await get_child(db, child.id) is None
    assert await delete_child(db, child.id) is False
