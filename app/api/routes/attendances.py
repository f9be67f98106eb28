"""Endpoints for check-in / check-out records."""

from datetime import date
from typing import Optional

from fastapi import APIRouter, HTTPException, Query, status

from app.api.dependencies import DbDep
from app.models.attendance import Attendance, AttendanceCreate
from app.services import attendance_service, child_service

router = APIRouter(prefix="/attendances", tags=["attendances"])


@router.post("", response_model=Attendance, status_code=status.HTTP_201_CREATED)
async def add_attendance(payload: AttendanceCreate, db: DbDep) -> Attendance:
    """Record a check-in / check-out."""
    child = await child_service.get_child(db, payload.child_id)
    if not child:
        raise HTTPException(status_code=404, detail=f"Child {payload.child_id} not found")
    return await attendance_service.add_attendance(db, payload)


@router.get("/{child_id}", response_model=list[Attendance])
async def get_attendances(
    child_id: int,
    db: DbDep,
    start: Optional[date] = Query(None, description="Range start (YYYY-MM-DD)"),
    end: Optional[date] = Query(None, description="Range end (YYYY-MM-DD)"),
) -> list[Attendance]:
    """
    Return attendance records for a child.

    - No parameter: full history
    - `?start=YYYY-MM-DD&end=YYYY-MM-DD`: a date range
    """
    child = await child_service.get_child(db, child_id)
    if not child:
        raise HTTPException(status_code=404, detail=f"Child {child_id} not found")

    if start and end:
        if end < start:
            raise HTTPException(status_code=400, detail="'end' must be >= 'start'")
        return await attendance_service.get_attendances_by_range(db, child_id, start, end)
    return await attendance_service.get_attendances_by_child(db, child_id)
