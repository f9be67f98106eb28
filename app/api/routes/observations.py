"""Endpoints for caregiver daily observations."""

from datetime import date
from typing import Optional

import aiosqlite
from fastapi import APIRouter, HTTPException, Query, status

from app.api.dependencies import DbDep
from app.models.observation import DailyObservation, ObservationCreate, ObservationUpdate
from app.services import child_service, observation_service

router = APIRouter(prefix="/observations", tags=["observations"])


@router.post("", response_model=DailyObservation, status_code=status.HTTP_201_CREATED)
async def add_observation(payload: ObservationCreate, db: DbDep) -> DailyObservation:
    """Record one day of observations for a child (one per child per date)."""
    child = await child_service.get_child(db, payload.child_id)
    if not child:
        raise HTTPException(status_code=404, detail=f"Child {payload.child_id} not found")
    try:
        return await observation_service.add_observation(db, payload)
    except aiosqlite.IntegrityError:
        raise HTTPException(
            status_code=409,
            detail=f"Child {payload.child_id} already has an observation for {payload.observation_date}",
        )


@router.get("/{child_id}", response_model=list[DailyObservation])
async def get_observations(
    child_id: int,
    db: DbDep,
    start: Optional[date] = Query(None, description="Range start (YYYY-MM-DD)"),
    end: Optional[date] = Query(None, description="Range end (YYYY-MM-DD)"),
) -> list[DailyObservation]:
    """
    Return observations for a child.

    - No parameter: full history, most recent first
    - `?start=YYYY-MM-DD&end=YYYY-MM-DD`: a date range, oldest first
    """
    child = await child_service.get_child(db, child_id)
    if not child:
        raise HTTPException(status_code=404, detail=f"Child {child_id} not found")

    if start and end:
        if end < start:
            raise HTTPException(status_code=400, detail="'end' must be >= 'start'")
        return await observation_service.get_observations_by_range(db, child_id, start, end)
    return await observation_service.get_observations_by_child(db, child_id)


@router.patch("/{observation_id}", response_model=DailyObservation)
async def update_observation(
    observation_id: int, payload: ObservationUpdate, db: DbDep
) -> DailyObservation:
    """Update an observation (all fields optional)."""
    try:
        observation = await observation_service.update_observation(db, observation_id, payload)
    except aiosqlite.IntegrityError:
        raise HTTPException(
            status_code=409,
            detail=f"Another observation already exists for {payload.observation_date}",
        )
    if not observation:
        raise HTTPException(status_code=404, detail=f"Observation {observation_id} not found")
    return observation


@router.delete("/{observation_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_observation(observation_id: int, db: DbDep) -> None:
    """Delete an observation."""
    deleted = await observation_service.delete_observation(db, observation_id)
    if not deleted:
        raise HTTPException(status_code=404, detail=f"Observation {observation_id} not found")
