"""Progress report endpoints."""

import asyncio
import logging
from datetime import date, timedelta
from functools import partial
from typing import Optional

from fastapi import APIRouter, HTTPException, Query, status

from app.api.dependencies import DbDep
from app.models.report import GenerateReportPayload, PeriodLabel, Report, ReportRequest, ReportSummary
from app.reports import generate_report, report_title, report_type
from app.services import attendance_service, child_service, observation_service, report_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/reports", tags=["reports"])

# Days covered by the default window, end date included
_DEFAULT_WINDOW_DAYS = {"Daily": 1, "Weekly": 7, "Monthly": 30}


def normalize_period(period: Optional[str]) -> PeriodLabel:
    """Map a free-form period ('daily', 'Monthly', ...) to a label; anything else is Weekly."""
    p = (period or "").strip().lower()
    if p == "daily":
        return "Daily"
    if p == "monthly":
        return "Monthly"
    return "Weekly"


def resolve_window(
    label: PeriodLabel,
    start: Optional[date],
    end: Optional[date],
    today: date,
) -> tuple[date, date]:
    """Fill in a missing window bound from the period length, ending today by default."""
    end_date = end or today
    start_date = start or end_date - timedelta(days=_DEFAULT_WINDOW_DAYS[label] - 1)
    return start_date, end_date


@router.post("/generate", response_model=Report, status_code=status.HTTP_201_CREATED)
async def generate_child_report(payload: GenerateReportPayload, db: DbDep) -> Report:
    """
    Generate and store a progress report for one child.

    - Default window: today (daily), the last 7 days (weekly) or the last
      30 days (monthly).
    - Observations and attendances in the window feed the report engine.
    """
    child = await child_service.get_child(db, payload.child_id)
    if not child:
        raise HTTPException(status_code=404, detail=f"Child {payload.child_id} not found")

    label = normalize_period(payload.period)
    start_date, end_date = resolve_window(label, payload.start, payload.end, date.today())
    if end_date < start_date:
        raise HTTPException(status_code=400, detail="'end' must be >= 'start'")

    observations = await observation_service.get_observations_by_range(
        db, child.id, start_date, end_date
    )
    attendances = await attendance_service.get_attendances_by_range(
        db, child.id, start_date, end_date
    )

    request = ReportRequest(
        child=child,
        attendances=attendances,
        observations=observations,
        period_start=start_date,
        period_end=end_date,
        period_label=label,
    )

    loop = asyncio.get_event_loop()
    content = await loop.run_in_executor(None, partial(generate_report, request))

    report = await report_service.save_report(
        db,
        child_id=child.id,
        title=report_title(child, label, start_date, end_date),
        content=content,
        report_type=report_type(label),
        period_start=start_date,
        period_end=end_date,
    )
    logger.info("Saved report %d for child %d (%s)", report.id, child.id, report.report_type)
    return report


@router.get("", response_model=list[ReportSummary])
async def list_reports(
    db: DbDep,
    child_id: Optional[int] = Query(None, description="Only reports for this child"),
    limit: int = Query(report_service.REPORT_HISTORY_LIMIT, ge=1, le=100),
) -> list[ReportSummary]:
    """Return past reports, newest first."""
    return await report_service.list_reports(db, child_id=child_id, limit=limit)


@router.get("/{report_id}", response_model=Report)
async def get_report(report_id: int, db: DbDep) -> Report:
    """Return the full Markdown of a stored report."""
    report = await report_service.get_report(db, report_id)
    if not report:
        raise HTTPException(status_code=404, detail=f"Report {report_id} not found")
    return report


@router.delete("/{report_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_report(report_id: int, db: DbDep) -> None:
    """Delete a stored report."""
    deleted = await report_service.delete_report(db, report_id)
    if not deleted:
        raise HTTPException(status_code=404, detail=f"Report {report_id} not found")
