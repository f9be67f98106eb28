"""Report generation input and persisted report models."""

from datetime import date, datetime
from typing import Literal, Optional

from pydantic import BaseModel

from .attendance import Attendance
from .child import Child
from .observation import DailyObservation


PeriodLabel = Literal["Daily", "Weekly", "Monthly"]
ReportType = Literal["daily", "weekly", "monthly"]


class ReportRequest(BaseModel):
    """Everything the report engine needs for one child and one period.

    Observations are expected to be pre-filtered to the child and window;
    nothing here is re-checked.
    """
    child: Child
    attendances: list[Attendance] = []
    observations: list[DailyObservation] = []
    period_start: date
    period_end: date
    period_label: Optional[PeriodLabel] = "Weekly"

    model_config = {"frozen": True}


class GenerateReportPayload(BaseModel):
    """Body of POST /reports/generate."""
    child_id: int
    period: str = "weekly"
    start: Optional[date] = None
    end: Optional[date] = None


class Report(BaseModel):
    """Full report record returned from the database."""
    id: int
    child_id: int
    title: str
    content: str
    report_type: ReportType
    period_start: date
    period_end: date
    created_at: datetime

    model_config = {"from_attributes": True}


class ReportSummary(BaseModel):
    """Lightweight listing model without the Markdown content."""
    id: int
    child_id: int
    title: str
    report_type: ReportType
    period_start: date
    period_end: date
    created_at: datetime
