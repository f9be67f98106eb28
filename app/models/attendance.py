"""Pydantic models for check-in / check-out events."""

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel


AttendanceStatus = Literal["present", "late", "absent", "excused"]


class AttendanceBase(BaseModel):
    child_id: int
    status: AttendanceStatus = "present"
    check_in_time: Optional[datetime] = None
    check_out_time: Optional[datetime] = None


class AttendanceCreate(AttendanceBase):
    """Payload to record a check-in / check-out."""
    pass


class Attendance(AttendanceBase):
    """Full attendance record returned from the database."""
    id: int
    created_at: datetime

    model_config = {"from_attributes": True}
