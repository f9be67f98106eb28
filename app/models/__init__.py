from .attendance import Attendance, AttendanceCreate
from .child import Child, ChildCreate, ChildUpdate, Gender
from .observation import DailyObservation, ObservationCreate, ObservationUpdate
from .report import Report, ReportRequest, ReportSummary

__all__ = [
    "Attendance", "AttendanceCreate",
    "Child", "ChildCreate", "ChildUpdate", "Gender",
    "DailyObservation", "ObservationCreate", "ObservationUpdate",
    "Report", "ReportRequest", "ReportSummary",
]
