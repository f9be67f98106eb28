"""Async operations for check-in / check-out records."""

from datetime import date, datetime
from typing import Optional

import aiosqlite

from app.models.attendance import Attendance, AttendanceCreate


def _parse_dt(value: Optional[str]) -> Optional[datetime]:
    return datetime.fromisoformat(value) if value else None


def _row_to_attendance(row: aiosqlite.Row) -> Attendance:
    return Attendance(
        id=row["id"],
        child_id=row["child_id"],
        status=row["status"],
        check_in_time=_parse_dt(row["check_in_time"]),
        check_out_time=_parse_dt(row["check_out_time"]),
        created_at=datetime.fromisoformat(row["created_at"]),
    )


async def add_attendance(db: aiosqlite.Connection, attendance: AttendanceCreate) -> Attendance:
    """Record a check-in / check-out and return the full record."""
    cursor = await db.execute(
        """INSERT INTO attendances (child_id, status, check_in_time, check_out_time)
           VALUES (?, ?, ?, ?)""",
        (
            attendance.child_id,
            attendance.status,
            attendance.check_in_time.isoformat() if attendance.check_in_time else None,
            attendance.check_out_time.isoformat() if attendance.check_out_time else None,
        ),
    )
    await db.commit()
    rows = await db.execute_fetchall(
        "SELECT * FROM attendances WHERE id = ?", (cursor.lastrowid,)
    )
    return _row_to_attendance(rows[0])


async def get_attendances_by_child(db: aiosqlite.Connection, child_id: int) -> list[Attendance]:
    """Return all attendance records for a child, most recent first."""
    rows = await db.execute_fetchall(
        """SELECT * FROM attendances
           WHERE child_id = ?
           ORDER BY COALESCE(check_in_time, created_at) DESC, id DESC""",
        (child_id,),
    )
    return [_row_to_attendance(r) for r in rows]


async def get_attendances_by_range(
    db: aiosqlite.Connection, child_id: int, start: date, end: date
) -> list[Attendance]:
    """Return attendances between start and end (inclusive calendar dates), oldest first.

    A record is dated by the calendar date written in its check-in time (or
    its creation time when the child never checked in), offset ignored.
    """
    rows = await db.execute_fetchall(
        """SELECT * FROM attendances
           WHERE child_id = ?
             AND substr(COALESCE(check_in_time, created_at), 1, 10) >= ?
             AND substr(COALESCE(check_in_time, created_at), 1, 10) <= ?
           ORDER BY COALESCE(check_in_time, created_at), id""",
        (child_id, start.isoformat(), end.isoformat()),
    )
    return [_row_to_attendance(r) for r in rows]
