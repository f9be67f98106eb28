"""Persistence for generated progress reports."""

import os
from datetime import date, datetime

import aiosqlite

from app.models.report import Report, ReportSummary

REPORT_HISTORY_LIMIT = int(os.getenv("REPORT_HISTORY_LIMIT", "20"))


def _row_to_report(row: aiosqlite.Row) -> Report:
    return Report(
        id=row["id"],
        child_id=row["child_id"],
        title=row["title"],
        content=row["content"],
        report_type=row["report_type"],
        period_start=date.fromisoformat(row["period_start"]),
        period_end=date.fromisoformat(row["period_end"]),
        created_at=datetime.fromisoformat(row["created_at"]),
    )


def _row_to_summary(row: aiosqlite.Row) -> ReportSummary:
    return ReportSummary(
        id=row["id"],
        child_id=row["child_id"],
        title=row["title"],
        report_type=row["report_type"],
        period_start=date.fromisoformat(row["period_start"]),
        period_end=date.fromisoformat(row["period_end"]),
        created_at=datetime.fromisoformat(row["created_at"]),
    )


async def save_report(
    db: aiosqlite.Connection,
    child_id: int,
    title: str,
    content: str,
    report_type: str,
    period_start: date,
    period_end: date,
) -> Report:
    """Persist a generated report and return the full record."""
    cursor = await db.execute(
        """INSERT INTO reports
               (child_id, title, content, report_type, period_start, period_end)
           VALUES (?, ?, ?, ?, ?, ?)""",
        (
            child_id,
            title,
            content,
            report_type,
            period_start.isoformat(),
            period_end.isoformat(),
        ),
    )
    await db.commit()
    rows = await db.execute_fetchall(
        "SELECT * FROM reports WHERE id = ?", (cursor.lastrowid,)
    )
    return _row_to_report(rows[0])


async def get_report(db: aiosqlite.Connection, report_id: int) -> Report | None:
    """Return a specific report by id."""
    async with db.execute("SELECT * FROM reports WHERE id = ?", (report_id,)) as cur:
        row = await cur.fetchone()
    return _row_to_report(row) if row else None


async def list_reports(
    db: aiosqlite.Connection,
    child_id: int | None = None,
    limit: int = REPORT_HISTORY_LIMIT,
) -> list[ReportSummary]:
    """Return the most recent report summaries, for one child or for everyone."""
    columns = "id, child_id, title, report_type, period_start, period_end, created_at"
    if child_id is None:
        rows = await db.execute_fetchall(
            f"""SELECT {columns} FROM reports
                ORDER BY created_at DESC, id DESC
                LIMIT ?""",
            (limit,),
        )
    else:
        rows = await db.execute_fetchall(
            f"""SELECT {columns} FROM reports
                WHERE child_id = ?
                ORDER BY created_at DESC, id DESC
                LIMIT ?""",
            (child_id, limit),
        )
    return [_row_to_summary(r) for r in rows]


async def delete_report(db: aiosqlite.Connection, report_id: int) -> bool:
    """Delete a report. Returns True if deleted."""
    cursor = await db.execute("DELETE FROM reports WHERE id = ?", (report_id,))
    await db.commit()
    return cursor.rowcount > 0
