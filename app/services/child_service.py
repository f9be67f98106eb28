"""Async CRUD operations for children."""

from datetime import date, datetime

import aiosqlite

from app.models.child import Child, ChildCreate, ChildUpdate


def _row_to_child(row: aiosqlite.Row) -> Child:
    return Child(
        id=row["id"],
        full_name=row["full_name"],
        date_of_birth=date.fromisoformat(row["date_of_birth"]),
        gender=row["gender"],
        organization_name=row["organization_name"],
        room_name=row["room_name"],
        caregiver_name=row["caregiver_name"],
        created_at=datetime.fromisoformat(row["created_at"]),
    )


async def create_child(db: aiosqlite.Connection, child: ChildCreate) -> Child:
    """Insert a new child and return the full record."""
    cursor = await db.execute(
        """INSERT INTO children
               (full_name, date_of_birth, gender, organization_name, room_name, caregiver_name)
           VALUES (?, ?, ?, ?, ?, ?)""",
        (
            child.full_name,
            child.date_of_birth.isoformat(),
            child.gender.value if child.gender else None,
            child.organization_name,
            child.room_name,
            child.caregiver_name,
        ),
    )
    await db.commit()
    rows = await db.execute_fetchall(
        "SELECT * FROM children WHERE id = ?", (cursor.lastrowid,)
    )
    return _row_to_child(rows[0])


async def get_child(db: aiosqlite.Connection, child_id: int) -> Child | None:
    """Return a child by id, or None if not found."""
    async with db.execute("SELECT * FROM children WHERE id = ?", (child_id,)) as cur:
        row = await cur.fetchone()
    return _row_to_child(row) if row else None


async def get_all_children(db: aiosqlite.Connection) -> list[Child]:
    """Return all registered children, alphabetically."""
    rows = await db.execute_fetchall("SELECT * FROM children ORDER BY full_name, id")
    return [_row_to_child(r) for r in rows]


async def update_child(db: aiosqlite.Connection, child_id: int, data: ChildUpdate) -> Child | None:
    """Update provided fields and return the updated child, or None."""
    updates = data.model_dump(exclude_unset=True, exclude_none=True)
    if not updates:
        return await get_child(db, child_id)

    if "date_of_birth" in updates:
        updates["date_of_birth"] = updates["date_of_birth"].isoformat()
    if "gender" in updates:
        updates["gender"] = updates["gender"].value

    cols = ", ".join(f"{k} = ?" for k in updates)
    values = list(updates.values()) + [child_id]
    await db.execute(f"UPDATE children SET {cols} WHERE id = ?", values)
    await db.commit()
    return await get_child(db, child_id)


async def delete_child(db: aiosqlite.Connection, child_id: int) -> bool:
    """Delete a child (observations, attendances and reports cascade). Returns True if deleted."""
    cursor = await db.execute("DELETE FROM children WHERE id = ?", (child_id,))
    await db.commit()
    return cursor.rowcount > 0
