"""Seed a demo child with one week of observations and attendance, then print a weekly report."""

import asyncio
import os
import sys
from datetime import date, datetime, timedelta
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from dotenv import load_dotenv
load_dotenv()

WEEK_START = date(2026, 10, 5)

# (activities, engagement, mood, cooperation, breakfast, lunch, snack, nap minutes, teacher note)
OBSERVATIONS = [
    (["Painting", "Block building"], "high", "Happy", "excellent", "eaten", "eaten", "eaten", 85,
     "Built the tallest tower in the room today."),
    (["Story time", "Outdoor play"], "high", "Happy", "good", "eaten", "partial", "eaten", 70, None),
    (["Music"], "medium", "Calm", "good", "eaten", "eaten", "skipped", 60,
     "Hummed along to every song."),
    (["Painting", "Sand play"], "high", "Excited", "excellent", "partial", "eaten", "eaten", 90, None),
    (["Puzzles"], "medium", "Happy", "needs_reminders", "eaten", "eaten", "eaten", 75,
     "Needed a reminder to share the puzzle pieces."),
]


async def main():
    import aiosqlite

    from app.models.attendance import AttendanceCreate
    from app.models.child import ChildCreate, Gender
    from app.models.observation import ObservationCreate
    from app.models.report import ReportRequest
    from app.reports import generate_report, report_title, report_type
    from app.services import attendance_service, child_service, observation_service, report_service
    from app.services.database import create_tables

    db_path = os.getenv("DATABASE_URL", "data/daycare.db")
    await create_tables(db_path)

    async with aiosqlite.connect(db_path) as db:
        db.row_factory = aiosqlite.Row
        await db.execute("PRAGMA foreign_keys = ON")

        # 1. Child
        child = await child_service.create_child(db, ChildCreate(
            full_name="Abebe",
            date_of_birth=date(2023, 3, 1),
            gender=Gender.MALE,
            organization_name="Little Acorns",
            room_name="Sunflowers",
            caregiver_name="Hana",
        ))
        print(f"✅ Created child {child.full_name} (id={child.id})")

        # 2. One observation and one check-in per weekday
        for i, (activities, engagement, mood, coop, breakfast, lunch, snack, nap, note) in enumerate(OBSERVATIONS):
            day = WEEK_START + timedelta(days=i)
            await observation_service.add_observation(db, ObservationCreate(
                child_id=child.id,
                observation_date=day,
                activities=activities,
                engagement_level=engagement,
                mood=mood,
                cooperation=coop,
                health_status="Healthy",
                energy_level="high" if engagement == "high" else "normal",
                eating_habits="good",
                breakfast_status=breakfast,
                lunch_status=lunch,
                snack_status=snack,
                nap_duration=nap,
                sleep_quality="restful",
                teacher_notes=note,
            ))
            await attendance_service.add_attendance(db, AttendanceCreate(
                child_id=child.id,
                status="present",
                check_in_time=datetime(day.year, day.month, day.day, 8, 15),
                check_out_time=datetime(day.year, day.month, day.day, 16, 45),
            ))
        print(f"✅ Added {len(OBSERVATIONS)} observations and check-ins")

        # 3. Weekly report
        week_end = WEEK_START + timedelta(days=6)
        request = ReportRequest(
            child=child,
            observations=await observation_service.get_observations_by_range(db, child.id, WEEK_START, week_end),
            attendances=await attendance_service.get_attendances_by_range(db, child.id, WEEK_START, week_end),
            period_start=WEEK_START,
            period_end=week_end,
            period_label="Weekly",
        )
        content = generate_report(request)
        report = await report_service.save_report(
            db,
            child_id=child.id,
            title=report_title(child, "Weekly", WEEK_START, week_end),
            content=content,
            report_type=report_type("Weekly"),
            period_start=WEEK_START,
            period_end=week_end,
        )
        print(f"✅ Saved report {report.id}: {report.title}\n")
        print(content)


if __name__ == "__main__":
    asyncio.run(main())
