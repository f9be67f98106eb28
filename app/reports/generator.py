"""Assemble the seven narrative sections into a single Markdown report."""

import logging
import math
from collections.abc import Callable
from datetime import date, datetime

from app.models.child import Child
from app.models.report import PeriodLabel, ReportRequest, ReportType

from . import scoring
from .aggregator import aggregate
from .narrative import SECTION_GENERATORS, NarrativeContext, pronouns_for

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]

DEFAULT_PERIOD_LABEL: PeriodLabel = "Weekly"
DISCLAIMER = "*This report is based on recorded observations for the specified period.*"
RULE = "---"

_PERIOD_NOUNS = {"Daily": "day", "Weekly": "week", "Monthly": "month"}
_DATE_PREFIXES = {"Daily": "Date", "Weekly": "Week of", "Monthly": "Month of"}
_DAYS_PER_YEAR = 365.25


def format_date(d: date) -> str:
    """'October 6, 2026', without zero padding on any platform."""
    return f"{d:%B} {d.day}, {d.year}"


def age_in_years(date_of_birth: date, today: date) -> int:
    """Whole years elapsed between birth and today."""
    return math.floor((today - date_of_birth).days / _DAYS_PER_YEAR)


def date_line(label: PeriodLabel, start: date, end: date) -> str:
    # Dates are rendered as given; ordering is the caller's concern
    if label == "Daily":
        return f"**{_DATE_PREFIXES[label]}:** {format_date(start)}"
    return f"**{_DATE_PREFIXES[label]}:** {format_date(start)} - {format_date(end)}"


def report_title(child: Child, label: PeriodLabel, start: date, end: date) -> str:
    """Title stored alongside a persisted report."""
    if label == "Daily":
        return f"{label} Report - {child.full_name} ({start.isoformat()})"
    return f"{label} Report - {child.full_name} ({start.isoformat()} - {end.isoformat()})"


def report_type(label: PeriodLabel) -> ReportType:
    return label.lower()  # type: ignore[return-value]


def build_context(request: ReportRequest, today: date) -> NarrativeContext:
    """Run the aggregator and scorers and bundle their outputs for the templates."""
    label = request.period_label or DEFAULT_PERIOD_LABEL
    period = _PERIOD_NOUNS[label]
    agg = aggregate(request.observations, request.attendances)

    return NarrativeContext(
        name=request.child.full_name,
        pronouns=pronouns_for(request.child.gender),
        period=period,
        age_years=age_in_years(request.child.date_of_birth, today),
        aggregate=agg,
        engagement=scoring.score_engagement(agg.engagement_levels),
        mood=scoring.summarize_mood(agg.moods),
        cooperation=scoring.summarize_cooperation(agg.cooperations),
        health=scoring.summarize_health(agg.health_statuses, period),
        energy=scoring.summarize_energy(agg.energy_levels),
        eating=scoring.summarize_eating(agg.eating_habits),
        sleep_quality=scoring.summarize_sleep_quality(agg.sleep_qualities),
        behavior=scoring.behavior_summary(agg.moods, agg.cooperations),
        naps=scoring.nap_stats(agg.nap_durations),
    )


def generate_report(request: ReportRequest, clock: Clock = datetime.now) -> str:
    """
    Produce the Markdown progress report for one child and one period.

    Args:
        request: Child, attendances and observations already filtered to the period.
        clock: Source of the generation timestamp (footer and age). Inject a
            fixed clock to get byte-identical output for identical input.

    Returns:
        Markdown with a title, a date line, seven numbered sections separated
        by horizontal rules, and a footer.
    """
    label = request.period_label or DEFAULT_PERIOD_LABEL
    generated_at = clock()
    ctx = build_context(request, generated_at.date())

    parts = [
        f"# {label} Report for {request.child.full_name}",
        date_line(label, request.period_start, request.period_end),
        RULE,
    ]
    for section in SECTION_GENERATORS:
        parts.append(section(ctx))
        parts.append(RULE)
    parts.append(f"*Report generated on {format_date(generated_at.date())}*\n{DISCLAIMER}")

    logger.info(
        "%s report generated for %s (%d observations, engagement=%s)",
        label, request.child.full_name, ctx.aggregate.observation_count, ctx.engagement.label,
    )
    return "\n\n".join(parts)
