"""Markdown section generators for child progress reports.

Every generator takes a NarrativeContext and returns one section, heading
included. Sections never come back empty: when a category has no data the
body is a fixed fallback sentence.
"""

import re
from dataclasses import dataclass
from typing import Optional

from app.models.child import Gender
from app.models.observation import EngagementLevel

from .aggregator import PeriodAggregate
from .scoring import (
    CategorySummary,
    EngagementScore,
    NapStats,
    pluralize,
)

SECTION_TITLES = (
    "1. General Overview",
    "2. Activities & Learning",
    "3. Behavior & Emotional Observation",
    "4. Health & Hygiene",
    "5. Meal & Sleep Pattern",
    "6. Teacher's Notes",
    "7. AI Summary & Suggestions",
)

_STEADY_ENERGY = {"high", "normal"}
_GOOD_NAP_MINUTES = 60
_EXCELLENT_NAP_MINUTES = 90


# ─── Pronouns ─────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Pronouns:
    subject: str
    object: str
    possessive: str

    @property
    def subject_title(self) -> str:
        return self.subject.capitalize()

    @property
    def possessive_title(self) -> str:
        return self.possessive.capitalize()


_PRONOUNS = {
    Gender.MALE: Pronouns("he", "him", "his"),
    Gender.FEMALE: Pronouns("she", "her", "her"),
}
NEUTRAL_PRONOUNS = Pronouns("they", "them", "their")


def pronouns_for(gender: Optional[Gender]) -> Pronouns:
    """Pronoun set for a child; OTHER and unknown gender are neutral."""
    return _PRONOUNS.get(gender, NEUTRAL_PRONOUNS)


# ─── Context ──────────────────────────────────────────────────────────────────

@dataclass
class NarrativeContext:
    """Everything the section templates read, computed once per report."""
    name: str
    pronouns: Pronouns
    period: str                 # "day" | "week" | "month"
    age_years: int
    aggregate: PeriodAggregate
    engagement: EngagementScore
    mood: CategorySummary
    cooperation: CategorySummary
    health: CategorySummary
    energy: CategorySummary
    eating: CategorySummary
    sleep_quality: CategorySummary
    behavior: str
    naps: NapStats

    @property
    def level(self) -> EngagementLevel:
        return self.engagement.level


def _heading(index: int) -> str:
    return f"## {SECTION_TITLES[index]}"


# Line starts that Markdown would read as a block (rule, heading, list, quote, fence)
_BLOCK_START = re.compile(r"^(\s*)(?:[-+*_=#>`~]|\d+[.)])")


def _escape_line(line: str) -> str:
    m = _BLOCK_START.match(line)
    if not m:
        return line
    if line[m.end() - 1] in ".)":
        return f"{line[:m.end() - 1]}\\{line[m.end() - 1:]}"
    indent = m.group(1)
    return f"{indent}\\{line[len(indent):]}"


def _bullet(item: str) -> str:
    """One list item; continuation lines are indented so they stay inside it."""
    lines = [_escape_line(line) for line in item.splitlines() or [item]]
    return "- " + "\n".join([lines[0], *(f"  {line}" for line in lines[1:])])


def _bullets(items: list[str]) -> str:
    return "\n".join(_bullet(item) for item in items)


def _section(index: int, *blocks: str) -> str:
    return "\n\n".join([_heading(index), *(b for b in blocks if b)])


# ─── 1. Overview ──────────────────────────────────────────────────────────────

def general_overview(ctx: NarrativeContext) -> str:
    agg, p = ctx.aggregate, ctx.pronouns
    adjective = {
        EngagementLevel.HIGH: "wonderful and productive",
        EngagementLevel.MEDIUM: "good",
    }.get(ctx.level, "meaningful")
    opening = "Today" if ctx.period == "day" else f"This {ctx.period}"
    age = f" ({pluralize(ctx.age_years, 'year')})" if ctx.age_years > 0 else ""

    sentences = [f"{opening} has been a {adjective} {ctx.period} for {ctx.name}{age}."]
    if agg.has_observations:
        quality = {
            EngagementLevel.HIGH: "excellent",
            EngagementLevel.MEDIUM: "good",
        }.get(ctx.level, "steady")
        sentences.append(
            f"{p.subject_title} showed {quality} engagement and participated actively in activities."
        )
        sentences.append(
            f"Our team has documented {pluralize(agg.observation_count, 'day')} of detailed observations."
        )
    else:
        sentences.append(f"We're continuing to observe and support {p.possessive} development and growth.")
        sentences.append(
            "Daily observations help us understand and support each child's unique needs and interests."
        )
    return _section(0, " ".join(sentences))


# ─── 2. Activities ────────────────────────────────────────────────────────────

def activities_and_learning(ctx: NarrativeContext) -> str:
    agg = ctx.aggregate
    activities = agg.activities or [f"No specific activities recorded this {ctx.period}"]

    if agg.has_observations:
        participation = {
            EngagementLevel.HIGH: "demonstrated enthusiastic participation",
            EngagementLevel.MEDIUM: "showed good interest and participation",
        }.get(ctx.level, "participated in activities with some encouragement")
        summary = f"{ctx.name} {participation} throughout the {ctx.period}."
    else:
        summary = "Activity data is being collected and will be available in future reports."

    skills = ""
    if agg.skill_notes:
        skills = f"**Skill Development Notes:**\n{_bullets(agg.skill_notes)}"

    return _section(
        1,
        f"**Activities Participated In:**\n{_bullets(activities)}",
        f"**Engagement Level:** {ctx.engagement.label.capitalize()}",
        summary,
        skills,
    )


# ─── 3. Behavior ──────────────────────────────────────────────────────────────

def behavior_and_emotion(ctx: NarrativeContext) -> str:
    agg = ctx.aggregate
    if not (agg.moods or agg.cooperations or agg.social_notes):
        return _section(
            2,
            f"Behavior observations are being tracked. {ctx.name} continues to adapt to the "
            "daycare environment and interact with peers and caregivers.",
        )

    social = agg.social_notes or ["Social interactions are developing well"]
    return _section(
        2,
        f"**Mood Patterns:** {ctx.mood.text}",
        f"**Cooperation:** {ctx.cooperation.text}",
        f"**Social Interactions:**\n{_bullets(social)}",
        f"{ctx.name} {ctx.behavior} throughout the {ctx.period}.",
    )


# ─── 4. Health ────────────────────────────────────────────────────────────────

def health_and_hygiene(ctx: NarrativeContext) -> str:
    agg = ctx.aggregate
    if not (agg.health_statuses or agg.energy_levels):
        return _section(
            3,
            f"Health and hygiene monitoring is ongoing. {ctx.name} is learning and "
            "practicing good hygiene habits.",
        )

    all_healthy = all("healthy" in s.lower() for s in agg.health_statuses)
    steady = bool(agg.energy_levels) and all(e.lower() in _STEADY_ENERGY for e in agg.energy_levels)
    hygiene = f"**Hygiene Notes:**\n{_bullets(agg.hygiene_notes)}" if agg.hygiene_notes else ""

    return _section(
        3,
        f"**Health Status:** {ctx.health.text}",
        f"**Energy Level:** {ctx.energy.text}",
        f"**Eating Habits:** {ctx.eating.text}",
        hygiene,
        f"Overall, {ctx.name} {'maintained good health' if all_healthy else 'showed normal health patterns'} "
        f"this {ctx.period} with {'steady' if steady else 'varied'} energy levels.",
    )


# ─── 5. Meals & sleep ─────────────────────────────────────────────────────────

def meal_and_sleep(ctx: NarrativeContext) -> str:
    agg, naps = ctx.aggregate, ctx.naps
    days = max(agg.observation_count, 1)

    meals = _bullets([
        f"Breakfast: {agg.breakfast_eaten} of {days} days",
        f"Lunch: {agg.lunch_eaten} of {days} days",
        f"Snacks: {agg.snack_eaten} of {days} days",
        f"Skipped Meals: {agg.skipped_meal_days} total",
    ])

    if agg.meals_eaten > agg.observation_count * 2:
        every_day = (
            agg.breakfast_eaten == agg.observation_count
            and agg.lunch_eaten == agg.observation_count
        )
        meal_note = (
            f"{ctx.name} showed {'excellent' if every_day else 'good'} meal participation "
            f"this {ctx.period}."
        )
    elif agg.skipped_meal_days > 0:
        meal_note = (
            "We noticed some meals were skipped. This is normal and we continue to "
            "encourage healthy eating habits."
        )
    else:
        meal_note = "Meal patterns are being monitored and tracked."

    if naps.average_minutes > 0:
        if naps.average_minutes >= _GOOD_NAP_MINUTES:
            routine = "excellent" if naps.average_minutes >= _EXCELLENT_NAP_MINUTES else "good"
            sleep_note = f"{ctx.name} maintained {routine} sleep routines with restful naps."
        else:
            sleep_note = "Nap times are being established and improved."
        sleep = "\n\n".join([
            _bullets([
                f"Average Nap Duration: {naps.formatted()}",
                f"Sleep Quality: {ctx.sleep_quality.text}",
            ]),
            sleep_note,
        ])
    else:
        sleep = "Sleep data is being collected. Regular nap schedules help support healthy development."

    return _section(
        4,
        f"**Meal Consumption:**\n{meals}",
        meal_note,
        f"**Sleep Patterns:**\n{sleep}",
    )


# ─── 6. Teacher's notes ───────────────────────────────────────────────────────

def teachers_notes(ctx: NarrativeContext) -> str:
    notes = ctx.aggregate.teacher_notes
    if notes:
        return _section(5, _bullets(notes))
    participant = "an active and engaged" if ctx.level == EngagementLevel.HIGH else "a wonderful"
    return _section(
        5,
        f"Overall, {ctx.name} has been {participant} participant this {ctx.period}. "
        f"We appreciate the opportunity to care for and support {ctx.pronouns.possessive} development.",
    )


# ─── 7. AI summary ────────────────────────────────────────────────────────────

def parent_suggestions(ctx: NarrativeContext) -> list[str]:
    """Suggestion bullets, rules evaluated in a fixed order."""
    agg, p = ctx.aggregate, ctx.pronouns
    suggestions: list[str] = []

    if ctx.level == EngagementLevel.LOW and agg.has_observations:
        suggestions.append(
            f"At home, try engaging {ctx.name} in similar activities to those at daycare "
            "to build interest and familiarity."
        )
    if agg.skipped_meal_days > agg.observation_count / 2:
        suggestions.append(
            "Consider discussing meal preferences with our staff. We're happy to work together "
            f"to ensure {ctx.name} enjoys {p.possessive} meals."
        )
    if 0 < ctx.naps.average_minutes < _GOOD_NAP_MINUTES:
        suggestions.append(
            "Maintaining a consistent sleep schedule at home can help support better nap times at daycare."
        )

    if not suggestions:
        return [
            f"Continue the great work at home! {ctx.name} is thriving in the daycare environment.",
            "Regular communication with our staff helps us provide the best care. "
            "Feel free to share any concerns or updates.",
            f"Celebrate {p.possessive} achievements and continue to encourage {p.possessive} "
            "curiosity and learning at home.",
        ]
    suggestions.append(f"We appreciate your partnership in supporting {ctx.name}'s growth and development.")
    return suggestions


def ai_summary(ctx: NarrativeContext) -> str:
    p = ctx.pronouns
    kind = {
        EngagementLevel.HIGH: "an excellent",
        EngagementLevel.MEDIUM: "a productive",
    }.get(ctx.level, "a meaningful")

    opening = f"{ctx.name} has had {kind} {ctx.period} at daycare."
    if ctx.level == EngagementLevel.HIGH:
        opening += (
            f" {p.possessive_title} high level of engagement in activities demonstrates "
            f"{p.possessive} curiosity and eagerness to learn."
        )
    elif ctx.level == EngagementLevel.MEDIUM:
        opening += (
            f" We're pleased to see {p.object} actively participating in activities "
            "with growing confidence."
        )

    return _section(
        6,
        opening,
        "**Suggestions for Parents:**",
        _bullets(parent_suggestions(ctx)),
        f"We look forward to another wonderful {ctx.period} with {ctx.name}!",
    )


SECTION_GENERATORS = (
    general_overview,
    activities_and_learning,
    behavior_and_emotion,
    health_and_hygiene,
    meal_and_sleep,
    teachers_notes,
    ai_summary,
)
