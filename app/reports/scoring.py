"""Qualitative scorers for aggregated observation categories.

Each scorer is a pure function returning both a short label for the
narrative templates and the counts behind it.
"""

import math
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field
from typing import Optional

from app.models.observation import EngagementLevel

# ─── Thresholds ───────────────────────────────────────────────────────────────

_ENGAGEMENT_POINTS = {"low": 1, "medium": 2, "high": 3}
ENGAGEMENT_LOW_BELOW = 1.5
ENGAGEMENT_HIGH_FROM = 2.5

POSITIVE_MOOD_WORDS = ("happy", "calm", "energetic", "cheerful")
GOOD_COOPERATION_WORDS = ("excellent", "good")


def pluralize(n: int, word: str) -> str:
    return f"{n} {word}{'s' if n != 1 else ''}"


# ─── Ordered tally ────────────────────────────────────────────────────────────

def normalize_label(value: str) -> str:
    return value.strip().lower()


def normalize_cooperation(value: str) -> str:
    return normalize_label(value).replace("_", " ")


@dataclass
class Tally:
    """Label frequencies in order of first occurrence."""

    counts: list[tuple[str, int]] = field(default_factory=list)

    @property
    def total(self) -> int:
        return sum(c for _, c in self.counts)

    def majority(self) -> Optional[tuple[str, int]]:
        """Most frequent label; on a tie the one seen first wins."""
        best: Optional[tuple[str, int]] = None
        for name, c in self.counts:
            if best is None or c > best[1]:
                best = (name, c)
        return best


def tally(values: Iterable[str], normalize: Callable[[str], str] = normalize_label) -> Tally:
    """Count labels in a single scan, keeping first-occurrence order."""
    index: dict[str, int] = {}
    counts: list[tuple[str, int]] = []
    for raw in values:
        if not raw:
            continue
        key = normalize(raw)
        if key in index:
            i = index[key]
            counts[i] = (key, counts[i][1] + 1)
        else:
            index[key] = len(counts)
            counts.append((key, 1))
    return Tally(counts)


# ─── Engagement ───────────────────────────────────────────────────────────────

@dataclass
class EngagementScore:
    level: EngagementLevel
    average: float
    count: int

    @property
    def label(self) -> str:
        return self.level.value


def classify_engagement(average: float) -> EngagementLevel:
    if average >= ENGAGEMENT_HIGH_FROM:
        return EngagementLevel.HIGH
    if average >= ENGAGEMENT_LOW_BELOW:
        return EngagementLevel.MEDIUM
    return EngagementLevel.LOW


def score_engagement(levels: Sequence[str]) -> EngagementScore:
    """Average the ordinal engagement levels; no data lands in the low bucket."""
    points = [_ENGAGEMENT_POINTS.get(normalize_label(lvl), 1) for lvl in levels if lvl]
    average = sum(points) / len(points) if points else 0.0
    return EngagementScore(level=classify_engagement(average), average=average, count=len(points))


# ─── Majority summaries ───────────────────────────────────────────────────────

@dataclass
class CategorySummary:
    """Narrative text for a category plus the majority label and its counts."""

    text: str
    label: Optional[str] = None
    count: int = 0
    total: int = 0


def _majority_summary(
    values: Sequence[str],
    phrases: dict[str, str],
    empty_text: str,
    fallback_text: str,
    normalize: Callable[[str], str] = normalize_label,
) -> CategorySummary:
    t = tally(values, normalize)
    top = t.majority()
    if top is None:
        return CategorySummary(text=empty_text)
    label, count = top
    return CategorySummary(
        text=phrases.get(label, fallback_text),
        label=label,
        count=count,
        total=t.total,
    )


def summarize_mood(moods: Sequence[str]) -> CategorySummary:
    t = tally(moods)
    top = t.majority()
    if top is None:
        return CategorySummary(text="Mood patterns are being observed")
    label, count = top
    return CategorySummary(
        text=f"Primarily {label} ({pluralize(count, 'observation')})",
        label=label,
        count=count,
        total=t.total,
    )


def summarize_cooperation(cooperations: Sequence[str]) -> CategorySummary:
    t = tally(cooperations, normalize_cooperation)
    top = t.majority()
    if top is None:
        return CategorySummary(text="Cooperation is developing well")
    label, count = top
    if label == "excellent":
        level = "Excellent"
    elif "good" in label:
        level = "Good"
    else:
        level = "Developing"
    return CategorySummary(
        text=f"{level} ({pluralize(count, 'observation')})",
        label=label,
        count=count,
        total=t.total,
    )


def summarize_health(health_statuses: Sequence[str], period: str = "week") -> CategorySummary:
    t = tally(health_statuses)
    top = t.majority()
    if top is None:
        return CategorySummary(text="Health monitoring ongoing")
    label, count = top
    healthy = sum(c for name, c in t.counts if "healthy" in name)
    if healthy == t.total:
        text = f"Good health maintained throughout the {period}"
    elif healthy > t.total / 2:
        text = "Generally healthy with normal variations"
    else:
        text = f"Health status monitored and supported (mostly {label})"
    return CategorySummary(text=text, label=label, count=count, total=t.total)


def summarize_energy(energy_levels: Sequence[str]) -> CategorySummary:
    return _majority_summary(
        energy_levels,
        {
            "high": "High energy levels observed",
            "normal": "Steady, normal energy levels",
            "low": "Varied energy levels (some lower energy days noted)",
        },
        empty_text="Energy levels are being observed",
        fallback_text="Energy levels appropriate for activities",
    )


def summarize_eating(eating_habits: Sequence[str]) -> CategorySummary:
    return _majority_summary(
        eating_habits,
        {
            "good": "Good eating habits maintained",
            "fair": "Generally good eating with some variations",
            "poor": "Eating habits are being encouraged and supported",
        },
        empty_text="Eating habits are being observed",
        fallback_text="Eating patterns are developing well",
    )


def summarize_sleep_quality(sleep_qualities: Sequence[str]) -> CategorySummary:
    return _majority_summary(
        sleep_qualities,
        {
            "restful": "Mostly restful sleep",
            "light": "Generally good sleep with some light sleep periods",
            "troubled": "Sleep patterns are being supported and improved",
        },
        empty_text="Sleep quality is being monitored",
        fallback_text="Sleep quality is appropriate",
    )


# ─── Behavior ─────────────────────────────────────────────────────────────────

def _matches_any(value: str, words: Iterable[str]) -> bool:
    v = value.lower()
    return any(w in v for w in words)


def behavior_summary(moods: Sequence[str], cooperations: Sequence[str]) -> str:
    """Verb phrase describing overall behavior, e.g. 'showed positive interactions ...'."""
    positive_moods = sum(1 for m in moods if m and _matches_any(m, POSITIVE_MOOD_WORDS))
    good_cooperation = sum(1 for c in cooperations if c and _matches_any(c, GOOD_COOPERATION_WORDS))

    if positive_moods > len(moods) / 2 and good_cooperation > len(cooperations) / 2:
        return "demonstrated positive behavior and excellent social skills"
    if positive_moods > 0 or good_cooperation > 0:
        return "showed positive interactions and continued to develop social skills"
    return "is learning and growing in social situations"


# ─── Naps ─────────────────────────────────────────────────────────────────────

@dataclass
class NapStats:
    average_minutes: int
    count: int

    @property
    def hours(self) -> int:
        return self.average_minutes // 60

    @property
    def minutes(self) -> int:
        return self.average_minutes % 60

    def formatted(self) -> str:
        return f"{self.hours} hours {self.minutes} minutes"


def nap_stats(durations: Sequence[int]) -> NapStats:
    """Mean nap length rounded to the nearest minute (halves round up); 0 without data."""
    if not durations:
        return NapStats(average_minutes=0, count=0)
    mean = sum(durations) / len(durations)
    return NapStats(average_minutes=int(math.floor(mean + 0.5)), count=len(durations))
