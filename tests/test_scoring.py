"""Unit tests for the categorical scorers."""

import pytest

from app.models.observation import EngagementLevel
from app.reports.scoring import (
    behavior_summary,
    nap_stats,
    score_engagement,
    summarize_cooperation,
    summarize_eating,
    summarize_energy,
    summarize_health,
    summarize_mood,
    summarize_sleep_quality,
    tally,
)


# ─── Engagement ───────────────────────────────────────────────────────────────

@pytest.mark.parametrize(
    "levels, expected",
    [
        (["high", "high", "high"], EngagementLevel.HIGH),
        (["low", "low"], EngagementLevel.LOW),
        (["low", "high"], EngagementLevel.MEDIUM),
        (["medium", "high"], EngagementLevel.HIGH),
        (["low", "medium"], EngagementLevel.MEDIUM),
        (["low", "low", "medium"], EngagementLevel.LOW),
    ],
)
def test_engagement_buckets(levels, expected):
    assert score_engagement(levels).level == expected


def test_engagement_without_data_is_low():
    score = score_engagement([])
    assert score.level == EngagementLevel.LOW
    assert score.average == 0
    assert score.count == 0


def test_engagement_keeps_raw_average():
    score = score_engagement(["low", "high"])
    assert score.average == 2.0
    assert score.count == 2
    assert score.label == "medium"


# ─── Tally & majority ─────────────────────────────────────────────────────────

def test_tally_preserves_first_occurrence_order():
    t = tally(["Happy", "calm", "happy", "Tired"])
    assert t.counts == [("happy", 2), ("calm", 1), ("tired", 1)]
    assert t.total == 4


def test_majority_picks_highest_count():
    summary = summarize_mood(["happy", "calm", "happy"])
    assert summary.label == "happy"
    assert summary.count == 2
    assert summary.total == 3
    assert summary.text == "Primarily happy (2 observations)"


def test_majority_tie_goes_to_first_seen():
    assert summarize_mood(["happy", "calm"]).label == "happy"
    assert summarize_mood(["calm", "happy"]).label == "calm"


def test_mood_single_observation_not_pluralised():
    assert summarize_mood(["Calm"]).text == "Primarily calm (1 observation)"


def test_mood_empty():
    summary = summarize_mood([])
    assert summary.text == "Mood patterns are being observed"
    assert summary.label is None


def test_cooperation_labels():
    assert summarize_cooperation(["excellent", "good", "excellent"]).text == "Excellent (2 observations)"
    assert summarize_cooperation(["good"]).text == "Good (1 observation)"
    developing = summarize_cooperation(["needs_reminders", "needs_reminders", "good"])
    assert developing.label == "needs reminders"
    assert developing.text == "Developing (2 observations)"
    assert summarize_cooperation([]).text == "Cooperation is developing well"


def test_health_summary():
    assert summarize_health(["Healthy", "healthy"]).text == "Good health maintained throughout the week"
    assert summarize_health(["Healthy"], "day").text == "Good health maintained throughout the day"
    assert (
        summarize_health(["Healthy", "Healthy", "Mild sniffles"]).text
        == "Generally healthy with normal variations"
    )
    assert (
        summarize_health(["Mild sniffles", "Cough", "Mild sniffles", "Healthy"]).text
        == "Health status monitored and supported (mostly mild sniffles)"
    )
    assert summarize_health([]).text == "Health monitoring ongoing"


def test_energy_eating_sleep_phrases():
    assert summarize_energy(["normal", "high", "normal"]).text == "Steady, normal energy levels"
    assert summarize_energy(["high"]).text == "High energy levels observed"
    assert summarize_energy(["low", "low", "high"]).text.startswith("Varied energy levels")
    assert summarize_energy([]).text == "Energy levels are being observed"

    assert summarize_eating(["fair", "good"]).text == "Generally good eating with some variations"
    assert summarize_eating(["good", "good", "poor"]).text == "Good eating habits maintained"
    assert summarize_eating([]).text == "Eating habits are being observed"

    assert summarize_sleep_quality(["restful"] * 5).text == "Mostly restful sleep"
    assert summarize_sleep_quality(["troubled", "light", "troubled"]).text == (
        "Sleep patterns are being supported and improved"
    )
    assert summarize_sleep_quality([]).text == "Sleep quality is being monitored"


# ─── Behavior ─────────────────────────────────────────────────────────────────

def test_behavior_positive_when_both_majorities_match():
    assert behavior_summary(["Happy", "cheerful", "tired"], ["excellent", "good"]) == (
        "demonstrated positive behavior and excellent social skills"
    )


def test_behavior_softer_when_any_positive():
    assert behavior_summary(["sad", "happy", "tired"], []) == (
        "showed positive interactions and continued to develop social skills"
    )
    assert behavior_summary([], ["good"]) == (
        "showed positive interactions and continued to develop social skills"
    )


def test_behavior_growth_fallback():
    assert behavior_summary(["sad"], ["needs_reminders"]) == "is learning and growing in social situations"
    assert behavior_summary([], []) == "is learning and growing in social situations"


# ─── Naps ─────────────────────────────────────────────────────────────────────

def test_nap_average_formatting():
    stats = nap_stats([30, 90])
    assert stats.average_minutes == 60
    assert stats.formatted() == "1 hours 0 minutes"
    assert nap_stats([75] * 5).formatted() == "1 hours 15 minutes"


def test_nap_average_rounds_half_up():
    assert nap_stats([45, 46]).average_minutes == 46
    assert nap_stats([40, 41, 41]).average_minutes == 41


def test_nap_without_data():
    stats = nap_stats([])
    assert stats.average_minutes == 0
    assert stats.count == 0
