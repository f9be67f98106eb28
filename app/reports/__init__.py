"""Observation-to-report synthesis: aggregate, score, narrate, assemble."""

from .aggregator import PeriodAggregate, aggregate
from .generator import generate_report, report_title, report_type

__all__ = ["PeriodAggregate", "aggregate", "generate_report", "report_title", "report_type"]
