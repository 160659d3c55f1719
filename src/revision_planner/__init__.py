"""Revision Planner - personal study schedule generator.

This package turns a list of things to revise (each with a confidence rating
and an optional exam sitting), a weekly pattern of free time and a planning
horizon into a day-by-day schedule of 40-minute study blocks and 10-minute
breaks. Exams and fixed breaks are never overlapped, weaker and soon-examined
material gets more time, and a topic stops being scheduled once its exam
has taken place.

Example usage:
    from revision_planner import load_planner, schedule

    planner = load_planner("planner.json")
    result = schedule(planner.entries, planner.weekly_slots, planner.date_range)

    for day, items in result.items_by_date().items():
        for item in items:
            print(f"{day} {item.start_time}-{item.end_time} {item.label}")

    # Export to JSON
    from revision_planner.exporters import JSONExporter
    exporter = JSONExporter()
    exporter.export(result, "schedule.json")
"""

from .exceptions import InvalidPlannerError, PlannerError, PlannerFileError
from .exporters import CSVExporter, ExcelExporter, JSONExporter, get_exporter
from .loader import PlannerData, load_planner, parse_planner
from .models import (
    BusyInterval,
    Confidence,
    DatedRevisionSlot,
    DateRange,
    Day,
    IntervalOrigin,
    ItemKind,
    RevisionEntry,
    ScheduleItem,
    ScheduleResult,
    ScheduleStatistics,
    SlotKind,
    WeeklySlot,
)
from .scheduler import RevisionScheduler, SchedulerSettings, create_scheduler, schedule

__version__ = "0.1.0"

__all__ = [
    # Scheduling
    "schedule",
    "RevisionScheduler",
    "SchedulerSettings",
    "create_scheduler",
    # Models
    "BusyInterval",
    "Confidence",
    "DatedRevisionSlot",
    "DateRange",
    "Day",
    "IntervalOrigin",
    "ItemKind",
    "RevisionEntry",
    "ScheduleItem",
    "ScheduleResult",
    "ScheduleStatistics",
    "SlotKind",
    "WeeklySlot",
    # Loading
    "PlannerData",
    "load_planner",
    "parse_planner",
    # Exporters
    "JSONExporter",
    "CSVExporter",
    "ExcelExporter",
    "get_exporter",
    # Exceptions
    "PlannerError",
    "PlannerFileError",
    "InvalidPlannerError",
]
