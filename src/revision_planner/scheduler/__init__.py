"""Revision slot-filling scheduler.

This package expands a weekly availability pattern over a date range, indexes
exams and fixed breaks as busy intervals, and greedily packs fixed-length
study and break blocks into the remaining revision time.

Main classes:
- RevisionScheduler: Runs the full pipeline and returns a ScheduleResult
- SchedulerSettings: Block lengths, lead-in window and confidence weights
- BusyIntervalIndex: Per-date exam and fixed-break intervals

Usage:
    from revision_planner.scheduler import schedule

    result = schedule(entries, weekly_slots, date_range)
    for item in result.items:
        print(item.date, item.start_time, item.label)
"""

from .algorithm import RevisionScheduler, create_scheduler, schedule
from .busy import BusyIntervalIndex, exam_interval
from .config import SchedulerSettings
from .constants import (
    BREAK_BLOCK_MINUTES,
    CONFIDENCE_WEIGHTS,
    LEAD_IN_DAYS,
    STUDY_BLOCK_MINUTES,
    ScheduleWarning,
)
from .expander import SlotExpansion, expand_weekly_slots
from .filler import FillerState, fill_slot, run_filler, select_entry

__all__ = [
    # Main scheduler
    "RevisionScheduler",
    "create_scheduler",
    "schedule",
    # Configuration
    "SchedulerSettings",
    # Pipeline steps
    "BusyIntervalIndex",
    "FillerState",
    "SlotExpansion",
    "exam_interval",
    "expand_weekly_slots",
    "fill_slot",
    "run_filler",
    "select_entry",
    # Constants
    "BREAK_BLOCK_MINUTES",
    "CONFIDENCE_WEIGHTS",
    "LEAD_IN_DAYS",
    "STUDY_BLOCK_MINUTES",
    "ScheduleWarning",
]
