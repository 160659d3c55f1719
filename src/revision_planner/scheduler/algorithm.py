"""Revision schedule assembly."""

import logging

from ..models import (
    DateRange,
    ItemKind,
    RevisionEntry,
    ScheduleItem,
    ScheduleResult,
    ScheduleStatistics,
    WeeklySlot,
)
from .busy import BusyIntervalIndex
from .config import SchedulerSettings
from .constants import ScheduleWarning
from .expander import expand_weekly_slots
from .filler import run_filler

logger = logging.getLogger(__name__)


class RevisionScheduler:
    """Builds a day-by-day revision schedule.

    Steps:
    1. Validate inputs (entries, weekly slots, date range)
    2. Expand weekly slots into dated revision slots and fixed breaks
    3. Index exams and fixed breaks per date
    4. Greedily fill revision slots with study/break blocks
    5. Merge with fixed breaks, derive warnings and statistics

    The scheduler keeps no state between calls; identical inputs always give
    an identical result.
    """

    def __init__(self, settings: SchedulerSettings | None = None) -> None:
        self.settings = settings or SchedulerSettings()

    def schedule(
        self,
        entries: list[RevisionEntry],
        weekly_slots: list[WeeklySlot],
        date_range: DateRange,
    ) -> ScheduleResult:
        """Generate a revision schedule.

        Args:
            entries: Things to revise
            weekly_slots: Weekly availability and fixed breaks
            date_range: Inclusive planning horizon

        Returns:
            ScheduleResult with items sorted by (date, start) and any warnings
        """
        if not entries:
            logger.warning("No revision entries supplied")
            return self._empty(ScheduleWarning.NO_ENTRIES)
        if not weekly_slots:
            logger.warning("No weekly slots supplied")
            return self._empty(ScheduleWarning.NO_AVAILABILITY)
        if date_range is None or not date_range.is_valid:
            logger.warning(f"Invalid date range: {date_range}")
            return self._empty(ScheduleWarning.INVALID_DATE_RANGE)

        expansion = expand_weekly_slots(weekly_slots, date_range)
        busy = BusyIntervalIndex.build(entries, expansion.fixed_breaks, date_range)
        logger.info(
            f"Scheduling {len(entries)} entries over {date_range.total_days} days: "
            f"{len(expansion.revision_slots)} revision slots, {len(busy)} busy intervals"
        )

        _, generated = run_filler(
            expansion.revision_slots, list(entries), busy, self.settings
        )

        items = self._assemble(generated, expansion.fixed_break_items)
        warnings = self._warnings(items, bool(expansion.revision_slots))
        statistics = ScheduleStatistics.from_items(items)
        logger.info(
            f"Scheduled {statistics.study_blocks} study blocks "
            f"({statistics.total_study_minutes} minutes)"
        )

        return ScheduleResult(items=items, warnings=warnings, statistics=statistics)

    def _assemble(
        self, generated: list[ScheduleItem], fixed_break_items: list[ScheduleItem]
    ) -> list[ScheduleItem]:
        """Merge generated blocks with fixed breaks in chronological order."""
        items = list(generated) + list(fixed_break_items)
        items.sort(key=lambda item: (item.date, item.start_minute))
        return items

    def _warnings(self, items: list[ScheduleItem], has_revision_slots: bool) -> list[str]:
        """Derive unschedulability warnings."""
        study_count = sum(1 for item in items if item.kind == ItemKind.STUDY)
        if has_revision_slots and study_count == 0:
            return [ScheduleWarning.NO_REVISION_BLOCKS.value]
        if not items:
            return [ScheduleWarning.NOTHING_SCHEDULED.value]
        return []

    def _empty(self, warning: ScheduleWarning) -> ScheduleResult:
        return ScheduleResult(items=[], warnings=[warning.value])


def create_scheduler(**overrides) -> RevisionScheduler:
    """Factory function to create a scheduler.

    Args:
        **overrides: SchedulerSettings fields to override (e.g. lead_in_days=7)

    Returns:
        Configured RevisionScheduler instance
    """
    return RevisionScheduler(SchedulerSettings.from_dict(overrides))


def schedule(
    entries: list[RevisionEntry],
    weekly_slots: list[WeeklySlot],
    date_range: DateRange,
    settings: SchedulerSettings | None = None,
) -> ScheduleResult:
    """Generate a revision schedule with default or given settings."""
    return RevisionScheduler(settings).schedule(entries, weekly_slots, date_range)
