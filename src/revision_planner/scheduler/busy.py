"""Per-date index of immovable busy intervals (exams and fixed breaks)."""

from collections import defaultdict
from datetime import date

from ..models import BusyInterval, DateRange, IntervalOrigin, RevisionEntry
from ..timeutils import overlaps, time_to_minutes


class BusyIntervalIndex:
    """Sorted busy intervals for every date in the planning range.

    The index is built once per scheduling run and only read afterwards.
    Intervals are half-open, so a block may start exactly when an exam ends.
    """

    def __init__(self, intervals: list[BusyInterval] | None = None) -> None:
        # date -> intervals sorted by start minute
        self._by_date: dict[date, list[BusyInterval]] = defaultdict(list)
        for interval in intervals or []:
            self._by_date[interval.date].append(interval)
        for day_intervals in self._by_date.values():
            day_intervals.sort(key=lambda i: i.start_minute)

    @classmethod
    def build(
        cls,
        entries: list[RevisionEntry],
        fixed_breaks: list[BusyInterval],
        date_range: DateRange,
    ) -> "BusyIntervalIndex":
        """Collect exam windows and fixed breaks falling inside the date range.

        Exams with missing, unparseable or inverted times are skipped.

        Args:
            entries: Revision entries, some with exam details
            fixed_breaks: Fixed-break intervals from the slot expander
            date_range: Inclusive planning horizon

        Returns:
            A populated BusyIntervalIndex
        """
        intervals: list[BusyInterval] = []
        if date_range.is_valid:
            for entry in entries:
                interval = exam_interval(entry)
                if interval and date_range.start <= interval.date <= date_range.end:
                    intervals.append(interval)

        intervals.extend(fixed_breaks)
        return cls(intervals)

    def intervals_on(self, day: date) -> list[BusyInterval]:
        """Get the sorted busy intervals for a date."""
        return list(self._by_date.get(day, []))

    def conflicts(self, day: date, start_minute: int, end_minute: int) -> list[BusyInterval]:
        """Get every busy interval on a date that overlaps [start_minute, end_minute)."""
        return [
            interval
            for interval in self._by_date.get(day, [])
            if overlaps(start_minute, end_minute, interval.start_minute, interval.end_minute)
        ]

    def conflict_end(self, day: date, start_minute: int, end_minute: int) -> int | None:
        """Latest end minute among intervals overlapping the window, or None if it is free."""
        conflicting = self.conflicts(day, start_minute, end_minute)
        if not conflicting:
            return None
        return max(interval.end_minute for interval in conflicting)

    def is_free(self, day: date, start_minute: int, end_minute: int) -> bool:
        return not self.conflicts(day, start_minute, end_minute)

    def dates(self) -> list[date]:
        return sorted(day for day, intervals in self._by_date.items() if intervals)

    def __len__(self) -> int:
        return sum(len(intervals) for intervals in self._by_date.values())


def exam_interval(entry: RevisionEntry) -> BusyInterval | None:
    """Build the busy interval for an entry's exam sitting, if it is fully specified."""
    if entry.exam_date is None:
        return None

    start_minute = time_to_minutes(entry.exam_start)
    end_minute = time_to_minutes(entry.exam_end)
    if start_minute is None or end_minute is None or end_minute <= start_minute:
        return None

    return BusyInterval(
        date=entry.exam_date,
        start_minute=start_minute,
        end_minute=end_minute,
        origin=IntervalOrigin.EXAM,
    )
