"""Data models for the revision planner."""

from collections import defaultdict
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Any, Iterator

from .timeutils import add_days, minutes_to_time, parse_date


class Day(Enum):
    """Days of the week, numbered like ``date.weekday()``."""

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6

    @classmethod
    def from_value(cls, value: Any) -> "Day | None":
        """Resolve a weekday from an index (0-6) or a name such as "Monday".

        Returns:
            The matching Day, or None if the value is not recognised
        """
        if isinstance(value, bool):
            return None
        if isinstance(value, int):
            try:
                return cls(value)
            except ValueError:
                return None
        if isinstance(value, str):
            name = value.strip().upper()
            if name.isdigit():
                return cls.from_value(int(name))
            return cls.__members__.get(name)
        return None


class Confidence(str, Enum):
    """Self-assessed mastery (RAG rating). Red is the weakest."""

    RED = "red"
    AMBER = "amber"
    GREEN = "green"


class SlotKind(str, Enum):
    """Kind of weekly availability window."""

    REVISION = "revision"
    FIXED_BREAK = "fixed_break"


class IntervalOrigin(str, Enum):
    """Source of an immovable busy interval."""

    EXAM = "exam"
    FIXED_BREAK = "fixed_break"


class ItemKind(str, Enum):
    """Kind of schedule item."""

    STUDY = "study"
    BREAK = "break"


@dataclass(frozen=True)
class RevisionEntry:
    """One subject/paper/topic to revise."""

    id: str
    subject_label: str
    confidence: Confidence
    exam_date: date | None = None
    exam_start: str | None = None
    exam_end: str | None = None
    exam_location: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any], default_id: str = "") -> "RevisionEntry":
        """Create an entry from a planner-file record.

        The label is taken from ``label`` or built from ``subject`` and
        ``paper``. Exam details may be nested under ``exam`` or given as flat
        ``exam_*`` keys. An unparseable exam date becomes None.
        """
        label = (data.get("label") or "").strip()
        if not label:
            subject = (data.get("subject") or "").strip()
            paper = str(data.get("paper", "") or "").strip()
            label = f"{subject} - {paper}" if paper else subject

        exam = data.get("exam") or {}
        return cls(
            id=str(data.get("id") or default_id),
            subject_label=label,
            confidence=Confidence(str(data["confidence"]).strip().lower()),
            exam_date=parse_date(exam.get("date", data.get("exam_date"))),
            exam_start=exam.get("start", data.get("exam_start")),
            exam_end=exam.get("end", data.get("exam_end")),
            exam_location=exam.get("location", data.get("exam_location")),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert entry to dictionary."""
        return {
            "id": self.id,
            "label": self.subject_label,
            "confidence": self.confidence.value,
            "exam": {
                "date": self.exam_date.isoformat() if self.exam_date else None,
                "start": self.exam_start,
                "end": self.exam_end,
                "location": self.exam_location,
            },
        }


@dataclass(frozen=True)
class WeeklySlot:
    """A recurring weekly availability window."""

    day_of_week: int
    start: str
    end: str
    kind: SlotKind = SlotKind.REVISION

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "WeeklySlot":
        """Create a slot from a planner-file record (``day``, ``start``, ``end``, ``type``)."""
        day = Day.from_value(data.get("day", data.get("day_of_week")))
        if day is None:
            raise ValueError(f"Unknown day: {data.get('day')!r}")
        return cls(
            day_of_week=day.value,
            start=str(data.get("start", "")),
            end=str(data.get("end", "")),
            kind=SlotKind(data.get("type") or data.get("kind") or SlotKind.REVISION.value),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert slot to dictionary."""
        return {
            "day": Day(self.day_of_week).name.lower(),
            "start": self.start,
            "end": self.end,
            "type": self.kind.value,
        }


@dataclass(frozen=True)
class DateRange:
    """Inclusive planning horizon. Bounds may be missing."""

    start: date | None
    end: date | None

    @classmethod
    def from_strings(cls, start: Any, end: Any) -> "DateRange":
        """Build a range from ISO date strings; malformed bounds become None."""
        return cls(start=parse_date(start), end=parse_date(end))

    @property
    def is_valid(self) -> bool:
        return self.start is not None and self.end is not None and self.start <= self.end

    @property
    def total_days(self) -> int:
        if not self.is_valid:
            return 0
        return (self.end - self.start).days + 1

    def dates(self) -> Iterator[date]:
        """Yield every date in the range, inclusive. Empty for an invalid range."""
        for offset in range(self.total_days):
            yield add_days(self.start, offset)


@dataclass(frozen=True)
class BusyInterval:
    """An immovable [start_minute, end_minute) window on a date."""

    date: date
    start_minute: int
    end_minute: int
    origin: IntervalOrigin


@dataclass(frozen=True)
class DatedRevisionSlot:
    """One calendar occurrence of a revision-kind weekly slot."""

    date: date
    start: str
    end: str
    start_minute: int
    end_minute: int

    @property
    def duration_minutes(self) -> int:
        return self.end_minute - self.start_minute


@dataclass(frozen=True)
class ScheduleItem:
    """A study block, short break, or fixed break on a specific date."""

    date: date
    start_minute: int
    end_minute: int
    kind: ItemKind
    entry: RevisionEntry | None = None
    confidence: Confidence | None = None
    fixed: bool = False

    @property
    def duration_minutes(self) -> int:
        return self.end_minute - self.start_minute

    @property
    def start_time(self) -> str:
        return minutes_to_time(self.start_minute)

    @property
    def end_time(self) -> str:
        return minutes_to_time(self.end_minute)

    @property
    def label(self) -> str:
        """Human-readable task description."""
        if self.kind == ItemKind.STUDY and self.entry is not None:
            return f"Revise: {self.entry.subject_label}"
        return "Fixed Break" if self.fixed else "Break"

    def to_dict(self) -> dict[str, Any]:
        """Convert item to dictionary."""
        return {
            "date": self.date.isoformat(),
            "day": Day(self.date.weekday()).name.lower(),
            "start_time": self.start_time,
            "end_time": self.end_time,
            "kind": self.kind.value,
            "fixed": self.fixed,
            "task": self.label,
            "entry_id": self.entry.id if self.entry else None,
            "subject_label": self.entry.subject_label if self.entry else None,
            "confidence": self.confidence.value if self.confidence else None,
            "duration_minutes": self.duration_minutes,
        }


@dataclass
class ScheduleStatistics:
    """Aggregate figures about a generated schedule."""

    study_blocks: int = 0
    break_blocks: int = 0
    fixed_breaks: int = 0
    total_study_minutes: int = 0
    study_minutes_by_date: dict[str, int] = field(default_factory=dict)
    study_minutes_by_entry: dict[str, int] = field(default_factory=dict)

    @classmethod
    def from_items(cls, items: list[ScheduleItem]) -> "ScheduleStatistics":
        """Compute statistics from schedule items."""
        by_date: dict[str, int] = defaultdict(int)
        by_entry: dict[str, int] = defaultdict(int)
        stats = cls()

        for item in items:
            if item.kind == ItemKind.STUDY:
                stats.study_blocks += 1
                stats.total_study_minutes += item.duration_minutes
                by_date[item.date.isoformat()] += item.duration_minutes
                if item.entry is not None:
                    by_entry[item.entry.id] += item.duration_minutes
            elif item.fixed:
                stats.fixed_breaks += 1
            else:
                stats.break_blocks += 1

        stats.study_minutes_by_date = dict(by_date)
        stats.study_minutes_by_entry = dict(by_entry)
        return stats

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "study_blocks": self.study_blocks,
            "break_blocks": self.break_blocks,
            "fixed_breaks": self.fixed_breaks,
            "total_study_minutes": self.total_study_minutes,
            "study_minutes_by_date": self.study_minutes_by_date,
            "study_minutes_by_entry": self.study_minutes_by_entry,
        }


@dataclass
class ScheduleResult:
    """Result of a scheduling run."""

    items: list[ScheduleItem] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    statistics: ScheduleStatistics = field(default_factory=ScheduleStatistics)

    @property
    def study_items(self) -> list[ScheduleItem]:
        return [item for item in self.items if item.kind == ItemKind.STUDY]

    def items_by_date(self) -> dict[date, list[ScheduleItem]]:
        """Group items by date, each day sorted by start time."""
        grouped: dict[date, list[ScheduleItem]] = defaultdict(list)
        for item in self.items:
            grouped[item.date].append(item)
        return {
            day: sorted(grouped[day], key=lambda i: i.start_minute)
            for day in sorted(grouped)
        }

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "items": [item.to_dict() for item in self.items],
            "warnings": list(self.warnings),
            "statistics": self.statistics.to_dict(),
        }
