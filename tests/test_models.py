"""Tests for data models."""

from datetime import date

import pytest

from revision_planner.models import (
    Confidence,
    DateRange,
    Day,
    ItemKind,
    RevisionEntry,
    ScheduleItem,
    ScheduleResult,
    ScheduleStatistics,
    SlotKind,
    WeeklySlot,
)


class TestDay:
    """Tests for Day.from_value."""

    def test_from_index(self):
        assert Day.from_value(0) == Day.MONDAY
        assert Day.from_value(6) == Day.SUNDAY

    def test_from_name_any_case(self):
        assert Day.from_value("monday") == Day.MONDAY
        assert Day.from_value(" Thursday ") == Day.THURSDAY

    def test_from_numeric_string(self):
        assert Day.from_value("5") == Day.SATURDAY

    @pytest.mark.parametrize("value", [7, -1, "Funday", None, True, 1.5])
    def test_unknown(self, value):
        assert Day.from_value(value) is None


class TestRevisionEntry:
    """Tests for RevisionEntry model."""

    def test_from_dict_builds_label_from_subject_and_paper(self):
        entry = RevisionEntry.from_dict(
            {"id": "p2", "subject": "Physics", "paper": "Paper 2", "confidence": "RED"}
        )
        assert entry.subject_label == "Physics - Paper 2"
        assert entry.confidence == Confidence.RED
        assert entry.exam_date is None

    def test_from_dict_prefers_label(self):
        entry = RevisionEntry.from_dict(
            {"label": "ICT practical", "subject": "ICT", "confidence": "green"}
        )
        assert entry.subject_label == "ICT practical"

    def test_from_dict_nested_exam(self):
        entry = RevisionEntry.from_dict(
            {
                "subject": "Chemistry",
                "confidence": "amber",
                "exam": {"date": "2025-04-30", "start": "9:00", "end": "10:15", "location": "Hall"},
            },
            default_id="3",
        )
        assert entry.id == "3"
        assert entry.exam_date == date(2025, 4, 30)
        assert entry.exam_start == "9:00"
        assert entry.exam_end == "10:15"
        assert entry.exam_location == "Hall"

    def test_from_dict_flat_exam_keys(self):
        entry = RevisionEntry.from_dict(
            {"subject": "Art", "confidence": "red", "exam_date": "2025-04-22"}
        )
        assert entry.exam_date == date(2025, 4, 22)

    def test_from_dict_bad_exam_date_becomes_none(self):
        entry = RevisionEntry.from_dict(
            {"subject": "Art", "confidence": "red", "exam": {"date": "soon"}}
        )
        assert entry.exam_date is None

    def test_to_dict(self):
        entry = RevisionEntry(
            id="a", subject_label="Art", confidence=Confidence.GREEN, exam_date=date(2025, 4, 22)
        )
        data = entry.to_dict()
        assert data["confidence"] == "green"
        assert data["exam"]["date"] == "2025-04-22"

    def test_entries_are_immutable(self, red_entry):
        with pytest.raises(AttributeError):
            red_entry.confidence = Confidence.GREEN


class TestWeeklySlot:
    """Tests for WeeklySlot model."""

    def test_from_dict_defaults_to_revision(self):
        slot = WeeklySlot.from_dict({"day": "tuesday", "start": "16:00", "end": "18:00"})
        assert slot.day_of_week == 1
        assert slot.kind == SlotKind.REVISION

    def test_from_dict_fixed_break(self):
        slot = WeeklySlot.from_dict(
            {"day": 5, "start": "12:00", "end": "12:30", "type": "fixed_break"}
        )
        assert slot.kind == SlotKind.FIXED_BREAK

    def test_from_dict_unknown_day(self):
        with pytest.raises(ValueError):
            WeeklySlot.from_dict({"day": "Funday", "start": "16:00", "end": "18:00"})

    def test_to_dict(self):
        slot = WeeklySlot(day_of_week=6, start="10:00", end="11:00")
        assert slot.to_dict() == {
            "day": "sunday",
            "start": "10:00",
            "end": "11:00",
            "type": "revision",
        }


class TestDateRange:
    """Tests for DateRange model."""

    def test_dates_inclusive(self):
        date_range = DateRange(date(2025, 4, 14), date(2025, 4, 16))
        assert list(date_range.dates()) == [
            date(2025, 4, 14),
            date(2025, 4, 15),
            date(2025, 4, 16),
        ]
        assert date_range.total_days == 3

    def test_single_day(self, monday_range):
        assert monday_range.is_valid
        assert monday_range.total_days == 1

    def test_inverted_is_invalid(self):
        date_range = DateRange(date(2025, 4, 16), date(2025, 4, 14))
        assert not date_range.is_valid
        assert list(date_range.dates()) == []

    def test_missing_bound_is_invalid(self):
        assert not DateRange(None, date(2025, 4, 14)).is_valid

    def test_from_strings(self):
        date_range = DateRange.from_strings("2025-04-14", "not a date")
        assert date_range.start == date(2025, 4, 14)
        assert date_range.end is None


class TestScheduleItem:
    """Tests for ScheduleItem model."""

    def test_study_item(self, monday, red_entry):
        item = ScheduleItem(
            date=monday,
            start_minute=960,
            end_minute=1000,
            kind=ItemKind.STUDY,
            entry=red_entry,
            confidence=red_entry.confidence,
        )
        assert item.duration_minutes == 40
        assert item.start_time == "16:00"
        assert item.end_time == "16:40"
        assert item.label == "Revise: Mathematics - Paper 1"

    def test_break_labels(self, monday):
        short = ScheduleItem(date=monday, start_minute=1000, end_minute=1010, kind=ItemKind.BREAK)
        fixed = ScheduleItem(
            date=monday, start_minute=720, end_minute=780, kind=ItemKind.BREAK, fixed=True
        )
        assert short.label == "Break"
        assert fixed.label == "Fixed Break"

    def test_to_dict(self, monday, red_entry):
        item = ScheduleItem(
            date=monday,
            start_minute=960,
            end_minute=1000,
            kind=ItemKind.STUDY,
            entry=red_entry,
            confidence=Confidence.RED,
        )
        data = item.to_dict()
        assert data["date"] == "2025-04-14"
        assert data["day"] == "monday"
        assert data["kind"] == "study"
        assert data["entry_id"] == "maths-1"
        assert data["confidence"] == "red"
        assert data["duration_minutes"] == 40


class TestScheduleResult:
    """Tests for ScheduleResult and ScheduleStatistics."""

    def _items(self, red_entry):
        tuesday = date(2025, 4, 15)
        monday = date(2025, 4, 14)
        return [
            ScheduleItem(tuesday, 960, 1000, ItemKind.STUDY, red_entry, Confidence.RED),
            ScheduleItem(monday, 1000, 1010, ItemKind.BREAK),
            ScheduleItem(monday, 960, 1000, ItemKind.STUDY, red_entry, Confidence.RED),
            ScheduleItem(monday, 720, 780, ItemKind.BREAK, fixed=True),
        ]

    def test_statistics_from_items(self, red_entry):
        stats = ScheduleStatistics.from_items(self._items(red_entry))
        assert stats.study_blocks == 2
        assert stats.break_blocks == 1
        assert stats.fixed_breaks == 1
        assert stats.total_study_minutes == 80
        assert stats.study_minutes_by_date == {"2025-04-15": 40, "2025-04-14": 40}
        assert stats.study_minutes_by_entry == {"maths-1": 80}

    def test_items_by_date_sorted(self, red_entry):
        result = ScheduleResult(items=self._items(red_entry))
        grouped = result.items_by_date()
        assert list(grouped) == [date(2025, 4, 14), date(2025, 4, 15)]
        assert [i.start_minute for i in grouped[date(2025, 4, 14)]] == [720, 960, 1000]

    def test_study_items(self, red_entry):
        result = ScheduleResult(items=self._items(red_entry))
        assert len(result.study_items) == 2

    def test_to_dict(self):
        result = ScheduleResult(warnings=["no entries"])
        data = result.to_dict()
        assert data["items"] == []
        assert data["warnings"] == ["no entries"]
        assert data["statistics"]["study_blocks"] == 0
