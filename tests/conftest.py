"""Test fixtures for revision planner tests."""

import json
from datetime import date

import pytest

from revision_planner.models import (
    Confidence,
    DateRange,
    RevisionEntry,
    SlotKind,
    WeeklySlot,
)

# 2025-04-14 is a Monday
MONDAY = date(2025, 4, 14)


@pytest.fixture
def monday():
    """A Monday used as the reference scheduling date."""
    return MONDAY


@pytest.fixture
def monday_range():
    """Date range covering exactly one Monday."""
    return DateRange(MONDAY, MONDAY)


@pytest.fixture
def red_entry():
    """A weak entry with no exam date."""
    return RevisionEntry(id="maths-1", subject_label="Mathematics - Paper 1", confidence=Confidence.RED)


@pytest.fixture
def monday_afternoon_slot():
    """Monday revision slot 16:00-17:40 (room for two study/break pairs)."""
    return WeeklySlot(day_of_week=0, start="16:00", end="17:40", kind=SlotKind.REVISION)


@pytest.fixture
def sample_planner_data():
    """A planner document as stored in a planner file."""
    return {
        "start_date": "2025-04-14",
        "end_date": "2025-04-20",
        "entries": [
            {
                "id": "phys-2",
                "subject": "Physics",
                "paper": "Paper 2",
                "confidence": "red",
                "exam": {
                    "date": "2025-04-17",
                    "start": "9:00",
                    "end": "10:15",
                    "location": "Auditorium",
                },
            },
            {
                "id": "chem-1",
                "subject": "Chemistry",
                "confidence": "amber",
            },
            {
                "label": "Geography - Paper 1",
                "confidence": "green",
                "exam": {"date": "2025-05-06", "start": "13:00", "end": "14:45"},
            },
        ],
        "weekly_slots": [
            {"day": "monday", "start": "16:00", "end": "17:40", "type": "revision"},
            {"day": "Thursday", "start": "09:00", "end": "12:00"},
            {"day": 5, "start": "10:00", "end": "13:00", "type": "revision"},
            {"day": 5, "start": "11:00", "end": "11:30", "type": "fixed_break"},
        ],
    }


@pytest.fixture
def planner_file(tmp_path, sample_planner_data):
    """Write the sample planner document to a temporary JSON file."""
    file_path = tmp_path / "planner.json"
    with open(file_path, "w", encoding="utf-8") as f:
        json.dump(sample_planner_data, f)
    return file_path
