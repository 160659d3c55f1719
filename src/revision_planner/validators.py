"""Validation of planner-file records."""

from typing import Any

from .models import Confidence, Day, SlotKind
from .timeutils import parse_date, time_to_minutes

VALID_CONFIDENCE = [c.value for c in Confidence]
VALID_SLOT_TYPES = [k.value for k in SlotKind]


def validate_confidence(confidence: Any) -> tuple[bool, str | None]:
    """Validate a confidence (RAG) rating.

    Args:
        confidence: Rating value (should be 'red', 'amber' or 'green')

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not confidence:
        return False, "Confidence is empty"

    value = str(confidence).strip().lower()
    if value not in VALID_CONFIDENCE:
        return False, f"Invalid confidence: '{confidence}'. Expected: {', '.join(VALID_CONFIDENCE)}"

    return True, None


def validate_time(value: Any, field_name: str = "time") -> tuple[bool, str | None]:
    """Validate an "HH:MM" clock time."""
    if time_to_minutes(value) is None:
        return False, f"Invalid {field_name}: '{value}'"
    return True, None


def validate_entry(record: Any) -> tuple[bool, str | None]:
    """Validate a revision entry record.

    Missing exam details are fine; a present but malformed exam date is
    reported so the user can fix it. Malformed exam times are tolerated
    (the exam just won't block any time).

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not isinstance(record, dict):
        return False, "Entry is not an object"

    label = record.get("label")
    subject = record.get("subject")
    if label is not None and not isinstance(label, str):
        return False, f"Label must be text: {label!r}"
    if subject is not None and not isinstance(subject, str):
        return False, f"Subject must be text: {subject!r}"
    if not (label or "").strip() and not (subject or "").strip():
        return False, "Entry has no subject or label"

    is_valid, error = validate_confidence(record.get("confidence"))
    if not is_valid:
        return False, error

    exam = record.get("exam")
    if exam is not None and not isinstance(exam, dict):
        return False, "Exam details must be an object"

    exam_date = (exam or {}).get("date", record.get("exam_date"))
    if exam_date and parse_date(exam_date) is None:
        return False, f"Invalid exam date: '{exam_date}'"

    return True, None


def validate_weekly_slot(record: Any) -> tuple[bool, str | None]:
    """Validate a weekly slot record.

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not isinstance(record, dict):
        return False, "Weekly slot is not an object"

    day = record.get("day", record.get("day_of_week"))
    if Day.from_value(day) is None:
        return False, f"Invalid day: '{day}'"

    slot_type = record.get("type") or record.get("kind") or SlotKind.REVISION.value
    if slot_type not in VALID_SLOT_TYPES:
        return False, f"Invalid slot type: '{slot_type}'. Expected: {', '.join(VALID_SLOT_TYPES)}"

    for field_name in ("start", "end"):
        is_valid, error = validate_time(record.get(field_name), field_name)
        if not is_valid:
            return False, error

    if time_to_minutes(record["end"]) <= time_to_minutes(record["start"]):
        return False, f"Slot ends before it starts: {record['start']}-{record['end']}"

    return True, None
