"""Planner file loader.

A planner file is a JSON document holding the revision entries, the weekly
availability pattern and the planning horizon:

    {
        "start_date": "2025-04-01",
        "end_date": "2025-05-31",
        "entries": [{"subject": "Physics", "paper": "2", "confidence": "red",
                     "exam": {"date": "2025-05-09", "start": "9:00", "end": "10:15"}}],
        "weekly_slots": [{"day": "monday", "start": "16:00", "end": "17:40"}]
    }

Bad records are skipped with a warning; only a missing or structurally
broken file raises.
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .exceptions import InvalidPlannerError, PlannerFileError
from .models import DateRange, RevisionEntry, WeeklySlot
from .validators import validate_entry, validate_weekly_slot

logger = logging.getLogger(__name__)


@dataclass
class PlannerData:
    """Scheduler inputs read from a planner file."""

    entries: list[RevisionEntry] = field(default_factory=list)
    weekly_slots: list[WeeklySlot] = field(default_factory=list)
    date_range: DateRange = field(default_factory=lambda: DateRange(None, None))
    warnings: list[str] = field(default_factory=list)
    source: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Convert back to planner-file form."""
        return {
            "start_date": self.date_range.start.isoformat() if self.date_range.start else None,
            "end_date": self.date_range.end.isoformat() if self.date_range.end else None,
            "entries": [entry.to_dict() for entry in self.entries],
            "weekly_slots": [slot.to_dict() for slot in self.weekly_slots],
        }


def load_planner(path: Path | str) -> PlannerData:
    """Load a planner JSON file.

    Args:
        path: Path to the planner file

    Returns:
        PlannerData with parsed records and loader warnings

    Raises:
        PlannerFileError: If the file cannot be read or is not valid JSON
        InvalidPlannerError: If the document structure is wrong
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise PlannerFileError(str(path), "file not found") from e
    except json.JSONDecodeError as e:
        raise PlannerFileError(str(path), f"invalid JSON ({e.msg} at line {e.lineno})") from e
    except UnicodeDecodeError as e:
        raise PlannerFileError(str(path), "file is not valid UTF-8") from e
    except OSError as e:
        raise PlannerFileError(str(path), str(e)) from e

    return parse_planner(data, source=str(path))


def parse_planner(data: Any, source: str = "") -> PlannerData:
    """Build PlannerData from an already-decoded planner document.

    Raises:
        InvalidPlannerError: If the document or its lists have the wrong type
    """
    if not isinstance(data, dict):
        raise InvalidPlannerError("top-level value must be an object", source or None)

    raw_entries = data.get("entries") or []
    raw_slots = data.get("weekly_slots") or []
    if not isinstance(raw_entries, list):
        raise InvalidPlannerError("'entries' must be a list", source or None)
    if not isinstance(raw_slots, list):
        raise InvalidPlannerError("'weekly_slots' must be a list", source or None)

    result = PlannerData(source=source)

    # Positional ids must not shadow an id given explicitly anywhere in the file
    explicit_ids = {
        str(record["id"]) for record in raw_entries if isinstance(record, dict) and record.get("id")
    }
    seen_ids: set[str] = set()
    for index, record in enumerate(raw_entries, start=1):
        is_valid, error = validate_entry(record)
        if not is_valid:
            _warn(result, f"Entry {index} skipped: {error}")
            continue

        default_id = _free_id(str(index), explicit_ids | seen_ids)
        entry = RevisionEntry.from_dict(record, default_id=default_id)
        if entry.id in seen_ids:
            _warn(result, f"Entry {index} skipped: duplicate id '{entry.id}'")
            continue
        seen_ids.add(entry.id)
        result.entries.append(entry)

    for index, record in enumerate(raw_slots, start=1):
        is_valid, error = validate_weekly_slot(record)
        if not is_valid:
            _warn(result, f"Weekly slot {index} skipped: {error}")
            continue
        result.weekly_slots.append(WeeklySlot.from_dict(record))

    result.date_range = DateRange.from_strings(data.get("start_date"), data.get("end_date"))
    if not result.date_range.is_valid:
        _warn(
            result,
            f"Invalid date range: {data.get('start_date')!r} to {data.get('end_date')!r}",
        )

    logger.info(
        f"Loaded {len(result.entries)} entries and {len(result.weekly_slots)} weekly slots"
        + (f" from {source}" if source else "")
    )
    return result


def _warn(result: PlannerData, message: str) -> None:
    logger.warning(message)
    result.warnings.append(message)


def _free_id(base: str, taken: set[str]) -> str:
    candidate = base
    suffix = 2
    while candidate in taken:
        candidate = f"{base}-{suffix}"
        suffix += 1
    return candidate
