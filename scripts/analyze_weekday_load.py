#!/usr/bin/env python3
"""Analyze how revision time is spread across weekdays and entries."""

from __future__ import annotations

import argparse
import json
from collections import defaultdict
from pathlib import Path

from revision_planner.loader import load_planner
from revision_planner.models import Day

WEEKDAYS = [day.name.lower() for day in Day]


def _load_json(path: Path) -> dict:
    with path.open(encoding="utf-8") as handle:
        return json.load(handle)


def _collect_study_minutes(schedule: dict) -> dict[str, dict[str, int]]:
    entry_day_minutes: dict[str, dict[str, int]] = defaultdict(lambda: defaultdict(int))
    for item in schedule.get("items", []):
        if item.get("kind") != "study" or not item.get("entry_id"):
            continue
        entry_day_minutes[item["entry_id"]][item.get("day", "")] += int(
            item.get("duration_minutes", 0) or 0
        )
    return entry_day_minutes


def _format_day_minutes(day_minutes: dict[str, int]) -> str:
    return " ".join(f"{day[:3]}={day_minutes.get(day, 0)}" for day in WEEKDAYS)


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Analyze weekday distribution of planned study time."
    )
    parser.add_argument(
        "--schedule",
        type=Path,
        required=True,
        help="Schedule JSON file (e.g., output/schedule.json)",
    )
    parser.add_argument(
        "--planner",
        type=Path,
        required=True,
        help="Planner JSON file the schedule was generated from",
    )
    args = parser.parse_args()

    schedule = _load_json(args.schedule)
    planner = load_planner(args.planner)

    entry_day_minutes = _collect_study_minutes(schedule)
    print(f"Entries in planner: {len(planner.entries)}")

    unscheduled = []
    for entry in planner.entries:
        day_minutes = entry_day_minutes.get(entry.id, {})
        total = sum(day_minutes.values())
        if total == 0:
            unscheduled.append(entry)
        exam = entry.exam_date.isoformat() if entry.exam_date else "-"
        print(
            f"{entry.subject_label} [{entry.confidence.value}] exam={exam}: "
            f"{_format_day_minutes(day_minutes)} | total={total}"
        )

    if unscheduled:
        print("\nEntries with no planned study time:")
        for entry in unscheduled:
            print(f"- {entry.subject_label}")


if __name__ == "__main__":
    main()
