"""Greedy priority slot filler.

Walks dated revision slots in chronological order and packs alternating
study and break blocks into each one, routing around busy intervals.

The only state carried between slots is a ``FillerState``: the lead-in
round-robin index and how far the current date has already been consumed. Filling
one slot is a pure transition ``(state, slot) -> (state, items)``, so single
steps can be tested without replaying a whole run.
"""

import logging
from dataclasses import dataclass, field, replace
from datetime import date

from ..models import DatedRevisionSlot, ItemKind, RevisionEntry, ScheduleItem
from ..timeutils import day_difference
from .busy import BusyIntervalIndex
from .config import SchedulerSettings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FillerState:
    """State threaded through the fold over dated slots."""

    cycle: int = 0
    # date -> first minute not yet consumed; only the latest date is kept
    cursor_per_date: dict[date, int] = field(default_factory=dict)

    def cursor(self, day: date) -> int:
        return self.cursor_per_date.get(day, 0)


def exam_passed(entry: RevisionEntry, current_date: date) -> bool:
    """An entry is no longer revisable on or after its exam date."""
    return entry.exam_date is not None and entry.exam_date <= current_date


def in_lead_in(entry: RevisionEntry, current_date: date, lead_in_days: int) -> bool:
    """Check whether an entry's exam falls within the lead-in window from current_date."""
    if entry.exam_date is None or entry.exam_date < current_date:
        return False
    return day_difference(current_date, entry.exam_date) <= lead_in_days


def select_entry(
    entries: list[RevisionEntry],
    current_date: date,
    cycle: int,
    settings: SchedulerSettings,
) -> tuple[RevisionEntry | None, int]:
    """Pick the entry to revise in the next study block.

    Entries whose exam is on or before ``current_date`` are excluded. If any
    remaining entry is within its exam lead-in window, those entries are
    rotated round-robin (ordered weakest confidence first) using ``cycle``.
    Otherwise the entry with the highest confidence weight wins; ties go to
    the earlier entry. The fallback branch leaves ``cycle`` untouched.

    Args:
        entries: All revision entries (never modified)
        current_date: Date of the slot being filled
        cycle: Current round-robin index
        settings: Scheduler settings (weights and lead-in window)

    Returns:
        Tuple of (selected entry or None, updated cycle)
    """
    eligible = [entry for entry in entries if not exam_passed(entry, current_date)]
    if not eligible:
        return None, cycle

    def by_weight(entry: RevisionEntry) -> int:
        return -settings.weight(entry.confidence)

    lead_in = [
        entry for entry in eligible if in_lead_in(entry, current_date, settings.lead_in_days)
    ]
    if lead_in:
        lead_in.sort(key=by_weight)
        if cycle >= len(lead_in):
            cycle = 0
        return lead_in[cycle], cycle + 1

    return sorted(eligible, key=by_weight)[0], cycle


def fill_slot(
    state: FillerState,
    slot: DatedRevisionSlot,
    entries: list[RevisionEntry],
    busy: BusyIntervalIndex,
    settings: SchedulerSettings,
) -> tuple[FillerState, list[ScheduleItem]]:
    """Fill one dated revision slot with study and break blocks.

    Args:
        state: State after the previous slot
        slot: The slot to fill
        entries: All revision entries
        busy: Busy interval index for the run
        settings: Scheduler settings

    Returns:
        Tuple of (new state, items emitted for this slot)
    """
    study = settings.study_block_minutes
    rest = settings.break_block_minutes
    day = slot.date
    slot_end = slot.end_minute
    cycle = state.cycle
    items: list[ScheduleItem] = []

    # Never reuse minutes already consumed by an earlier slot on the same date
    t = max(slot.start_minute, state.cursor(day))

    while t < slot_end:
        # Move past any obstacle covering t or the smallest possible block
        blocked_until = busy.conflict_end(day, t, t + rest)
        if blocked_until is not None:
            t = min(blocked_until, slot_end)
            continue

        if slot_end - t < study:
            break

        blocked_until = busy.conflict_end(day, t, t + study)
        if blocked_until is not None:
            t = min(blocked_until, slot_end)
            continue

        entry, cycle = select_entry(entries, day, cycle, settings)
        if entry is None:
            logger.debug(f"No revisable entries left on {day.isoformat()}")
            break

        items.append(
            ScheduleItem(
                date=day,
                start_minute=t,
                end_minute=t + study,
                kind=ItemKind.STUDY,
                entry=entry,
                confidence=entry.confidence,
            )
        )
        t += study

        if slot_end - t < rest:
            break

        blocked_until = busy.conflict_end(day, t, t + rest)
        if blocked_until is not None:
            t = min(blocked_until, slot_end)
            continue

        items.append(
            ScheduleItem(
                date=day,
                start_minute=t,
                end_minute=t + rest,
                kind=ItemKind.BREAK,
            )
        )
        t += rest

    # Slots arrive date-ascending, so earlier dates are never read again
    cursors = {day: max(t, state.cursor(day))}
    return replace(state, cycle=cycle, cursor_per_date=cursors), items


def run_filler(
    slots: list[DatedRevisionSlot],
    entries: list[RevisionEntry],
    busy: BusyIntervalIndex,
    settings: SchedulerSettings,
    state: FillerState | None = None,
) -> tuple[FillerState, list[ScheduleItem]]:
    """Fold ``fill_slot`` over slots in chronological order.

    Returns:
        Tuple of (final state, all generated study and break items)
    """
    state = state or FillerState()
    items: list[ScheduleItem] = []

    for slot in sorted(slots, key=lambda s: (s.date, s.start_minute)):
        state, slot_items = fill_slot(state, slot, entries, busy, settings)
        if not slot_items:
            logger.debug(
                f"Slot {slot.date.isoformat()} {slot.start}-{slot.end} produced no blocks"
            )
        items.extend(slot_items)

    return state, items
