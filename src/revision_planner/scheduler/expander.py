"""Expansion of weekly availability into dated slot instances."""

from dataclasses import dataclass, field

from ..models import (
    BusyInterval,
    DatedRevisionSlot,
    DateRange,
    IntervalOrigin,
    ItemKind,
    ScheduleItem,
    SlotKind,
    WeeklySlot,
)
from ..timeutils import day_of_week, time_to_minutes


@dataclass
class SlotExpansion:
    """Concrete slot instances for a date range.

    Fixed breaks appear twice: as busy intervals the filler must route
    around, and as ready-made break items for the final schedule.
    """

    revision_slots: list[DatedRevisionSlot] = field(default_factory=list)
    fixed_breaks: list[BusyInterval] = field(default_factory=list)
    fixed_break_items: list[ScheduleItem] = field(default_factory=list)


def expand_weekly_slots(
    weekly_slots: list[WeeklySlot], date_range: DateRange
) -> SlotExpansion:
    """Turn weekly recurring slots into dated instances.

    Slots whose times do not parse, or whose end is not after their start,
    are dropped silently.

    Args:
        weekly_slots: Weekly recurrence pattern
        date_range: Inclusive planning horizon

    Returns:
        SlotExpansion with every list sorted by (date, start_minute)
    """
    expansion = SlotExpansion()

    for current in date_range.dates():
        weekday = day_of_week(current)
        for slot in weekly_slots:
            if slot.day_of_week != weekday:
                continue

            start_minute = time_to_minutes(slot.start)
            end_minute = time_to_minutes(slot.end)
            if start_minute is None or end_minute is None or end_minute <= start_minute:
                continue

            if slot.kind == SlotKind.FIXED_BREAK:
                expansion.fixed_breaks.append(
                    BusyInterval(
                        date=current,
                        start_minute=start_minute,
                        end_minute=end_minute,
                        origin=IntervalOrigin.FIXED_BREAK,
                    )
                )
                expansion.fixed_break_items.append(
                    ScheduleItem(
                        date=current,
                        start_minute=start_minute,
                        end_minute=end_minute,
                        kind=ItemKind.BREAK,
                        fixed=True,
                    )
                )
            else:
                expansion.revision_slots.append(
                    DatedRevisionSlot(
                        date=current,
                        start=slot.start,
                        end=slot.end,
                        start_minute=start_minute,
                        end_minute=end_minute,
                    )
                )

    # Stable sorts keep input order for slots that start together
    expansion.revision_slots.sort(key=lambda s: (s.date, s.start_minute))
    expansion.fixed_breaks.sort(key=lambda b: (b.date, b.start_minute))
    expansion.fixed_break_items.sort(key=lambda i: (i.date, i.start_minute))
    return expansion
