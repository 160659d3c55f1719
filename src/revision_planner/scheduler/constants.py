"""Constants for revision scheduling."""

from enum import Enum

from ..models import Confidence

# Fixed block lengths in minutes. Blocks are never shortened to fit.
STUDY_BLOCK_MINUTES = 40
BREAK_BLOCK_MINUTES = 10

# Days before an exam (inclusive) during which its entry joins the round-robin
LEAD_IN_DAYS = 4

# Scheduling weight per confidence rating; weaker material first
CONFIDENCE_WEIGHTS = {
    Confidence.RED: 3,
    Confidence.AMBER: 2,
    Confidence.GREEN: 1,
}


class ScheduleWarning(str, Enum):
    """Warnings attached to a schedule result."""

    NO_ENTRIES = "no entries"
    NO_AVAILABILITY = "no availability"
    INVALID_DATE_RANGE = "invalid date range"
    NO_REVISION_BLOCKS = "could not schedule any revision blocks"
    NOTHING_SCHEDULED = "nothing could be scheduled"
