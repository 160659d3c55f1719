"""Clock-time and calendar-date arithmetic.

Clock times are "HH:MM" strings, converted to minutes since midnight for all
comparisons. Invalid input is represented by ``None`` rather than by an
exception or a zero value.
"""

import re
from datetime import date, datetime, timedelta

MINUTES_PER_DAY = 24 * 60

# One- or two-digit hours ("8:30" appears in exam timetables), two-digit minutes
TIME_PATTERN = re.compile(r"([0-9]{1,2}):([0-9]{2})")


def time_to_minutes(text: str | None) -> int | None:
    """Convert an "HH:MM" string to minutes since midnight.

    Args:
        text: Clock time such as "16:40" or "8:30"

    Returns:
        Minutes since midnight, or None if the text is not a valid time
        (including placeholders such as "various")
    """
    if not text or not isinstance(text, str):
        return None

    match = TIME_PATTERN.fullmatch(text.strip())
    if not match:
        return None

    hours = int(match.group(1))
    minutes = int(match.group(2))
    if hours > 23 or minutes > 59:
        return None

    return hours * 60 + minutes


def minutes_to_time(minutes: int) -> str:
    """Format minutes since midnight as "HH:MM", wrapping at 24 hours."""
    minutes %= MINUTES_PER_DAY
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def add_minutes(text: str, delta: int) -> str:
    """Add minutes to a clock time.

    Args:
        text: Clock time in "HH:MM" format
        delta: Minutes to add (may be negative)

    Returns:
        The shifted time modulo 24 hours, or the input unchanged if it is
        not a valid time
    """
    minutes = time_to_minutes(text)
    if minutes is None:
        return text
    return minutes_to_time(minutes + delta)


def parse_date(value) -> date | None:
    """Parse an ISO "YYYY-MM-DD" value into a date.

    ``date`` instances pass through; datetimes are truncated to their date.

    Returns:
        The date, or None for missing or malformed values
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not value or not isinstance(value, str):
        return None
    try:
        return datetime.strptime(value.strip(), "%Y-%m-%d").date()
    except ValueError:
        return None


def add_days(day: date, n: int) -> date:
    """Return the date ``n`` calendar days after ``day``."""
    return day + timedelta(days=n)


def day_difference(first: date, second: date) -> int:
    """Whole calendar days from ``first`` to ``second`` (negative if earlier).

    Works on date-only values so daylight-saving transitions cannot skew it.
    """
    return (second - first).days


def day_of_week(day: date) -> int:
    """Weekday index of a date, Monday = 0 ... Sunday = 6."""
    return day.weekday()


def overlaps(
    start_a: int | None,
    end_a: int | None,
    start_b: int | None,
    end_b: int | None,
) -> bool:
    """Check whether half-open intervals [start_a, end_a) and [start_b, end_b) overlap.

    Returns False if any bound is missing.
    """
    if start_a is None or end_a is None or start_b is None or end_b is None:
        return False
    return start_a < end_b and start_b < end_a
