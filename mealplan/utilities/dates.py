"""ISO-8601 parsing for the weekStart parameter."""
from datetime import date, datetime, timedelta
from typing import Optional, Tuple

from mealplan.domain.errors import InvalidDateError, ValidationError
from mealplan.utilities.constants import MAX_PLAN_DAYS


def parse_week_start(value: Optional[str]) -> date:
    """Parse an ISO-8601 date or datetime into the calendar day it falls on locally.

    A datetime with an offset (``2024-01-01T10:00:00.000Z``) is converted to local
    time first, so the result is the local midnight of that instant's day.
    """
    if value is None or not str(value).strip():
        raise ValidationError("weekStart query parameter is required")
    raw = str(value).strip()
    # fromisoformat only learned the trailing 'Z' in 3.11
    if raw.endswith(("Z", "z")):
        raw = raw[:-1] + "+00:00"
    try:
        if len(raw) == 10:
            return date.fromisoformat(raw)
        parsed = datetime.fromisoformat(raw)
    except ValueError:
        raise InvalidDateError() from None
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone()
    return parsed.date()


def week_range(week_start: date) -> Tuple[date, date]:
    """Half-open [start, end) window covered by a plan starting at week_start."""
    return week_start, week_start + timedelta(days=MAX_PLAN_DAYS)


__all__ = ['parse_week_start', 'week_range']
