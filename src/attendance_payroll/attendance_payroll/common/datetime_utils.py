from __future__ import annotations

from datetime import date, datetime, time
from typing import Union

from ..core.exceptions import ValidationError


def parse_hhmm(value: Union[str, time]) -> time:
    """Parse an ``HH:MM`` (or ``HH:MM:SS``) time-of-day string.

    ``time`` values are passed through unchanged.
    """
    if isinstance(value, time):
        return value

    v = (value or "").strip()
    for fmt in ("%H:%M", "%H:%M:%S"):
        try:
            return datetime.strptime(v, fmt).time()
        except ValueError:
            continue
    raise ValidationError(f"Invalid time of day (HH:MM): {value!r}")


def as_date(value: Union[date, datetime]) -> date:
    """Drop the time component of a datetime; dates pass through."""
    if isinstance(value, datetime):
        return value.date()
    return value
