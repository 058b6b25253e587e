"""Date and label helpers shared by the analytics engines."""

from __future__ import annotations

import calendar
import datetime
import logging
from typing import Optional

from app.core.config import settings

logger = logging.getLogger(__name__)

DATE_FORMAT = settings.DATE_FORMAT

HEAVY = "heavy"
LIGHT = "light"
CUSTOM = "custom"

_WORKOUT_TYPES = {HEAVY, LIGHT, CUSTOM}


def parse_session_date(value: str) -> Optional[datetime.date]:
    """Parse a ``yyyy/MM/dd`` day string.  Returns ``None`` if it does not parse."""
    try:
        return datetime.datetime.strptime(value, DATE_FORMAT).date()
    except (TypeError, ValueError):
        logger.warning("Skipping record with unparsable date %r", value)
        return None


def format_session_date(value: datetime.date) -> str:
    return value.strftime(DATE_FORMAT)


def resolve_as_of(as_of: Optional[datetime.datetime]) -> datetime.datetime:
    """The single "current time" read of an engine call."""
    if as_of is None:
        return datetime.datetime.now()
    return to_local_naive(as_of)


def to_local_naive(value: datetime.datetime) -> datetime.datetime:
    """Convert an aware datetime to naive local time; naive values pass through."""
    if value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)


def floor_hour(value: datetime.datetime) -> datetime.datetime:
    return value.replace(minute=0, second=0, microsecond=0)


def add_months(value: datetime.date, months: int) -> datetime.date:
    """Calendar month arithmetic; the day is clamped to the target month's length."""
    month_index = value.month - 1 + months
    year = value.year + month_index // 12
    month = month_index % 12 + 1
    day = min(value.day, calendar.monthrange(year, month)[1])
    return value.replace(year=year, month=month, day=day)


def normalize_workout_type(value: Optional[str]) -> str:
    """Map a declared workout type onto heavy / light / custom (default heavy)."""
    lowered = value.lower() if value else HEAVY
    return lowered if lowered in _WORKOUT_TYPES else HEAVY
