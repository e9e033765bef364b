"""
Calendar date helpers

Appointments are stored as instants. Calendars group them by the local
calendar date (year, month, day-of-month in the active time zone), never by
instant equality. These helpers accept model instances or plain mappings
with a ``date`` entry holding a datetime, a date or an ISO 8601 string.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import date, datetime, time, timedelta, tzinfo
from typing import Any

from django.utils import timezone  # type: ignore
from django.utils.dateparse import parse_date, parse_datetime  # type: ignore

logger = logging.getLogger(__name__)


def field_of(item: Any, name: str, default: Any = None) -> Any:
    """Read ``name`` from a mapping or an object."""
    if isinstance(item, Mapping):
        return item.get(name, default)
    return getattr(item, name, default)


def to_local_datetime(value: Any, tz: tzinfo | None = None) -> datetime | date | None:
    """
    Normalize an appointment timestamp

    Aware datetimes are converted to ``tz`` (the current time zone by
    default). Naive datetimes are taken as already local. Plain dates pass
    through. Returns None for anything that cannot be parsed.
    """
    if value is None:
        return None
    if isinstance(value, str):
        text = value.strip()
        try:
            parsed = parse_datetime(text) or parse_date(text)
        except ValueError:
            return None
        if parsed is None:
            return None
        value = parsed
    if isinstance(value, datetime):
        if timezone.is_aware(value):
            return timezone.localtime(value, tz)
        return value
    if isinstance(value, date):
        return value
    return None


def calendar_date_of(value: Any, tz: tzinfo | None = None) -> date | None:
    local = to_local_datetime(value, tz)
    if isinstance(local, datetime):
        return local.date()
    return local


def time_of_day(value: Any, tz: tzinfo | None = None) -> time:
    """Local wall-clock time; date-only values sort first."""
    local = to_local_datetime(value, tz)
    if isinstance(local, datetime):
        return local.time()
    return time.min


def appointment_day(appointment: Any, tz: tzinfo | None = None) -> date | None:
    """Local calendar date of an appointment, or None (logged) when its date is unusable."""
    raw = field_of(appointment, "date")
    day = calendar_date_of(raw, tz)
    if day is None:
        logger.warning(
            f"Skipping appointment {field_of(appointment, 'id')!r}: unparseable date {raw!r}"
        )
    return day


def sort_by_time_of_day(appointments, tz: tzinfo | None = None) -> list:
    """Stable sort by local time of day; equal times keep their input order."""
    return sorted(appointments, key=lambda a: time_of_day(field_of(a, "date"), tz))


def local_today(tz: tzinfo | None = None) -> date:
    return timezone.localdate(timezone=tz)


def is_supported_day(day: date) -> bool:
    """Days whose local bounds convert to any UTC offset without leaving the datetime range."""
    return date.min < day < date.max


def local_day_bounds(day: date, tz: tzinfo | None = None) -> tuple[datetime, datetime]:
    """
    Aware instants ``[start, end)`` covering the local calendar ``day``

    Raises ValueError for the first and last representable days.
    """
    if not is_supported_day(day):
        raise ValueError(f"{day} is outside the supported date range")
    start = timezone.make_aware(datetime.combine(day, time.min), tz)
    end = timezone.make_aware(datetime.combine(day + timedelta(days=1), time.min), tz)
    return start, end
