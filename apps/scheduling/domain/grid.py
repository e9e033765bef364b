"""
Month Calendar Grid

Builds the grid of days shown by the schedule screen for one month: whole
weeks from the week containing the 1st of the month to the week containing
its last day, so the grid length is always a multiple of 7 (35 or 42 days,
28 for a February that starts on the first weekday).

Each day carries the appointments whose local calendar date matches it.
Navigating to another month means building a new grid from a new reference
date; grids are immutable.

Usage:
    grid = build_month_grid(date(2024, 2, 14), appointments)
    for week in grid.weeks():
        ...
    next_grid = build_month_grid(grid.next(), appointments)
"""

from __future__ import annotations

import calendar
from collections import defaultdict
from dataclasses import dataclass, field
from datetime import date, timedelta, tzinfo
from typing import Dict, Iterable, List, Optional, Tuple

from django.conf import settings  # type: ignore

from shared.domain.value_objects import DateRange

from .dates import appointment_day, local_today, sort_by_time_of_day

SUNDAY = calendar.SUNDAY
DAYS_IN_WEEK = 7


@dataclass(frozen=True)
class CalendarDay:
    """One cell of the month grid."""
    date: date
    is_current_month: bool
    is_today: bool
    appointments: Tuple = field(default_factory=tuple)

    @property
    def has_appointments(self) -> bool:
        return bool(self.appointments)


@dataclass(frozen=True)
class MonthGrid:
    """
    Month grid aggregate

    ``reference`` is normalized to the first day of the displayed month.
    """
    reference: date
    first_weekday: int
    days: Tuple[CalendarDay, ...]

    def weeks(self) -> List[Tuple[CalendarDay, ...]]:
        return [
            self.days[i:i + DAYS_IN_WEEK]
            for i in range(0, len(self.days), DAYS_IN_WEEK)
        ]

    @property
    def displayed_range(self) -> DateRange:
        return DateRange(self.days[0].date, self.days[-1].date + timedelta(days=1))

    def day(self, on: date) -> Optional[CalendarDay]:
        if not self.displayed_range.contains(on):
            return None
        return self.days[(on - self.days[0].date).days]

    def previous(self) -> date:
        """Reference date of the previous month."""
        return shift_month(self.reference, -1)

    def next(self) -> date:
        """Reference date of the next month."""
        return shift_month(self.reference, 1)

    def __len__(self) -> int:
        return len(self.days)


def default_first_weekday() -> int:
    return getattr(settings, "CALENDAR_FIRST_WEEKDAY", SUNDAY)


def month_bounds(reference: date) -> Tuple[date, date]:
    """First and last day of the month containing ``reference``."""
    last_day = calendar.monthrange(reference.year, reference.month)[1]
    return reference.replace(day=1), reference.replace(day=last_day)


def shift_month(reference: date, delta: int) -> date:
    """
    Move ``reference`` by ``delta`` months

    The day of month is clamped to the target month's length, so
    Jan 31 + 1 month is Feb 29 in a leap year.
    """
    month_index = reference.year * 12 + (reference.month - 1) + delta
    year, month = divmod(month_index, 12)
    last_day = calendar.monthrange(year, month + 1)[1]
    return date(year, month + 1, min(reference.day, last_day))


def displayed_range(reference: date, first_weekday: Optional[int] = None) -> DateRange:
    """
    Whole weeks covering the month of ``reference`` (end exclusive)

    Raises ValueError when those weeks run past ``date.min`` or ``date.max``.
    """
    if first_weekday is None:
        first_weekday = default_first_weekday()
    first, last = month_bounds(reference)
    last_weekday = (first_weekday + DAYS_IN_WEEK - 1) % DAYS_IN_WEEK
    try:
        start = first - timedelta(days=(first.weekday() - first_weekday) % DAYS_IN_WEEK)
        end = last + timedelta(days=(last_weekday - last.weekday()) % DAYS_IN_WEEK)
        return DateRange(start, end + timedelta(days=1))
    except OverflowError:
        raise ValueError(f"Weeks around {first:%Y-%m} are outside the supported date range")


def group_by_day(appointments: Iterable, tz: Optional[tzinfo] = None) -> Dict[date, List]:
    """Bucket appointments by local calendar date, skipping unparseable ones."""
    grouped: Dict[date, List] = defaultdict(list)
    for appointment in appointments:
        day = appointment_day(appointment, tz)
        if day is not None:
            grouped[day].append(appointment)
    return grouped


def build_month_grid(
    reference: date,
    appointments: Iterable = (),
    today: Optional[date] = None,
    first_weekday: Optional[int] = None,
    tz: Optional[tzinfo] = None,
) -> MonthGrid:
    """
    Build the grid for the month containing ``reference``

    ``today`` defaults to the current local date. Appointments within a day
    are ordered by time of day. Raises ValueError for months whose grid
    would leave the supported date range.
    """
    if first_weekday is None:
        first_weekday = default_first_weekday()
    if today is None:
        today = local_today(tz)
    span = displayed_range(reference, first_weekday)
    by_day = group_by_day(appointments, tz)

    days = tuple(
        CalendarDay(
            date=day,
            is_current_month=(day.year, day.month) == (reference.year, reference.month),
            is_today=day == today,
            appointments=tuple(sort_by_time_of_day(by_day.get(day, ()), tz)),
        )
        for day in span.days()
    )
    return MonthGrid(
        reference=reference.replace(day=1),
        first_weekday=first_weekday,
        days=days,
    )
