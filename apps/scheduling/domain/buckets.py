"""
Appointment Bucketer

Splits a realtor's appointments into the three lists of the schedule
screen. Rules, applied in order:

1. ``today``: the appointment's local calendar date is today
2. ``tomorrow``: it is today + 1 day
3. ``selected_date``: it is the selected date, and the selected date is
   neither today nor tomorrow (otherwise the list stays empty)

An appointment lands in at most one bucket. Each bucket is ordered by time
of day, ties keep input order.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta, tzinfo
from typing import Iterable, List, Optional, Tuple

from .dates import appointment_day, local_today, sort_by_time_of_day


@dataclass(frozen=True)
class AppointmentBuckets:
    today_date: date
    tomorrow_date: date
    selected: date
    today: Tuple = ()
    tomorrow: Tuple = ()
    selected_date: Tuple = ()

    @property
    def selected_is_distinct(self) -> bool:
        """True when the selected date gets its own list."""
        return self.selected not in (self.today_date, self.tomorrow_date)

    @property
    def is_empty(self) -> bool:
        return not (self.today or self.tomorrow or self.selected_date)


def bucket_appointments(
    appointments: Iterable,
    selected_date: date,
    today: Optional[date] = None,
    tz: Optional[tzinfo] = None,
) -> AppointmentBuckets:
    if today is None:
        today = local_today(tz)
    tomorrow = today + timedelta(days=1)
    selected_is_distinct = selected_date not in (today, tomorrow)

    today_items: List = []
    tomorrow_items: List = []
    selected_items: List = []
    for appointment in appointments:
        day = appointment_day(appointment, tz)
        if day is None:
            continue
        if day == today:
            today_items.append(appointment)
        elif day == tomorrow:
            tomorrow_items.append(appointment)
        elif selected_is_distinct and day == selected_date:
            selected_items.append(appointment)

    return AppointmentBuckets(
        today_date=today,
        tomorrow_date=tomorrow,
        selected=selected_date,
        today=tuple(sort_by_time_of_day(today_items, tz)),
        tomorrow=tuple(sort_by_time_of_day(tomorrow_items, tz)),
        selected_date=tuple(sort_by_time_of_day(selected_items, tz)),
    )


def appointments_on(appointments: Iterable, day: date, tz: Optional[tzinfo] = None) -> List:
    """Appointments falling on ``day``, ordered by time of day."""
    return sort_by_time_of_day(
        [a for a in appointments if appointment_day(a, tz) == day],
        tz,
    )
