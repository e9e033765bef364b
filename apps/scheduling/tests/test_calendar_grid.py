"""Tests for the month grid and the appointment bucketer."""

from __future__ import annotations

from datetime import date, datetime, time, timezone as dt_timezone

from django.test import SimpleTestCase
from django.utils import timezone

from apps.scheduling.domain.buckets import appointments_on, bucket_appointments
from apps.scheduling.domain.grid import build_month_grid, displayed_range, month_bounds, shift_month


def local(year, month, day, hour=0, minute=0):
    return timezone.make_aware(datetime(year, month, day, hour, minute))


class MonthGridTests(SimpleTestCase):
    def test_february_2024_spans_five_weeks(self) -> None:
        grid = build_month_grid(date(2024, 2, 14), today=date(2024, 2, 14))
        self.assertEqual(len(grid), 35)
        self.assertEqual(grid.days[0].date, date(2024, 1, 28))
        self.assertEqual(grid.days[-1].date, date(2024, 3, 2))
        self.assertEqual(len(grid.weeks()), 5)
        self.assertTrue(all(len(week) == 7 for week in grid.weeks()))
        self.assertEqual(grid.reference, date(2024, 2, 1))

    def test_grid_length_is_whole_weeks_and_covers_month(self) -> None:
        expected = {
            date(2026, 2, 1): 28,  # starts on Sunday, ends on Saturday
            date(2026, 8, 1): 42,
            date(2024, 2, 1): 35,
        }
        for reference, length in expected.items():
            with self.subTest(reference=reference):
                span = displayed_range(reference, 6)
                self.assertEqual(len(span), length)
                self.assertTrue(span.contains(reference))

        for month in range(1, 13):
            reference = date(2025, month, 1)
            grid = build_month_grid(reference, today=date(2025, 1, 1))
            self.assertEqual(len(grid) % 7, 0)
            first, last = month_bounds(reference)
            self.assertIsNotNone(grid.day(first))
            self.assertIsNotNone(grid.day(last))

    def test_monday_first_weekday(self) -> None:
        grid = build_month_grid(date(2024, 2, 1), today=date(2024, 2, 1), first_weekday=0)
        self.assertEqual(grid.days[0].date, date(2024, 1, 29))
        self.assertEqual(grid.days[-1].date, date(2024, 3, 3))

    def test_flags(self) -> None:
        grid = build_month_grid(date(2024, 2, 1), today=date(2024, 2, 29))
        self.assertFalse(grid.day(date(2024, 1, 31)).is_current_month)
        self.assertTrue(grid.day(date(2024, 2, 29)).is_current_month)
        self.assertEqual([d.date for d in grid.days if d.is_today], [date(2024, 2, 29)])

    def test_appointments_grouped_by_local_date(self) -> None:
        late_evening = {"id": 1, "date": datetime(2024, 2, 15, 5, 0, tzinfo=dt_timezone.utc)}  # Feb 14, 21:00 local
        morning = {"id": 2, "date": local(2024, 2, 14, 9, 0)}
        trailing = {"id": 3, "date": local(2024, 3, 1, 12, 0)}
        outside = {"id": 4, "date": local(2024, 3, 10, 12, 0)}

        grid = build_month_grid(date(2024, 2, 1), [late_evening, trailing, morning, outside], today=date(2024, 2, 1))

        self.assertEqual([a["id"] for a in grid.day(date(2024, 2, 14)).appointments], [2, 1])
        self.assertEqual(grid.day(date(2024, 2, 15)).appointments, ())
        self.assertEqual([a["id"] for a in grid.day(date(2024, 3, 1)).appointments], [3])
        total = sum(len(d.appointments) for d in grid.days)
        self.assertEqual(total, 3)

    def test_malformed_dates_are_skipped_and_logged(self) -> None:
        good = {"id": 1, "date": "2024-02-14T10:30:00-08:00"}
        bad = {"id": 2, "date": "not-a-date"}
        missing = {"id": 3}
        with self.assertLogs("apps.scheduling.domain.dates", level="WARNING") as logs:
            grid = build_month_grid(date(2024, 2, 1), [good, bad, missing], today=date(2024, 2, 1))
        self.assertEqual(len(logs.records), 2)
        self.assertEqual([a["id"] for a in grid.day(date(2024, 2, 14)).appointments], [1])

    def test_navigation(self) -> None:
        grid = build_month_grid(date(2024, 1, 31), today=date(2024, 1, 1))
        self.assertEqual(grid.next(), date(2024, 2, 1))
        self.assertEqual(grid.previous(), date(2023, 12, 1))

    def test_shift_month_clamps_day(self) -> None:
        self.assertEqual(shift_month(date(2024, 1, 31), 1), date(2024, 2, 29))
        self.assertEqual(shift_month(date(2023, 1, 31), 1), date(2023, 2, 28))
        self.assertEqual(shift_month(date(2024, 3, 31), -1), date(2024, 2, 29))
        self.assertEqual(shift_month(date(2024, 12, 15), 1), date(2025, 1, 15))
        self.assertEqual(shift_month(date(2024, 1, 15), -13), date(2022, 12, 15))

    def test_months_at_the_edge_of_the_date_range(self) -> None:
        with self.assertRaises(ValueError):
            build_month_grid(date(1, 1, 1), today=date(2024, 1, 1))
        with self.assertRaises(ValueError):
            displayed_range(date(9999, 12, 1), 6)
        grid = build_month_grid(date(1, 2, 1), today=date(2024, 1, 1))
        self.assertEqual(grid.days[0].date, date(1, 1, 28))
        self.assertFalse(grid.days[0].has_appointments)


class BucketTests(SimpleTestCase):
    today = date(2024, 2, 14)

    def test_today_appointment_with_today_selected(self) -> None:
        meeting = {"id": 1, "date": local(2024, 2, 14, 10, 30)}
        buckets = bucket_appointments([meeting], selected_date=self.today, today=self.today)
        self.assertEqual(buckets.today, (meeting,))
        self.assertEqual(buckets.tomorrow, ())
        self.assertEqual(buckets.selected_date, ())
        self.assertFalse(buckets.selected_is_distinct)

    def test_partition(self) -> None:
        today_late = {"id": 1, "date": local(2024, 2, 14, 14, 0)}
        today_early = {"id": 2, "date": local(2024, 2, 14, 10, 30)}
        tomorrow = {"id": 3, "date": local(2024, 2, 15, 11, 0)}
        selected = {"id": 4, "date": local(2024, 2, 20, 9, 0)}
        other = {"id": 5, "date": local(2024, 2, 21, 9, 0)}
        yesterday = {"id": 6, "date": local(2024, 2, 13, 9, 0)}

        buckets = bucket_appointments(
            [today_late, tomorrow, selected, today_early, other, yesterday],
            selected_date=date(2024, 2, 20),
            today=self.today,
        )
        self.assertEqual([a["id"] for a in buckets.today], [2, 1])
        self.assertEqual([a["id"] for a in buckets.tomorrow], [3])
        self.assertEqual([a["id"] for a in buckets.selected_date], [4])
        self.assertTrue(buckets.selected_is_distinct)
        self.assertFalse(buckets.is_empty)

    def test_selected_tomorrow_does_not_duplicate(self) -> None:
        tomorrow = {"id": 3, "date": local(2024, 2, 15, 11, 0)}
        buckets = bucket_appointments([tomorrow], selected_date=date(2024, 2, 15), today=self.today)
        self.assertEqual(buckets.tomorrow, (tomorrow,))
        self.assertEqual(buckets.selected_date, ())

    def test_equal_times_keep_input_order(self) -> None:
        first = {"id": 1, "date": local(2024, 2, 14, 9, 0)}
        second = {"id": 2, "date": local(2024, 2, 14, 9, 0)}
        buckets = bucket_appointments([first, second], selected_date=self.today, today=self.today)
        self.assertEqual([a["id"] for a in buckets.today], [1, 2])

    def test_empty(self) -> None:
        buckets = bucket_appointments([], selected_date=self.today, today=self.today)
        self.assertTrue(buckets.is_empty)

    def test_appointments_on(self) -> None:
        items = [
            {"id": 1, "date": local(2024, 2, 14, 15, 0)},
            {"id": 2, "date": local(2024, 2, 15, 8, 0)},
            {"id": 3, "date": time(8, 0)},
            {"id": 4, "date": local(2024, 2, 14, 8, 0)},
        ]
        with self.assertLogs("apps.scheduling.domain.dates", level="WARNING"):
            result = appointments_on(items, self.today)
        self.assertEqual([a["id"] for a in result], [4, 1])
