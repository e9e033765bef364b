"""Tests for the appointment endpoints."""

from __future__ import annotations

from datetime import date, datetime, time, timedelta
from decimal import Decimal

from django.urls import reverse
from django.utils import timezone
from rest_framework import status
from rest_framework.test import APITestCase

from apps.activities.models import Activity
from apps.clients.models import Client
from apps.properties.models import Property
from apps.scheduling.models import Appointment
from apps.users.models import User


def at(day: date, hour: int, minute: int = 0) -> datetime:
    return timezone.make_aware(datetime.combine(day, time(hour, minute)))


class AppointmentAPITests(APITestCase):
    def setUp(self) -> None:
        self.realtor = User.objects.create_user(username="alexmorgan", email="alex@example.com")
        self.other = User.objects.create_user(username="jdoe", email="jdoe@example.com")
        self.sarah = Client.objects.create(name="Sarah Johnson", email="sarah@example.com", realtor=self.realtor)
        self.villa = Property.objects.create(
            listed_by=self.realtor,
            title="Luxury Villa",
            address="123 Luxury Ave",
            city="Beverly Hills",
            state="CA",
            zip_code="90210",
            price=Decimal("4500000"),
            bedrooms=5,
            bathrooms=Decimal("4"),
            square_feet=6200,
            listing_type=Property.ListingType.FOR_SALE,
        )
        self.today = timezone.localdate()
        self.tomorrow = self.today + timedelta(days=1)

    def make(self, title: str, when: datetime, realtor=None) -> Appointment:
        return Appointment.objects.create(
            title=title,
            location="123 Luxury Ave, Beverly Hills, CA",
            date=when,
            realtor=realtor or self.realtor,
        )

    def test_create_records_activity(self) -> None:
        payload = {
            "title": "Property Viewing",
            "location": "123 Luxury Ave, Beverly Hills, CA",
            "date": at(self.tomorrow, 10, 30).isoformat(),
            "client": self.sarah.pk,
            "property": self.villa.pk,
            "notes": "Client is very interested in this property",
        }
        response = self.client.post(reverse("appointment-list"), payload, format="json")
        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertEqual(response.data["client_name"], "Sarah Johnson")
        self.assertEqual(response.data["property_title"], "Luxury Villa")
        activity = Activity.objects.get(type=Activity.Type.APPOINTMENT)
        self.assertEqual(activity.title, "New appointment scheduled")
        self.assertEqual(activity.property_id, self.villa.pk)

    def test_create_rejects_foreign_client(self) -> None:
        foreign = Client.objects.create(name="Else", email="else@example.com", realtor=self.other)
        payload = {"title": "Call", "date": at(self.today, 9).isoformat(), "client": foreign.pk}
        response = self.client.post(reverse("appointment-list"), payload, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("client", response.data)

    def test_create_requires_valid_date(self) -> None:
        response = self.client.post(reverse("appointment-list"), {"title": "Call", "date": "soon"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("date", response.data)

    def test_list_is_chronological_and_scoped(self) -> None:
        self.make("Later", at(self.tomorrow, 15, 30))
        self.make("Sooner", at(self.today, 10, 30))
        self.make("Not mine", at(self.today, 8), realtor=self.other)
        response = self.client.get(reverse("appointment-list"))
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual([a["title"] for a in response.data], ["Sooner", "Later"])

    def test_today(self) -> None:
        self.make("Listing Presentation", at(self.today, 14))
        self.make("Property Viewing", at(self.today, 10, 30))
        self.make("Client Meeting", at(self.tomorrow, 11))
        response = self.client.get(reverse("appointment-today"))
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual([a["title"] for a in response.data], ["Property Viewing", "Listing Presentation"])

    def test_calendar_month(self) -> None:
        self.make("Valentine viewing", at(date(2024, 2, 14), 10))
        self.make("Leap day", at(date(2024, 2, 29), 18))
        self.make("Trailing day", at(date(2024, 3, 1), 9))
        self.make("Outside grid", at(date(2024, 3, 10), 9))

        response = self.client.get(reverse("appointment-calendar"), {"month": "2024-02"})
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        data = response.data
        self.assertEqual(data["month"], "2024-02")
        self.assertEqual(data["previous"], "2024-01")
        self.assertEqual(data["next"], "2024-03")
        self.assertEqual(data["start"], "2024-01-28")
        self.assertEqual(data["end"], "2024-03-02")
        self.assertEqual(len(data["weeks"]), 5)

        days = [day for week in data["weeks"] for day in week]
        by_date = {day["date"]: day for day in days}
        self.assertEqual([a["title"] for a in by_date["2024-02-14"]["appointments"]], ["Valentine viewing"])
        self.assertEqual([a["title"] for a in by_date["2024-02-29"]["appointments"]], ["Leap day"])
        self.assertTrue(by_date["2024-02-14"]["has_appointments"])
        self.assertFalse(by_date["2024-02-15"]["has_appointments"])
        self.assertFalse(by_date["2024-03-01"]["is_current_month"])
        self.assertEqual(len(by_date["2024-03-01"]["appointments"]), 1)
        self.assertEqual(sum(len(d["appointments"]) for d in days), 3)

    def test_calendar_defaults_to_current_month(self) -> None:
        response = self.client.get(reverse("appointment-calendar"))
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["month"], self.today.strftime("%Y-%m"))
        today_cells = [d for week in response.data["weeks"] for d in week if d["is_today"]]
        self.assertEqual(len(today_cells), 1)

    def test_calendar_invalid_month(self) -> None:
        for value in ("2024-13", "february", "2024-2-1"):
            response = self.client.get(reverse("appointment-calendar"), {"month": value})
            self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, value)
            self.assertIn("month", response.data)

    def test_calendar_rejects_months_at_the_edge_of_the_date_range(self) -> None:
        for value in ("0001-01", "9999-12"):
            response = self.client.get(reverse("appointment-calendar"), {"month": value})
            self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, value)
            self.assertIn("month", response.data)

    def test_agenda_buckets(self) -> None:
        selected = self.today + timedelta(days=5)
        self.make("Today viewing", at(self.today, 10, 30))
        self.make("Tomorrow meeting", at(self.tomorrow, 11))
        self.make("Selected call", at(selected, 9))
        self.make("Unrelated", at(self.today + timedelta(days=6), 9))

        response = self.client.get(reverse("appointment-agenda"), {"date": selected.isoformat()})
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual([a["title"] for a in response.data["today"]], ["Today viewing"])
        self.assertEqual([a["title"] for a in response.data["tomorrow"]], ["Tomorrow meeting"])
        self.assertEqual([a["title"] for a in response.data["selected_date"]], ["Selected call"])
        self.assertTrue(response.data["selected_is_distinct"])

    def test_agenda_selected_today_only_in_today(self) -> None:
        self.make("Property Viewing", at(self.today, 10, 30))
        response = self.client.get(reverse("appointment-agenda"), {"date": self.today.isoformat()})
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(len(response.data["today"]), 1)
        self.assertEqual(response.data["tomorrow"], [])
        self.assertEqual(response.data["selected_date"], [])
        self.assertFalse(response.data["selected_is_distinct"])

    def test_agenda_empty_and_invalid(self) -> None:
        response = self.client.get(reverse("appointment-agenda"))
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertTrue(response.data["is_empty"])

        response = self.client.get(reverse("appointment-agenda"), {"date": "2024-02-30"})
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("date", response.data)

    def test_agenda_rejects_first_and_last_representable_days(self) -> None:
        for value in ("0001-01-01", "9999-12-31"):
            response = self.client.get(reverse("appointment-agenda"), {"date": value})
            self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, value)
            self.assertIn("date", response.data)
