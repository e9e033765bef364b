"""Tests for the clients (leads) endpoints."""

from __future__ import annotations

from datetime import timedelta

from django.urls import reverse
from django.utils import timezone
from rest_framework import status
from rest_framework.test import APITestCase

from apps.activities.models import Activity
from apps.clients.models import Client
from apps.users.models import User


class ClientAPITests(APITestCase):
    def setUp(self) -> None:
        self.realtor = User.objects.create_user(username="alexmorgan", email="alex@example.com")
        self.other = User.objects.create_user(username="jdoe", email="jdoe@example.com")
        self.sarah = Client.objects.create(name="Sarah Johnson", email="sarah@example.com", realtor=self.realtor)
        Client.objects.create(name="Someone Else", email="else@example.com", realtor=self.other)

    def test_list_is_scoped_to_realtor(self) -> None:
        response = self.client.get(reverse("client-list"))
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual([c["name"] for c in response.data], ["Sarah Johnson"])

    def test_create_records_lead_activity(self) -> None:
        payload = {"name": "David Miller", "email": "david@example.com", "phone": "555-234-5678"}
        response = self.client.post(reverse("client-list"), payload, format="json")
        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertEqual(response.data["realtor"], self.realtor.pk)
        activity = Activity.objects.get()
        self.assertEqual(activity.type, Activity.Type.LEAD)
        self.assertEqual(activity.title, "New lead added")
        self.assertEqual(activity.description, "David Miller")

    def test_invalid_phone_rejected(self) -> None:
        payload = {"name": "Bad Phone", "email": "bad@example.com", "phone": "call me"}
        response = self.client.post(reverse("client-list"), payload, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("phone", response.data)

    def test_foreign_client_not_found(self) -> None:
        foreign = Client.objects.get(name="Someone Else")
        response = self.client.get(reverse("client-detail", args=[foreign.pk]))
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_new_leads_window(self) -> None:
        Client.objects.filter(pk=self.sarah.pk).update(created_at=timezone.now() - timedelta(days=8))
        Client.objects.create(name="Jennifer Lee", email="jen@example.com", realtor=self.realtor)
        names = list(Client.objects.filter(realtor=self.realtor).new_leads().values_list("name", flat=True))
        self.assertEqual(names, ["Jennifer Lee"])
