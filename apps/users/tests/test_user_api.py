"""Tests for the current realtor profile endpoint."""

from __future__ import annotations

from django.test import override_settings
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.users.models import User


class CurrentRealtorAPITests(APITestCase):
    def setUp(self) -> None:
        self.realtor = User.objects.create_user(
            username="alexmorgan",
            email="alex@example.com",
            password="password",
            name="Alex Morgan",
            phone="  555-987-6543 ",
        )

    def test_me_returns_realtor_without_password(self) -> None:
        response = self.client.get(reverse("user-me"))
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["username"], "alexmorgan")
        self.assertEqual(response.data["display_name"], "Alex Morgan")
        self.assertEqual(response.data["phone"], "555-987-6543")
        self.assertEqual(response.data["role"], User.RoleChoices.REALTOR)
        self.assertNotIn("password", response.data)

    def test_patch_me_updates_profile(self) -> None:
        response = self.client.patch(reverse("user-me"), {"name": "Alex M."}, format="json")
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.realtor.refresh_from_db()
        self.assertEqual(self.realtor.name, "Alex M.")

    def test_role_is_read_only(self) -> None:
        self.client.patch(reverse("user-me"), {"role": "admin"}, format="json")
        self.realtor.refresh_from_db()
        self.assertEqual(self.realtor.role, User.RoleChoices.REALTOR)

    @override_settings(REALTOR_USERNAME="nobody")
    def test_missing_realtor(self) -> None:
        response = self.client.get(reverse("user-me"))
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data, {"detail": "User not found"})

    def test_retrieve_public_profile(self) -> None:
        response = self.client.get(reverse("user-detail", args=[self.realtor.pk]))
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["email"], "alex@example.com")
