"""Tests for theme settings and page content endpoints."""

from __future__ import annotations

from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.theming.models import SiteContent, ThemeSettings


class ThemeSettingsAPITests(APITestCase):
    def test_active_without_settings_returns_defaults(self) -> None:
        response = self.client.get(reverse("theme-settings-active"))
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertIsNone(response.data["id"])
        self.assertEqual(response.data["theme"]["variables"]["--navigation-color"], "#1a1a1a")

    def test_active_settings_include_applied_theme(self) -> None:
        ThemeSettings.objects.create(name="Old", is_active=False, primary_color="#000000")
        theme = ThemeSettings.objects.create(
            name="Brand",
            primary_color="#aa0000",
            heading_font="Playfair Display",
            primary_logo="https://example.com/logo.png",
        )
        response = self.client.get(reverse("theme-settings-active"))
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["id"], theme.pk)
        applied = response.data["theme"]
        self.assertEqual(applied["variables"]["--primary-color"], "#aa0000")
        self.assertEqual(applied["variables"]["--navigation-color"], "#1a1a1a")
        self.assertEqual(applied["logo_url"], "https://example.com/logo.png")
        self.assertEqual(len(applied["font_stylesheets"]), 1)

    def test_patch_normalizes_colors(self) -> None:
        theme = ThemeSettings.objects.create(name="Brand")
        url = reverse("theme-settings-detail", args=[theme.pk])
        response = self.client.patch(url, {"navigation_color": "#ABC"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["navigation_color"], "#aabbcc")
        self.assertEqual(response.data["theme"]["variables"]["--navigation-color"], "#aabbcc")

    def test_patch_rejects_bad_color(self) -> None:
        theme = ThemeSettings.objects.create(name="Brand")
        url = reverse("theme-settings-detail", args=[theme.pk])
        response = self.client.patch(url, {"primary_color": "blue"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("primary_color", response.data)

    def test_patch_rejects_unsafe_fonts(self) -> None:
        theme = ThemeSettings.objects.create(name="Brand")
        url = reverse("theme-settings-detail", args=[theme.pk])
        response = self.client.patch(
            url, {"heading_font": "X; } body {", "body_font_weight": "bold"}, format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("heading_font", response.data)
        self.assertIn("body_font_weight", response.data)

        response = self.client.patch(
            url, {"heading_font": "Playfair Display", "body_font_weight": "300"}, format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["theme"]["variables"]["--heading-font"], "Playfair Display")

    def test_unknown_theme(self) -> None:
        response = self.client.get(reverse("theme-settings-detail", args=[999]))
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)


class PageContentAPITests(APITestCase):
    def test_grouped_by_section(self) -> None:
        SiteContent.objects.create(page="home", section_name="hero", content_key="heroHeadline", content_value="Find Your Dream Home")
        SiteContent.objects.create(page="home", section_name="hero", content_key="heroButtonText", content_value="Browse Properties")
        SiteContent.objects.create(page="home", section_name="about", content_key="subtitle", content_value="About LuxeLead")
        SiteContent.objects.create(page="contact", section_name="hero", content_key="heroHeadline", content_value="Get in touch")

        response = self.client.get(reverse("page-content", args=["home"]))
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data, {
            "about": {"subtitle": "About LuxeLead"},
            "hero": {"heroButtonText": "Browse Properties", "heroHeadline": "Find Your Dream Home"},
        })

    def test_unknown_page_is_empty(self) -> None:
        response = self.client.get(reverse("page-content", args=["missing"]))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data, {})
