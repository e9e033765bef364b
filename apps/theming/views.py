"""Theme settings and CMS content API views."""

from __future__ import annotations

import logging

from rest_framework import generics  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import APIView  # type: ignore

from .models import SiteContent, ThemeSettings
from .serializers import ThemeSettingsSerializer
from .theme import apply_theme

logger = logging.getLogger(__name__)


class ThemeSettingsDetailView(generics.RetrieveUpdateAPIView):
    queryset = ThemeSettings.objects.all()
    serializer_class = ThemeSettingsSerializer

    def perform_update(self, serializer):  # type: ignore
        theme = serializer.save()
        logger.info(f"Theme settings {theme.pk} updated")


class ActiveThemeView(APIView):
    """The active theme. Defaults are returned when no record exists."""

    def get(self, request, format=None):  # type: ignore
        settings = ThemeSettings.get_active()
        if settings is None:
            return Response({"id": None, "theme": apply_theme(None).as_dict()})
        return Response(ThemeSettingsSerializer(settings, context={"request": request}).data)


class PageContentView(APIView):
    """Page copy grouped as ``{section: {key: value}}``."""

    def get(self, request, page, format=None):  # type: ignore
        grouped: dict = {}
        rows = SiteContent.objects.filter(page=page).values_list(
            "section_name", "content_key", "content_value"
        )
        for section, key, value in rows:
            grouped.setdefault(section, {})[key] = value
        return Response(grouped)
