"""Serializers for theme settings and site content."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from shared.domain.value_objects import HexColor

from .models import ThemeSettings
from .theme import COLOR_FIELDS, apply_theme


class ThemeSettingsSerializer(serializers.ModelSerializer):
    """Raw settings plus the applied theme (variables, logo, font stylesheets)."""

    theme = serializers.SerializerMethodField()

    class Meta:
        model = ThemeSettings
        fields = [
            "id",
            "name",
            "is_active",
            *COLOR_FIELDS,
            "heading_font",
            "body_font",
            "button_font",
            "heading_font_weight",
            "body_font_weight",
            "button_font_weight",
            "header_logo",
            "primary_logo",
            "secondary_logo",
            "updated_at",
            "theme",
        ]
        read_only_fields = ["id", "updated_at", "theme"]

    def get_theme(self, obj: ThemeSettings) -> dict:
        return apply_theme(obj).as_dict()

    def validate(self, attrs):  # type: ignore
        # Colors are stored in the normalized #rrggbb form
        for name in COLOR_FIELDS:
            value = attrs.get(name)
            if value:
                attrs[name] = HexColor(value).value
        return attrs
