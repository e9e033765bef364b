"""Admin registrations for theming."""

from __future__ import annotations

from django.contrib import admin

from .models import SiteContent, ThemeSettings


@admin.register(ThemeSettings)
class ThemeSettingsAdmin(admin.ModelAdmin):
    list_display = ("name", "is_active", "primary_color", "heading_font", "updated_at")
    list_filter = ("is_active",)
    readonly_fields = ("updated_at",)


@admin.register(SiteContent)
class SiteContentAdmin(admin.ModelAdmin):
    list_display = ("page", "section_name", "content_key")
    list_filter = ("page",)
    search_fields = ("section_name", "content_key", "content_value")
