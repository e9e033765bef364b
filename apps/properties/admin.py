"""Admin registrations for properties domain."""

from __future__ import annotations

from django.contrib import admin

from .models import Property


@admin.register(Property)
class PropertyAdmin(admin.ModelAdmin):
    list_display = (
        "title",
        "city",
        "state",
        "listing_type",
        "status",
        "price",
        "bedrooms",
        "listed_by",
    )
    list_filter = ("status", "listing_type", "state", "city")
    search_fields = ("title", "address", "city", "zip_code", "listed_by__username")
    readonly_fields = ("created_at", "updated_at")
