"""Admin registrations for the activity feed."""

from __future__ import annotations

from django.contrib import admin

from .models import Activity


@admin.register(Activity)
class ActivityAdmin(admin.ModelAdmin):
    list_display = ("title", "type", "user", "property", "created_at")
    list_filter = ("type",)
    search_fields = ("title", "description", "user__username")
    readonly_fields = ("created_at",)
