"""Admin registrations for appointments."""

from __future__ import annotations

from django.contrib import admin

from .models import Appointment


@admin.register(Appointment)
class AppointmentAdmin(admin.ModelAdmin):
    list_display = ("title", "date", "location", "client", "property", "realtor")
    list_filter = ("realtor",)
    search_fields = ("title", "location", "notes")
    date_hierarchy = "date"
    readonly_fields = ("created_at",)
