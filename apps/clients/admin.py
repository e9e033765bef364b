"""Admin registrations for clients."""

from __future__ import annotations

from django.contrib import admin

from .models import Client


@admin.register(Client)
class ClientAdmin(admin.ModelAdmin):
    list_display = ("name", "email", "phone", "realtor", "created_at")
    search_fields = ("name", "email", "phone")
    readonly_fields = ("created_at",)
