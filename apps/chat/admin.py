"""Admin registrations for the messaging inbox."""

from __future__ import annotations

from django.contrib import admin

from .models import Message


@admin.register(Message)
class MessageAdmin(admin.ModelAdmin):
    list_display = ("sender", "receiver", "client", "read", "created_at")
    list_filter = ("read",)
    search_fields = ("content", "sender__username", "receiver__username", "client__name")
    readonly_fields = ("created_at", "read_at")
