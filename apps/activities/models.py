"""Activity feed model."""

from __future__ import annotations

from django.conf import settings  # type: ignore
from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class Activity(models.Model):
    """Single entry of the realtor's activity feed."""

    class Type(models.TextChoices):
        MESSAGE = "message", _("Message")
        OFFER = "offer", _("Offer")
        LISTING = "listing", _("Listing")
        LEAD = "lead", _("Lead")
        APPOINTMENT = "appointment", _("Appointment")
        PROPERTY_UPDATE = "property_update", _("Property update")
        PROPERTY_DELETE = "property_delete", _("Property delete")

    type = models.CharField(max_length=30, choices=Type.choices)
    title = models.CharField(max_length=255)
    description = models.TextField()
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="activities",
    )
    property = models.ForeignKey(
        "properties.Property",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="activities",
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name = _("Activity")
        verbose_name_plural = _("Activities")
        ordering = ["-created_at", "-id"]
        indexes = [
            models.Index(fields=["user", "-created_at"], name="activity_user_created_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.get_type_display()}: {self.title}"
