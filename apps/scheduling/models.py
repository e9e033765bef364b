"""Appointment model for the realtor schedule."""

from __future__ import annotations

from django.conf import settings  # type: ignore
from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class AppointmentQuerySet(models.QuerySet):
    def for_realtor(self, realtor):
        return self.filter(realtor=realtor).select_related("client", "property")

    def between(self, start, end):
        """Appointments with ``start <= date < end``."""
        return self.filter(date__gte=start, date__lt=end)


class Appointment(models.Model):
    """A viewing, meeting or call on the realtor's schedule."""

    title = models.CharField(max_length=255)
    location = models.CharField(max_length=255, blank=True)
    date = models.DateTimeField(help_text=_("Start of the appointment"))
    client = models.ForeignKey(
        "clients.Client",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="appointments",
    )
    realtor = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="appointments",
    )
    property = models.ForeignKey(
        "properties.Property",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="appointments",
    )
    notes = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    objects = AppointmentQuerySet.as_manager()

    class Meta:
        verbose_name = _("Appointment")
        verbose_name_plural = _("Appointments")
        ordering = ["date", "id"]
        indexes = [
            models.Index(fields=["realtor", "date"], name="appointment_realtor_date_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.title} at {self.date:%Y-%m-%d %H:%M}"
