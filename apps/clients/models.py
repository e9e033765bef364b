"""Client (lead) model."""

from __future__ import annotations

from datetime import timedelta

from django.conf import settings  # type: ignore
from django.db import models  # type: ignore
from django.utils import timezone  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore

from apps.users.models import PHONE_VALIDATOR


class ClientQuerySet(models.QuerySet):
    def new_leads(self, days: int = 7):
        """Clients created within the last ``days`` days."""
        return self.filter(created_at__gt=timezone.now() - timedelta(days=days))


class Client(models.Model):
    """A lead or client of the realtor."""

    name = models.CharField(max_length=255)
    email = models.EmailField()
    phone = models.CharField(max_length=20, blank=True, validators=[PHONE_VALIDATOR])
    realtor = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="clients",
    )
    profile_image = models.URLField(max_length=500, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    objects = ClientQuerySet.as_manager()

    class Meta:
        verbose_name = _("Client")
        verbose_name_plural = _("Clients")
        ordering = ["name"]

    def __str__(self) -> str:
        return self.name
