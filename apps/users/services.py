"""Resolution of the realtor the dashboard acts for."""

from __future__ import annotations

from django.conf import settings  # type: ignore
from rest_framework.exceptions import NotFound  # type: ignore

from .models import CustomUser


def get_current_realtor() -> CustomUser:
    """Return the configured realtor or raise ``NotFound`` (HTTP 404)."""
    user = CustomUser.objects.filter(username=settings.REALTOR_USERNAME).first()
    if user is None:
        raise NotFound("User not found")
    return user


class CurrentRealtorMixin:
    """View mixin caching the current realtor for the duration of a request."""

    def get_realtor(self) -> CustomUser:
        realtor = getattr(self, "_realtor", None)
        if realtor is None:
            realtor = get_current_realtor()
            self._realtor = realtor
        return realtor
