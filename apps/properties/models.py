"""Property domain models for RealtorHub.

Listings for sale or rent published by a realtor. Prices are stored as
decimals in USD; rental prices are monthly.
"""

from __future__ import annotations

from decimal import Decimal

from django.conf import settings  # type: ignore
from django.core.validators import MinValueValidator  # type: ignore
from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class Property(models.Model):
    """A property listed for sale or for rent."""

    class ListingType(models.TextChoices):
        FOR_SALE = "For Sale", _("For Sale")
        FOR_RENT = "For Rent", _("For Rent")

    class Status(models.TextChoices):
        ACTIVE = "Active", _("Active")
        PENDING = "Pending", _("Pending")
        SOLD = "Sold", _("Sold")

    title = models.CharField(max_length=255)
    address = models.CharField(max_length=255)
    city = models.CharField(max_length=100)
    state = models.CharField(max_length=50)
    zip_code = models.CharField(max_length=20)
    price = models.DecimalField(
        max_digits=14,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.00"))],
    )
    bedrooms = models.PositiveSmallIntegerField()
    bathrooms = models.DecimalField(
        max_digits=4,
        decimal_places=1,
        validators=[MinValueValidator(Decimal("0.0"))],
    )
    square_feet = models.PositiveIntegerField()
    lot_size = models.DecimalField(
        max_digits=8,
        decimal_places=2,
        default=Decimal("0.00"),
        help_text=_("Lot size in acres."),
    )
    description = models.TextField(blank=True)
    listing_type = models.CharField(max_length=20, choices=ListingType.choices)
    status = models.CharField(max_length=20, choices=Status.choices, default=Status.ACTIVE)
    main_image = models.URLField(max_length=500, blank=True)
    images = models.JSONField(default=list, blank=True)
    features = models.JSONField(default=list, blank=True)
    listed_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="properties",
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("Property")
        verbose_name_plural = _("Properties")
        ordering = ["-created_at", "-id"]
        indexes = [
            models.Index(fields=["status"], name="property_status_idx"),
            models.Index(fields=["listed_by", "status"], name="property_owner_status_idx"),
        ]

    def __str__(self) -> str:
        return self.title

    @property
    def full_address(self) -> str:
        return f"{self.address}, {self.city}, {self.state}"
