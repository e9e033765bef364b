"""User domain models for RealtorHub.

The dashboard belongs to a realtor: every listing, client, appointment and
activity is attached to one. The marketing site shows the same record as the
public agent profile. There is no login flow, the acting realtor is picked by
``settings.REALTOR_USERNAME`` (see ``apps.users.services``).
"""

from __future__ import annotations

from typing import Any

from django.contrib.auth.models import AbstractUser, BaseUserManager  # type: ignore
from django.core.validators import RegexValidator  # type: ignore
from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


PHONE_VALIDATOR = RegexValidator(
    regex=r"^\+?[\d\-\s().]{7,20}$",
    message=_("Invalid phone number. Use digits, spaces, dashes or parentheses."),
)


class CustomUserManager(BaseUserManager):
    """User manager: users log in by username and must have an email."""

    use_in_migrations = True

    def _create_user(self, username: str, email: str, password: str | None, **extra_fields: Any):
        if not username:
            raise ValueError("Username is required to create a user.")
        if not email:
            raise ValueError("Email is required to create a user.")
        email = self.normalize_email(email)
        username = self.model.normalize_username(username)

        phone = extra_fields.get("phone")
        if phone:
            extra_fields["phone"] = self.normalize_phone(phone)

        user = self.model(username=username, email=email, **extra_fields)
        if password:
            user.set_password(password)
        else:
            user.set_unusable_password()
        user.save(using=self._db)
        return user

    def create_user(self, username: str, email: str, password: str | None = None, **extra_fields: Any):
        extra_fields.setdefault("is_staff", False)
        extra_fields.setdefault("is_superuser", False)
        extra_fields.setdefault("role", CustomUser.RoleChoices.REALTOR)
        return self._create_user(username, email, password, **extra_fields)

    def create_superuser(self, username: str, email: str, password: str | None = None, **extra_fields: Any):
        extra_fields.setdefault("is_staff", True)
        extra_fields.setdefault("is_superuser", True)
        extra_fields.setdefault("role", CustomUser.RoleChoices.ADMIN)

        if extra_fields.get("is_staff") is not True:
            raise ValueError("Superuser must have is_staff=True.")
        if extra_fields.get("is_superuser") is not True:
            raise ValueError("Superuser must have is_superuser=True.")

        return self._create_user(username, email, password, **extra_fields)

    @staticmethod
    def normalize_phone(phone: str) -> str:
        """Trim surrounding whitespace, the display format is kept as entered."""
        return phone.strip()


class CustomUser(AbstractUser):
    """Realtor (or site admin) owning listings, clients and appointments."""

    class RoleChoices(models.TextChoices):
        REALTOR = "realtor", _("Realtor")
        ADMIN = "admin", _("Admin")

    email = models.EmailField(_("Email"))
    name = models.CharField(_("Display name"), max_length=255, blank=True)
    phone = models.CharField(
        _("Phone"),
        max_length=20,
        blank=True,
        validators=[PHONE_VALIDATOR],
    )
    profile_image = models.URLField(_("Profile image"), max_length=500, blank=True)
    role = models.CharField(
        _("Role"),
        max_length=20,
        choices=RoleChoices.choices,
        default=RoleChoices.REALTOR,
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = CustomUserManager()

    USERNAME_FIELD = "username"
    REQUIRED_FIELDS = ["email"]

    class Meta:
        verbose_name = _("User")
        verbose_name_plural = _("Users")
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return f"{self.display_name} ({self.get_role_display()})"

    @property
    def display_name(self) -> str:
        return self.name or self.get_full_name() or self.username


# Short alias used across apps and tests
User = CustomUser
