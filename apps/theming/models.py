"""Marketing site appearance and CMS copy.

``ThemeSettings`` stores the colors, fonts and logo choice of the public
site. Every field may be left blank; ``apps.theming.theme.apply_theme``
fills blanks with defaults. ``SiteContent`` holds editable page copy keyed
by page, section and key.
"""

from __future__ import annotations

from django.core.validators import RegexValidator  # type: ignore
from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore

from .theme import FONT_NAME_PATTERN, FONT_WEIGHT_PATTERN

HEX_COLOR_VALIDATOR = RegexValidator(
    regex=r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$",
    message=_("Enter a hex color such as #1e3a5f."),
)
FONT_NAME_VALIDATOR = RegexValidator(
    regex=FONT_NAME_PATTERN,
    message=_("Font names may contain only letters, digits, spaces and hyphens."),
)
FONT_WEIGHT_VALIDATOR = RegexValidator(
    regex=FONT_WEIGHT_PATTERN,
    message=_("Enter a font weight from 100 to 900."),
)


def color_field(help_text: str) -> models.CharField:
    return models.CharField(
        max_length=7,
        blank=True,
        validators=[HEX_COLOR_VALIDATOR],
        help_text=help_text,
    )


class ThemeSettings(models.Model):
    """Look and feel of the public site."""

    class HeaderLogo(models.TextChoices):
        PRIMARY = "primary", _("Primary logo")
        SECONDARY = "secondary", _("Secondary logo")
        NONE = "none", _("No logo")

    name = models.CharField(max_length=100, default="Default")
    is_active = models.BooleanField(default=True)

    primary_color = color_field(_("Brand color"))
    secondary_color = color_field(_("Accent background color"))
    tertiary_color = color_field(_("Card background color"))
    text_color = color_field(_("Body text color"))
    link_color = color_field(_("Link color"))
    link_hover_color = color_field(_("Link hover color"))
    navigation_color = color_field(_("Navigation bar color"))
    sub_navigation_color = color_field(_("Sub-navigation color"))
    header_background_color = color_field(_("Header background color"))
    section_background_color = color_field(_("Section background color"))

    # Fonts
    heading_font = models.CharField(max_length=100, blank=True, validators=[FONT_NAME_VALIDATOR])
    body_font = models.CharField(max_length=100, blank=True, validators=[FONT_NAME_VALIDATOR])
    button_font = models.CharField(max_length=100, blank=True, validators=[FONT_NAME_VALIDATOR])
    heading_font_weight = models.CharField(max_length=3, blank=True, validators=[FONT_WEIGHT_VALIDATOR])
    body_font_weight = models.CharField(max_length=3, blank=True, validators=[FONT_WEIGHT_VALIDATOR])
    button_font_weight = models.CharField(max_length=3, blank=True, validators=[FONT_WEIGHT_VALIDATOR])

    # Logos
    header_logo = models.CharField(max_length=10, choices=HeaderLogo.choices, blank=True)
    primary_logo = models.URLField(max_length=500, blank=True)
    secondary_logo = models.URLField(max_length=500, blank=True)

    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("Theme settings")
        verbose_name_plural = _("Theme settings")
        ordering = ["-is_active", "-updated_at", "id"]

    def __str__(self) -> str:
        return f"{self.name}{' (active)' if self.is_active else ''}"

    @classmethod
    def get_active(cls) -> "ThemeSettings | None":
        return cls.objects.filter(is_active=True).order_by("-updated_at", "id").first()


class SiteContent(models.Model):
    """One editable piece of page copy."""

    page = models.SlugField(max_length=50)
    section_name = models.CharField(max_length=100)
    content_key = models.CharField(max_length=100)
    content_value = models.TextField(blank=True)

    class Meta:
        verbose_name = _("Site content")
        verbose_name_plural = _("Site content")
        ordering = ["page", "section_name", "content_key"]
        constraints = [
            models.UniqueConstraint(
                fields=["page", "section_name", "content_key"],
                name="site_content_unique_key",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.page}/{self.section_name}/{self.content_key}"
