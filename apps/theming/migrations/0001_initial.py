import django.core.validators
from django.db import migrations, models


def color_field(help_text):
    return models.CharField(
        blank=True,
        help_text=help_text,
        max_length=7,
        validators=[
            django.core.validators.RegexValidator(
                message="Enter a hex color such as #1e3a5f.",
                regex="^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$",
            )
        ],
    )


def font_field():
    return models.CharField(
        blank=True,
        max_length=100,
        validators=[
            django.core.validators.RegexValidator(
                message="Font names may contain only letters, digits, spaces and hyphens.",
                regex="^[A-Za-z0-9][A-Za-z0-9 \\-]*$",
            )
        ],
    )


def font_weight_field():
    return models.CharField(
        blank=True,
        max_length=3,
        validators=[
            django.core.validators.RegexValidator(
                message="Enter a font weight from 100 to 900.",
                regex="^[1-9]00$",
            )
        ],
    )


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="ThemeSettings",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(default="Default", max_length=100)),
                ("is_active", models.BooleanField(default=True)),
                ("primary_color", color_field("Brand color")),
                ("secondary_color", color_field("Accent background color")),
                ("tertiary_color", color_field("Card background color")),
                ("text_color", color_field("Body text color")),
                ("link_color", color_field("Link color")),
                ("link_hover_color", color_field("Link hover color")),
                ("navigation_color", color_field("Navigation bar color")),
                ("sub_navigation_color", color_field("Sub-navigation color")),
                ("header_background_color", color_field("Header background color")),
                ("section_background_color", color_field("Section background color")),
                ("heading_font", font_field()),
                ("body_font", font_field()),
                ("button_font", font_field()),
                ("heading_font_weight", font_weight_field()),
                ("body_font_weight", font_weight_field()),
                ("button_font_weight", font_weight_field()),
                (
                    "header_logo",
                    models.CharField(
                        blank=True,
                        choices=[("primary", "Primary logo"), ("secondary", "Secondary logo"), ("none", "No logo")],
                        max_length=10,
                    ),
                ),
                ("primary_logo", models.URLField(blank=True, max_length=500)),
                ("secondary_logo", models.URLField(blank=True, max_length=500)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "verbose_name": "Theme settings",
                "verbose_name_plural": "Theme settings",
                "ordering": ["-is_active", "-updated_at", "id"],
            },
        ),
        migrations.CreateModel(
            name="SiteContent",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("page", models.SlugField()),
                ("section_name", models.CharField(max_length=100)),
                ("content_key", models.CharField(max_length=100)),
                ("content_value", models.TextField(blank=True)),
            ],
            options={
                "verbose_name": "Site content",
                "verbose_name_plural": "Site content",
                "ordering": ["page", "section_name", "content_key"],
                "constraints": [
                    models.UniqueConstraint(
                        fields=("page", "section_name", "content_key"),
                        name="site_content_unique_key",
                    )
                ],
            },
        ),
    ]
