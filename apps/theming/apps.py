from django.apps import AppConfig


class ThemingConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.theming"
    label = "theming"
