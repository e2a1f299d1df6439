"""App configuration for the scripts app."""

from django.apps import AppConfig


class ScriptsConfig(AppConfig):
    """Management commands for seeding and maintenance."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "scripts"
