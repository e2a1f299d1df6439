"""App configuration for the research app."""

from django.apps import AppConfig


class ResearchConfig(AppConfig):
    """Multilingual research papers."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "research"
