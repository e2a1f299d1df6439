"""App configuration for the content app."""

from django.apps import AppConfig


class ContentConfig(AppConfig):
    """Shared translatable-content models, slugs and serializer base classes."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "content"
