"""App configuration for the tags app."""

from django.apps import AppConfig


class TagsConfig(AppConfig):
    """Article tags."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "tags"
