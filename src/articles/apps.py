"""App configuration for the articles app."""

from django.apps import AppConfig


class ArticlesConfig(AppConfig):
    """Multilingual articles."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "articles"
