"""App configuration for the books app."""

from django.apps import AppConfig


class BooksConfig(AppConfig):
    """Multilingual books."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "books"
