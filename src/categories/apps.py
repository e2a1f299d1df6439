"""App configuration for the categories app."""

from django.apps import AppConfig


class CategoriesConfig(AppConfig):
    """Categories for articles, books and research."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "categories"
