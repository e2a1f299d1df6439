"""App configuration for the attachments app."""

from django.apps import AppConfig


class AttachmentsConfig(AppConfig):
    """Uploaded files and their metadata."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "attachments"
