"""Uploaded files stored through Django's default storage."""

from django.db import models


def attachment_upload_to(instance: "Attachment", filename: str) -> str:
    collection = instance.collection or "default"
    return f"attachments/{collection}/{filename}"


class Attachment(models.Model):
    file = models.FileField(upload_to=attachment_upload_to, max_length=500)
    original_name = models.CharField(max_length=255)
    mime_type = models.CharField(max_length=100)
    size = models.PositiveBigIntegerField()
    disk = models.CharField(max_length=50, default="local")
    collection = models.CharField(max_length=100, blank=True)
    alt_text = models.CharField(max_length=255, blank=True)
    metadata = models.JSONField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at", "-id"]

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.original_name

    @property
    def url(self) -> str:
        return self.file.url if self.file else ""


__all__ = ["Attachment", "attachment_upload_to"]
