"""Abstract building blocks for translatable content.

Concrete models (articles, books, research, categories, tags) subclass
``TranslatableModel`` and declare a ``Translation`` subclass whose foreign key
uses ``related_name="translations"``.
"""

from django.db import models

from .languages import LANGUAGE_CHOICES


class TranslatableModel(models.Model):
    """Entity with a collection-unique slug and per-language translations."""

    # Translation field the slug is derived from, and the prefix used for the
    # id-based slug when that field yields no slug characters.
    slug_source_field = "title"
    slug_prefix = "item"

    slug = models.SlugField(max_length=120, unique=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True
        ordering = ["-created_at", "-id"]

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.slug


class Translation(models.Model):
    """Language-specific text for a translatable entity."""

    language_code = models.CharField(max_length=8, choices=LANGUAGE_CHOICES)
    is_default = models.BooleanField(default=False)

    class Meta:
        abstract = True
        ordering = ["-is_default", "language_code"]

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.language_code


class AttachmentLink(models.Model):
    """Ordered link between a content entity and an uploaded attachment."""

    attachment = models.ForeignKey(
        "attachments.Attachment",
        on_delete=models.PROTECT,
        related_name="%(app_label)s_%(class)s_links",
    )
    type = models.CharField(max_length=20)
    order = models.PositiveIntegerField(default=0)

    class Meta:
        abstract = True
        ordering = ["order", "id"]


__all__ = ["TranslatableModel", "Translation", "AttachmentLink"]
