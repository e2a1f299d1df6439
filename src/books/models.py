"""Books, possibly published in several parts."""

from django.db import models

from content.models import AttachmentLink, TranslatableModel, Translation


class Book(TranslatableModel):
    slug_prefix = "book"

    category = models.ForeignKey("categories.Category", on_delete=models.PROTECT, related_name="books")
    isbn = models.CharField(max_length=32, blank=True)
    pages = models.PositiveIntegerField(default=0)
    parts = models.PositiveIntegerField(default=1)
    part_number = models.PositiveIntegerField(default=1)
    total_parts = models.PositiveIntegerField(default=1)
    publish_year = models.CharField(max_length=10, blank=True)
    is_published = models.BooleanField(default=False)
    views = models.PositiveIntegerField(default=0)

    class Meta(TranslatableModel.Meta):
        pass


class BookTranslation(Translation):
    book = models.ForeignKey(Book, on_delete=models.CASCADE, related_name="translations")
    title = models.CharField(max_length=255)
    author = models.CharField(max_length=255, blank=True)
    publisher = models.CharField(max_length=255, blank=True)
    description = models.TextField(blank=True)
    series = models.CharField(max_length=255, blank=True)
    meta_title = models.CharField(max_length=255, blank=True)
    meta_description = models.TextField(blank=True)

    class Meta(Translation.Meta):
        constraints = [
            models.UniqueConstraint(fields=["book", "language_code"], name="uniq_book_translation_language"),
        ]


class BookAttachment(AttachmentLink):
    class Type(models.TextChoices):
        COVER = "cover", "Cover"
        PDF = "pdf", "PDF"
        OTHER = "other", "Other"

    type = models.CharField(max_length=20, choices=Type.choices)
    book = models.ForeignKey(Book, on_delete=models.CASCADE, related_name="attachment_links")
    caption = models.CharField(max_length=255, blank=True)

    class Meta(AttachmentLink.Meta):
        pass


__all__ = ["Book", "BookAttachment", "BookTranslation"]
