"""Research papers with per-language title and abstract."""

from django.db import models

from content.models import AttachmentLink, TranslatableModel, Translation


class Research(TranslatableModel):
    slug_prefix = "research"

    category = models.ForeignKey("categories.Category", on_delete=models.PROTECT, related_name="research")
    date = models.DateField()
    pages = models.PositiveIntegerField(default=0)
    views = models.PositiveIntegerField(default=0)

    class Meta(TranslatableModel.Meta):
        verbose_name_plural = "research"


class ResearchTranslation(Translation):
    research = models.ForeignKey(Research, on_delete=models.CASCADE, related_name="translations")
    title = models.CharField(max_length=255)
    abstract = models.TextField()

    class Meta(Translation.Meta):
        constraints = [
            models.UniqueConstraint(fields=["research", "language_code"], name="uniq_research_translation_language"),
        ]


class ResearchAttachment(AttachmentLink):
    class Type(models.TextChoices):
        PDF = "pdf", "PDF"
        IMAGE = "image", "Image"
        OTHER = "other", "Other"

    type = models.CharField(max_length=20, choices=Type.choices)
    research = models.ForeignKey(Research, on_delete=models.CASCADE, related_name="attachment_links")

    class Meta(AttachmentLink.Meta):
        pass


__all__ = ["Research", "ResearchAttachment", "ResearchTranslation"]
