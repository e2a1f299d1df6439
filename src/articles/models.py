"""Articles with per-language title, summary and body."""

from django.db import models

from content.models import AttachmentLink, TranslatableModel, Translation


class Article(TranslatableModel):
    slug_prefix = "article"

    category = models.ForeignKey("categories.Category", on_delete=models.PROTECT, related_name="articles")
    published_at = models.DateTimeField(null=True, blank=True)
    is_published = models.BooleanField(default=False)
    views = models.PositiveIntegerField(default=0)
    tags = models.ManyToManyField("tags.Tag", related_name="articles", blank=True)

    class Meta(TranslatableModel.Meta):
        pass


class ArticleTranslation(Translation):
    article = models.ForeignKey(Article, on_delete=models.CASCADE, related_name="translations")
    title = models.CharField(max_length=255)
    summary = models.TextField(blank=True)
    body = models.TextField()
    meta_title = models.CharField(max_length=255, blank=True)
    meta_description = models.TextField(blank=True)

    class Meta(Translation.Meta):
        constraints = [
            models.UniqueConstraint(fields=["article", "language_code"], name="uniq_article_translation_language"),
        ]


class ArticleAttachment(AttachmentLink):
    class Type(models.TextChoices):
        FEATURED = "featured", "Featured"
        GALLERY = "gallery", "Gallery"
        ATTACHMENT = "attachment", "Attachment"
        OTHER = "other", "Other"

    type = models.CharField(max_length=20, choices=Type.choices)
    article = models.ForeignKey(Article, on_delete=models.CASCADE, related_name="attachment_links")
    caption = models.CharField(max_length=255, blank=True)

    class Meta(AttachmentLink.Meta):
        pass


__all__ = ["Article", "ArticleAttachment", "ArticleTranslation"]
