"""Categories for articles, books and research, with per-language names."""

from django.db import models

from content.models import TranslatableModel, Translation


class Category(TranslatableModel):
    class Kind(models.TextChoices):
        ARTICLE = "article", "Article"
        BOOK = "book", "Book"
        RESEARCH = "research", "Research"

    slug_source_field = "name"
    slug_prefix = "category"

    kind = models.CharField(max_length=20, choices=Kind.choices, default=Kind.ARTICLE)
    parent = models.ForeignKey(
        "self", null=True, blank=True, on_delete=models.SET_NULL, related_name="children"
    )
    sort_order = models.IntegerField(default=0)
    is_active = models.BooleanField(default=True)

    class Meta(TranslatableModel.Meta):
        ordering = ["sort_order", "id"]
        verbose_name_plural = "categories"


class CategoryTranslation(Translation):
    category = models.ForeignKey(Category, on_delete=models.CASCADE, related_name="translations")
    name = models.CharField(max_length=255)
    description = models.TextField(blank=True)
    meta_title = models.CharField(max_length=255, blank=True)
    meta_description = models.TextField(blank=True)

    class Meta(Translation.Meta):
        constraints = [
            models.UniqueConstraint(fields=["category", "language_code"], name="uniq_category_translation_language"),
        ]


__all__ = ["Category", "CategoryTranslation"]
