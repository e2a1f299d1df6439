"""Tags attached to articles."""

from django.db import models

from content.models import TranslatableModel, Translation


class Tag(TranslatableModel):
    slug_source_field = "name"
    slug_prefix = "tag"

    class Meta(TranslatableModel.Meta):
        ordering = ["id"]


class TagTranslation(Translation):
    tag = models.ForeignKey(Tag, on_delete=models.CASCADE, related_name="translations")
    name = models.CharField(max_length=100)

    class Meta(Translation.Meta):
        constraints = [
            models.UniqueConstraint(fields=["tag", "language_code"], name="uniq_tag_translation_language"),
        ]


__all__ = ["Tag", "TagTranslation"]
