"""Serializers for research papers."""

from rest_framework import serializers

from categories.models import Category
from content.serializers import (
    AttachmentLinkSerializer,
    TranslatableModelSerializer,
    TranslationSerializer,
    category_summary,
)

from .models import Research, ResearchAttachment, ResearchTranslation


class ResearchTranslationSerializer(TranslationSerializer):
    title = serializers.CharField(max_length=255)
    abstract = serializers.CharField()

    class Meta(TranslationSerializer.Meta):
        model = ResearchTranslation
        fields = TranslationSerializer.Meta.fields + ["title", "abstract"]


class ResearchAttachmentSerializer(AttachmentLinkSerializer):
    type = serializers.ChoiceField(choices=ResearchAttachment.Type.choices)


class ResearchSerializer(TranslatableModelSerializer):
    translations = ResearchTranslationSerializer(many=True)
    attachments = ResearchAttachmentSerializer(many=True, required=False, source="attachment_links")
    categoryId = serializers.PrimaryKeyRelatedField(
        source="category", queryset=Category.objects.filter(kind=Category.Kind.RESEARCH)
    )
    pages = serializers.IntegerField(min_value=0)
    views = serializers.IntegerField(read_only=True)

    class Meta:
        model = Research
        fields = [
            "id",
            "slug",
            "categoryId",
            "date",
            "pages",
            "views",
            "translations",
            "attachments",
            "createdAt",
            "updatedAt",
        ]

    def to_representation(self, instance):
        data = super().to_representation(instance)
        data["category"] = category_summary(instance.category, self.language)
        return data


__all__ = ["ResearchAttachmentSerializer", "ResearchSerializer", "ResearchTranslationSerializer"]
