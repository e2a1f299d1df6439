"""Serializers for articles, their translations and attachment links."""

from rest_framework import serializers

from categories.models import Category
from content.serializers import (
    AttachmentLinkSerializer,
    TranslatableModelSerializer,
    TranslationSerializer,
    category_summary,
)
from content.translations import translated_value
from tags.models import Tag

from .models import Article, ArticleAttachment, ArticleTranslation


class ArticleTranslationSerializer(TranslationSerializer):
    title = serializers.CharField(max_length=255)
    summary = serializers.CharField(required=False, allow_blank=True)
    body = serializers.CharField()
    metaTitle = serializers.CharField(source="meta_title", required=False, allow_blank=True, max_length=255)
    metaDescription = serializers.CharField(source="meta_description", required=False, allow_blank=True)

    class Meta(TranslationSerializer.Meta):
        model = ArticleTranslation
        fields = TranslationSerializer.Meta.fields + ["title", "summary", "body", "metaTitle", "metaDescription"]


class ArticleAttachmentSerializer(AttachmentLinkSerializer):
    type = serializers.ChoiceField(choices=ArticleAttachment.Type.choices)
    caption = serializers.CharField(required=False, allow_blank=True, max_length=255)


class ArticleSerializer(TranslatableModelSerializer):
    translations = ArticleTranslationSerializer(many=True)
    attachments = ArticleAttachmentSerializer(many=True, required=False, source="attachment_links")
    categoryId = serializers.PrimaryKeyRelatedField(
        source="category", queryset=Category.objects.filter(kind=Category.Kind.ARTICLE)
    )
    tagIds = serializers.PrimaryKeyRelatedField(
        source="tags", queryset=Tag.objects.all(), many=True, required=False
    )
    publishedAt = serializers.DateTimeField(source="published_at", required=False, allow_null=True)
    isPublished = serializers.BooleanField(source="is_published", required=False)
    views = serializers.IntegerField(read_only=True)

    class Meta:
        model = Article
        fields = [
            "id",
            "slug",
            "categoryId",
            "tagIds",
            "publishedAt",
            "isPublished",
            "views",
            "translations",
            "attachments",
            "createdAt",
            "updatedAt",
        ]

    def to_representation(self, instance):
        data = super().to_representation(instance)
        data["category"] = category_summary(instance.category, self.language)
        data["tags"] = [
            {
                "id": tag.pk,
                "slug": tag.slug,
                "name": translated_value(tag.translations.all(), "name", self.language),
            }
            for tag in instance.tags.all()
        ]
        return data


__all__ = ["ArticleAttachmentSerializer", "ArticleSerializer", "ArticleTranslationSerializer"]
