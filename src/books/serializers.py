"""Serializers for books."""

from rest_framework import serializers

from categories.models import Category
from content.serializers import (
    AttachmentLinkSerializer,
    TranslatableModelSerializer,
    TranslationSerializer,
    category_summary,
)

from .models import Book, BookAttachment, BookTranslation


class BookTranslationSerializer(TranslationSerializer):
    title = serializers.CharField(max_length=255)
    author = serializers.CharField(required=False, allow_blank=True, max_length=255)
    publisher = serializers.CharField(required=False, allow_blank=True, max_length=255)
    description = serializers.CharField(required=False, allow_blank=True)
    series = serializers.CharField(required=False, allow_blank=True, max_length=255)
    metaTitle = serializers.CharField(source="meta_title", required=False, allow_blank=True, max_length=255)
    metaDescription = serializers.CharField(source="meta_description", required=False, allow_blank=True)

    class Meta(TranslationSerializer.Meta):
        model = BookTranslation
        fields = TranslationSerializer.Meta.fields + [
            "title",
            "author",
            "publisher",
            "description",
            "series",
            "metaTitle",
            "metaDescription",
        ]


class BookAttachmentSerializer(AttachmentLinkSerializer):
    type = serializers.ChoiceField(choices=BookAttachment.Type.choices)
    caption = serializers.CharField(required=False, allow_blank=True, max_length=255)


class BookSerializer(TranslatableModelSerializer):
    translations = BookTranslationSerializer(many=True)
    attachments = BookAttachmentSerializer(many=True, required=False, source="attachment_links")
    categoryId = serializers.PrimaryKeyRelatedField(
        source="category", queryset=Category.objects.filter(kind=Category.Kind.BOOK)
    )
    isbn = serializers.CharField(required=False, allow_blank=True, max_length=32)
    pages = serializers.IntegerField(min_value=0)
    parts = serializers.IntegerField(min_value=1, required=False)
    partNumber = serializers.IntegerField(source="part_number", min_value=1, required=False)
    totalParts = serializers.IntegerField(source="total_parts", min_value=1, required=False)
    publishYear = serializers.CharField(source="publish_year", required=False, allow_blank=True, max_length=10)
    isPublished = serializers.BooleanField(source="is_published", required=False)
    views = serializers.IntegerField(read_only=True)

    class Meta:
        model = Book
        fields = [
            "id",
            "slug",
            "categoryId",
            "isbn",
            "pages",
            "parts",
            "partNumber",
            "totalParts",
            "publishYear",
            "isPublished",
            "views",
            "translations",
            "attachments",
            "createdAt",
            "updatedAt",
        ]

    def validate(self, attrs):
        part_number = attrs.get("part_number", getattr(self.instance, "part_number", 1))
        total_parts = attrs.get("total_parts", getattr(self.instance, "total_parts", 1))
        if part_number > total_parts:
            raise serializers.ValidationError({"partNumber": "Part number cannot exceed total parts."})
        return attrs

    def to_representation(self, instance):
        data = super().to_representation(instance)
        data["category"] = category_summary(instance.category, self.language)
        return data


__all__ = ["BookAttachmentSerializer", "BookSerializer", "BookTranslationSerializer"]
