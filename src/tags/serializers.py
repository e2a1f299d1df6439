"""Serializers for tags."""

from rest_framework import serializers

from content.serializers import TranslatableModelSerializer, TranslationSerializer

from .models import Tag, TagTranslation


class TagTranslationSerializer(TranslationSerializer):
    name = serializers.CharField(max_length=100)

    class Meta(TranslationSerializer.Meta):
        model = TagTranslation
        fields = TranslationSerializer.Meta.fields + ["name"]


class TagSerializer(TranslatableModelSerializer):
    translations = TagTranslationSerializer(many=True)

    class Meta:
        model = Tag
        fields = ["id", "slug", "translations", "createdAt", "updatedAt"]


__all__ = ["TagSerializer", "TagTranslationSerializer"]
