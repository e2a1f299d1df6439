"""Serializers for categories."""

from rest_framework import serializers

from content.serializers import TranslatableModelSerializer, TranslationSerializer

from .models import Category, CategoryTranslation

# Reverse relation holding the content filed under each kind.
_CONTENT_RELATIONS = {
    Category.Kind.ARTICLE: "articles",
    Category.Kind.BOOK: "books",
    Category.Kind.RESEARCH: "research",
}


class CategoryTranslationSerializer(TranslationSerializer):
    name = serializers.CharField(max_length=255)
    description = serializers.CharField(required=False, allow_blank=True)
    metaTitle = serializers.CharField(source="meta_title", required=False, allow_blank=True, max_length=255)
    metaDescription = serializers.CharField(source="meta_description", required=False, allow_blank=True)

    class Meta(TranslationSerializer.Meta):
        model = CategoryTranslation
        fields = TranslationSerializer.Meta.fields + ["name", "description", "metaTitle", "metaDescription"]


class CategorySerializer(TranslatableModelSerializer):
    translations = CategoryTranslationSerializer(many=True)
    kind = serializers.ChoiceField(choices=Category.Kind.choices, required=False)
    parentId = serializers.PrimaryKeyRelatedField(
        source="parent", queryset=Category.objects.all(), required=False, allow_null=True
    )
    sortOrder = serializers.IntegerField(source="sort_order", required=False)
    isActive = serializers.BooleanField(source="is_active", required=False)

    class Meta:
        model = Category
        fields = [
            "id",
            "slug",
            "kind",
            "parentId",
            "sortOrder",
            "isActive",
            "translations",
            "createdAt",
            "updatedAt",
        ]

    def validate(self, attrs):
        instance = self.instance
        kind = attrs.get("kind", getattr(instance, "kind", Category.Kind.ARTICLE))
        parent = attrs["parent"] if "parent" in attrs else getattr(instance, "parent", None)

        if parent is not None and instance is not None and parent.pk == instance.pk:
            raise serializers.ValidationError({"parentId": "A category cannot be its own parent."})
        if parent is not None and parent.kind != kind:
            raise serializers.ValidationError({"parentId": "Parent category must be of the same kind."})

        if instance is not None and kind != instance.kind:
            if instance.children.exclude(kind=kind).exists():
                raise serializers.ValidationError({"kind": "Child categories must be of the same kind."})
            content = getattr(instance, _CONTENT_RELATIONS[instance.kind])
            if content.exists():
                raise serializers.ValidationError({"kind": "Cannot change the kind of a category that has content."})
        return attrs


__all__ = ["CategorySerializer", "CategoryTranslationSerializer"]
