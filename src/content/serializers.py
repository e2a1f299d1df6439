"""Serializer base classes shared by every translatable resource.

``TranslatableModelSerializer`` owns the write protocol common to articles,
books, research, categories and tags:

- translations are validated as a set (at least one, no repeated language,
  exactly one default) and always replace the stored set wholesale;
- the slug is taken from the payload when given (validated, then made unique
  within the collection), otherwise derived from the default translation, and
  falls back to ``<prefix>-<id>`` when nothing usable remains;
- on update the slug is only regenerated when the default translation's
  title/name actually changes.

Reads resolve the translation for the language in the serializer context
(``context["language"]``) and flatten its fields into the representation.
"""

from typing import Any, Optional

from django.db import transaction
from django.db.models import Q
from rest_framework import serializers

from attachments.models import Attachment
from attachments.serializers import AttachmentSerializer

from .languages import LANGUAGE_CODES, get_language
from .slugs import MAX_SLUG_LENGTH, fallback_slug, generate_slug, generate_unique_slug, is_valid_slug
from .translations import resolve_translation

# Keys of a translation representation that are not flattened onto the entity.
_TRANSLATION_META_KEYS = ("id", "languageCode", "isDefault")


def unique_slug_for(model, base_slug: str, exclude_pk: Optional[int] = None) -> str:
    """Make ``base_slug`` unique among ``model`` rows, ignoring ``exclude_pk``."""
    existing = model.objects.filter(Q(slug=base_slug) | Q(slug__startswith=f"{base_slug}-"))
    if exclude_pk is not None:
        existing = existing.exclude(pk=exclude_pk)
    return generate_unique_slug(base_slug, set(existing.values_list("slug", flat=True)))


def validate_translation_set(translations: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """Check a submitted translation list as a whole."""
    if not translations:
        raise serializers.ValidationError("At least one translation is required.")

    codes = [item["language_code"] for item in translations]
    duplicates = sorted({code for code in codes if codes.count(code) > 1})
    if duplicates:
        raise serializers.ValidationError(f"Duplicate language codes: {', '.join(duplicates)}.")

    defaults = sum(1 for item in translations if item.get("is_default"))
    if defaults != 1:
        raise serializers.ValidationError("Exactly one translation must be marked as default.")
    return translations


class TranslationSerializer(serializers.ModelSerializer):
    """Base for per-model translation serializers; subclasses extend ``Meta.fields``."""

    languageCode = serializers.ChoiceField(source="language_code", choices=LANGUAGE_CODES)
    isDefault = serializers.BooleanField(source="is_default", default=False)

    class Meta:
        fields = ["id", "languageCode", "isDefault"]
        read_only_fields = ["id"]


class AttachmentLinkSerializer(serializers.Serializer):
    """One ordered link to an uploaded attachment; subclasses narrow ``type``."""

    id = serializers.IntegerField(read_only=True)
    attachmentId = serializers.PrimaryKeyRelatedField(source="attachment", queryset=Attachment.objects.all())
    type = serializers.CharField(max_length=20)
    order = serializers.IntegerField(min_value=0, default=0)

    def to_representation(self, instance):
        data = super().to_representation(instance)
        data["attachment"] = AttachmentSerializer(instance.attachment, context=self.context).data
        return data


def validate_attachment_links(links: list[dict[str, Any]]) -> list[dict[str, Any]]:
    attachment_ids = [link["attachment"].pk for link in links]
    if len(attachment_ids) != len(set(attachment_ids)):
        raise serializers.ValidationError("Duplicate attachment IDs are not allowed.")
    orders = [link.get("order", 0) for link in links]
    if len(orders) != len(set(orders)):
        raise serializers.ValidationError("Duplicate attachment orders are not allowed.")
    return links


class TranslatableModelSerializer(serializers.ModelSerializer):
    """ModelSerializer for ``content.models.TranslatableModel`` subclasses.

    Subclasses declare ``translations = <X>TranslationSerializer(many=True)``
    and, for entities with files, ``attachments = <X>LinkSerializer(many=True,
    required=False, source="attachment_links")``.
    """

    slug = serializers.CharField(required=False, allow_blank=True, max_length=MAX_SLUG_LENGTH)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    # Names of child relations replaced wholesale on write.
    child_relations = ("translations", "attachment_links")

    @property
    def language(self) -> Optional[str]:
        return self.context.get("language")

    def validate_slug(self, value: str) -> str:
        if value and not is_valid_slug(value):
            raise serializers.ValidationError(
                "Slug may only contain lowercase letters, digits and single hyphens."
            )
        return value

    def validate_translations(self, value):
        return validate_translation_set(value)

    def validate_attachments(self, value):
        return validate_attachment_links(value)

    # Representation -------------------------------------------------------

    def to_representation(self, instance):
        data = super().to_representation(instance)
        translations = list(instance.translations.all())
        translation = resolve_translation(translations, self.language)
        translation_data = (
            self.fields["translations"].child.to_representation(translation) if translation is not None else None
        )
        for key, value in self._blank_translation().items():
            data[key] = translation_data.get(key, value) if translation_data else value
        data["translation"] = translation_data
        data["availableLanguages"] = [
            {"code": lang.code, "name": lang.name, "nativeName": lang.native_name}
            for lang in (get_language(t.language_code) for t in translations)
            if lang is not None
        ]
        return data

    def _blank_translation(self) -> dict[str, str]:
        child = self.fields["translations"].child
        return {name: "" for name in child.fields if name not in _TRANSLATION_META_KEYS}

    # Writes ---------------------------------------------------------------

    def create(self, validated_data):
        children = self._pop_children(validated_data)
        slug = validated_data.pop("slug", "")
        model = self.Meta.model

        with transaction.atomic():
            base = slug or self._slug_from_translations(children.get("translations"))
            if base:
                validated_data["slug"] = unique_slug_for(model, base)
            else:
                # Placeholder until the primary key is known.
                validated_data["slug"] = unique_slug_for(model, f"{model.slug_prefix}-new")
            instance = super().create(validated_data)
            if not base:
                instance.slug = unique_slug_for(model, fallback_slug(model.slug_prefix, instance.pk), instance.pk)
                instance.save(update_fields=["slug"])
            self._replace_children(instance, children)
        return instance

    def update(self, instance, validated_data):
        children = self._pop_children(validated_data)
        slug = validated_data.pop("slug", "")
        model = self.Meta.model

        with transaction.atomic():
            if slug:
                if slug != instance.slug:
                    instance.slug = unique_slug_for(model, slug, instance.pk)
            elif "translations" in children:
                current = self._slug_source(list(instance.translations.all()))
                submitted = self._slug_source(children["translations"])
                if submitted != current:
                    base = generate_slug(submitted) or fallback_slug(model.slug_prefix, instance.pk)
                    instance.slug = unique_slug_for(model, base, instance.pk)
            instance = super().update(instance, validated_data)
            self._replace_children(instance, children)
        return instance

    def _pop_children(self, validated_data) -> dict[str, list[dict[str, Any]]]:
        return {name: validated_data.pop(name) for name in self.child_relations if name in validated_data}

    def _slug_source(self, translations) -> str:
        default = resolve_translation(translations or [])
        if default is None:
            return ""
        field = self.Meta.model.slug_source_field
        value = default.get(field) if isinstance(default, dict) else getattr(default, field, "")
        return value or ""

    def _slug_from_translations(self, translations) -> str:
        return generate_slug(self._slug_source(translations))

    @staticmethod
    def _replace_children(instance, children: dict[str, list[dict[str, Any]]]) -> None:
        """Delete and recreate each supplied child collection."""
        for name, items in children.items():
            relation = instance._meta.get_field(name)
            child_model = relation.related_model
            fk_name = relation.field.name
            child_model.objects.filter(**{fk_name: instance}).delete()
            child_model.objects.bulk_create([child_model(**{fk_name: instance}, **item) for item in items])
        if children:
            # Drop prefetched rows so the response reflects the new children.
            getattr(instance, "_prefetched_objects_cache", {}).clear()


def category_summary(category, language: Optional[str]) -> Optional[dict[str, Any]]:
    """Compact category projection embedded in articles, books and research."""
    if category is None:
        return None
    translation = resolve_translation(category.translations.all(), language)
    return {
        "id": category.pk,
        "slug": category.slug,
        "name": getattr(translation, "name", "") if translation else "",
    }


__all__ = [
    "AttachmentLinkSerializer",
    "TranslatableModelSerializer",
    "TranslationSerializer",
    "category_summary",
    "unique_slug_for",
    "validate_attachment_links",
    "validate_translation_set",
]
