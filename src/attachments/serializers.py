"""Serializers for uploading and describing attachments."""

import json
import re

from django.conf import settings
from rest_framework import serializers

from .constants import ALLOWED_MIME_TYPES
from .models import Attachment

# Collections become a storage subdirectory.
_COLLECTION_NAME = re.compile(r"[A-Za-z0-9_-]+")


class MetadataField(serializers.JSONField):
    """JSON object that may also arrive as a string in multipart form data."""

    def to_internal_value(self, data):
        if isinstance(data, str):
            try:
                data = json.loads(data) if data else None
            except ValueError:
                self.fail("invalid")
        return super().to_internal_value(data)


class AttachmentSerializer(serializers.ModelSerializer):
    """Read/update projection; the file itself is only set on upload."""

    originalName = serializers.CharField(source="original_name", read_only=True)
    mimeType = serializers.CharField(source="mime_type", read_only=True)
    altText = serializers.CharField(source="alt_text", required=False, allow_blank=True, max_length=255)
    metadata = MetadataField(required=False, allow_null=True)
    url = serializers.SerializerMethodField()
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    class Meta:
        model = Attachment
        fields = [
            "id",
            "originalName",
            "mimeType",
            "size",
            "disk",
            "collection",
            "altText",
            "metadata",
            "url",
            "createdAt",
            "updatedAt",
        ]
        read_only_fields = ["id", "size", "disk"]

    def get_url(self, obj) -> str:
        url = obj.url
        request = self.context.get("request")
        if url and request is not None:
            return request.build_absolute_uri(url)
        return url

    def validate_collection(self, value: str) -> str:
        if value and not _COLLECTION_NAME.fullmatch(value):
            raise serializers.ValidationError(
                "Collection may only contain letters, digits, underscores and hyphens."
            )
        return value

    def validate_metadata(self, value):
        if value is not None and not isinstance(value, dict):
            raise serializers.ValidationError("Metadata must be a JSON object.")
        return value


class AttachmentUploadSerializer(AttachmentSerializer):
    """Multipart upload: ``file`` plus optional collection, altText and metadata."""

    file = serializers.FileField(write_only=True)

    class Meta(AttachmentSerializer.Meta):
        fields = AttachmentSerializer.Meta.fields + ["file"]

    def validate_file(self, upload):
        if upload.size > settings.ATTACHMENT_MAX_SIZE:
            raise serializers.ValidationError(
                f"File exceeds the maximum size of {settings.ATTACHMENT_MAX_SIZE} bytes."
            )
        content_type = (getattr(upload, "content_type", "") or "").lower()
        if content_type not in ALLOWED_MIME_TYPES:
            raise serializers.ValidationError(f"File type '{content_type}' is not allowed.")
        return upload

    def create(self, validated_data):
        upload = validated_data["file"]
        validated_data.update(
            original_name=upload.name,
            mime_type=upload.content_type.lower(),
            size=upload.size,
        )
        return super().create(validated_data)


__all__ = ["AttachmentSerializer", "AttachmentUploadSerializer"]
