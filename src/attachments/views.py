"""Attachment upload, listing, metadata update and deletion."""

import logging

from django.db import transaction
from rest_framework import serializers
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser

from access_control.permissions import RBACPermission
from core.response import BaseViewSet

from .models import Attachment
from .serializers import AttachmentSerializer, AttachmentUploadSerializer

logger = logging.getLogger(__name__)


class AttachmentQuerySerializer(serializers.Serializer):
    mimeType = serializers.CharField(required=False)
    collection = serializers.CharField(required=False)
    disk = serializers.CharField(required=False)
    search = serializers.CharField(required=False, allow_blank=True)


class AttachmentViewSet(BaseViewSet):
    queryset = Attachment.objects.all()
    permission_classes = [RBACPermission]
    permission_resource = "ATTACHMENT"
    public_read = True
    parser_classes = [MultiPartParser, FormParser, JSONParser]
    lookup_value_regex = r"\d+"

    def get_serializer_class(self):
        if self.action == "create":
            return AttachmentUploadSerializer
        return AttachmentSerializer

    def get_queryset(self):
        queryset = super().get_queryset()
        if self.action != "list":
            return queryset
        query = AttachmentQuerySerializer(data=self.request.query_params)
        query.is_valid(raise_exception=True)
        filters = query.validated_data
        if filters.get("mimeType"):
            queryset = queryset.filter(mime_type=filters["mimeType"])
        if filters.get("collection"):
            queryset = queryset.filter(collection=filters["collection"])
        if filters.get("disk"):
            queryset = queryset.filter(disk=filters["disk"])
        if filters.get("search"):
            queryset = queryset.filter(original_name__icontains=filters["search"])
        return queryset

    def perform_create(self, serializer):
        attachment = serializer.save()
        logger.info("Attachment %s uploaded (%s, %s bytes)", attachment.pk, attachment.mime_type, attachment.size)

    def perform_destroy(self, instance):
        """Delete the row (refused while linked) and then the stored bytes."""
        file_name = instance.file.name
        storage = instance.file.storage
        with transaction.atomic():
            instance.delete()
        if file_name:
            try:
                storage.delete(file_name)
            except OSError:
                logger.warning("Failed to delete stored file for attachment %s", file_name)


__all__ = ["AttachmentViewSet"]
