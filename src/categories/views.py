"""Category endpoints under ``/api/v1/<lang>/categories/``."""

from rest_framework import serializers

from content.views import ContentQuerySerializer, TranslatableViewSet

from .models import Category
from .serializers import CategorySerializer


class CategoryQuerySerializer(ContentQuerySerializer):
    kind = serializers.ChoiceField(choices=Category.Kind.choices, required=False)
    parentId = serializers.IntegerField(required=False, min_value=1)
    isActive = serializers.BooleanField(required=False, allow_null=True, default=None)


class CategoryViewSet(TranslatableViewSet):
    queryset = Category.objects.prefetch_related("translations")
    serializer_class = CategorySerializer
    permission_resource = "CATEGORY"
    query_serializer_class = CategoryQuerySerializer
    search_fields = ("translations__name", "translations__description")
    count_views = False

    def filter_by(self, queryset, filters):
        queryset = super().filter_by(queryset, filters)
        if filters.get("kind"):
            queryset = queryset.filter(kind=filters["kind"])
        if filters.get("parentId"):
            queryset = queryset.filter(parent_id=filters["parentId"])
        if filters.get("isActive") is not None:
            queryset = queryset.filter(is_active=filters["isActive"])
        return queryset


__all__ = ["CategoryViewSet"]
