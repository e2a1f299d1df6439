"""Research endpoints under ``/api/v1/<lang>/research/``."""

from rest_framework import serializers

from content.views import ContentQuerySerializer, TranslatableViewSet

from .models import Research
from .serializers import ResearchSerializer


class ResearchQuerySerializer(ContentQuerySerializer):
    categoryId = serializers.IntegerField(required=False, min_value=1)
    dateFrom = serializers.DateField(required=False)
    dateTo = serializers.DateField(required=False)

    def validate(self, attrs):
        if attrs.get("dateFrom") and attrs.get("dateTo") and attrs["dateFrom"] > attrs["dateTo"]:
            raise serializers.ValidationError({"dateFrom": "dateFrom must not be after dateTo."})
        return attrs


class ResearchViewSet(TranslatableViewSet):
    queryset = Research.objects.select_related("category").prefetch_related(
        "translations", "category__translations", "attachment_links__attachment"
    )
    serializer_class = ResearchSerializer
    permission_resource = "RESEARCH"
    query_serializer_class = ResearchQuerySerializer
    search_fields = ("translations__title", "translations__abstract")

    def filter_by(self, queryset, filters):
        queryset = super().filter_by(queryset, filters)
        if filters.get("categoryId"):
            queryset = queryset.filter(category_id=filters["categoryId"])
        if filters.get("dateFrom"):
            queryset = queryset.filter(date__gte=filters["dateFrom"])
        if filters.get("dateTo"):
            queryset = queryset.filter(date__lte=filters["dateTo"])
        return queryset


__all__ = ["ResearchViewSet"]
