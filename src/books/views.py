"""Book endpoints under ``/api/v1/<lang>/books/``."""

from rest_framework import serializers

from content.views import ContentQuerySerializer, TranslatableViewSet

from .models import Book
from .serializers import BookSerializer


class BookQuerySerializer(ContentQuerySerializer):
    categoryId = serializers.IntegerField(required=False, min_value=1)
    author = serializers.CharField(required=False, allow_blank=True)
    series = serializers.CharField(required=False, allow_blank=True)
    year = serializers.CharField(required=False, max_length=10)
    isPublished = serializers.BooleanField(required=False, allow_null=True, default=None)


class BookViewSet(TranslatableViewSet):
    queryset = Book.objects.select_related("category").prefetch_related(
        "translations", "category__translations", "attachment_links__attachment"
    )
    serializer_class = BookSerializer
    permission_resource = "BOOK"
    query_serializer_class = BookQuerySerializer
    search_fields = ("translations__title", "translations__author", "translations__description")

    def filter_by(self, queryset, filters):
        queryset = super().filter_by(queryset, filters)
        if filters.get("categoryId"):
            queryset = queryset.filter(category_id=filters["categoryId"])
        if filters.get("author"):
            queryset = queryset.filter(translations__author__icontains=filters["author"]).distinct()
        if filters.get("series"):
            queryset = queryset.filter(translations__series__icontains=filters["series"]).distinct()
        if filters.get("year"):
            queryset = queryset.filter(publish_year=filters["year"])
        if filters.get("isPublished") is not None:
            queryset = queryset.filter(is_published=filters["isPublished"])
        return queryset


__all__ = ["BookViewSet"]
