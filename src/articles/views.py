"""Article endpoints under ``/api/v1/<lang>/articles/``."""

from rest_framework import serializers

from content.views import ContentQuerySerializer, TranslatableViewSet

from .models import Article
from .serializers import ArticleSerializer


class ArticleQuerySerializer(ContentQuerySerializer):
    categoryId = serializers.IntegerField(required=False, min_value=1)
    tag = serializers.SlugField(required=False)
    isPublished = serializers.BooleanField(required=False, allow_null=True, default=None)


class ArticleViewSet(TranslatableViewSet):
    queryset = Article.objects.select_related("category").prefetch_related(
        "translations",
        "category__translations",
        "tags__translations",
        "attachment_links__attachment",
    )
    serializer_class = ArticleSerializer
    permission_resource = "ARTICLE"
    query_serializer_class = ArticleQuerySerializer
    search_fields = ("translations__title", "translations__summary", "translations__body")

    def filter_by(self, queryset, filters):
        queryset = super().filter_by(queryset, filters)
        if filters.get("categoryId"):
            queryset = queryset.filter(category_id=filters["categoryId"])
        if filters.get("tag"):
            queryset = queryset.filter(tags__slug=filters["tag"])
        if filters.get("isPublished") is not None:
            queryset = queryset.filter(is_published=filters["isPublished"])
        return queryset


__all__ = ["ArticleViewSet"]
