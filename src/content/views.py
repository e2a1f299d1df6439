"""ViewSet base class for the per-language content routes.

Routes look like ``/api/v1/<lang>/<resource>/``; the ``lang`` URL kwarg picks
the translation rendered in responses and must be a supported language.
"""

import logging
from typing import Any, Optional

from django.db.models import F, Q
from django.shortcuts import get_object_or_404
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import serializers
from rest_framework.decorators import action

from access_control.permissions import RBACPermission
from core.errors import InvalidLanguage
from core.response import BaseViewSet, api_response

from .languages import is_supported_language

logger = logging.getLogger(__name__)


class ContentQuerySerializer(serializers.Serializer):
    """Filters accepted by every translatable list endpoint."""

    search = serializers.CharField(required=False, allow_blank=True, max_length=200)
    languageCode = serializers.CharField(required=False, max_length=8)


class LanguageMixin:
    """Validate the ``lang`` URL kwarg before authentication runs."""

    def initial(self, request, *args, **kwargs):
        language = kwargs.get("lang")
        if not is_supported_language(language):
            raise InvalidLanguage()
        self.language = language
        super().initial(request, *args, **kwargs)  # type: ignore[misc]


class TranslatableViewSet(LanguageMixin, BaseViewSet):
    """CRUD for a translatable model plus lookup by slug.

    Subclasses set ``queryset``, ``serializer_class``, ``permission_resource``
    and optionally ``query_serializer_class``/``search_fields`` and override
    ``filter_by`` for resource-specific filters.
    """

    permission_classes = [RBACPermission]
    permission_resource: Optional[str] = None
    public_read = True
    lookup_value_regex = r"\d+"
    http_method_names = ["get", "post", "put", "patch", "delete", "head", "options"]

    query_serializer_class: type[serializers.Serializer] = ContentQuerySerializer
    # Translation columns matched by ``search`` (icontains, OR-ed).
    search_fields: tuple[str, ...] = ("translations__title",)
    # Whether retrieving by slug bumps the ``views`` counter.
    count_views = True

    language: Optional[str] = None

    def get_serializer_context(self):
        context = super().get_serializer_context()
        context["language"] = self.language
        return context

    def get_queryset(self):
        queryset = super().get_queryset()
        if self.action != "list":
            return queryset
        query = self.query_serializer_class(data=self.request.query_params)
        query.is_valid(raise_exception=True)
        return self.filter_by(queryset, query.validated_data)

    def filter_by(self, queryset, filters: dict[str, Any]):
        """Apply the validated list filters; subclasses extend and call super."""
        search = filters.get("search")
        if search:
            condition = Q()
            for field in self.search_fields:
                condition |= Q(**{f"{field}__icontains": search})
            queryset = queryset.filter(condition)
        language_code = filters.get("languageCode")
        if language_code:
            queryset = queryset.filter(translations__language_code=language_code)
        if search or language_code:
            queryset = queryset.distinct()
        return queryset

    def update(self, request, *args, **kwargs):
        # PUT is a partial update as well: omitted fields keep their values.
        kwargs["partial"] = True
        return super().update(request, *args, **kwargs)

    def perform_create(self, serializer):
        instance = serializer.save()
        logger.info("%s %s created", type(instance).__name__, instance.pk)

    def perform_destroy(self, instance):
        pk = instance.pk
        instance.delete()
        logger.info("%s %s deleted", type(instance).__name__, pk)

    @extend_schema(parameters=[OpenApiParameter("slug", str, OpenApiParameter.PATH)])
    @action(detail=False, methods=["get"], url_path=r"slug/(?P<slug>[^/.]+)")
    def by_slug(self, request, slug=None, **kwargs):
        """Retrieve a single item by its slug."""
        queryset = self.get_queryset()
        instance = get_object_or_404(queryset, slug=slug)
        if self.count_views and hasattr(instance, "views"):
            type(instance).objects.filter(pk=instance.pk).update(views=F("views") + 1)
            instance.refresh_from_db(fields=["views"])
        return api_response(self.get_serializer(instance).data)


__all__ = ["ContentQuerySerializer", "LanguageMixin", "TranslatableViewSet"]
