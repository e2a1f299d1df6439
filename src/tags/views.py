"""Tag endpoints under ``/api/v1/<lang>/tags/``."""

from content.views import TranslatableViewSet

from .models import Tag
from .serializers import TagSerializer


class TagViewSet(TranslatableViewSet):
    queryset = Tag.objects.prefetch_related("translations")
    serializer_class = TagSerializer
    permission_resource = "TAG"
    search_fields = ("translations__name",)
    count_views = False


__all__ = ["TagViewSet"]
