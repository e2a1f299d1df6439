"""Routing for the tags viewset; mounted under ``api/v1/<lang>/``."""

from django.urls import include, path
from rest_framework.routers import DefaultRouter

from .views import TagViewSet

router = DefaultRouter()
router.include_root_view = False
router.register(r"tags", TagViewSet, basename="tag")

urlpatterns = [
    path("", include(router.urls)),
]
