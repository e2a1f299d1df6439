"""Routing for the research viewset; mounted under ``api/v1/<lang>/``."""

from django.urls import include, path
from rest_framework.routers import DefaultRouter

from .views import ResearchViewSet

router = DefaultRouter()
router.include_root_view = False
router.register(r"research", ResearchViewSet, basename="research")

urlpatterns = [
    path("", include(router.urls)),
]
