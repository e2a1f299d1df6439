"""Root URL configuration for the multilingual content API."""
from django.conf import settings
from django.conf.urls.static import static
from django.urls import include, path
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView

content_patterns = [
    path("", include("articles.urls")),
    path("", include("books.urls")),
    path("", include("research.urls")),
    path("", include("categories.urls")),
    path("", include("tags.urls")),
]

urlpatterns = [
    path("api/v1/auth/", include("authentication.urls")),
    path("api/v1/", include("authentication.users_urls")),
    path("api/v1/", include("access_control.urls")),
    path("api/v1/", include("attachments.urls")),
    path("api/v1/<str:lang>/", include(content_patterns)),
    path("api/schema/", SpectacularAPIView.as_view(), name="schema"),
    path("api/docs/", SpectacularSwaggerView.as_view(url_name="schema"), name="swagger-ui"),
] + static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
