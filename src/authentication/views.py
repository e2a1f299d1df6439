"""Authentication endpoints and user administration."""

from typing import Any, Optional

from django.conf import settings
from django.contrib.auth import get_user_model
from drf_spectacular.utils import extend_schema
from rest_framework import mixins, status
from rest_framework.decorators import action

from access_control.permissions import IsAuthenticatedPrincipal, RBACPermission, require_principal
from core.response import BaseAPIView, BaseReadOnlyViewSet, api_response

from . import services
from .serializers import (
    LoginSerializer,
    RefreshSerializer,
    UserCreateSerializer,
    UserDetailSerializer,
    UserRolesSerializer,
    UserStatusSerializer,
    UserSummarySerializer,
    replace_roles,
)

User = get_user_model()


class LoginView(BaseAPIView):
    permission_classes: list[Any] = []

    @extend_schema(request=LoginSerializer)
    def post(self, request):
        """Authenticate and issue access + refresh tokens."""
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        result = services.login(**serializer.validated_data)
        response = api_response(
            {
                "user": UserSummarySerializer(result.user).data,
                "accessToken": result.access_token,
                "refreshToken": result.refresh_token,
            },
            message="Login successful",
        )
        response.set_cookie(
            settings.REFRESH_TOKEN_COOKIE,
            result.refresh_token,
            expires=result.refresh_expires_at,
            httponly=True,
            secure=not settings.DEBUG,
            samesite="Strict",
        )
        return response


class RefreshView(BaseAPIView):
    permission_classes: list[Any] = []

    @extend_schema(request=RefreshSerializer)
    def post(self, request):
        """Exchange a persisted refresh token for a new access token."""
        serializer = RefreshSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        refresh_token = serializer.validated_data.get("refreshToken") or request.COOKIES.get(
            settings.REFRESH_TOKEN_COOKIE
        )
        access_token = services.refresh_access_token(refresh_token)
        return api_response({"accessToken": access_token}, message="Token refreshed successfully")


class LogoutView(BaseAPIView):
    """Revoke the refresh token and blocklist the current access token."""

    permission_classes: list[Any] = []

    @extend_schema(request=RefreshSerializer)
    def post(self, request):
        serializer = RefreshSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        refresh_token = serializer.validated_data.get("refreshToken") or request.COOKIES.get(
            settings.REFRESH_TOKEN_COOKIE
        )
        services.logout(refresh_token=refresh_token, access_token=_get_bearer_token(request))
        response = api_response(None, message="Logged out successfully")
        response.delete_cookie(settings.REFRESH_TOKEN_COOKIE, samesite="Strict")
        return response


class MeView(BaseAPIView):
    permission_classes = [IsAuthenticatedPrincipal]

    def get(self, request):
        """Return the authenticated principal."""
        principal = require_principal(request)
        return api_response(
            {
                "id": principal.id,
                "username": principal.username,
                "email": request.user.email,
                "fullName": request.user.full_name,
                "roles": list(principal.roles),
                "permissions": sorted(principal.permissions),
            }
        )


class UserViewSet(
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    mixins.CreateModelMixin,
    BaseReadOnlyViewSet,
):
    """List, inspect and create users; change their status and roles."""

    queryset = User.objects.prefetch_related("roles")
    permission_classes = [RBACPermission]
    permission_resource = "USER"
    lookup_value_regex = r"\d+"

    def get_serializer_class(self):
        if self.action == "create":
            return UserCreateSerializer
        if self.action == "update_status":
            return UserStatusSerializer
        if self.action == "update_roles":
            return UserRolesSerializer
        return UserDetailSerializer

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = serializer.save()
        return api_response(
            UserDetailSerializer(user).data,
            status=status.HTTP_201_CREATED,
            message="User created successfully",
        )

    @action(detail=True, methods=["patch"], url_path="status")
    def update_status(self, request, pk=None):
        user = self.get_object()
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user.is_active = serializer.validated_data["isActive"]
        user.save(update_fields=["is_active", "updated_at"])
        return api_response(UserDetailSerializer(user).data, message="User status updated successfully")

    @action(detail=True, methods=["put"], url_path="roles")
    def update_roles(self, request, pk=None):
        """Replace the user's roles in one transaction."""
        user = self.get_object()
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        replace_roles(user, serializer.validated_data["roleIds"])
        user = self.get_queryset().get(pk=user.pk)
        return api_response(UserDetailSerializer(user).data, message="User roles updated successfully")


def _get_bearer_token(request) -> Optional[str]:
    """Extract the Bearer token from Authorization header if present."""
    auth_header = request.META.get("HTTP_AUTHORIZATION", "")
    if auth_header.startswith("Bearer "):
        return auth_header[len("Bearer "):].strip()
    return None


__all__ = ["LoginView", "LogoutView", "MeView", "RefreshView", "UserViewSet"]
