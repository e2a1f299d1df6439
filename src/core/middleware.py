"""Middleware to authenticate requests via JWT and the Redis blocklist."""

import logging
from typing import Optional

from django.contrib.auth.models import AnonymousUser
from django.utils.deprecation import MiddlewareMixin
from rest_framework.exceptions import APIException, AuthenticationFailed

from access_control.permissions import build_principal
from authentication.models import User
from authentication.services import BlocklistUnavailable, TokenService

from .errors import ServiceUnavailable

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


class JWTAuthMiddleware(MiddlewareMixin):
    """Decode the access JWT and attach ``request.user`` and ``request.principal``.

    A failed verification does not short-circuit the request: the error is
    stored on ``request.auth_error`` and only raised by the permission classes
    of protected views, so public routes keep working with a stale token.
    A blocklist outage is recorded the same way and surfaces as 503 on
    protected routes only; login, refresh, logout and public reads proceed.
    """

    def process_request(self, request):  # type: ignore[override]
        request.user = AnonymousUser()
        request.principal = None
        request.auth_error = None

        auth_header = request.META.get("HTTP_AUTHORIZATION", "")
        if not auth_header.startswith(BEARER_PREFIX):
            return None

        token = auth_header[len(BEARER_PREFIX):].strip()
        try:
            payload = TokenService.verify_access_token(token)
        except BlocklistUnavailable:
            logger.error("Token blocklist unavailable during authentication")
            request.auth_error = ServiceUnavailable("Authentication service unavailable.")
            return None
        except APIException as exc:
            request.auth_error = exc
            return None

        user = self._get_user(payload.get("sub"))
        if user is None or not user.is_active:
            request.auth_error = AuthenticationFailed("User not found or inactive")
            return None

        request.user = user
        request.principal = build_principal(user)
        return None

    @staticmethod
    def _get_user(user_id: Optional[str]) -> Optional[User]:
        if not user_id:
            return None
        try:
            return User.objects.get(pk=user_id)
        except (User.DoesNotExist, ValueError):
            return None


__all__ = ["JWTAuthMiddleware"]
