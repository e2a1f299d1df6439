"""Authentication helpers that bridge JWT middleware into DRF.

DRF's ``Request.user`` normally relies on its own authentication classes.
Since this project performs JWT verification in ``JWTAuthMiddleware``, this
module provides a lightweight authenticator that simply surfaces the user
already attached to the underlying Django request.
"""

from typing import Any, Optional, Tuple

from django.contrib.auth.models import AnonymousUser
from rest_framework.authentication import BaseAuthentication


class MiddlewareUserAuthentication(BaseAuthentication):
    """Expose ``request._request.user`` (set by middleware) to DRF.

    This authenticator does *not* perform any credential parsing or token
    decoding. Token failures are left on ``request.auth_error`` by the
    middleware and raised by the permission classes of protected views only.
    """

    def authenticate(self, request) -> Optional[Tuple[Any, Any]]:
        django_request = getattr(request, "_request", None)
        if django_request is None:
            return None

        user = getattr(django_request, "user", None)
        if user is None or isinstance(user, AnonymousUser):
            return None

        if not getattr(user, "is_authenticated", False):
            return None

        return user, getattr(django_request, "principal", None)

    def authenticate_header(self, request) -> str:
        # Lets DRF answer 401 rather than downgrading to 403.
        return 'Bearer realm="api"'


__all__ = ["MiddlewareUserAuthentication"]
