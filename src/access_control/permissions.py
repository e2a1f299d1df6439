"""Permission aggregation and the DRF permission classes of the guard chain.

Requests are authenticated by ``core.middleware.JWTAuthMiddleware``, which
attaches a ``Principal`` (or remembers why it could not). The classes here
turn that into DRF errors on protected views:

- no principal and no remembered failure -> 401 ``NotAuthenticated``
- remembered token failure -> that error (401/403)
- principal lacks the required permission -> 403 ``PermissionDenied``
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Optional

from rest_framework import permissions
from rest_framework.exceptions import NotAuthenticated, PermissionDenied

# HTTP method -> permission action prefix.
METHOD_ACTIONS = {
    "GET": "READ",
    "HEAD": "READ",
    "OPTIONS": "READ",
    "POST": "CREATE",
    "PUT": "UPDATE",
    "PATCH": "UPDATE",
    "DELETE": "DELETE",
}


@dataclass(frozen=True)
class Principal:
    """Authenticated caller as seen by authorization checks."""

    id: int
    username: str
    roles: tuple[str, ...] = ()
    permissions: frozenset[str] = field(default_factory=frozenset)

    @property
    def is_authenticated(self) -> bool:
        return True


def aggregate_permissions(grants: Iterable[Iterable[str]]) -> frozenset[str]:
    """Union of permission names across roles/groups, independent of order."""
    names: set[str] = set()
    for grant in grants:
        names.update(grant)
    return frozenset(names)


def effective_permissions(user) -> frozenset[str]:
    """Every permission name reachable through the user's roles and groups."""
    grants: list[list[str]] = []
    for role in user.roles.prefetch_related("permissions"):
        grants.append([permission.name for permission in role.permissions.all()])
    for group in user.groups.prefetch_related("permissions"):
        grants.append([permission.name for permission in group.permissions.all()])
    return aggregate_permissions(grants)


def is_authorized(effective: Iterable[str], required: str) -> bool:
    return required in effective


def build_principal(user) -> Principal:
    return Principal(
        id=user.pk,
        username=user.username,
        roles=tuple(user.roles.values_list("name", flat=True)),
        permissions=effective_permissions(user),
    )


def require_principal(request) -> Principal:
    """Return the request's principal or raise the matching auth error."""
    error = getattr(request, "auth_error", None)
    if error is not None:
        raise error
    principal = getattr(request, "principal", None)
    if principal is None:
        raise NotAuthenticated("No token provided")
    return principal


class IsAuthenticatedPrincipal(permissions.BasePermission):
    """Require a verified bearer token."""

    def has_permission(self, request, view) -> bool:
        require_principal(request)
        return True


class HasPermission(permissions.BasePermission):
    """Require a verified bearer token carrying ``required_permission``."""

    required_permission: Optional[str] = None
    message = "Insufficient permissions"

    def get_required_permission(self, request, view) -> Optional[str]:
        return self.required_permission

    def has_permission(self, request, view) -> bool:
        principal = require_principal(request)
        required = self.get_required_permission(request, view)
        if required is None:
            return True
        if not is_authorized(principal.permissions, required):
            raise PermissionDenied(self.message)
        return True


def require_permission(name: str) -> type[HasPermission]:
    """Build a permission class demanding ``name``, for ``permission_classes``."""
    return type(f"Require{name.title().replace('_', '')}", (HasPermission,), {"required_permission": name})


class RBACPermission(HasPermission):
    """Derive the required permission from the HTTP method and the view.

    Views declare ``permission_resource`` (e.g. ``"ARTICLE"``); a POST then
    requires ``CREATE_ARTICLE``, PUT/PATCH ``UPDATE_ARTICLE`` and so on. Views
    setting ``public_read = True`` serve safe methods without a token.
    """

    def has_permission(self, request, view) -> bool:
        if request.method in permissions.SAFE_METHODS and getattr(view, "public_read", False):
            return True
        return super().has_permission(request, view)

    def get_required_permission(self, request, view) -> Optional[str]:
        resource = getattr(view, "permission_resource", None)
        action = METHOD_ACTIONS.get(request.method)
        if not resource or not action:
            # Misconfigured view or unknown method: deny.
            raise PermissionDenied(self.message)
        return f"{action}_{resource}"


__all__ = [
    "HasPermission",
    "IsAuthenticatedPrincipal",
    "METHOD_ACTIONS",
    "Principal",
    "RBACPermission",
    "aggregate_permissions",
    "build_principal",
    "effective_permissions",
    "is_authorized",
    "require_permission",
    "require_principal",
]
