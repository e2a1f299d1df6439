"""ViewSets for access control administration."""

from rest_framework import mixins

from core.response import BaseReadOnlyViewSet
from .models import Role
from .permissions import RBACPermission
from .serializers import RoleSerializer


class RoleViewSet(mixins.ListModelMixin, mixins.RetrieveModelMixin, BaseReadOnlyViewSet):
    """Read-only role listing; roles are provisioned by ``seed_rbac``."""

    serializer_class = RoleSerializer
    permission_classes = [RBACPermission]
    permission_resource = "ROLE"
    queryset = Role.objects.prefetch_related("permissions")


__all__ = ["RoleViewSet"]
