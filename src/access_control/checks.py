"""System checks for RBAC configuration."""

from django.core.checks import Error, register

from access_control.permissions import RBACPermission


@register()
def rbac_views_have_permission_resource(app_configs, **kwargs):
    """Ensure RBAC-protected views declare a ``permission_resource`` attribute.

    Only the viewsets listed below are inspected; new RBAC-protected views
    should be added here.
    """
    errors: list[Error] = []

    # Import here to avoid circular imports at module load time.
    from access_control.views import RoleViewSet
    from articles.views import ArticleViewSet
    from attachments.views import AttachmentViewSet
    from authentication.views import UserViewSet
    from books.views import BookViewSet
    from categories.views import CategoryViewSet
    from research.views import ResearchViewSet
    from tags.views import TagViewSet

    rbac_views = [
        ArticleViewSet,
        AttachmentViewSet,
        BookViewSet,
        CategoryViewSet,
        ResearchViewSet,
        RoleViewSet,
        TagViewSet,
        UserViewSet,
    ]

    for view_cls in rbac_views:
        permission_classes = getattr(view_cls, "permission_classes", [])
        if any(issubclass(cls, RBACPermission) for cls in permission_classes):
            resource = getattr(view_cls, "permission_resource", None)
            if not resource:
                errors.append(
                    Error(
                        f"{view_cls.__name__} uses RBACPermission but does not "
                        f"define permission_resource.",
                        obj=view_cls,
                        id="access_control.E001",
                    )
                )

    return errors
