"""Management commands and system checks."""

from __future__ import annotations

import os
from datetime import timedelta
from io import StringIO
from unittest import mock

from django.contrib.auth import get_user_model
from django.core.management import call_command
from django.test import TestCase
from django.utils import timezone

from access_control.checks import rbac_views_have_permission_resource
from access_control.models import Permission, Role
from articles.views import ArticleViewSet
from authentication.managers import UserManager
from authentication.models import RefreshToken
from scripts.management.commands.seed_rbac import permission_names
from tests.utils import create_user

User = get_user_model()


def _run(*args) -> str:
    out = StringIO()
    call_command(*args, stdout=out)
    return out.getvalue()


class SeedRBACCommandTests(TestCase):
    def test_seeds_roles_and_permissions(self):
        output = _run("seed_rbac")

        self.assertIn("RBAC seed completed.", output)
        self.assertEqual(Permission.objects.count(), len(permission_names()))
        self.assertEqual(
            set(Role.objects.values_list("name", flat=True)), {"SUPER_ADMIN", "ADMIN", "EDITOR", "USER"}
        )

    def test_role_grants(self):
        _run("seed_rbac")

        editor = set(Role.objects.get(name="EDITOR").permissions.values_list("name", flat=True))
        reader = set(Role.objects.get(name="USER").permissions.values_list("name", flat=True))

        self.assertIn("CREATE_ARTICLE", editor)
        self.assertIn("DELETE_ATTACHMENT", editor)
        self.assertNotIn("CREATE_USER", editor)
        self.assertTrue(reader)
        self.assertTrue(all(name.startswith("READ_") for name in reader))

    def test_is_idempotent(self):
        _run("seed_rbac")
        _run("seed_rbac")

        self.assertEqual(Permission.objects.count(), len(permission_names()))
        self.assertEqual(Role.objects.count(), 4)

    def test_reset_recreates_grants(self):
        _run("seed_rbac")
        Role.objects.get(name="USER").permissions.clear()

        output = _run("seed_rbac", "--reset")

        self.assertIn("Seeded RBAC data cleared.", output)
        self.assertTrue(Role.objects.get(name="USER").permissions.exists())

    def test_creates_super_admin_from_environment(self):
        env = {
            "SUPER_ADMIN_USERNAME": "root",
            "SUPER_ADMIN_EMAIL": "root@example.com",
            "SUPER_ADMIN_PASSWORD": "RootPass123",
        }
        with mock.patch.dict(os.environ, env):
            _run("seed_rbac")
            _run("seed_rbac")

        user = User.objects.get(username="root")
        self.assertEqual(list(user.roles.values_list("name", flat=True)), ["SUPER_ADMIN"])
        self.assertTrue(UserManager.verify_password(user, "RootPass123"))

    def test_skips_super_admin_without_environment(self):
        with mock.patch.dict(os.environ, {}, clear=True):
            output = _run("seed_rbac")

        self.assertIn("skipping super admin", output)
        self.assertFalse(User.objects.exists())


class PurgeRefreshTokensCommandTests(TestCase):
    def test_removes_only_expired_tokens(self):
        user = create_user("someone")
        now = timezone.now()
        RefreshToken.objects.create(token="old", user=user, expires_at=now - timedelta(days=1))
        RefreshToken.objects.create(token="live", user=user, expires_at=now + timedelta(days=1))

        output = _run("purge_refresh_tokens")

        self.assertIn("Removed 1 expired refresh token(s).", output)
        self.assertEqual(list(RefreshToken.objects.values_list("token", flat=True)), ["live"])


class PermissionResourceCheckTests(TestCase):
    def test_configured_views_pass(self):
        self.assertEqual(rbac_views_have_permission_resource(None), [])

    def test_missing_resource_is_reported(self):
        with mock.patch.object(ArticleViewSet, "permission_resource", None):
            errors = rbac_views_have_permission_resource(None)

        self.assertEqual([error.id for error in errors], ["access_control.E001"])
