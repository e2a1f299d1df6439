"""Shared helpers for tests (RBAC seeding, users, tokens, fake Redis)."""

from __future__ import annotations

from typing import Dict, Iterable
from unittest import mock

from django.contrib.auth import get_user_model
from django.test import TestCase
from rest_framework.test import APIClient

from access_control.models import Role
from authentication.managers import UserManager
from authentication.services import TokenService
from scripts.management.commands.seed_rbac import seed_rbac

User = get_user_model()

# One bcrypt hash shared by every test user; hashing at cost 12 is slow.
DEFAULT_PASSWORD = "StrongPass123"
_password_hashes: Dict[str, str] = {}


class FakeRedis:
    """Minimal Redis stub supporting the commands used by TokenService."""

    def __init__(self):
        self._store: Dict[str, str] = {}

    def setex(self, key: str, ttl_seconds: int, value: str) -> None:
        """Mimic Redis SETEX; TTL is ignored in tests, value stored in-memory."""
        self._store[key] = value

    def get(self, key: str):
        """Return stored value for key or None, matching Redis GET semantics."""
        return self._store.get(key)

    def clear(self) -> None:
        self._store.clear()


class BrokenRedis:
    """Redis stub whose every call fails like a lost connection."""

    def setex(self, *args, **kwargs):
        raise ConnectionError("redis down")

    def get(self, *args, **kwargs):
        raise ConnectionError("redis down")


def patch_redis(client) -> list:
    """Start patches routing every Redis lookup to ``client``; returns the patchers."""
    patchers = [
        mock.patch("core.redis_client.get_redis_client", return_value=client),
        mock.patch("authentication.services.get_redis_client", return_value=client),
    ]
    for patcher in patchers:
        patcher.start()
    return patchers


def seed_rbac_basics() -> tuple[dict, dict]:
    """Create base roles, permissions and grants for tests.

    Delegates to the same helpers used by the ``seed_rbac`` management command
    to keep RBAC setup logic in a single place.
    """

    return seed_rbac()


def create_user(username: str, roles: Iterable[Role] = (), password: str = DEFAULT_PASSWORD, **extra):
    """Create a user with a bcrypt-hashed password for tests."""

    if password not in _password_hashes:
        _password_hashes[password] = UserManager.hash_password(password)
    extra.setdefault("email", f"{username}@example.com")
    user = User.objects.create(username=username, password_hash=_password_hashes[password], **extra)
    user.roles.set(list(roles))
    return user


def authenticated_client(user) -> APIClient:
    """APIClient sending a freshly minted access token for ``user``."""

    client = APIClient()
    client.credentials(HTTP_AUTHORIZATION=f"Bearer {TokenService.generate_access_token(user)}")
    return client


class APITestCase(TestCase):
    """TestCase with Redis patched to an in-memory fake and RBAC seeded.

    Provides ``admin`` (SUPER_ADMIN), ``editor`` (EDITOR) and ``reader``
    (USER) accounts plus matching authenticated clients.
    """

    @classmethod
    def setUpClass(cls):
        """Patch Redis clients to use in-memory fake for all tests."""
        super().setUpClass()
        cls.fake_redis = FakeRedis()
        cls.patchers = patch_redis(cls.fake_redis)

    @classmethod
    def tearDownClass(cls):
        """Stop Redis patches after all tests complete."""
        for patcher in cls.patchers:
            patcher.stop()
        super().tearDownClass()

    @classmethod
    def setUpTestData(cls):
        cls.roles, cls.permissions = seed_rbac_basics()
        cls.admin = create_user("admin", [cls.roles["SUPER_ADMIN"]])
        cls.editor = create_user("editor", [cls.roles["EDITOR"]])
        cls.reader = create_user("reader", [cls.roles["USER"]])

    def setUp(self):
        self.fake_redis.clear()
        self.anon_client = APIClient()
        self.admin_client = authenticated_client(self.admin)
        self.editor_client = authenticated_client(self.editor)
        self.reader_client = authenticated_client(self.reader)
