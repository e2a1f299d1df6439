"""Authorization guard: token verification, permission checks, public reads."""

from __future__ import annotations

import time

import jwt
from django.conf import settings
from rest_framework.test import APIClient

from authentication.models import RefreshToken
from authentication.services import TokenService
from tests.utils import APITestCase, BrokenRedis, authenticated_client, create_user, patch_redis

ARTICLES_URL = "/api/v1/en/articles/"
USERS_URL = "/api/v1/users/"
LOGOUT_URL = "/api/v1/auth/logout/"


def _expired_access_token(user) -> str:
    now = int(time.time())
    payload = {"sub": str(user.pk), "jti": "expired", "iat": now - 3600, "exp": now - 60, "type": "access"}
    return jwt.encode(payload, settings.ACCESS_TOKEN_SECRET, algorithm="HS256")


class GuardTests(APITestCase):
    def _client_with(self, header: str) -> APIClient:
        client = APIClient()
        client.credentials(HTTP_AUTHORIZATION=header)
        return client

    def test_missing_token_is_unauthorized(self):
        response = self.anon_client.get(USERS_URL)
        body = response.json()

        self.assertEqual(response.status_code, 401)
        self.assertEqual(body, {"success": False, "error": {"code": "UNAUTHORIZED", "message": "No token provided"}})

    def test_non_bearer_header_is_treated_as_missing(self):
        response = self._client_with("Token abc").get(USERS_URL)
        self.assertEqual(response.status_code, 401)

    def test_garbage_token_is_invalid(self):
        response = self._client_with("Bearer not-a-jwt").get(USERS_URL)

        self.assertEqual(response.status_code, 403)
        self.assertEqual(response.json()["error"]["code"], "INVALID_TOKEN")

    def test_expired_token(self):
        response = self._client_with(f"Bearer {_expired_access_token(self.admin)}").get(USERS_URL)

        self.assertEqual(response.status_code, 403)
        self.assertEqual(response.json()["error"]["code"], "TOKEN_EXPIRED")

    def test_refresh_token_is_not_an_access_token(self):
        refresh_token, _ = TokenService.generate_refresh_token(self.admin)
        response = self._client_with(f"Bearer {refresh_token}").get(USERS_URL)

        self.assertEqual(response.status_code, 403)
        self.assertEqual(response.json()["error"]["code"], "INVALID_TOKEN")

    def test_token_signed_with_wrong_secret(self):
        now = int(time.time())
        payload = {"sub": str(self.admin.pk), "jti": "j", "iat": now, "exp": now + 60, "type": "access"}
        token = jwt.encode(payload, "some-other-secret", algorithm="HS256")

        response = self._client_with(f"Bearer {token}").get(USERS_URL)
        self.assertEqual(response.status_code, 403)

    def test_inactive_user_token_is_unauthorized(self):
        user = create_user("sleepy", [self.roles["ADMIN"]])
        client = self._client_with(f"Bearer {TokenService.generate_access_token(user)}")
        user.is_active = False
        user.save(update_fields=["is_active"])

        self.assertEqual(client.get(USERS_URL).status_code, 401)

    def test_missing_permission_is_forbidden(self):
        response = self.reader_client.post(ARTICLES_URL, {}, format="json")
        body = response.json()

        self.assertEqual(response.status_code, 403)
        self.assertEqual(body["error"], {"code": "FORBIDDEN", "message": "Insufficient permissions"})

    def test_user_without_roles_is_forbidden(self):
        client = self._client_with(f"Bearer {TokenService.generate_access_token(create_user('plain'))}")
        self.assertEqual(client.get(USERS_URL).status_code, 403)

    def test_permission_granted(self):
        self.assertEqual(self.admin_client.get(USERS_URL).status_code, 200)

    def test_public_reads_need_no_token(self):
        self.assertEqual(self.anon_client.get(ARTICLES_URL).status_code, 200)

    def test_public_reads_ignore_bad_token(self):
        response = self._client_with("Bearer not-a-jwt").get(ARTICLES_URL)
        self.assertEqual(response.status_code, 200)

    def test_writes_without_token_are_unauthorized(self):
        response = self.anon_client.post(ARTICLES_URL, {}, format="json")
        self.assertEqual(response.status_code, 401)

    def test_failed_authorization_has_no_side_effects(self):
        self.reader_client.delete(f"{USERS_URL}{self.admin.pk}/")
        self.reader_client.put(f"{USERS_URL}{self.admin.pk}/roles/", {"roleIds": []}, format="json")
        self.assertTrue(self.admin.roles.filter(name="SUPER_ADMIN").exists())


class BlocklistOutageTests(APITestCase):
    """Redis failures while checking the blocklist fail closed on protected routes only."""

    def setUp(self):
        super().setUp()
        self.client_with_token = authenticated_client(self.admin)
        for patcher in patch_redis(BrokenRedis()):
            self.addCleanup(patcher.stop)

    def test_protected_route_returns_503(self):
        response = self.client_with_token.get(USERS_URL)

        self.assertEqual(response.status_code, 503)
        self.assertEqual(response.json()["error"]["code"], "SERVICE_UNAVAILABLE")

    def test_public_read_still_served(self):
        response = self.client_with_token.get(ARTICLES_URL)
        self.assertEqual(response.status_code, 200)

    def test_logout_succeeds_and_revokes_refresh_token(self):
        refresh_token, expires_at = TokenService.generate_refresh_token(self.admin)
        RefreshToken.objects.create(token=refresh_token, user=self.admin, expires_at=expires_at)

        response = self.client_with_token.post(LOGOUT_URL, {"refreshToken": refresh_token}, format="json")

        self.assertEqual(response.status_code, 200)
        self.assertTrue(response.json()["success"])
        self.assertFalse(RefreshToken.objects.filter(token=refresh_token).exists())
