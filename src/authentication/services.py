"""Token lifecycle: JWT issuance and verification, login, refresh, logout.

Access and refresh tokens are HS256 JWTs signed with separate secrets. Refresh
tokens are additionally persisted; a refresh token string that is not in the
``RefreshToken`` table is never accepted. Revoked access tokens are tracked by
``jti`` in a Redis blocklist until they would have expired anyway.
"""

import logging
import time
import uuid
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone as dt_timezone
from functools import lru_cache
from typing import Any, Optional

import jwt
from django.conf import settings
from django.contrib.auth import get_user_model
from rest_framework.exceptions import AuthenticationFailed, NotAuthenticated

from core.errors import InvalidRefreshToken, InvalidToken, TokenExpired
from core.redis_client import get_redis_client

from .managers import UserManager
from .models import RefreshToken

logger = logging.getLogger(__name__)

User = get_user_model()

ACCESS = "access"
REFRESH = "refresh"


class BlocklistUnavailable(Exception):
    """Raised when Redis blocklist cannot be checked (fail-closed)."""


class TokenService:
    """Handle JWT issuance, decoding, and blocklist operations."""

    ALGORITHM = "HS256"
    BLOCKLIST_PREFIX = "blocklist:token:"

    @classmethod
    def access_ttl(cls) -> timedelta:
        return timedelta(minutes=settings.ACCESS_TOKEN_LIFETIME_MINUTES)

    @classmethod
    def refresh_ttl(cls) -> timedelta:
        return timedelta(days=settings.REFRESH_TOKEN_LIFETIME_DAYS)

    @classmethod
    def generate_access_token(cls, user) -> str:
        now = datetime.now(dt_timezone.utc)
        payload = cls._build_payload(user, ACCESS, now, cls.access_ttl())
        return jwt.encode(payload, settings.ACCESS_TOKEN_SECRET, algorithm=cls.ALGORITHM)

    @classmethod
    def generate_refresh_token(cls, user) -> tuple[str, datetime]:
        """Return a signed refresh token and its expiry."""
        now = datetime.now(dt_timezone.utc)
        payload = cls._build_payload(user, REFRESH, now, cls.refresh_ttl())
        token = jwt.encode(payload, settings.REFRESH_TOKEN_SECRET, algorithm=cls.ALGORITHM)
        return token, datetime.fromtimestamp(payload["exp"], tz=dt_timezone.utc)

    @classmethod
    def _build_payload(cls, user, token_type: str, issued_at: datetime, ttl: timedelta) -> dict[str, Any]:
        exp = issued_at + ttl
        return {
            "sub": str(user.pk),
            # Unique per token, so two logins in the same second still yield
            # distinct refresh token strings.
            "jti": str(uuid.uuid4()),
            "exp": int(exp.timestamp()),
            "iat": int(issued_at.timestamp()),
            "type": token_type,
        }

    @classmethod
    def decode_token(cls, token: str, secret: str, expected_type: str) -> dict[str, Any]:
        """Decode and validate a JWT; raises PyJWT errors on bad signature or expiry."""

        payload = jwt.decode(
            token,
            secret,
            algorithms=[cls.ALGORITHM],
            options={"require": ["sub", "exp", "iat", "jti"]},
        )
        if payload.get("type") != expected_type:
            raise jwt.InvalidTokenError("Invalid token type")
        return payload

    @classmethod
    def verify_access_token(cls, token: str) -> dict[str, Any]:
        """Validate an access token and check it is not revoked.

        Raises ``TokenExpired`` on expiry, ``InvalidToken`` on any other
        failure, and ``BlocklistUnavailable`` when Redis cannot be reached.
        """

        try:
            payload = cls.decode_token(token, settings.ACCESS_TOKEN_SECRET, ACCESS)
        except jwt.ExpiredSignatureError as exc:
            raise TokenExpired() from exc
        except jwt.InvalidTokenError as exc:
            raise InvalidToken() from exc

        if cls.is_token_blocked(payload["jti"]):
            raise InvalidToken("Token has been revoked.")
        return payload

    @classmethod
    def block_token(cls, jti: str, exp: int) -> None:
        """Add token jti to blocklist until its expiration timestamp."""

        client = get_redis_client()
        ttl_seconds = max(1, exp - int(time.time()))
        try:
            client.setex(f"{cls.BLOCKLIST_PREFIX}{jti}", ttl_seconds, "1")
        except Exception as exc:
            raise BlocklistUnavailable("Redis unavailable while blocklisting") from exc

    @classmethod
    def is_token_blocked(cls, jti: str) -> bool:
        """Check if a token jti is present in the blocklist."""

        client = get_redis_client()
        try:
            return client.get(f"{cls.BLOCKLIST_PREFIX}{jti}") is not None
        except Exception as exc:
            raise BlocklistUnavailable("Redis unavailable while checking blocklist") from exc


@dataclass(frozen=True)
class LoginResult:
    user: Any
    access_token: str
    refresh_token: str
    refresh_expires_at: datetime


@lru_cache(maxsize=1)
def _dummy_password_hash() -> str:
    return UserManager.hash_password(uuid.uuid4().hex)


def _invalid_credentials() -> AuthenticationFailed:
    return AuthenticationFailed("Invalid credentials")


def login(username: str, password: str) -> LoginResult:
    """Verify credentials, issue both tokens and persist the refresh token.

    Unknown user, inactive user and wrong password fail identically.
    """

    user = User.objects.filter(username=username).first()
    if user is None:
        # Keep the response time in line with a real bcrypt comparison.
        UserManager.verify_password(_DummyUser(_dummy_password_hash()), password)
        logger.warning("Login failed")
        raise _invalid_credentials()

    password_ok = UserManager.verify_password(user, password)
    if not password_ok or not user.is_active:
        logger.warning("Login failed")
        raise _invalid_credentials()

    access_token = TokenService.generate_access_token(user)
    refresh_token, expires_at = TokenService.generate_refresh_token(user)
    RefreshToken.objects.create(token=refresh_token, user=user, expires_at=expires_at)
    logger.info("User %s logged in", user.pk)
    return LoginResult(user, access_token, refresh_token, expires_at)


def refresh_access_token(refresh_token: Optional[str]) -> str:
    """Exchange a persisted, valid refresh token for a new access token."""

    if not refresh_token:
        raise NotAuthenticated("Refresh token required")

    stored = RefreshToken.objects.filter(token=refresh_token).first()
    if stored is None:
        raise InvalidRefreshToken()

    try:
        payload = TokenService.decode_token(refresh_token, settings.REFRESH_TOKEN_SECRET, REFRESH)
    except jwt.ExpiredSignatureError as exc:
        stored.delete()
        raise InvalidRefreshToken() from exc
    except jwt.InvalidTokenError as exc:
        raise InvalidRefreshToken() from exc

    if stored.is_expired:
        stored.delete()
        raise InvalidRefreshToken()

    user = User.objects.filter(pk=payload["sub"]).first()
    if user is None or not user.is_active or user.pk != stored.user_id:
        raise AuthenticationFailed("User not found or inactive")

    logger.info("Access token refreshed for user %s", user.pk)
    return TokenService.generate_access_token(user)


def logout(refresh_token: Optional[str] = None, access_token: Optional[str] = None) -> None:
    """Revoke the given refresh token and blocklist the access token, if any.

    Never fails: an unknown refresh token is a no-op and blocklist errors are
    logged, not raised.
    """

    if refresh_token:
        deleted, _ = RefreshToken.objects.filter(token=refresh_token).delete()
        logger.info("Logout removed %s refresh token(s)", deleted)

    if access_token:
        try:
            payload = TokenService.decode_token(access_token, settings.ACCESS_TOKEN_SECRET, ACCESS)
            TokenService.block_token(payload["jti"], payload["exp"])
        except jwt.InvalidTokenError:
            logger.debug("Ignoring invalid access token on logout")
        except BlocklistUnavailable:
            logger.error("Could not blocklist access token during logout")


def purge_expired_refresh_tokens() -> int:
    """Delete refresh tokens past their expiry; returns the number removed."""

    deleted, _ = RefreshToken.objects.expired().delete()
    logger.info("Purged %s expired refresh token(s)", deleted)
    return deleted


class _DummyUser:
    def __init__(self, password_hash: str):
        self.password_hash = password_hash


__all__ = [
    "BlocklistUnavailable",
    "LoginResult",
    "TokenService",
    "login",
    "logout",
    "purge_expired_refresh_tokens",
    "refresh_access_token",
]
