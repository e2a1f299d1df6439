"""User accounts and persisted refresh tokens.

Django's built-in groups/permissions (``PermissionsMixin``) are not used:
roles, permissions and groups live in the ``access_control`` app.
"""

from typing import ClassVar, Optional

from django.contrib.auth.models import AbstractBaseUser
from django.db import models
from django.utils import timezone

from .managers import UserManager


class User(AbstractBaseUser):
    """Account identified by username with a bcrypt password hash."""

    username = models.CharField(max_length=50, unique=True)
    email = models.EmailField(unique=True)
    full_name = models.CharField(max_length=150, blank=True)
    password_hash = models.CharField(max_length=128)
    is_active = models.BooleanField(default=True)
    roles = models.ManyToManyField(
        "access_control.Role",
        through="access_control.UserRole",
        related_name="users",
        blank=True,
    )
    date_joined = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    USERNAME_FIELD = "username"
    EMAIL_FIELD = "email"
    REQUIRED_FIELDS: ClassVar[list[str]] = ["email"]

    objects = UserManager()

    class Meta:
        ordering = ["-date_joined", "-id"]

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.username

    def set_password(self, raw_password: Optional[str]) -> None:  # type: ignore[override]
        """Override to ensure bcrypt hashing via manager utility."""

        if raw_password is None:
            self.password_hash = ""
        else:
            self.password_hash = UserManager.hash_password(raw_password)

    def check_password(self, raw_password: Optional[str]) -> bool:  # type: ignore[override]
        if raw_password is None:
            return False
        return UserManager.verify_password(self, raw_password)


class RefreshTokenQuerySet(models.QuerySet):
    def expired(self):
        return self.filter(expires_at__lte=timezone.now())


class RefreshToken(models.Model):
    """A refresh token issued at login; a token string not stored here is never valid."""

    token = models.CharField(max_length=512, unique=True)
    user = models.ForeignKey(User, on_delete=models.CASCADE, related_name="refresh_tokens")
    created_at = models.DateTimeField(auto_now_add=True)
    expires_at = models.DateTimeField()

    objects = RefreshTokenQuerySet.as_manager()

    class Meta:
        ordering = ["-created_at"]
        indexes = [models.Index(fields=["expires_at"], name="refresh_token_expires_idx")]

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"RefreshToken(user={self.user_id})"

    @property
    def is_expired(self) -> bool:
        return self.expires_at <= timezone.now()


__all__ = ["RefreshToken", "User"]
