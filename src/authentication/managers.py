"""Custom user manager handling bcrypt hashing and verification."""

import bcrypt
from django.conf import settings
from django.contrib.auth.base_user import BaseUserManager


class UserManager(BaseUserManager):
    """Manager to create users with bcrypt password hashes."""

    use_in_migrations = True

    def create_user(self, username: str, email: str, password: str | None = None, **extra_fields):
        """Create a user with a bcrypt-hashed password."""
        if not username:
            raise ValueError("The username must be set")
        if not email:
            raise ValueError("The email must be set")
        if password is None:
            raise ValueError("Password must be provided")
        user = self.model(username=username, email=self.normalize_email(email), **extra_fields)
        user.password_hash = self.hash_password(password)
        user.save(using=self._db)
        return user

    @staticmethod
    def hash_password(raw_password: str) -> str:
        """Hash a raw password using bcrypt and return the utf-8 string."""
        salt = bcrypt.gensalt(rounds=settings.BCRYPT_ROUNDS)
        hashed = bcrypt.hashpw(raw_password.encode(), salt)
        return hashed.decode()

    @staticmethod
    def verify_password(user, raw_password: str) -> bool:
        """Verify raw password against stored bcrypt hash."""

        if not user.password_hash:
            return False
        try:
            return bcrypt.checkpw(raw_password.encode(), user.password_hash.encode("utf-8"))
        except ValueError:
            # Malformed stored hash.
            return False


__all__ = ["UserManager"]
