"""Serializers for login/refresh/logout and user administration."""

from typing import cast

from django.contrib.auth import get_user_model
from django.db import transaction
from rest_framework import serializers

from access_control.models import Role
from core.errors import Conflict

from .managers import UserManager

User = get_user_model()


class LoginSerializer(serializers.Serializer):
    username = serializers.CharField(max_length=50)
    password = serializers.CharField(write_only=True, trim_whitespace=False)


class RefreshSerializer(serializers.Serializer):
    refreshToken = serializers.CharField(required=False, allow_blank=True)


class UserSummarySerializer(serializers.ModelSerializer):
    """Public user projection; never includes the password hash."""

    fullName = serializers.CharField(source="full_name", read_only=True)
    roles = serializers.SlugRelatedField(slug_field="name", many=True, read_only=True)

    class Meta:
        model = User
        fields = ["id", "username", "email", "fullName", "roles"]
        read_only_fields = fields


class UserDetailSerializer(UserSummarySerializer):
    isActive = serializers.BooleanField(source="is_active", read_only=True)
    createdAt = serializers.DateTimeField(source="date_joined", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    class Meta(UserSummarySerializer.Meta):
        fields = UserSummarySerializer.Meta.fields + ["isActive", "createdAt", "updatedAt"]
        read_only_fields = fields


class UserCreateSerializer(serializers.Serializer):
    """Create a user with a bcrypt-hashed password and optional roles."""

    username = serializers.RegexField(r"^[A-Za-z0-9_.-]+$", min_length=3, max_length=50)
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True, min_length=8, trim_whitespace=False)
    fullName = serializers.CharField(source="full_name", required=False, allow_blank=True, max_length=150)
    roleIds = serializers.ListField(child=serializers.IntegerField(min_value=1), required=False)

    def validate_roleIds(self, value):
        return resolve_roles(value)

    def validate(self, attrs):
        taken = User.objects.filter(username=attrs["username"]) | User.objects.filter(email__iexact=attrs["email"])
        if taken.exists():
            raise Conflict("Email or username already exists.")
        return attrs

    def create(self, validated_data):
        roles = validated_data.pop("roleIds", [])
        manager = cast(UserManager, User.objects)
        with transaction.atomic():
            user = manager.create_user(**validated_data)
            if roles:
                replace_roles(user, roles)
        return user


class UserStatusSerializer(serializers.Serializer):
    isActive = serializers.BooleanField()


class UserRolesSerializer(serializers.Serializer):
    roleIds = serializers.ListField(child=serializers.IntegerField(min_value=1), allow_empty=True)

    def validate_roleIds(self, value):
        return resolve_roles(value)


def resolve_roles(role_ids: list[int]) -> list[Role]:
    """Look up every id, rejecting the request when any is unknown."""
    unique_ids = list(dict.fromkeys(role_ids))
    roles = list(Role.objects.filter(pk__in=unique_ids))
    missing = sorted(set(unique_ids) - {role.pk for role in roles})
    if missing:
        raise serializers.ValidationError(f"Invalid role IDs: {', '.join(map(str, missing))}.")
    return roles


def replace_roles(user, roles: list[Role]) -> None:
    """Swap the user's roles for ``roles`` in one transaction."""
    with transaction.atomic():
        user.roles.set(roles)


__all__ = [
    "LoginSerializer",
    "RefreshSerializer",
    "UserCreateSerializer",
    "UserDetailSerializer",
    "UserRolesSerializer",
    "UserStatusSerializer",
    "UserSummarySerializer",
    "replace_roles",
]
