"""Serializers for access control resources."""

from rest_framework import serializers

from .models import Role


class RoleSerializer(serializers.ModelSerializer):
    """Role with the names of the permissions it grants."""

    permissions = serializers.SlugRelatedField(slug_field="name", many=True, read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)

    class Meta:
        model = Role
        fields = ["id", "name", "description", "permissions", "createdAt"]
        read_only_fields = fields


__all__ = ["RoleSerializer"]
