"""Serializers for user-related API endpoints."""

from __future__ import annotations

from django.contrib.auth import get_user_model  # type: ignore
from rest_framework import serializers  # type: ignore

User = get_user_model()


class UserSerializer(serializers.ModelSerializer):
    """Public realtor profile. The password hash is never exposed."""

    display_name = serializers.ReadOnlyField()

    class Meta:
        model = User
        fields = [
            "id",
            "username",
            "name",
            "display_name",
            "email",
            "phone",
            "profile_image",
            "role",
            "created_at",
        ]
        read_only_fields = ["id", "username", "role", "created_at"]


class UserShortSerializer(serializers.ModelSerializer):
    """Compact user representation for nested responses."""

    display_name = serializers.ReadOnlyField()

    class Meta:
        model = User
        fields = ["id", "username", "display_name", "profile_image"]
