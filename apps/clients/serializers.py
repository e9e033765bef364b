"""Serializers for clients."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from .models import Client


class ClientSerializer(serializers.ModelSerializer):
    realtor = serializers.ReadOnlyField(source="realtor_id")

    class Meta:
        model = Client
        fields = ["id", "name", "email", "phone", "profile_image", "realtor", "created_at"]
        read_only_fields = ["id", "realtor", "created_at"]
