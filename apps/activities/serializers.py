"""Serializers for the activity feed."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from apps.properties.models import Property

from .models import Activity


class ActivitySerializer(serializers.ModelSerializer):
    user = serializers.ReadOnlyField(source="user_id")
    property = serializers.PrimaryKeyRelatedField(
        queryset=Property.objects.all(),
        required=False,
        allow_null=True,
    )
    type_display = serializers.ReadOnlyField(source="get_type_display")

    class Meta:
        model = Activity
        fields = [
            "id",
            "type",
            "type_display",
            "title",
            "description",
            "user",
            "property",
            "created_at",
        ]
        read_only_fields = ["id", "user", "created_at", "type_display"]
