"""Serializers for the properties domain."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from apps.users.serializers import UserShortSerializer

from .models import Property


class PropertySerializer(serializers.ModelSerializer):
    listed_by = UserShortSerializer(read_only=True)
    full_address = serializers.ReadOnlyField()

    class Meta:
        model = Property
        fields = [
            "id",
            "title",
            "address",
            "city",
            "state",
            "zip_code",
            "full_address",
            "price",
            "bedrooms",
            "bathrooms",
            "square_feet",
            "lot_size",
            "description",
            "listing_type",
            "status",
            "main_image",
            "images",
            "features",
            "listed_by",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class PropertyWriteSerializer(serializers.ModelSerializer):
    images = serializers.ListField(child=serializers.URLField(max_length=500), required=False)
    features = serializers.ListField(child=serializers.CharField(max_length=100), required=False)

    class Meta:
        model = Property
        fields = [
            "title",
            "address",
            "city",
            "state",
            "zip_code",
            "price",
            "bedrooms",
            "bathrooms",
            "square_feet",
            "lot_size",
            "description",
            "listing_type",
            "status",
            "main_image",
            "images",
            "features",
        ]

    def validate(self, attrs):  # type: ignore
        main_image = attrs.get("main_image")
        images = attrs.get("images")
        # The gallery always starts with the cover picture
        if main_image and images is not None and main_image not in images:
            attrs["images"] = [main_image, *images]
        return attrs
