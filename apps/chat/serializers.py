"""Serializers for the messaging inbox."""

from __future__ import annotations

from django.contrib.auth import get_user_model  # type: ignore
from rest_framework import serializers  # type: ignore

from apps.clients.models import Client

from .domain import counterpart
from .models import Message

User = get_user_model()


class MessageSerializer(serializers.ModelSerializer):
    sender = serializers.ReadOnlyField(source="sender_id")
    receiver = serializers.PrimaryKeyRelatedField(
        queryset=User.objects.all(),
        required=False,
        allow_null=True,
    )
    client = serializers.PrimaryKeyRelatedField(
        queryset=Client.objects.all(),
        required=False,
        allow_null=True,
    )
    participant = serializers.SerializerMethodField()

    class Meta:
        model = Message
        fields = [
            "id",
            "sender",
            "receiver",
            "client",
            "participant",
            "content",
            "read",
            "read_at",
            "created_at",
        ]
        read_only_fields = ["id", "sender", "read", "read_at", "created_at", "participant"]

    def get_participant(self, obj: Message) -> dict | None:
        viewer = self.context.get("realtor")
        if viewer is None:
            return None
        return counterpart(obj, viewer.pk).as_dict()

    def validate(self, attrs):  # type: ignore
        receiver = attrs.get("receiver")
        client = attrs.get("client")
        if (receiver is None) == (client is None):
            raise serializers.ValidationError("Provide exactly one of 'receiver' or 'client'.")
        realtor = self.context.get("realtor")
        if realtor is not None:
            if receiver is not None and receiver.pk == realtor.pk:
                raise serializers.ValidationError({"receiver": "Cannot send a message to yourself."})
            if client is not None and client.realtor_id != realtor.pk:
                raise serializers.ValidationError({"client": "Unknown client."})
        return attrs


class ConversationSerializer(serializers.Serializer):
    """Read-only view of ``apps.chat.domain.ConversationSummary``."""

    participant = serializers.SerializerMethodField()
    last_message = serializers.SerializerMethodField()
    unread_count = serializers.IntegerField()

    def get_participant(self, obj) -> dict:
        return obj.participant.as_dict()

    def get_last_message(self, obj) -> dict:
        return MessageSerializer(obj.last_message, context=self.context).data
