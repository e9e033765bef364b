"""Messaging inbox API views."""

from __future__ import annotations

from django.shortcuts import get_object_or_404  # type: ignore
from rest_framework import generics, status  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import APIView  # type: ignore

from apps.activities.models import Activity
from apps.activities.services import preview, record_activity
from apps.users.services import CurrentRealtorMixin

from .domain import summarize_conversations
from .models import Message
from .serializers import ConversationSerializer, MessageSerializer


class RealtorContextMixin(CurrentRealtorMixin):
    def get_serializer_context(self):  # type: ignore
        context = super().get_serializer_context()
        context["realtor"] = self.get_realtor()
        return context


class MessageCreateView(RealtorContextMixin, generics.CreateAPIView):
    """Send a message to a user or a client."""

    serializer_class = MessageSerializer

    def perform_create(self, serializer):  # type: ignore
        realtor = self.get_realtor()
        message = serializer.save(sender=realtor)
        record_activity(realtor, Activity.Type.MESSAGE, "New message sent", preview(message.content))


class ConversationListView(CurrentRealtorMixin, APIView):
    """Inbox: one entry per conversation partner, newest first."""

    def get(self, request):  # type: ignore
        realtor = self.get_realtor()
        messages = Message.objects.involving(realtor).select_related("sender", "receiver", "client")
        summaries = summarize_conversations(messages, realtor.pk)
        serializer = ConversationSerializer(summaries, many=True, context={"realtor": realtor})
        return Response(serializer.data)


class UserThreadView(RealtorContextMixin, generics.ListAPIView):
    serializer_class = MessageSerializer
    pagination_class = None

    def get_queryset(self):  # type: ignore
        return Message.objects.between_users(self.get_realtor(), self.kwargs["user_id"]).select_related(
            "sender", "receiver", "client"
        )


class ClientThreadView(RealtorContextMixin, generics.ListAPIView):
    serializer_class = MessageSerializer
    pagination_class = None

    def get_queryset(self):  # type: ignore
        return Message.objects.with_client(self.get_realtor(), self.kwargs["client_id"]).select_related(
            "sender", "receiver", "client"
        )


class MessageReadView(CurrentRealtorMixin, APIView):
    """Mark a message addressed to the acting realtor as read."""

    def post(self, request, pk):  # type: ignore
        realtor = self.get_realtor()
        message = get_object_or_404(Message, pk=pk, receiver=realtor)
        message.mark_as_read()
        serializer = MessageSerializer(message, context={"realtor": realtor})
        return Response(serializer.data, status=status.HTTP_200_OK)
