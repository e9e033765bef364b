"""Tests for the messaging inbox."""

from __future__ import annotations

from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.activities.models import Activity
from apps.chat.domain import ParticipantKind, counterpart
from apps.chat.models import Message
from apps.clients.models import Client
from apps.users.models import User


class MessageAPITests(APITestCase):
    def setUp(self) -> None:
        self.realtor = User.objects.create_user(username="alexmorgan", email="alex@example.com", name="Alex Morgan")
        self.colleague = User.objects.create_user(username="kate", email="kate@example.com", name="Kate Brown")
        self.client_record = Client.objects.create(
            name="David Miller",
            email="david@example.com",
            realtor=self.realtor,
        )

    def test_send_to_client_records_truncated_activity(self) -> None:
        content = "Hey, are we still meeting today at 3pm? I would also like to see the pool."
        response = self.client.post(
            reverse("message-create"),
            {"client": self.client_record.pk, "content": content},
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertEqual(response.data["participant"]["kind"], "client")
        self.assertEqual(response.data["participant"]["name"], "David Miller")
        activity = Activity.objects.get(type=Activity.Type.MESSAGE)
        self.assertEqual(activity.description, content[:50] + "...")

    def test_requires_exactly_one_recipient(self) -> None:
        response = self.client.post(reverse("message-create"), {"content": "Hi"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        response = self.client.post(
            reverse("message-create"),
            {"receiver": self.colleague.pk, "client": self.client_record.pk, "content": "Hi"},
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_cannot_message_self(self) -> None:
        response = self.client.post(
            reverse("message-create"),
            {"receiver": self.realtor.pk, "content": "Note to self"},
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("receiver", response.data)

    def test_conversations_group_by_participant(self) -> None:
        Message.objects.create(sender=self.colleague, receiver=self.realtor, content="First")
        Message.objects.create(sender=self.realtor, receiver=self.colleague, content="Reply")
        Message.objects.create(sender=self.colleague, receiver=self.realtor, content="Latest from Kate")
        Message.objects.create(sender=self.realtor, client=self.client_record, content="Floor plans attached")

        response = self.client.get(reverse("message-conversations"))
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(len(response.data), 2)

        newest, older = response.data
        self.assertEqual(newest["participant"]["kind"], "client")
        self.assertEqual(newest["unread_count"], 0)
        self.assertEqual(older["participant"], {
            "kind": "user",
            "id": self.colleague.pk,
            "name": "Kate Brown",
            "profile_image": "",
        })
        self.assertEqual(older["last_message"]["content"], "Latest from Kate")
        self.assertEqual(older["unread_count"], 2)

    def test_threads(self) -> None:
        Message.objects.create(sender=self.colleague, receiver=self.realtor, content="Hello")
        Message.objects.create(sender=self.realtor, receiver=self.colleague, content="Hi Kate")
        Message.objects.create(sender=self.realtor, client=self.client_record, content="Hi David")

        response = self.client.get(reverse("message-user-thread", args=[self.colleague.pk]))
        self.assertEqual([m["content"] for m in response.data], ["Hello", "Hi Kate"])

        response = self.client.get(reverse("message-client-thread", args=[self.client_record.pk]))
        self.assertEqual([m["content"] for m in response.data], ["Hi David"])

    def test_mark_read(self) -> None:
        message = Message.objects.create(sender=self.colleague, receiver=self.realtor, content="Hello")
        response = self.client.post(reverse("message-read", args=[message.pk]))
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertTrue(response.data["read"])
        message.refresh_from_db()
        self.assertIsNotNone(message.read_at)

    def test_cannot_mark_outgoing_message_read(self) -> None:
        message = Message.objects.create(sender=self.realtor, receiver=self.colleague, content="Hello")
        response = self.client.post(reverse("message-read", args=[message.pk]))
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_counterpart_is_the_other_user(self) -> None:
        incoming = Message.objects.create(sender=self.colleague, receiver=self.realtor, content="Hello")
        outgoing = Message.objects.create(sender=self.realtor, receiver=self.colleague, content="Hi")
        for message in (incoming, outgoing):
            participant = counterpart(message, self.realtor.pk)
            self.assertIs(participant.kind, ParticipantKind.USER)
            self.assertEqual(participant.id, self.colleague.pk)
