"""Chat domain models for RealtorHub.

Provides basic messaging between a realtor and other users or clients.
Conversations are not stored: they are derived from messages by
``apps.chat.domain.summarize_conversations``.
"""

from __future__ import annotations

from django.conf import settings
from django.db import models
from django.db.models import Q
from django.utils import timezone
from django.utils.translation import gettext_lazy as _


class MessageQuerySet(models.QuerySet):
    def involving(self, user):
        """Messages sent or received by ``user``."""
        return self.filter(Q(sender=user) | Q(receiver=user))

    def between_users(self, user, other_user_id: int):
        return self.filter(
            Q(sender=user, receiver_id=other_user_id) | Q(sender_id=other_user_id, receiver=user)
        )

    def with_client(self, user, client_id: int):
        return self.filter(sender=user, client_id=client_id)


class Message(models.Model):
    """
    Represents a single message.

    Exactly one of ``receiver`` (a user) and ``client`` is set.
    """

    sender = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="sent_messages",
        help_text=_("Sender"),
    )
    receiver = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name="received_messages",
        help_text=_("Receiving user"),
    )
    client = models.ForeignKey(
        "clients.Client",
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name="messages",
        help_text=_("Receiving client"),
    )
    content = models.TextField(help_text=_("Message text"))

    # Read status
    read = models.BooleanField(default=False, help_text=_("Read by the receiver"))
    read_at = models.DateTimeField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)

    objects = MessageQuerySet.as_manager()

    class Meta:
        verbose_name = _("Message")
        verbose_name_plural = _("Messages")
        ordering = ["created_at", "id"]
        indexes = [
            models.Index(fields=["sender", "-created_at"], name="message_sender_created_idx"),
            models.Index(fields=["receiver", "read"], name="message_receiver_read_idx"),
        ]
        constraints = [
            models.CheckConstraint(
                condition=(
                    Q(receiver__isnull=False, client__isnull=True)
                    | Q(receiver__isnull=True, client__isnull=False)
                ),
                name="message_single_recipient",
            ),
        ]

    def __str__(self) -> str:
        preview = self.content[:50] + "..." if len(self.content) > 50 else self.content
        return f"Message from {self.sender_id} at {self.created_at}: {preview}"

    def mark_as_read(self) -> None:
        """Mark this message as read."""
        if not self.read:
            self.read = True
            self.read_at = timezone.now()
            self.save(update_fields=["read", "read_at"])
