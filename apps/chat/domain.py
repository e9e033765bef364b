"""
Conversation participants and inbox summaries

A conversation partner is either a platform user or a realtor's client.
``Participant`` is a tagged variant over the two so callers switch on
``kind`` instead of probing attributes.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List


class ParticipantKind(str, Enum):
    USER = "user"
    CLIENT = "client"


@dataclass(frozen=True)
class Participant:
    kind: ParticipantKind
    id: int
    name: str
    profile_image: str = ""

    @classmethod
    def from_user(cls, user) -> "Participant":
        return cls(
            kind=ParticipantKind.USER,
            id=user.pk,
            name=user.display_name,
            profile_image=user.profile_image or "",
        )

    @classmethod
    def from_client(cls, client) -> "Participant":
        return cls(
            kind=ParticipantKind.CLIENT,
            id=client.pk,
            name=client.name,
            profile_image=client.profile_image or "",
        )

    @property
    def key(self) -> tuple:
        return (self.kind.value, self.id)

    def as_dict(self) -> dict:
        return {
            "kind": self.kind.value,
            "id": self.id,
            "name": self.name,
            "profile_image": self.profile_image,
        }


def counterpart(message, viewer_id: int) -> Participant:
    """Return the other side of ``message`` as seen by ``viewer_id``."""
    if message.client_id is not None:
        return Participant.from_client(message.client)
    if message.sender_id == viewer_id:
        return Participant.from_user(message.receiver)
    return Participant.from_user(message.sender)


@dataclass(frozen=True)
class ConversationSummary:
    participant: Participant
    last_message: object
    unread_count: int = 0


def summarize_conversations(messages: Iterable, viewer_id: int) -> List[ConversationSummary]:
    """
    Group messages by conversation partner

    Returns one summary per partner with the latest message and the number
    of unread messages addressed to the viewer, most recent conversation
    first.
    """
    latest = {}
    unread = {}
    participants = {}
    for message in messages:
        participant = counterpart(message, viewer_id)
        key = participant.key
        participants[key] = participant
        current = latest.get(key)
        if current is None or (message.created_at, message.pk) > (current.created_at, current.pk):
            latest[key] = message
        if message.receiver_id == viewer_id and not message.read:
            unread[key] = unread.get(key, 0) + 1

    summaries = [
        ConversationSummary(
            participant=participants[key],
            last_message=message,
            unread_count=unread.get(key, 0),
        )
        for key, message in latest.items()
    ]
    summaries.sort(key=lambda s: (s.last_message.created_at, s.last_message.pk), reverse=True)
    return summaries
