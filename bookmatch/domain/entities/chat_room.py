"""Domain entities describing pairwise chat rooms."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from .book import CommonBook
from .message import Message
from .user import UserSummary


def pair_key(first_user_id: int, second_user_id: int) -> str:
    """Return the order-independent key identifying a pair of users."""

    low, high = sorted((int(first_user_id), int(second_user_id)))
    return f"{low}:{high}"


@dataclass(frozen=True)
class ChatRoomParticipant:
    """Membership of a user in a chat room."""

    user_id: int
    user: UserSummary | None = None


@dataclass
class ChatRoom:
    """A conversation between exactly two users."""

    id: int | None
    pair_key: str
    created_at: datetime | None = None
    updated_at: datetime | None = None
    participants: list[ChatRoomParticipant] = field(default_factory=list)
    matched_books: list[CommonBook] = field(default_factory=list)
    messages: list[Message] = field(default_factory=list)

    @property
    def participant_ids(self) -> list[int]:
        return [participant.user_id for participant in self.participants]

    @property
    def last_message(self) -> Message | None:
        return self.messages[-1] if self.messages else None


__all__ = ["ChatRoom", "ChatRoomParticipant", "pair_key"]
