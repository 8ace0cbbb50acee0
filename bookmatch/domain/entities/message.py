"""Domain entity representing a chat message."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from .user import UserSummary


@dataclass
class Message:
    """A message posted by a participant into a chat room."""

    id: int | None
    chat_room_id: int
    sender_id: int
    content: str
    created_at: datetime | None = None
    sender: UserSummary | None = None


__all__ = ["Message"]
