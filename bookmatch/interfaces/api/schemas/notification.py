"""Pydantic models describing notification payloads."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from .base import CamelModel


class NotificationRead(CamelModel):
    """Representation of a notification delivered to the client."""

    id: int
    user_id: int
    type: str
    title: str
    content: str
    related_id: int | None = None
    link: str | None = None
    is_read: bool = False
    created_at: datetime | None = None


class NotificationListResponse(CamelModel):
    notifications: list[NotificationRead] = Field(default_factory=list)
    unread_count: int = 0


class UnreadCountResponse(CamelModel):
    unread_count: int


__all__ = ["NotificationListResponse", "NotificationRead", "UnreadCountResponse"]
