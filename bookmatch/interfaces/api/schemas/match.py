"""Pydantic models describing matches and chat rooms."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from .base import CamelModel


class CommonBookRead(CamelModel):
    title: str
    author: str


class MatchRead(CamelModel):
    matched_user_id: int
    username: str
    email: str
    common_books: list[CommonBookRead] = Field(default_factory=list)
    match_count: int


class MatchListResponse(CamelModel):
    matches: list[MatchRead] = Field(default_factory=list)


class ChatRoomCreate(CamelModel):
    target_user_id: int | None = None


class ProfileRead(CamelModel):
    id: int
    username: str
    email: str


class SenderRead(CamelModel):
    id: int
    username: str


class ParticipantRead(CamelModel):
    user_id: int
    user: ProfileRead | None = None


class ChatMessageRead(CamelModel):
    id: int
    chat_room_id: int
    sender_id: int
    content: str
    created_at: datetime | None = None
    sender: SenderRead | None = None


class ChatRoomRead(CamelModel):
    id: int
    created_at: datetime | None = None
    updated_at: datetime | None = None
    participants: list[ParticipantRead] = Field(default_factory=list)
    matched_books: list[CommonBookRead] = Field(default_factory=list)
    messages: list[ChatMessageRead] = Field(default_factory=list)


class ChatRoomSummaryRead(ChatRoomRead):
    last_message: ChatMessageRead | None = None


class ChatRoomResponse(CamelModel):
    message: str
    created: bool
    chat_room: ChatRoomRead


class ChatRoomDetailResponse(CamelModel):
    chat_room: ChatRoomRead


class ChatRoomListResponse(CamelModel):
    chat_rooms: list[ChatRoomSummaryRead] = Field(default_factory=list)


__all__ = [
    "ChatMessageRead",
    "ChatRoomCreate",
    "ChatRoomDetailResponse",
    "ChatRoomListResponse",
    "ChatRoomRead",
    "ChatRoomResponse",
    "ChatRoomSummaryRead",
    "CommonBookRead",
    "MatchListResponse",
    "MatchRead",
    "ParticipantRead",
    "ProfileRead",
    "SenderRead",
]
