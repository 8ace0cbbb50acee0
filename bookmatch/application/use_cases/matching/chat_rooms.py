"""Use cases for reading a user's chat rooms."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from bookmatch.domain.entities import ChatRoom
from bookmatch.domain.exceptions import NotFoundError, PermissionDeniedError
from bookmatch.infrastructure.repositories import ChatRoomRepository


def get_chat_room(session: Session, *, room_id: int, user_id: int) -> ChatRoom:
    """Return the room with its messages in display order.

    Only participants may read a room.
    """

    ensure_participant(session, room_id=room_id, user_id=user_id)
    room = ChatRoomRepository(session).get(room_id)
    if room is None:
        raise NotFoundError("Chat room not found")
    return room


def list_chat_rooms(session: Session, *, user_id: int) -> Sequence[ChatRoom]:
    """Return the rooms of ``user_id``, most recently active first."""

    return ChatRoomRepository(session).list_for_user(user_id)


def ensure_participant(session: Session, *, room_id: int, user_id: int) -> None:
    repository = ChatRoomRepository(session)
    if not repository.exists(room_id):
        raise NotFoundError("Chat room not found")
    if not repository.is_participant(room_id, user_id):
        raise PermissionDeniedError("You are not a participant of this chat room")


__all__ = ["ensure_participant", "get_chat_room", "list_chat_rooms"]
