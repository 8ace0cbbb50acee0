"""Return the chat room shared by two users, creating it when needed."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from sqlalchemy.orm import Session

from bookmatch.application.use_cases.notifications import (
    NotificationDispatcher,
    notify_chat_opened,
)
from bookmatch.domain.entities import Book, ChatRoom, NotificationDelivery, pair_key
from bookmatch.domain.exceptions import InvalidRequestError, NotFoundError
from bookmatch.infrastructure.repositories import (
    BookRepository,
    ChatRoomRepository,
    DuplicateRoomError,
    UserRepository,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RoomResolution:
    """Outcome of :meth:`RoomResolver.resolve`."""

    room: ChatRoom
    created: bool
    notification: NotificationDelivery | None = None


class RoomResolver:
    """Look up or atomically create the single room of a pair of users."""

    def __init__(self, session: Session, dispatcher: NotificationDispatcher) -> None:
        self._rooms = ChatRoomRepository(session)
        self._books = BookRepository(session)
        self._users = UserRepository(session)
        self._dispatcher = dispatcher

    def resolve(self, requester_id: int, target_id: int | None) -> RoomResolution:
        if not target_id:
            raise InvalidRequestError("Target user id is required")
        if target_id == requester_id:
            raise InvalidRequestError("You cannot open a chat room with yourself")
        if self._users.get_summary(target_id) is None:
            raise NotFoundError("Target user not found")

        existing = self._find_shared_room(requester_id, target_id)
        if existing is not None:
            return RoomResolution(room=existing, created=False)

        matched_books = self.common_books(requester_id, target_id)
        key = pair_key(requester_id, target_id)
        try:
            room_id = self._rooms.create_room(
                pair_key=key,
                participant_ids=(requester_id, target_id),
                matched_book_ids=[book.id for book in matched_books],
            )
        except DuplicateRoomError as exc:
            logger.info("Chat room for pair %s was created concurrently; reusing %s", key, exc.room_id)
            return RoomResolution(room=self._load(exc.room_id), created=False)

        room = self._load(room_id)
        logger.info(
            "Chat room %s created for users %s and %s with %s matched book(s)",
            room_id,
            requester_id,
            target_id,
            len(matched_books),
        )
        delivery = notify_chat_opened(
            self._dispatcher,
            room_id=room_id,
            requester=self._users.get_summary(requester_id),
            target_id=target_id,
        )
        return RoomResolution(room=room, created=True, notification=delivery)

    def common_books(self, requester_id: int, target_id: int) -> list[Book]:
        """Return the requester's copies of the books the target also owns."""

        target_keys = {book.key for book in self._books.list_for_user(target_id)}
        return [book for book in self._books.list_for_user(requester_id) if book.key in target_keys]

    def _find_shared_room(self, requester_id: int, target_id: int) -> ChatRoom | None:
        requester_rooms = self._rooms.list_room_ids_for_user(requester_id)
        if not requester_rooms:
            return None
        shared = self._rooms.filter_rooms_with_participant(target_id, requester_rooms)
        if not shared:
            return None
        return self._load(shared[0])

    def _load(self, room_id: int) -> ChatRoom:
        room = self._rooms.get(room_id)
        if room is None:
            raise NotFoundError("Chat room not found")
        return room


__all__ = ["RoomResolution", "RoomResolver"]
