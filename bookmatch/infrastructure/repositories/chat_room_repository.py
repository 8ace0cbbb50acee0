"""Persistence helpers for chat rooms, their participants and matched books."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, selectinload

from bookmatch.domain.entities import ChatRoom, ChatRoomParticipant, CommonBook, Message
from bookmatch.infrastructure.models import (
    ChatRoomMatchedBookModel,
    ChatRoomModel,
    ChatRoomParticipantModel,
)
from bookmatch.utils import ensure_app_naive_datetime, ensure_app_timezone, now_in_app_timezone

from .message_repository import MessageRepository
from .user_repository import UserRepository


class DuplicateRoomError(Exception):
    """A room for the same pair of users was committed concurrently."""

    def __init__(self, room_id: int) -> None:
        super().__init__(f"Chat room {room_id} already exists for this pair")
        self.room_id = room_id


class ChatRoomRepository:
    """Provide persistence operations for :class:`ChatRoom` aggregates."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_room_ids_for_user(self, user_id: int) -> list[int]:
        query = (
            self.session.query(ChatRoomParticipantModel.chat_room_id)
            .filter(ChatRoomParticipantModel.user_id == user_id)
            .order_by(ChatRoomParticipantModel.chat_room_id.asc())
        )
        return [room_id for (room_id,) in query.all()]

    def filter_rooms_with_participant(
        self, user_id: int, room_ids: Sequence[int]
    ) -> list[int]:
        """Return the subset of ``room_ids`` in which ``user_id`` participates."""

        if not room_ids:
            return []
        query = (
            self.session.query(ChatRoomParticipantModel.chat_room_id)
            .filter(
                ChatRoomParticipantModel.user_id == user_id,
                ChatRoomParticipantModel.chat_room_id.in_(list(room_ids)),
            )
            .order_by(ChatRoomParticipantModel.chat_room_id.asc())
        )
        return [room_id for (room_id,) in query.all()]

    def is_participant(self, room_id: int, user_id: int) -> bool:
        query = self.session.query(ChatRoomParticipantModel.id).filter(
            ChatRoomParticipantModel.chat_room_id == room_id,
            ChatRoomParticipantModel.user_id == user_id,
        )
        return query.first() is not None

    def list_participant_ids(self, room_id: int) -> list[int]:
        query = (
            self.session.query(ChatRoomParticipantModel.user_id)
            .filter(ChatRoomParticipantModel.chat_room_id == room_id)
            .order_by(ChatRoomParticipantModel.id.asc())
        )
        return [user_id for (user_id,) in query.all()]

    def exists(self, room_id: int) -> bool:
        return self.session.get(ChatRoomModel, room_id) is not None

    def get(self, room_id: int, *, include_messages: bool = True) -> ChatRoom | None:
        model = self._query().filter(ChatRoomModel.id == room_id).first()
        if model is None:
            return None
        return self._to_entity(model, include_messages=include_messages)

    def get_by_pair_key(self, key: str, *, include_messages: bool = True) -> ChatRoom | None:
        model = self._query().filter(ChatRoomModel.pair_key == key).first()
        if model is None:
            return None
        return self._to_entity(model, include_messages=include_messages)

    def list_for_user(self, user_id: int) -> Sequence[ChatRoom]:
        room_ids = self.list_room_ids_for_user(user_id)
        if not room_ids:
            return []
        query = (
            self._query()
            .filter(ChatRoomModel.id.in_(room_ids))
            .order_by(ChatRoomModel.updated_at.desc(), ChatRoomModel.id.desc())
        )
        models = query.all()
        messages = MessageRepository(self.session).list_for_rooms([model.id for model in models])
        return [
            self._to_entity(model, include_messages=False, messages=messages[model.id])
            for model in models
        ]

    def create_room(
        self,
        *,
        pair_key: str,
        participant_ids: Sequence[int],
        matched_book_ids: Sequence[int] = (),
    ) -> int:
        """Insert a room with its participants and matched books in one transaction.

        Raises :class:`DuplicateRoomError` when another transaction already
        committed a room for ``pair_key``. Any other failure rolls back every
        row of the sequence before propagating.
        """

        now = ensure_app_naive_datetime(now_in_app_timezone())
        room = ChatRoomModel(pair_key=pair_key, created_at=now, updated_at=now)
        try:
            self.session.add(room)
            self.session.flush()
            room_id = room.id
            self.session.add_all(
                ChatRoomParticipantModel(chat_room_id=room_id, user_id=user_id)
                for user_id in participant_ids
            )
            self.session.add_all(
                ChatRoomMatchedBookModel(chat_room_id=room_id, book_id=book_id)
                for book_id in matched_book_ids
            )
            self.session.commit()
        except IntegrityError:
            self.session.rollback()
            existing = self.get_by_pair_key(pair_key, include_messages=False)
            if existing is not None:
                raise DuplicateRoomError(existing.id) from None
            raise
        except Exception:
            self.session.rollback()
            raise
        return room_id

    def _query(self):
        return self.session.query(ChatRoomModel).options(
            selectinload(ChatRoomModel.participants),
            selectinload(ChatRoomModel.matched_books),
        )

    def _to_entity(
        self,
        model: ChatRoomModel,
        *,
        include_messages: bool,
        messages: Sequence[Message] | None = None,
    ) -> ChatRoom:
        participants = [
            ChatRoomParticipant(
                user_id=participant.user_id,
                user=UserRepository.to_summary(participant.user) if participant.user else None,
            )
            for participant in model.participants
        ]
        matched_books = [
            CommonBook(title=matched.book.title, author=matched.book.author)
            for matched in model.matched_books
            if matched.book is not None
        ]
        if messages is None:
            messages = (
                MessageRepository(self.session).list_for_room(model.id) if include_messages else []
            )
        return ChatRoom(
            id=model.id,
            pair_key=model.pair_key,
            created_at=ensure_app_timezone(model.created_at),
            updated_at=ensure_app_timezone(model.updated_at),
            participants=participants,
            matched_books=matched_books,
            messages=list(messages),
        )


__all__ = ["ChatRoomRepository", "DuplicateRoomError"]
