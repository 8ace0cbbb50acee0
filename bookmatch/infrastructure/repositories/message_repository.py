"""Persistence helpers for chat messages."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from bookmatch.domain.entities import Message
from bookmatch.infrastructure.models import ChatRoomModel, MessageModel
from bookmatch.utils import ensure_app_naive_datetime, ensure_app_timezone, now_in_app_timezone

from .user_repository import UserRepository


class MessageRepository:
    """Store and list :class:`Message` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def create(self, message: Message) -> Message:
        """Insert ``message`` and bump the room's ``updated_at`` in one commit."""

        created_at = ensure_app_naive_datetime(message.created_at or now_in_app_timezone())
        model = MessageModel(
            chat_room_id=message.chat_room_id,
            sender_id=message.sender_id,
            content=message.content,
            created_at=created_at,
        )
        try:
            self.session.add(model)
            self.session.query(ChatRoomModel).filter(
                ChatRoomModel.id == message.chat_room_id
            ).update({ChatRoomModel.updated_at: created_at}, synchronize_session=False)
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        self.session.refresh(model)
        return self._to_entity(model)

    def list_for_room(self, room_id: int) -> Sequence[Message]:
        query = (
            self.session.query(MessageModel)
            .filter(MessageModel.chat_room_id == room_id)
            .order_by(MessageModel.created_at.asc(), MessageModel.id.asc())
        )
        return [self._to_entity(model) for model in query.all()]

    def list_for_rooms(self, room_ids: Sequence[int]) -> dict[int, list[Message]]:
        """Return the messages of every room in ``room_ids`` with a single query."""

        grouped: dict[int, list[Message]] = {room_id: [] for room_id in room_ids}
        if not grouped:
            return grouped
        query = (
            self.session.query(MessageModel)
            .filter(MessageModel.chat_room_id.in_(list(grouped)))
            .order_by(MessageModel.created_at.asc(), MessageModel.id.asc())
        )
        for model in query.all():
            grouped[model.chat_room_id].append(self._to_entity(model))
        return grouped

    @staticmethod
    def _to_entity(model: MessageModel) -> Message:
        return Message(
            id=model.id,
            chat_room_id=model.chat_room_id,
            sender_id=model.sender_id,
            content=model.content,
            created_at=ensure_app_timezone(model.created_at),
            sender=UserRepository.to_summary(model.sender) if model.sender else None,
        )


__all__ = ["MessageRepository"]
