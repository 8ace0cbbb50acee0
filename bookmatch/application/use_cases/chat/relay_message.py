"""Persist chat messages and fan them out to the room and its members."""

from __future__ import annotations

import logging
from typing import Protocol

from sqlalchemy.orm import Session

from bookmatch.application.use_cases.matching import ensure_participant
from bookmatch.application.use_cases.notifications import (
    NotificationDispatcher,
    notify_new_message,
)
from bookmatch.domain.entities import Message
from bookmatch.domain.exceptions import InvalidRequestError
from bookmatch.infrastructure.repositories import ChatRoomRepository, MessageRepository
from bookmatch.utils import now_in_app_timezone

logger = logging.getLogger(__name__)

MAX_MESSAGE_LENGTH = 4000


class MessageBroadcaster(Protocol):
    """Anything able to push a stored message to the sessions of its room."""

    def broadcast_message(self, message: Message) -> int:
        """Return the number of sessions the message was sent to."""


class MessageRelay:
    """Store a message, broadcast it to the room and notify the other member."""

    def __init__(
        self,
        session: Session,
        broadcaster: MessageBroadcaster,
        dispatcher: NotificationDispatcher,
    ) -> None:
        self._session = session
        self._messages = MessageRepository(session)
        self._rooms = ChatRoomRepository(session)
        self._broadcaster = broadcaster
        self._dispatcher = dispatcher

    def relay(self, room_id: int, sender_id: int, content: str | None) -> Message:
        """Persist ``content`` from ``sender_id`` in ``room_id`` and fan it out.

        Validation and persistence errors propagate before anything is sent.
        Once the message is stored, broadcast and notification failures are
        logged only.
        """

        text = content.strip() if isinstance(content, str) else ""
        if not text:
            raise InvalidRequestError("Message content is required")
        if len(text) > MAX_MESSAGE_LENGTH:
            raise InvalidRequestError("Message is too long")
        ensure_participant(self._session, room_id=room_id, user_id=sender_id)

        message = self._messages.create(
            Message(
                id=None,
                chat_room_id=room_id,
                sender_id=sender_id,
                content=text,
                created_at=now_in_app_timezone(),
            )
        )

        try:
            self._broadcaster.broadcast_message(message)
        except Exception:
            logger.warning("Broadcast of message %s to room %s failed", message.id, room_id, exc_info=True)
        else:
            logger.debug("Message %s sent to room %s", message.id, room_id)

        self._notify_recipients(message)
        return message

    def _notify_recipients(self, message: Message) -> None:
        try:
            recipients = [
                user_id
                for user_id in self._rooms.list_participant_ids(message.chat_room_id)
                if user_id != message.sender_id
            ]
            for recipient_id in recipients:
                notify_new_message(self._dispatcher, message=message, recipient_id=recipient_id)
        except Exception:
            logger.error(
                "Could not notify participants of room %s about message %s",
                message.chat_room_id,
                message.id,
                exc_info=True,
            )


__all__ = ["MAX_MESSAGE_LENGTH", "MessageBroadcaster", "MessageRelay"]
