"""Utility helpers to generate and dispatch domain notifications."""

from __future__ import annotations

from bookmatch.domain.entities import (
    NOTIFICATION_TYPE_CHAT_OPENED,
    NOTIFICATION_TYPE_NEW_MATCH,
    NOTIFICATION_TYPE_NEW_MESSAGE,
    Book,
    Message,
    NotificationDelivery,
    UserSummary,
    display_name,
)

from .dispatcher import NotificationDispatcher

MATCHES_LINK = "/matches"
MESSAGE_PREVIEW_LENGTH = 50
ELLIPSIS = "..."


def chat_link(room_id: int) -> str:
    return f"/chats/{room_id}"


def message_preview(content: str, limit: int = MESSAGE_PREVIEW_LENGTH) -> str:
    """Return ``content`` cut to ``limit`` characters, marking the cut."""

    if len(content) <= limit:
        return content
    return content[:limit] + ELLIPSIS


def notify_new_match(
    dispatcher: NotificationDispatcher,
    *,
    book: Book,
    owner: UserSummary | None,
    matched_user: UserSummary,
) -> tuple[NotificationDelivery, NotificationDelivery]:
    """Tell both owners of ``book`` that they now share it.

    The matched user learns who added the book, and the owner who just added
    it gets a copy pointing back at the matched user.
    """

    to_matched = dispatcher.notify(
        matched_user.id,
        NOTIFICATION_TYPE_NEW_MATCH,
        "New match",
        f"{display_name(owner)} also owns 《{book.title}》, you can start chatting!",
        related_id=book.user_id,
        link=MATCHES_LINK,
    )
    to_owner = dispatcher.notify(
        book.user_id,
        NOTIFICATION_TYPE_NEW_MATCH,
        "Match found",
        f"You and {display_name(matched_user)} both own 《{book.title}》",
        related_id=matched_user.id,
        link=MATCHES_LINK,
    )
    return to_matched, to_owner


def notify_chat_opened(
    dispatcher: NotificationDispatcher,
    *,
    room_id: int,
    requester: UserSummary | None,
    target_id: int,
) -> NotificationDelivery:
    """Inform ``target_id`` that someone opened a chat room with them."""

    return dispatcher.notify(
        target_id,
        NOTIFICATION_TYPE_CHAT_OPENED,
        "New chat room",
        f"{display_name(requester)} opened a chat room with you",
        related_id=room_id,
        link=chat_link(room_id),
    )


def notify_new_message(
    dispatcher: NotificationDispatcher,
    *,
    message: Message,
    recipient_id: int,
) -> NotificationDelivery:
    """Send a preview of ``message`` to a participant who did not write it."""

    return dispatcher.notify(
        recipient_id,
        NOTIFICATION_TYPE_NEW_MESSAGE,
        "New message",
        f"{display_name(message.sender)}: {message_preview(message.content)}",
        related_id=message.chat_room_id,
        link=chat_link(message.chat_room_id),
    )


__all__ = [
    "MATCHES_LINK",
    "MESSAGE_PREVIEW_LENGTH",
    "chat_link",
    "message_preview",
    "notify_chat_opened",
    "notify_new_match",
    "notify_new_message",
]
