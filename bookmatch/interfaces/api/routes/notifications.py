"""Endpoints for reading and tidying up persisted notifications."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from bookmatch.application.use_cases.notifications import (
    count_unread_notifications,
    delete_notification,
    delete_read_notifications,
    list_notifications,
    mark_all_notifications_read,
    mark_notification_read,
)
from bookmatch.config import get_settings
from bookmatch.domain.entities import User
from bookmatch.domain.exceptions import BookmatchError
from bookmatch.infrastructure.database import get_db
from bookmatch.interfaces.api.dependencies import get_current_user
from bookmatch.interfaces.api.errors import to_http_exception
from bookmatch.interfaces.api.schemas import (
    MessageResponse,
    NotificationListResponse,
    NotificationRead,
    UnreadCountResponse,
)

router = APIRouter(prefix="/notifications", tags=["notifications"])


@router.get("", response_model=NotificationListResponse)
def read_notifications(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> NotificationListResponse:
    """Return the most recent notifications for the authenticated user."""

    notifications, unread = list_notifications(
        db, user_id=current_user.id, limit=get_settings().notification_page_size
    )
    return NotificationListResponse(
        notifications=[NotificationRead.model_validate(n) for n in notifications],
        unread_count=unread,
    )


@router.get("/unread-count", response_model=UnreadCountResponse)
def read_unread_count(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> UnreadCountResponse:
    return UnreadCountResponse(unread_count=count_unread_notifications(db, user_id=current_user.id))


@router.put("/read-all", response_model=MessageResponse)
def read_all(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> MessageResponse:
    mark_all_notifications_read(db, user_id=current_user.id)
    return MessageResponse(message="All notifications marked as read")


@router.put("/{notification_id}/read", response_model=MessageResponse)
def read_one(
    notification_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> MessageResponse:
    try:
        mark_notification_read(db, notification_id=notification_id, user_id=current_user.id)
    except BookmatchError as exc:
        raise to_http_exception(exc) from exc
    return MessageResponse(message="Notification marked as read")


@router.delete("/read/all", response_model=MessageResponse)
def remove_read(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> MessageResponse:
    deleted = delete_read_notifications(db, user_id=current_user.id)
    return MessageResponse(message=f"Deleted {deleted} read notification(s)")


@router.delete("/{notification_id}", response_model=MessageResponse)
def remove_one(
    notification_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> MessageResponse:
    try:
        delete_notification(db, notification_id=notification_id, user_id=current_user.id)
    except BookmatchError as exc:
        raise to_http_exception(exc) from exc
    return MessageResponse(message="Notification deleted")
