"""Websocket endpoint carrying chat messages and notifications."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import Any

from fastapi import APIRouter, HTTPException, WebSocket, WebSocketDisconnect, status
from sqlalchemy.exc import SQLAlchemyError

from bookmatch.application.use_cases.matching import ensure_participant
from bookmatch.domain.exceptions import BookmatchError, InvalidRequestError
from bookmatch.infrastructure.database import SessionLocal
from bookmatch.infrastructure.notifications import (
    notification_manager,
    room_group,
    serialize_notification,
)
from bookmatch.infrastructure.repositories import NotificationRepository
from bookmatch.interfaces.api.dependencies import build_message_relay, resolve_current_user
from bookmatch.interfaces.api.errors import GENERIC_ERROR_MESSAGE

router = APIRouter(tags=["realtime"])
logger = logging.getLogger(__name__)

EventHandler = Callable[[WebSocket, int, Any], Awaitable[None]]


def _room_id(data: Any) -> int:
    """Extract a room id from ``data`` given either bare or as ``{"roomId": ...}``."""

    if isinstance(data, dict):
        data = data.get("roomId")
    if isinstance(data, bool):
        data = None
    try:
        room_id = int(data)
    except (TypeError, ValueError) as exc:
        raise InvalidRequestError("Room id is required") from exc
    if room_id <= 0:
        raise InvalidRequestError("Room id is required")
    return room_id


async def _send_error(websocket: WebSocket, message: str) -> None:
    await websocket.send_json({"type": "error", "data": {"message": message}})


async def _handle_ping(websocket: WebSocket, user_id: int, data: Any) -> None:
    await websocket.send_json({"type": "pong"})


async def _handle_join_room(websocket: WebSocket, user_id: int, data: Any) -> None:
    room_id = _room_id(data)
    session = SessionLocal()
    try:
        ensure_participant(session, room_id=room_id, user_id=user_id)
    finally:
        session.close()
    notification_manager.join(room_group(room_id), websocket)
    logger.debug("User %s joined room %s", user_id, room_id)
    await websocket.send_json({"type": "joined-room", "data": {"roomId": room_id}})


async def _handle_leave_room(websocket: WebSocket, user_id: int, data: Any) -> None:
    room_id = _room_id(data)
    notification_manager.leave(room_group(room_id), websocket)
    await websocket.send_json({"type": "left-room", "data": {"roomId": room_id}})


async def _handle_send_message(websocket: WebSocket, user_id: int, data: Any) -> None:
    if not isinstance(data, dict):
        raise InvalidRequestError("Room id and message are required")
    room_id = _room_id(data)
    session = SessionLocal()
    try:
        build_message_relay(session).relay(room_id, user_id, data.get("message"))
    finally:
        session.close()


async def _handle_ack(websocket: WebSocket, user_id: int, data: Any) -> None:
    if not isinstance(data, list):
        return
    ids = [value for value in data if isinstance(value, int) and not isinstance(value, bool)]
    if not ids:
        return
    session = SessionLocal()
    try:
        NotificationRepository(session).mark_as_read(ids, user_id=user_id)
    finally:
        session.close()


_HANDLERS: dict[str, EventHandler] = {
    "ping": _handle_ping,
    "join-room": _handle_join_room,
    "leave-room": _handle_leave_room,
    "send-message": _handle_send_message,
    "ack": _handle_ack,
}


async def _dispatch_frame(websocket: WebSocket, user_id: int, frame: dict[str, Any]) -> None:
    handler = _HANDLERS.get(frame.get("type"))
    if handler is None:
        await _send_error(websocket, "Unknown event type")
        return
    try:
        await handler(websocket, user_id, frame.get("data"))
    except BookmatchError as exc:
        await _send_error(websocket, str(exc))
    except WebSocketDisconnect:
        raise
    except SQLAlchemyError:
        logger.exception("Database error while handling %s from user %s", frame.get("type"), user_id)
        await _send_error(websocket, GENERIC_ERROR_MESSAGE)
    except Exception:
        logger.exception("Unexpected error while handling %s from user %s", frame.get("type"), user_id)
        await _send_error(websocket, GENERIC_ERROR_MESSAGE)


@router.websocket("/ws")
async def realtime_websocket(websocket: WebSocket) -> None:
    """Authenticate with ``?token=`` and exchange JSON ``{type, data}`` frames."""

    token = websocket.query_params.get("token")
    if not token:
        await websocket.close(code=status.WS_1008_POLICY_VIOLATION)
        return

    session = SessionLocal()
    try:
        user = resolve_current_user(token, session)
        pending = NotificationRepository(session).list_unread_for_user(user.id)
    except HTTPException:
        await websocket.close(code=status.WS_1008_POLICY_VIOLATION)
        return
    finally:
        session.close()

    await notification_manager.connect(user.id, websocket)
    logger.info("User %s connected to the realtime channel", user.id)
    try:
        if pending:
            await websocket.send_json(
                {"type": "init", "data": [serialize_notification(n) for n in pending]}
            )
        while True:
            try:
                frame = await websocket.receive_json()
            except ValueError:
                await _send_error(websocket, "Malformed frame")
                continue

            if not isinstance(frame, dict):
                await _send_error(websocket, "Malformed frame")
                continue
            await _dispatch_frame(websocket, user.id, frame)
    except WebSocketDisconnect:
        logger.info("User %s disconnected from the realtime channel", user.id)
    finally:
        notification_manager.disconnect(websocket)
