"""Connection management helpers for realtime websockets."""

from __future__ import annotations

import asyncio
import logging
from collections import defaultdict
from typing import Any, DefaultDict, Set

from anyio import from_thread
from fastapi import WebSocket

logger = logging.getLogger(__name__)


def user_group(user_id: int) -> str:
    """Name of the group holding every session of ``user_id``."""

    return f"user-{user_id}"


def room_group(room_id: int) -> str:
    """Name of the group holding every session joined to ``room_id``."""

    return f"room-{room_id}"


class ConnectionManager:
    """Manage active websocket connections grouped by named channels.

    Each connection belongs to its owner's user group from the moment it is
    accepted and may additionally join any number of room groups.
    """

    def __init__(self) -> None:
        self._groups: DefaultDict[str, Set[WebSocket]] = defaultdict(set)
        self._memberships: DefaultDict[WebSocket, Set[str]] = defaultdict(set)
        self._tasks: Set[asyncio.Task] = set()

    async def connect(self, user_id: int, websocket: WebSocket) -> None:
        """Accept the websocket connection and register it for ``user_id``."""

        await websocket.accept()
        self.join(user_group(user_id), websocket)

    def join(self, group: str, websocket: WebSocket) -> None:
        self._groups[group].add(websocket)
        self._memberships[websocket].add(group)

    def leave(self, group: str, websocket: WebSocket) -> None:
        connections = self._groups.get(group)
        if connections is not None:
            connections.discard(websocket)
            if not connections:
                self._groups.pop(group, None)
        groups = self._memberships.get(websocket)
        if groups is not None:
            groups.discard(group)
            if not groups:
                self._memberships.pop(websocket, None)

    def disconnect(self, websocket: WebSocket) -> None:
        """Remove ``websocket`` from every group it joined."""

        for group in list(self._memberships.get(websocket, ())):
            self.leave(group, websocket)

    def connection_count(self, group: str) -> int:
        return len(self._groups.get(group, ()))

    def groups_for(self, websocket: WebSocket) -> frozenset[str]:
        return frozenset(self._memberships.get(websocket, ()))

    async def send_to_group(self, group: str, message: dict[str, Any]) -> int:
        """Send ``message`` to every connection in ``group``.

        Returns the number of connections that accepted the message. Broken
        connections are dropped from every group.
        """

        sent = 0
        for connection in list(self._groups.get(group, ())):
            try:
                await connection.send_json(message)
            except Exception:
                logger.info("Dropping unreachable websocket from group %s", group)
                self.disconnect(connection)
            else:
                sent += 1
        return sent

    def schedule_send(self, group: str, message: dict[str, Any]) -> None:
        """Deliver ``message`` to ``group`` without waiting for the result.

        On the event loop the send becomes a background task; from an anyio
        worker thread it runs on the loop through ``from_thread``. Calling it
        from any other thread raises ``RuntimeError``.
        """

        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            from_thread.run(self.send_to_group, group, message)
        else:
            task = loop.create_task(self.send_to_group(group, message))
            self._tasks.add(task)
            task.add_done_callback(self._tasks.discard)


notification_manager = ConnectionManager()


__all__ = ["ConnectionManager", "notification_manager", "room_group", "user_group"]
