"""Tests for the websocket group bookkeeping."""

from __future__ import annotations

import anyio
import pytest

from bookmatch.domain.entities import Message, Notification, UserSummary
from bookmatch.infrastructure.notifications import (
    ConnectionManager,
    NotificationPublisher,
    RoomEventPublisher,
    room_group,
    user_group,
)


class FakeWebSocket:
    def __init__(self, fail: bool = False) -> None:
        self.accepted = False
        self.fail = fail
        self.sent: list[dict] = []

    async def accept(self) -> None:
        self.accepted = True

    async def send_json(self, message: dict) -> None:
        if self.fail:
            raise RuntimeError("connection closed")
        self.sent.append(message)


async def _drain() -> None:
    """Let tasks scheduled on the running loop complete."""

    for _ in range(3):
        await anyio.sleep(0)


@pytest.fixture()
def anyio_backend():
    return "asyncio"


@pytest.mark.anyio
async def test_connect_joins_the_user_group():
    manager = ConnectionManager()
    websocket = FakeWebSocket()

    await manager.connect(1, websocket)

    assert websocket.accepted is True
    assert manager.connection_count(user_group(1)) == 1
    assert manager.groups_for(websocket) == frozenset({"user-1"})


@pytest.mark.anyio
async def test_disconnect_leaves_every_group():
    manager = ConnectionManager()
    websocket = FakeWebSocket()
    await manager.connect(1, websocket)
    manager.join(room_group(5), websocket)
    manager.join(room_group(6), websocket)

    manager.disconnect(websocket)

    assert manager.groups_for(websocket) == frozenset()
    assert manager.connection_count(user_group(1)) == 0
    assert manager.connection_count(room_group(5)) == 0


@pytest.mark.anyio
async def test_send_to_group_reaches_members_and_drops_broken_sockets():
    manager = ConnectionManager()
    healthy = FakeWebSocket()
    broken = FakeWebSocket(fail=True)
    outsider = FakeWebSocket()
    for websocket in (healthy, broken):
        manager.join(room_group(3), websocket)
    manager.join(room_group(4), outsider)

    sent = await manager.send_to_group(room_group(3), {"type": "ping"})

    assert sent == 1
    assert healthy.sent == [{"type": "ping"}]
    assert outsider.sent == []
    assert manager.connection_count(room_group(3)) == 1


def test_publisher_skips_offline_users():
    manager = ConnectionManager()
    publisher = NotificationPublisher(manager)
    notification = Notification(
        id=1, user_id=9, type="new_match", title="New match", content="hello"
    )

    assert publisher.dispatch(notification) == 0


@pytest.mark.anyio
async def test_publisher_pushes_to_live_sessions():
    manager = ConnectionManager()
    websocket = FakeWebSocket()
    await manager.connect(9, websocket)
    notification = Notification(
        id=1, user_id=9, type="new_match", title="New match", content="hello", link="/matches"
    )

    assert NotificationPublisher(manager).dispatch(notification) == 1
    await _drain()

    [frame] = websocket.sent
    assert frame["type"] == "new-notification"
    assert frame["data"]["userId"] == 9
    assert frame["data"]["isRead"] is False
    assert frame["data"]["link"] == "/matches"


@pytest.mark.anyio
async def test_room_publisher_broadcasts_new_messages():
    manager = ConnectionManager()
    member = FakeWebSocket()
    manager.join(room_group(2), member)
    message = Message(
        id=10,
        chat_room_id=2,
        sender_id=1,
        content="hi",
        sender=UserSummary(id=1, username="alice", email="alice@example.com"),
    )

    assert RoomEventPublisher(manager).broadcast_message(message) == 1
    await _drain()

    [frame] = member.sent
    assert frame["type"] == "new-message"
    assert frame["data"]["roomId"] == 2
    assert frame["data"]["message"]["sender"] == {"id": 1, "username": "alice"}
