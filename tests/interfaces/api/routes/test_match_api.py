"""End-to-end tests for matching, chat rooms and realtime delivery."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient
from starlette.websockets import WebSocketDisconnect


def _add_book(client: TestClient, headers: dict, title: str, author: str) -> dict:
    response = client.post("/api/books", json={"title": title, "author": author}, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


def _receive_until(websocket, frame_type: str, limit: int = 5) -> dict:
    for _ in range(limit):
        frame = websocket.receive_json()
        if frame["type"] == frame_type:
            return frame
    raise AssertionError(f"no {frame_type!r} frame received")


def test_match_chat_and_notify_flow(client: TestClient, register) -> None:
    alice, alice_headers, alice_token = register("alice")
    bob, bob_headers, bob_token = register("bob")

    _add_book(client, alice_headers, "Dune", "Frank Herbert")
    added = _add_book(client, bob_headers, "dune", "Frank  Herbert")
    assert added["newMatches"] == 1

    alice_notifications = client.get("/api/notifications", headers=alice_headers).json()
    assert alice_notifications["unreadCount"] == 1
    assert alice_notifications["notifications"][0]["content"] == (
        "bob also owns 《dune》, you can start chatting!"
    )
    bob_notifications = client.get("/api/notifications", headers=bob_headers).json()
    assert bob_notifications["notifications"][0]["content"] == "You and alice both own 《dune》"

    [match] = client.get("/api/match/find", headers=alice_headers).json()["matches"]
    assert match["matchedUserId"] == bob["id"]
    assert match["matchCount"] == 1
    assert match["commonBooks"] == [{"title": "dune", "author": "Frank  Herbert"}]

    with client.websocket_connect(f"/ws?token={bob_token}") as bob_ws:
        opened = client.post(
            "/api/match/chat-room", json={"targetUserId": bob["id"]}, headers=alice_headers
        )
        assert opened.status_code == 200
        body = opened.json()
        assert body["created"] is True
        room = body["chatRoom"]
        assert room["matchedBooks"] == [{"title": "Dune", "author": "Frank Herbert"}]
        assert {p["userId"] for p in room["participants"]} == {alice["id"], bob["id"]}

        pushed = _receive_until(bob_ws, "new-notification")
        assert pushed["data"]["type"] == "chat_opened"
        assert pushed["data"]["content"] == "alice opened a chat room with you"
        assert pushed["data"]["link"] == f"/chats/{room['id']}"

        again = client.post(
            "/api/match/chat-room", json={"targetUserId": alice["id"]}, headers=bob_headers
        ).json()
        assert again["created"] is False
        assert again["chatRoom"]["id"] == room["id"]

        bob_ws.send_json({"type": "join-room", "data": room["id"]})
        assert bob_ws.receive_json() == {"type": "joined-room", "data": {"roomId": room["id"]}}

        with client.websocket_connect(f"/ws?token={alice_token}") as alice_ws:
            alice_ws.send_json(
                {"type": "send-message", "data": {"roomId": room["id"], "message": "Loved it?"}}
            )
            alice_ws.send_json({"type": "ping"})
            assert _receive_until(alice_ws, "pong") == {"type": "pong"}

        new_message = _receive_until(bob_ws, "new-message")
        assert new_message["data"]["roomId"] == room["id"]
        assert new_message["data"]["message"]["content"] == "Loved it?"
        assert new_message["data"]["message"]["sender"] == {"id": alice["id"], "username": "alice"}
        message_notification = _receive_until(bob_ws, "new-notification")
        assert message_notification["data"]["content"] == "alice: Loved it?"

    detail = client.get(f"/api/match/chat-room/{room['id']}", headers=bob_headers)
    assert detail.status_code == 200
    assert [m["content"] for m in detail.json()["chatRoom"]["messages"]] == ["Loved it?"]

    [summary] = client.get("/api/match/chat-rooms", headers=alice_headers).json()["chatRooms"]
    assert summary["lastMessage"]["content"] == "Loved it?"


def test_chat_room_preconditions(client: TestClient, register) -> None:
    alice, alice_headers, _ = register("alice")

    missing = client.post("/api/match/chat-room", json={}, headers=alice_headers)
    self_chat = client.post(
        "/api/match/chat-room", json={"targetUserId": alice["id"]}, headers=alice_headers
    )
    unknown = client.post("/api/match/chat-room", json={"targetUserId": 999}, headers=alice_headers)

    assert missing.status_code == 400
    assert self_chat.status_code == 400
    assert self_chat.json() == {"error": "You cannot open a chat room with yourself"}
    assert unknown.status_code == 404


def test_only_participants_can_open_a_room(client: TestClient, register) -> None:
    _, alice_headers, _ = register("alice")
    bob, _, _ = register("bob")
    _, mallory_headers, mallory_token = register("mallory")
    room_id = client.post(
        "/api/match/chat-room", json={"targetUserId": bob["id"]}, headers=alice_headers
    ).json()["chatRoom"]["id"]

    response = client.get(f"/api/match/chat-room/{room_id}", headers=mallory_headers)
    assert response.status_code == 403
    assert response.json() == {"error": "You are not a participant of this chat room"}
    assert client.get("/api/match/chat-room/999", headers=mallory_headers).status_code == 404

    with client.websocket_connect(f"/ws?token={mallory_token}") as websocket:
        websocket.send_json({"type": "join-room", "data": {"roomId": room_id}})
        assert websocket.receive_json() == {
            "type": "error",
            "data": {"message": "You are not a participant of this chat room"},
        }
        websocket.send_json({"type": "send-message", "data": {"roomId": room_id, "message": "hi"}})
        assert websocket.receive_json()["type"] == "error"


def test_websocket_rejects_invalid_tokens(client: TestClient) -> None:
    with pytest.raises(WebSocketDisconnect) as exc_info:
        with client.websocket_connect("/ws?token=not-a-token"):
            pass

    assert exc_info.value.code == 1008


def test_websocket_reports_malformed_frames(client: TestClient, register) -> None:
    _, _, token = register("alice")

    with client.websocket_connect(f"/ws?token={token}") as websocket:
        websocket.send_text("not json")
        assert websocket.receive_json() == {"type": "error", "data": {"message": "Malformed frame"}}
        websocket.send_json({"type": "dance"})
        assert websocket.receive_json() == {
            "type": "error",
            "data": {"message": "Unknown event type"},
        }
        websocket.send_json({"type": "send-message", "data": {"roomId": 1, "message": ""}})
        assert websocket.receive_json()["type"] == "error"


def test_non_text_message_keeps_the_socket_open(client: TestClient, register) -> None:
    alice, alice_headers, alice_token = register("alice")
    bob, bob_headers, _ = register("bob")
    room_id = client.post(
        "/api/match/chat-room", json={"targetUserId": bob["id"]}, headers=bob_headers
    ).json()["chatRoom"]["id"]

    with client.websocket_connect(f"/ws?token={alice_token}") as websocket:
        _receive_until(websocket, "init")
        websocket.send_json({"type": "send-message", "data": {"roomId": room_id, "message": 123}})
        assert websocket.receive_json() == {
            "type": "error",
            "data": {"message": "Message content is required"},
        }
        websocket.send_json({"type": "ping"})
        assert websocket.receive_json() == {"type": "pong"}

        client.post("/api/books", json={"title": "Dune", "author": "Frank Herbert"}, headers=bob_headers)
        client.post("/api/books", json={"title": "Dune", "author": "Frank Herbert"}, headers=alice_headers)
        pushed = _receive_until(websocket, "new-notification")
        assert pushed["data"]["userId"] == alice["id"]

    detail = client.get(f"/api/match/chat-room/{room_id}", headers=alice_headers).json()
    assert detail["chatRoom"]["messages"] == []


def test_unexpected_handler_failure_is_reported_as_error(
    client: TestClient, register, monkeypatch
) -> None:
    from bookmatch.interfaces.api.routes import realtime

    async def _explode(websocket, user_id, data):
        raise RuntimeError("boom")

    monkeypatch.setitem(realtime._HANDLERS, "leave-room", _explode)
    _, _, token = register("alice")

    with client.websocket_connect(f"/ws?token={token}") as websocket:
        websocket.send_json({"type": "leave-room", "data": 1})
        assert websocket.receive_json() == {
            "type": "error",
            "data": {"message": realtime.GENERIC_ERROR_MESSAGE},
        }
        websocket.send_json({"type": "ping"})
        assert websocket.receive_json() == {"type": "pong"}
