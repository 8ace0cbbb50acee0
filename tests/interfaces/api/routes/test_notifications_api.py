"""Tests for the notification inbox endpoints."""

from __future__ import annotations

from fastapi.testclient import TestClient


def _seed_matches(client: TestClient, register):
    _, alice_headers, alice_token = register("alice")
    _, bob_headers, _ = register("bob")
    for title in ("Dune", "Emma"):
        client.post("/api/books", json={"title": title, "author": "Someone"}, headers=alice_headers)
        client.post("/api/books", json={"title": title, "author": "Someone"}, headers=bob_headers)
    return alice_headers, alice_token


def test_read_and_delete_notifications(client: TestClient, register) -> None:
    alice_headers, _ = _seed_matches(client, register)

    listing = client.get("/api/notifications", headers=alice_headers).json()
    assert listing["unreadCount"] == 2
    first, second = listing["notifications"]
    assert first["isRead"] is False
    assert first["link"] == "/matches"

    marked = client.put(f"/api/notifications/{first['id']}/read", headers=alice_headers)
    assert marked.status_code == 200
    count = client.get("/api/notifications/unread-count", headers=alice_headers).json()
    assert count == {"unreadCount": 1}

    assert client.delete("/api/notifications/read/all", headers=alice_headers).status_code == 200
    remaining = client.get("/api/notifications", headers=alice_headers).json()["notifications"]
    assert [n["id"] for n in remaining] == [second["id"]]

    assert client.put("/api/notifications/read-all", headers=alice_headers).status_code == 200
    assert client.get("/api/notifications/unread-count", headers=alice_headers).json() == {
        "unreadCount": 0
    }

    assert client.delete(f"/api/notifications/{second['id']}", headers=alice_headers).status_code == 200
    assert client.get("/api/notifications", headers=alice_headers).json() == {
        "notifications": [],
        "unreadCount": 0,
    }


def test_unknown_notifications_are_not_found(client: TestClient, register) -> None:
    _, headers, _ = register("alice")

    assert client.put("/api/notifications/999/read", headers=headers).status_code == 404
    response = client.delete("/api/notifications/999", headers=headers)
    assert response.status_code == 404
    assert response.json() == {"error": "Notification not found"}


def test_websocket_ack_marks_notifications_read(client: TestClient, register) -> None:
    alice_headers, alice_token = _seed_matches(client, register)

    with client.websocket_connect(f"/ws?token={alice_token}") as websocket:
        init = websocket.receive_json()
        assert init["type"] == "init"
        ids = [n["id"] for n in init["data"]]
        assert len(ids) == 2
        websocket.send_json({"type": "ack", "data": ids})
        websocket.send_json({"type": "ping"})
        assert websocket.receive_json() == {"type": "pong"}

    assert client.get("/api/notifications/unread-count", headers=alice_headers).json() == {
        "unreadCount": 0
    }
