"""Tests for the book inventory endpoints."""

from __future__ import annotations

from fastapi.testclient import TestClient


def test_add_list_and_delete_books(client: TestClient, register) -> None:
    _, headers, _ = register("alice")

    created = client.post(
        "/api/books",
        json={"title": "Dune", "author": "Frank Herbert", "genre": "Science fiction"},
        headers=headers,
    )
    assert created.status_code == 201
    body = created.json()
    assert body["message"] == "Book added successfully"
    assert body["newMatches"] == 0
    assert body["book"]["genre"] == "Science fiction"
    book_id = body["book"]["id"]

    client.post("/api/books", json={"title": "Emma", "author": "Jane Austen"}, headers=headers)
    listed = client.get("/api/books", headers=headers).json()["books"]
    assert [book["title"] for book in listed] == ["Emma", "Dune"]

    deleted = client.delete(f"/api/books/{book_id}", headers=headers)
    assert deleted.status_code == 200
    assert [book["title"] for book in client.get("/api/books", headers=headers).json()["books"]] == [
        "Emma"
    ]


def test_missing_fields_are_rejected(client: TestClient, register) -> None:
    _, headers, _ = register("alice")

    response = client.post("/api/books", json={"title": "  ", "author": "Frank Herbert"}, headers=headers)

    assert response.status_code == 400
    assert response.json() == {"error": "Title and author are required"}


def test_duplicate_books_conflict(client: TestClient, register) -> None:
    _, headers, _ = register("alice")
    client.post("/api/books", json={"title": "Dune", "author": "Frank Herbert"}, headers=headers)

    response = client.post("/api/books", json={"title": "DUNE", "author": "frank herbert"}, headers=headers)

    assert response.status_code == 409
    assert response.json() == {"error": "You have already added this book"}


def test_cannot_delete_someone_elses_book(client: TestClient, register) -> None:
    _, alice_headers, _ = register("alice")
    _, bob_headers, _ = register("bob")
    book_id = client.post(
        "/api/books", json={"title": "Dune", "author": "Frank Herbert"}, headers=alice_headers
    ).json()["book"]["id"]

    response = client.delete(f"/api/books/{book_id}", headers=bob_headers)

    assert response.status_code == 404
    assert response.json() == {"error": "Book not found or not owned by you"}
