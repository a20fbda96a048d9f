"""Shared helpers for API tests."""

import asyncio
from uuid import UUID

from fastapi.testclient import TestClient

from askboard.domain.value import UserId, UserRole
from askboard.persistence.repository.inmemory import InMemoryStore

PASSWORD = "password123"


def register(client: TestClient, name: str, email: str) -> dict:
    """Register a user and return ``{"id", "headers"}`` for acting as them.

    The session cookie is dropped so each request picks its user through
    the Authorization header.
    """
    response = client.post(
        "/auth/register", json={"name": name, "email": email, "password": PASSWORD}
    )
    assert response.status_code == 201, response.text
    client.cookies.clear()
    body = response.json()
    return {
        "id": body["user"]["id"],
        "headers": {"Authorization": f"Bearer {body['token']}"},
    }


def promote_to_admin(client: TestClient, user_id: str) -> None:
    """Give a registered user the ADMIN role directly in the store."""
    container = client.app.state.dishka_container
    store = asyncio.run(container.get(InMemoryStore))
    key = UserId(UUID(user_id))
    store.users[key] = store.users[key].model_copy(update={"role": UserRole.ADMIN})


def ask(client: TestClient, user: dict, title: str, tags: list[str]) -> str:
    """Post a question and return its ID."""
    response = client.post(
        "/questions",
        json={
            "title": title,
            "description": "<p>Longer description of what I tried so far.</p>",
            "tags": tags,
        },
        headers=user["headers"],
    )
    assert response.status_code == 201, response.text
    return response.json()["question"]["id"]


def answer(client: TestClient, user: dict, question_id: str) -> str:
    """Post an answer and return its ID."""
    response = client.post(
        "/answers",
        json={
            "questionId": question_id,
            "content": "<p>This is how I solved exactly that.</p>",
        },
        headers=user["headers"],
    )
    assert response.status_code == 201, response.text
    return response.json()["answer"]["id"]
