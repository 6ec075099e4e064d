# mypy: ignore-errors
"""Tests for the chat history endpoint."""

from fastapi import status

from friendlytime.services.message_service import create_message


def test_history_is_symmetric(client, db_session) -> None:
    """Both orderings of the pair return the same conversation."""
    create_message(db_session, 1, 2, "Hi Aarav")
    create_message(db_session, 2, 1, "Hello!")
    create_message(db_session, 1, 3, "Someone else")

    forward = client.get("/api/v1/messages/1/2")
    backward = client.get("/api/v1/messages/2/1")
    assert forward.status_code == status.HTTP_200_OK
    assert forward.json() == backward.json()
    assert [row["content"] for row in forward.json()] == ["Hi Aarav", "Hello!"]


def test_history_row_shape(client, db_session) -> None:
    """Rows expose ids, both participants, content and an ISO timestamp."""
    message = create_message(db_session, 1, 2, "Are you free on Saturday?")

    data = client.get("/api/v1/messages/1/2").json()
    assert data == [
        {
            "id": message.id,
            "sender_id": 1,
            "receiver_id": 2,
            "content": "Are you free on Saturday?",
            "created_at": data[0]["created_at"],
        }
    ]
    assert data[0]["created_at"].endswith("+00:00")


def test_history_for_strangers_is_empty(client) -> None:
    """Users who never talked have an empty history."""
    response = client.get("/api/v1/messages/5/6")
    assert response.status_code == status.HTTP_200_OK
    assert response.json() == []
