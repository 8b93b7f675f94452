"""Integration tests for the Messaging API."""

import pytest
from httpx import AsyncClient

from tests.conftest import MENTOR_ID, OTHER_ID, STUDENT_ID


async def _start(client: AsyncClient, headers, recipient_id: str | None = MENTOR_ID):
    return await client.post(
        "/api/v1/messages/new", json={"recipientId": recipient_id}, headers=headers
    )


class TestStartConversation:
    @pytest.mark.asyncio
    async def test_creates_conversation(self, client: AsyncClient, student_headers):
        response = await _start(client, student_headers)

        assert response.status_code == 201
        body = response.json()
        assert body["created"] is True
        assert body["data"]["participants"] == [STUDENT_ID, MENTOR_ID]

    @pytest.mark.asyncio
    async def test_reuses_conversation_from_either_side(
        self, client: AsyncClient, student_headers, mentor_headers
    ):
        first = await _start(client, student_headers)

        response = await _start(client, mentor_headers, recipient_id=STUDENT_ID)

        assert response.status_code == 200
        body = response.json()
        assert body["created"] is False
        assert body["message"] == "Conversation exists"
        assert body["data"]["id"] == first.json()["data"]["id"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("recipient", [None, ""])
    async def test_missing_recipient(self, client: AsyncClient, student_headers, recipient):
        response = await _start(client, student_headers, recipient_id=recipient)

        assert response.status_code == 400
        assert response.json()["code"] == "MISSING_RECIPIENT"

    @pytest.mark.asyncio
    async def test_cannot_message_self(self, client: AsyncClient, student_headers):
        response = await _start(client, student_headers, recipient_id=STUDENT_ID)

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_RECIPIENT"


class TestSendAndRead:
    @pytest.fixture
    async def conversation_id(self, client: AsyncClient, student_headers) -> str:
        response = await _start(client, student_headers)
        return str(response.json()["data"]["id"])

    @pytest.mark.asyncio
    async def test_send_message(
        self, client: AsyncClient, conversation_id: str, student_headers
    ):
        response = await client.post(
            f"/api/v1/messages/{conversation_id}",
            json={"content": "Hi there"},
            headers=student_headers,
        )

        assert response.status_code == 201
        data = response.json()["data"]
        assert data["senderId"] == STUDENT_ID
        assert data["recipientId"] == MENTOR_ID
        assert data["read"] is False

    @pytest.mark.asyncio
    async def test_blank_content_rejected(
        self, client: AsyncClient, conversation_id: str, student_headers, mentor_headers
    ):
        response = await client.post(
            f"/api/v1/messages/{conversation_id}",
            json={"content": "   "},
            headers=student_headers,
        )

        assert response.status_code == 400
        assert response.json()["code"] == "MISSING_CONTENT"
        messages = await client.get(f"/api/v1/messages/{conversation_id}", headers=mentor_headers)
        assert messages.json()["data"] == []

    @pytest.mark.asyncio
    async def test_outsider_cannot_send_or_read(
        self, client: AsyncClient, conversation_id: str, other_headers
    ):
        send = await client.post(
            f"/api/v1/messages/{conversation_id}",
            json={"content": "let me in"},
            headers=other_headers,
        )
        read = await client.get(f"/api/v1/messages/{conversation_id}", headers=other_headers)

        assert send.status_code == 403
        assert send.json()["code"] == "UNAUTHORIZED_ACCESS"
        assert read.status_code == 403

    @pytest.mark.asyncio
    async def test_unknown_conversation_is_forbidden(self, client: AsyncClient, student_headers):
        response = await client.get(
            "/api/v1/messages/000000000000000000000000", headers=student_headers
        )

        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_fetch_marks_read_and_updates_unread_count(
        self, client: AsyncClient, conversation_id: str, student_headers, mentor_headers
    ):
        for text in ("one", "two"):
            await client.post(
                f"/api/v1/messages/{conversation_id}",
                json={"content": text},
                headers=student_headers,
            )

        before = await client.get("/api/v1/messages/unread-count", headers=mentor_headers)
        assert before.json()["data"]["count"] == 2

        first_fetch = await client.get(
            f"/api/v1/messages/{conversation_id}", headers=mentor_headers
        )
        data = first_fetch.json()["data"]
        assert [m["content"] for m in data] == ["one", "two"]
        assert all(m["read"] is False for m in data)

        after = await client.get("/api/v1/messages/unread-count", headers=mentor_headers)
        assert after.json()["data"]["count"] == 0

        second_fetch = await client.get(
            f"/api/v1/messages/{conversation_id}", headers=mentor_headers
        )
        assert all(m["read"] is True for m in second_fetch.json()["data"])

    @pytest.mark.asyncio
    async def test_sender_fetch_does_not_mark_own_messages(
        self, client: AsyncClient, conversation_id: str, student_headers, mentor_headers
    ):
        await client.post(
            f"/api/v1/messages/{conversation_id}",
            json={"content": "ping"},
            headers=student_headers,
        )

        await client.get(f"/api/v1/messages/{conversation_id}", headers=student_headers)

        count = await client.get("/api/v1/messages/unread-count", headers=mentor_headers)
        assert count.json()["data"]["count"] == 1


class TestListConversations:
    @pytest.mark.asyncio
    async def test_most_recent_activity_first(
        self, client: AsyncClient, student_headers
    ):
        older = (await _start(client, student_headers, recipient_id=MENTOR_ID)).json()["data"]
        newer = (await _start(client, student_headers, recipient_id=OTHER_ID)).json()["data"]

        await client.post(
            f"/api/v1/messages/{older['id']}",
            json={"content": "bump"},
            headers=student_headers,
        )

        response = await client.get("/api/v1/messages/conversations", headers=student_headers)

        ids = [c["id"] for c in response.json()["data"]]
        assert ids == [older["id"], newer["id"]]

    @pytest.mark.asyncio
    async def test_only_own_conversations(
        self, client: AsyncClient, student_headers, other_headers
    ):
        await _start(client, student_headers)

        response = await client.get("/api/v1/messages/conversations", headers=other_headers)

        assert response.json()["data"] == []
