"""Unit tests for MessagingService."""

from datetime import datetime

import pytest

from core.exceptions import (
    InvalidRecipientError,
    MissingContentError,
    MissingRecipientError,
    UnauthorizedAccessError,
)
from domain.entities.conversation import Conversation
from domain.entities.message import Message
from domain.services.messaging_service import MessagingService
from tests.unit.conftest import FakeUnitOfWork

ALICE = "alice-uid"
BOB = "bob-uid"
MALLORY = "mallory-uid"


@pytest.fixture
def service(uow: FakeUnitOfWork) -> MessagingService:
    return MessagingService(lambda: uow)


@pytest.fixture
def conversation() -> Conversation:
    return Conversation(participants=(ALICE, BOB))


# --- list_conversations ---


class TestListConversations:
    @pytest.mark.asyncio
    async def test_returns_participant_conversations(
        self, service: MessagingService, uow: FakeUnitOfWork, conversation: Conversation
    ):
        uow.conversations.list_for_participant.return_value = [conversation]

        result = await service.list_conversations(ALICE)

        assert result == [conversation]
        uow.conversations.list_for_participant.assert_called_once_with(ALICE)


# --- start_conversation ---


class TestStartConversation:
    @pytest.mark.asyncio
    async def test_creates_new_conversation(self, service: MessagingService, uow: FakeUnitOfWork):
        uow.conversations.get_or_create.side_effect = lambda c: (c, True)

        conversation, created = await service.start_conversation(ALICE, BOB)

        assert created is True
        assert conversation.participants == (ALICE, BOB)
        assert uow.committed

    @pytest.mark.asyncio
    async def test_reuses_existing_conversation(
        self, service: MessagingService, uow: FakeUnitOfWork, conversation: Conversation
    ):
        uow.conversations.get_or_create.return_value = (conversation, False)

        result, created = await service.start_conversation(BOB, ALICE)

        assert created is False
        assert result is conversation
        uow.conversations.get_or_create.assert_called_once()
        uow.conversations.get_by_participants.assert_not_called()
        assert not uow.committed

    @pytest.mark.asyncio
    @pytest.mark.parametrize("recipient", [None, "", "   "])
    async def test_raises_when_recipient_missing(
        self, service: MessagingService, uow: FakeUnitOfWork, recipient
    ):
        with pytest.raises(MissingRecipientError) as exc_info:
            await service.start_conversation(ALICE, recipient)

        assert exc_info.value.status_code == 400
        uow.conversations.get_or_create.assert_not_called()

    @pytest.mark.asyncio
    async def test_raises_when_recipient_is_caller(self, service: MessagingService):
        with pytest.raises(InvalidRecipientError):
            await service.start_conversation(ALICE, ALICE)


# --- get_messages ---


class TestGetMessages:
    @pytest.mark.asyncio
    async def test_returns_messages_and_marks_read(
        self, service: MessagingService, uow: FakeUnitOfWork, conversation: Conversation
    ):
        message = Message(
            conversation_id=conversation.id, sender_id=BOB, recipient_id=ALICE, content="hi"
        )
        uow.conversations.get.return_value = conversation
        uow.messages.list_for_conversation.return_value = [message]
        uow.messages.mark_read.return_value = 1

        result = await service.get_messages(conversation.id, ALICE)

        assert result == [message]
        assert result[0].read is False
        uow.messages.mark_read.assert_called_once_with(conversation.id, ALICE)
        assert uow.committed

    @pytest.mark.asyncio
    async def test_non_participant_is_rejected(
        self, service: MessagingService, uow: FakeUnitOfWork, conversation: Conversation
    ):
        uow.conversations.get.return_value = conversation

        with pytest.raises(UnauthorizedAccessError) as exc_info:
            await service.get_messages(conversation.id, MALLORY)

        assert exc_info.value.status_code == 403
        uow.messages.list_for_conversation.assert_not_called()
        uow.messages.mark_read.assert_not_called()

    @pytest.mark.asyncio
    async def test_missing_conversation_looks_like_unauthorized(
        self, service: MessagingService, uow: FakeUnitOfWork
    ):
        uow.conversations.get.return_value = None

        with pytest.raises(UnauthorizedAccessError):
            await service.get_messages("nope", ALICE)


# --- send_message ---


class TestSendMessage:
    @pytest.mark.asyncio
    async def test_sends_to_other_participant_and_touches_conversation(
        self, service: MessagingService, uow: FakeUnitOfWork, conversation: Conversation
    ):
        uow.conversations.get.return_value = conversation
        uow.messages.create.side_effect = lambda m: m

        result = await service.send_message(conversation.id, BOB, "hello")

        assert result.sender_id == BOB
        assert result.recipient_id == ALICE
        assert result.content == "hello"
        assert result.read is False
        uow.conversations.touch.assert_called_once_with(conversation.id, result.timestamp)
        assert uow.committed

    @pytest.mark.asyncio
    @pytest.mark.parametrize("content", [None, "", "  \n "])
    async def test_blank_content_writes_nothing(
        self, service: MessagingService, uow: FakeUnitOfWork, conversation: Conversation, content
    ):
        uow.conversations.get.return_value = conversation

        with pytest.raises(MissingContentError) as exc_info:
            await service.send_message(conversation.id, ALICE, content)

        assert exc_info.value.status_code == 400
        uow.messages.create.assert_not_called()
        uow.conversations.touch.assert_not_called()
        assert not uow.committed

    @pytest.mark.asyncio
    async def test_participant_check_runs_before_content_check(
        self, service: MessagingService, uow: FakeUnitOfWork, conversation: Conversation
    ):
        uow.conversations.get.return_value = conversation

        with pytest.raises(UnauthorizedAccessError):
            await service.send_message(conversation.id, MALLORY, "")

    @pytest.mark.asyncio
    async def test_touch_uses_message_timestamp(
        self, service: MessagingService, uow: FakeUnitOfWork, conversation: Conversation
    ):
        stamp = datetime(2026, 3, 1, 12, 0, 0)
        uow.conversations.get.return_value = conversation
        uow.messages.create.return_value = Message(
            conversation_id=conversation.id,
            sender_id=ALICE,
            recipient_id=BOB,
            content="x",
            timestamp=stamp,
        )

        await service.send_message(conversation.id, ALICE, "x")

        uow.conversations.touch.assert_called_once_with(conversation.id, stamp)


# --- count_unread ---


class TestCountUnread:
    @pytest.mark.asyncio
    async def test_returns_repository_count(self, service: MessagingService, uow: FakeUnitOfWork):
        uow.messages.count_unread.return_value = 4

        assert await service.count_unread(ALICE) == 4
        uow.messages.count_unread.assert_called_once_with(ALICE)


class TestMalformedIds:
    @pytest.mark.asyncio
    async def test_malformed_conversation_id_skips_lookup(
        self, service: MessagingService, uow: FakeUnitOfWork
    ):
        with pytest.raises(UnauthorizedAccessError):
            await service.send_message("not-an-id", ALICE, "hi")

        uow.conversations.get.assert_not_called()
