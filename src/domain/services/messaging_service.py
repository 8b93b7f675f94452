"""Messaging service layer with business logic."""

from collections.abc import Callable

import structlog

from core.exceptions import (
    InvalidRecipientError,
    MissingContentError,
    MissingRecipientError,
    UnauthorizedAccessError,
)
from domain.entities.conversation import Conversation
from domain.entities.identifiers import is_object_id
from domain.entities.message import Message
from domain.repositories.unit_of_work import IUnitOfWork

logger = structlog.get_logger()


class MessagingService:
    """Service layer for conversations and direct messages.

    Every operation that touches a conversation's content first verifies the
    caller is one of its two participants. A conversation that does not
    exist is reported the same way as one the caller is not part of.
    """

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def list_conversations(self, user_id: str) -> list[Conversation]:
        """Get the caller's conversations, most recent activity first."""
        async with self._uow_factory() as uow:
            return await uow.conversations.list_for_participant(user_id)  # type: ignore[no-any-return]

    async def start_conversation(
        self, user_id: str, recipient_id: str | None
    ) -> tuple[Conversation, bool]:
        """Find or create the conversation between the caller and a recipient.

        Returns:
            Tuple of (conversation, created). ``created`` is False when an
            existing conversation for the pair was reused.

        Raises:
            MissingRecipientError: If recipient_id is missing or blank.
            InvalidRecipientError: If recipient_id is the caller.
        """
        recipient_id = (recipient_id or "").strip()
        if not recipient_id:
            raise MissingRecipientError()
        if recipient_id == user_id:
            raise InvalidRecipientError()

        async with self._uow_factory() as uow:
            conversation, created = await uow.conversations.get_or_create(
                Conversation(participants=(user_id, recipient_id))
            )
            if created:
                await uow.commit()

        if created:
            logger.info(
                "conversation_started",
                conversation_id=conversation.id,
                initiator_id=user_id,
                recipient_id=recipient_id,
            )
        return conversation, created

    async def get_messages(self, conversation_id: str, user_id: str) -> list[Message]:
        """Get a conversation's messages, oldest first, and acknowledge them.

        Unread messages addressed to the caller are marked read in the same
        unit of work. The returned list reflects read state as it was before
        this fetch.

        Raises:
            UnauthorizedAccessError: If the caller is not a participant.
        """
        async with self._uow_factory() as uow:
            await self._require_participant(uow, conversation_id, user_id)

            messages = await uow.messages.list_for_conversation(conversation_id)
            marked = await uow.messages.mark_read(conversation_id, user_id)
            await uow.commit()

        if marked:
            logger.debug(
                "messages_marked_read",
                conversation_id=conversation_id,
                reader_id=user_id,
                count=marked,
            )
        return messages  # type: ignore[no-any-return]

    async def send_message(
        self, conversation_id: str, user_id: str, content: str | None
    ) -> Message:
        """Append a message from the caller to the other participant.

        Raises:
            UnauthorizedAccessError: If the caller is not a participant.
            MissingContentError: If content is missing or blank.
        """
        async with self._uow_factory() as uow:
            conversation = await self._require_participant(uow, conversation_id, user_id)

            if not content or not content.strip():
                raise MissingContentError()

            message = Message(
                conversation_id=conversation.id,
                sender_id=user_id,
                recipient_id=conversation.other_participant(user_id),
                content=content,
            )
            created = await uow.messages.create(message)
            await uow.conversations.touch(conversation.id, created.timestamp)
            await uow.commit()

        logger.info(
            "message_sent",
            conversation_id=created.conversation_id,
            message_id=created.id,
            sender_id=created.sender_id,
        )
        return created  # type: ignore[no-any-return]

    async def count_unread(self, user_id: str) -> int:
        """Count unread messages addressed to the caller."""
        async with self._uow_factory() as uow:
            return await uow.messages.count_unread(user_id)  # type: ignore[no-any-return]

    # --- Internal helpers ---

    @staticmethod
    async def _require_participant(
        uow: IUnitOfWork, conversation_id: str, user_id: str
    ) -> Conversation:
        """Load the conversation and verify membership. Raises on failure."""
        if not is_object_id(conversation_id):
            raise UnauthorizedAccessError()
        conversation = await uow.conversations.get(conversation_id)
        if not conversation or not conversation.has_participant(user_id):
            raise UnauthorizedAccessError()
        return conversation
