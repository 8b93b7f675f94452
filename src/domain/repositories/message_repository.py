"""Message repository protocol."""

from typing import Protocol

from domain.entities.message import Message


class IMessageRepository(Protocol):
    """Repository interface for Message entities."""

    async def create(self, message: Message) -> Message:
        """Create a new message."""
        ...

    async def list_for_conversation(self, conversation_id: str) -> list[Message]:
        """List a conversation's messages, oldest first."""
        ...

    async def mark_read(self, conversation_id: str, recipient_id: str) -> int:
        """Mark unread messages addressed to recipient as read. Returns count."""
        ...

    async def count_unread(self, recipient_id: str) -> int:
        """Count unread messages addressed to recipient across conversations."""
        ...
