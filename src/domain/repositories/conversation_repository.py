"""Conversation repository protocol."""

from datetime import datetime
from typing import Protocol

from domain.entities.conversation import Conversation


class IConversationRepository(Protocol):
    """Repository interface for Conversation entities."""

    async def get(self, id: str) -> Conversation | None:
        """Get a conversation by ID."""
        ...

    async def get_by_participants(self, first: str, second: str) -> Conversation | None:
        """Get the conversation between two identities, in either order."""
        ...

    async def get_or_create(self, conversation: Conversation) -> tuple[Conversation, bool]:
        """Insert a conversation unless one exists for the same pair.

        Returns:
            Tuple of (conversation, created).
        """
        ...

    async def list_for_participant(self, user_id: str) -> list[Conversation]:
        """List a participant's conversations, most recently updated first."""
        ...

    async def touch(self, id: str, at: datetime) -> None:
        """Set a conversation's updated_at."""
        ...
