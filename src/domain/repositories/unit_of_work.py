"""Unit of Work protocol."""

from typing import Protocol

from domain.repositories.conversation_repository import IConversationRepository
from domain.repositories.event_repository import IEventRepository
from domain.repositories.job_repository import IJobRepository
from domain.repositories.mentorship_repository import IMentorshipRepository
from domain.repositories.message_repository import IMessageRepository
from domain.repositories.profile_repository import IProfileRepository


class IUnitOfWork(Protocol):
    """Unit of Work interface for managing transactions."""

    profiles: IProfileRepository
    mentorship_requests: IMentorshipRepository
    conversations: IConversationRepository
    messages: IMessageRepository
    jobs: IJobRepository
    events: IEventRepository

    async def commit(self) -> None:
        """Commit the current transaction."""
        ...

    async def rollback(self) -> None:
        """Rollback the current transaction."""
        ...

    async def __aenter__(self) -> "IUnitOfWork":
        """Enter the context manager."""
        ...

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:  # type: ignore
        """Exit the context manager."""
        ...
