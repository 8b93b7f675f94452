"""SQLAlchemy Unit of Work implementation."""

from typing import Any, Optional

import structlog
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from core.exceptions import StoreError
from infrastructure.database.repositories.sqlalchemy_conversation_repo import (
    SQLAlchemyConversationRepository,
)
from infrastructure.database.repositories.sqlalchemy_event_repo import SQLAlchemyEventRepository
from infrastructure.database.repositories.sqlalchemy_job_repo import SQLAlchemyJobRepository
from infrastructure.database.repositories.sqlalchemy_mentorship_repo import (
    SQLAlchemyMentorshipRepository,
)
from infrastructure.database.repositories.sqlalchemy_message_repo import SQLAlchemyMessageRepository
from infrastructure.database.repositories.sqlalchemy_profile_repo import SQLAlchemyProfileRepository

logger = structlog.get_logger()


class SQLAlchemyUnitOfWork:
    """Unit of Work implementation using SQLAlchemy.

    Any ``SQLAlchemyError`` escaping the context is rolled back and re-raised
    as ``StoreError`` so callers only ever see application exceptions.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory
        self._session: Optional[AsyncSession] = None

    def _require_session(self) -> AsyncSession:
        if not self._session:
            raise RuntimeError("UnitOfWork not initialized. Use as context manager.")
        return self._session

    @property
    def profiles(self) -> SQLAlchemyProfileRepository:
        """Get profile repository."""
        return SQLAlchemyProfileRepository(self._require_session())

    @property
    def mentorship_requests(self) -> SQLAlchemyMentorshipRepository:
        """Get mentorship request repository."""
        return SQLAlchemyMentorshipRepository(self._require_session())

    @property
    def conversations(self) -> SQLAlchemyConversationRepository:
        """Get conversation repository."""
        return SQLAlchemyConversationRepository(self._require_session())

    @property
    def messages(self) -> SQLAlchemyMessageRepository:
        """Get message repository."""
        return SQLAlchemyMessageRepository(self._require_session())

    @property
    def jobs(self) -> SQLAlchemyJobRepository:
        """Get job posting repository."""
        return SQLAlchemyJobRepository(self._require_session())

    @property
    def events(self) -> SQLAlchemyEventRepository:
        """Get event repository."""
        return SQLAlchemyEventRepository(self._require_session())

    async def commit(self) -> None:
        """Commit the current transaction."""
        if self._session:
            await self._session.commit()

    async def rollback(self) -> None:
        """Rollback the current transaction."""
        if self._session:
            await self._session.rollback()

    async def __aenter__(self) -> "SQLAlchemyUnitOfWork":
        """Enter the context manager and create session."""
        self._session = self._session_factory()
        return self

    async def __aexit__(
        self,
        exc_type: Optional[type],
        exc_val: Optional[BaseException],
        exc_tb: Any,
    ) -> None:
        """Exit the context manager, translating store failures."""
        if self._session:
            try:
                if exc_type:
                    await self.rollback()
            finally:
                await self._session.close()
                self._session = None

        if isinstance(exc_val, SQLAlchemyError):
            logger.error(
                "store_operation_failed",
                error=str(exc_val),
                error_type=type(exc_val).__name__,
            )
            raise StoreError() from exc_val
