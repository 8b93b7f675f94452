"""Dependency injection factories for API v1."""

from functools import lru_cache
from typing import Callable

from domain.services.event_service import EventService
from domain.services.job_service import JobService
from domain.services.mentorship_service import MentorshipService
from domain.services.messaging_service import MessagingService
from domain.services.profile_service import ProfileService
from infrastructure.database.session import async_session_factory
from infrastructure.database.sqlalchemy_uow import SQLAlchemyUnitOfWork


def get_uow_factory() -> Callable[[], SQLAlchemyUnitOfWork]:
    """Factory for creating Unit of Work instances."""

    def factory() -> SQLAlchemyUnitOfWork:
        return SQLAlchemyUnitOfWork(async_session_factory)

    return factory


@lru_cache
def get_profile_service() -> ProfileService:
    """Get Profile service instance."""
    return ProfileService(get_uow_factory())


@lru_cache
def get_mentorship_service() -> MentorshipService:
    """Get Mentorship service instance."""
    return MentorshipService(get_uow_factory())


@lru_cache
def get_messaging_service() -> MessagingService:
    """Get Messaging service instance."""
    return MessagingService(get_uow_factory())


@lru_cache
def get_job_service() -> JobService:
    """Get Job service instance."""
    return JobService(get_uow_factory())


@lru_cache
def get_event_service() -> EventService:
    """Get Event service instance."""
    return EventService(get_uow_factory())
