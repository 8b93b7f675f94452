"""Event announcements service layer."""

from collections.abc import Callable
from typing import Any

import structlog

from core.exceptions import (
    EventNotFoundError,
    InvalidDescriptionError,
    UnauthorizedEventAccessError,
)
from domain.entities.event import MIN_DESCRIPTION_LENGTH, Event
from domain.entities.identifiers import is_object_id
from domain.entities.media import Media
from domain.repositories.unit_of_work import IUnitOfWork

logger = structlog.get_logger()


class EventService:
    """Service layer for community events.

    Events are immutable once posted; the organizer can only remove them.
    """

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def list_events(self) -> list[Event]:
        """Get every event, newest first."""
        async with self._uow_factory() as uow:
            return await uow.events.list_all()  # type: ignore[no-any-return]

    async def get_event(self, event_id: str) -> Event:
        """Get an event by ID. Malformed IDs are reported as not found."""
        async with self._uow_factory() as uow:
            return await self._get_event(uow, event_id)

    async def create_event(
        self,
        organizer: str,
        description: str | None,
        media: dict[str, Any] | None = None,
    ) -> Event:
        """Announce an event organized by the caller.

        Raises:
            InvalidDescriptionError: If the trimmed description is shorter
                than ``MIN_DESCRIPTION_LENGTH``.
        """
        description = (description or "").strip()
        if len(description) < MIN_DESCRIPTION_LENGTH:
            raise InvalidDescriptionError(MIN_DESCRIPTION_LENGTH)

        media_obj = Media.from_parts(media.get("type"), media.get("url")) if media else None
        event = Event(description=description, organizer=organizer, media=media_obj)

        async with self._uow_factory() as uow:
            created = await uow.events.create(event)
            await uow.commit()

        logger.info("event_created", event_id=created.id, organizer=organizer)
        return created  # type: ignore[no-any-return]

    async def delete_event(self, event_id: str, user_id: str) -> None:
        """Remove an event. Organizer only.

        Raises:
            EventNotFoundError: If the event does not exist.
            UnauthorizedEventAccessError: If the caller is not the organizer.
        """
        async with self._uow_factory() as uow:
            event = await self._get_event(uow, event_id)

            if not event.is_organized_by(user_id):
                raise UnauthorizedEventAccessError()

            await uow.events.delete(event.id)
            await uow.commit()

        logger.info("event_deleted", event_id=event_id)

    @staticmethod
    async def _get_event(uow: IUnitOfWork, event_id: str) -> Event:
        event = await uow.events.get(event_id) if is_object_id(event_id) else None
        if not event:
            raise EventNotFoundError(event_id)
        return event
