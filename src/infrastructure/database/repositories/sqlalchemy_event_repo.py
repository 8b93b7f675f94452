"""SQLAlchemy implementation of Event repository."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.event import Event
from domain.entities.media import Media
from infrastructure.database.models import EventModel


class SQLAlchemyEventRepository:
    """SQLAlchemy implementation of IEventRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, event: Event) -> Event:
        """Create a new event."""
        model = self._to_model(event)
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        return self._to_entity(model)

    async def get(self, id: str) -> Event | None:
        """Get an event by ID."""
        model = await self._session.get(EventModel, id)
        return self._to_entity(model) if model else None

    async def list_all(self) -> list[Event]:
        """List every event, newest first."""
        stmt = select(EventModel).order_by(EventModel.created_at.desc(), EventModel.id.desc())
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    async def delete(self, id: str) -> bool:
        """Delete an event."""
        model = await self._session.get(EventModel, id)

        if not model:
            return False

        await self._session.delete(model)
        await self._session.flush()
        return True

    def _to_entity(self, model: EventModel) -> Event:
        """Convert ORM model to domain entity."""
        return Event(
            id=model.id,
            description=model.description,
            media=Media.from_parts(model.media_type, model.media_url),
            organizer=model.organizer,
            created_at=model.created_at,
        )

    def _to_model(self, entity: Event) -> EventModel:
        """Convert domain entity to ORM model."""
        return EventModel(
            id=entity.id,
            description=entity.description,
            media_type=entity.media.type.value if entity.media else None,
            media_url=entity.media.url if entity.media else None,
            organizer=entity.organizer,
            created_at=entity.created_at,
        )
