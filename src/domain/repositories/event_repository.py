"""Event posting repository protocol."""

from typing import Protocol

from domain.entities.event import Event


class IEventRepository(Protocol):
    """Repository interface for Event entities."""

    async def create(self, event: Event) -> Event:
        """Create a new event."""
        ...

    async def get(self, id: str) -> Event | None:
        """Get an event by ID."""
        ...

    async def list_all(self) -> list[Event]:
        """List every event, newest first."""
        ...

    async def delete(self, id: str) -> bool:
        """Delete an event. Returns False if it did not exist."""
        ...
