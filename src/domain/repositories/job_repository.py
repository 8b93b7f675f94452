"""Job posting repository protocol."""

from typing import Protocol

from domain.entities.job import Job


class IJobRepository(Protocol):
    """Repository interface for Job entities."""

    async def create(self, job: Job) -> Job:
        """Create a new job posting."""
        ...

    async def get(self, id: str) -> Job | None:
        """Get a job posting by ID."""
        ...

    async def list_all(self) -> list[Job]:
        """List every job posting, newest first."""
        ...

    async def list_by_poster(self, posted_by: str) -> list[Job]:
        """List the postings of one identity, newest first."""
        ...

    async def update(self, job: Job) -> Job:
        """Persist description, media and updated_at."""
        ...

    async def delete(self, id: str) -> bool:
        """Delete a job posting. Returns False if it did not exist."""
        ...
