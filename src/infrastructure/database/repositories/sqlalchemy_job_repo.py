"""SQLAlchemy implementation of Job repository."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.job import Job
from domain.entities.media import Media
from infrastructure.database.models import JobModel


class SQLAlchemyJobRepository:
    """SQLAlchemy implementation of IJobRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, job: Job) -> Job:
        """Create a new job posting."""
        model = self._to_model(job)
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        return self._to_entity(model)

    async def get(self, id: str) -> Job | None:
        """Get a job posting by ID."""
        model = await self._session.get(JobModel, id)
        return self._to_entity(model) if model else None

    async def list_all(self) -> list[Job]:
        """List every job posting, newest first."""
        stmt = select(JobModel).order_by(JobModel.created_at.desc(), JobModel.id.desc())
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    async def list_by_poster(self, posted_by: str) -> list[Job]:
        """List the postings of one identity, newest first."""
        stmt = (
            select(JobModel)
            .where(JobModel.posted_by == posted_by)
            .order_by(JobModel.created_at.desc(), JobModel.id.desc())
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    async def update(self, job: Job) -> Job:
        """Persist description, media and updated_at."""
        model = await self._session.get(JobModel, job.id)

        if not model:
            raise ValueError(f"Job {job.id} not found")

        model.description = job.description
        model.media_type = job.media.type.value if job.media else None
        model.media_url = job.media.url if job.media else None
        model.updated_at = job.updated_at

        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, id: str) -> bool:
        """Delete a job posting."""
        model = await self._session.get(JobModel, id)

        if not model:
            return False

        await self._session.delete(model)
        await self._session.flush()
        return True

    def _to_entity(self, model: JobModel) -> Job:
        """Convert ORM model to domain entity."""
        return Job(
            id=model.id,
            description=model.description,
            media=Media.from_parts(model.media_type, model.media_url),
            posted_by=model.posted_by,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: Job) -> JobModel:
        """Convert domain entity to ORM model."""
        return JobModel(
            id=entity.id,
            description=entity.description,
            media_type=entity.media.type.value if entity.media else None,
            media_url=entity.media.url if entity.media else None,
            posted_by=entity.posted_by,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )
