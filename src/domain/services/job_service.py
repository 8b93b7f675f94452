"""Job board service layer with business logic."""

from collections.abc import Callable
from datetime import datetime
from typing import Any

import structlog

from core.exceptions import (
    InvalidJobIdError,
    JobNotFoundError,
    MissingDescriptionError,
    NoUpdateFieldsError,
    UnauthorizedJobAccessError,
)
from domain.entities.identifiers import is_object_id
from domain.entities.job import Job
from domain.entities.media import Media
from domain.repositories.unit_of_work import IUnitOfWork

logger = structlog.get_logger()


def _media_from(payload: dict[str, Any] | None) -> Media | None:
    if not payload:
        return None
    return Media.from_parts(payload.get("type"), payload.get("url"))


def _clears_media(payload: dict[str, Any] | None) -> bool:
    """An explicit ``{type: null, url: null}`` removes the attachment."""
    return (
        payload is not None
        and "type" in payload
        and "url" in payload
        and payload["type"] is None
        and payload["url"] is None
    )


class JobService:
    """Service layer for the community job board.

    Anyone may read postings. Only the identity that posted a job may edit
    or delete it.
    """

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def list_jobs(self) -> list[Job]:
        """Get every job posting, newest first."""
        async with self._uow_factory() as uow:
            return await uow.jobs.list_all()  # type: ignore[no-any-return]

    async def list_my_jobs(self, user_id: str) -> list[Job]:
        """Get the caller's own postings, newest first."""
        async with self._uow_factory() as uow:
            return await uow.jobs.list_by_poster(user_id)  # type: ignore[no-any-return]

    async def get_job(self, job_id: str) -> Job:
        """Get a job posting by ID.

        Raises:
            InvalidJobIdError: If job_id is not a well-formed identifier.
            JobNotFoundError: If no posting has this ID.
        """
        async with self._uow_factory() as uow:
            return await self._get_job(uow, job_id)

    async def create_job(
        self,
        user_id: str,
        description: str | None,
        media: dict[str, Any] | None = None,
    ) -> Job:
        """Post a job on behalf of the caller.

        Media is attached only when both its type and url are given;
        partial media is dropped.

        Raises:
            MissingDescriptionError: If description is missing or blank.
        """
        description = (description or "").strip()
        if not description:
            raise MissingDescriptionError()

        job = Job(description=description, posted_by=user_id, media=_media_from(media))

        async with self._uow_factory() as uow:
            created = await uow.jobs.create(job)
            await uow.commit()

        logger.info("job_posted", job_id=created.id, posted_by=user_id)
        return created  # type: ignore[no-any-return]

    async def update_job(
        self,
        job_id: str,
        user_id: str,
        description: str | None = None,
        media: dict[str, Any] | None = None,
    ) -> Job:
        """Change the description and/or media of the caller's posting.

        Checks run in order: ID shape, existence, ownership, then payload.
        Sending media with both type and url set to null, alongside a new
        description, removes the attachment.

        Raises:
            InvalidJobIdError: If job_id is not a well-formed identifier.
            JobNotFoundError: If no posting has this ID.
            UnauthorizedJobAccessError: If the caller did not post the job.
            NoUpdateFieldsError: If neither a description nor complete media
                was provided.
        """
        description = (description or "").strip()
        new_media = _media_from(media)

        async with self._uow_factory() as uow:
            job = await self._get_job(uow, job_id)

            if not job.is_posted_by(user_id):
                raise UnauthorizedJobAccessError("update")

            if not description and new_media is None:
                raise NoUpdateFieldsError()

            if description:
                job.description = description
            if new_media is not None:
                job.media = new_media
            elif _clears_media(media):
                job.media = None
            job.updated_at = datetime.utcnow()

            updated = await uow.jobs.update(job)
            await uow.commit()

        logger.info("job_updated", job_id=updated.id, has_media=updated.media is not None)
        return updated  # type: ignore[no-any-return]

    async def delete_job(self, job_id: str, user_id: str) -> None:
        """Delete the caller's posting.

        Raises:
            InvalidJobIdError: If job_id is not a well-formed identifier.
            JobNotFoundError: If no posting has this ID.
            UnauthorizedJobAccessError: If the caller did not post the job.
        """
        async with self._uow_factory() as uow:
            job = await self._get_job(uow, job_id)

            if not job.is_posted_by(user_id):
                raise UnauthorizedJobAccessError("delete")

            await uow.jobs.delete(job.id)
            await uow.commit()

        logger.info("job_deleted", job_id=job_id)

    # --- Internal helpers ---

    @staticmethod
    async def _get_job(uow: IUnitOfWork, job_id: str) -> Job:
        if not is_object_id(job_id):
            raise InvalidJobIdError(job_id)
        job = await uow.jobs.get(job_id)
        if not job:
            raise JobNotFoundError(job_id)
        return job
