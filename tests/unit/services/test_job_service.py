"""Unit tests for JobService."""

import pytest

from core.exceptions import (
    ErrorCode,
    InvalidJobIdError,
    JobNotFoundError,
    MissingDescriptionError,
    NoUpdateFieldsError,
    UnauthorizedJobAccessError,
)
from domain.entities.job import Job
from domain.entities.media import Media, MediaType
from domain.services.job_service import JobService
from tests.unit.conftest import FakeUnitOfWork

POSTER = "poster-uid"
STRANGER = "stranger-uid"
IMAGE = {"type": "image", "url": "https://cdn.example.com/job.png"}


@pytest.fixture
def service(uow: FakeUnitOfWork) -> JobService:
    return JobService(lambda: uow)


@pytest.fixture
def job() -> Job:
    return Job(description="Backend engineer wanted", posted_by=POSTER)


# --- list / get ---


class TestReadJobs:
    @pytest.mark.asyncio
    async def test_list_jobs(self, service: JobService, uow: FakeUnitOfWork, job: Job):
        uow.jobs.list_all.return_value = [job]

        assert await service.list_jobs() == [job]

    @pytest.mark.asyncio
    async def test_list_my_jobs_filters_by_caller(
        self, service: JobService, uow: FakeUnitOfWork, job: Job
    ):
        uow.jobs.list_by_poster.return_value = [job]

        result = await service.list_my_jobs(POSTER)

        assert result == [job]
        uow.jobs.list_by_poster.assert_called_once_with(POSTER)

    @pytest.mark.asyncio
    async def test_get_job(self, service: JobService, uow: FakeUnitOfWork, job: Job):
        uow.jobs.get.return_value = job

        assert await service.get_job(job.id) is job

    @pytest.mark.asyncio
    @pytest.mark.parametrize("job_id", ["abc", "Z" * 24, "0" * 23])
    async def test_malformed_id_is_rejected_without_lookup(
        self, service: JobService, uow: FakeUnitOfWork, job_id: str
    ):
        with pytest.raises(InvalidJobIdError) as exc_info:
            await service.get_job(job_id)

        assert exc_info.value.status_code == 400
        assert exc_info.value.message == "Invalid job ID"
        uow.jobs.get.assert_not_called()

    @pytest.mark.asyncio
    async def test_missing_job(self, service: JobService, uow: FakeUnitOfWork):
        uow.jobs.get.return_value = None

        with pytest.raises(JobNotFoundError) as exc_info:
            await service.get_job("0" * 24)

        assert exc_info.value.status_code == 404


# --- create_job ---


class TestCreateJob:
    @pytest.mark.asyncio
    async def test_creates_job_with_media(self, service: JobService, uow: FakeUnitOfWork):
        uow.jobs.create.side_effect = lambda j: j

        job = await service.create_job(POSTER, "  Data analyst  ", IMAGE)

        assert job.description == "Data analyst"
        assert job.posted_by == POSTER
        assert job.media == Media(type=MediaType.IMAGE, url=IMAGE["url"])
        assert uow.committed

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "media", [None, {}, {"type": "image"}, {"url": "https://x.example"}, {"type": None}]
    )
    async def test_partial_media_is_dropped(
        self, service: JobService, uow: FakeUnitOfWork, media
    ):
        uow.jobs.create.side_effect = lambda j: j

        job = await service.create_job(POSTER, "Data analyst", media)

        assert job.media is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize("description", [None, "", "   "])
    async def test_description_required(
        self, service: JobService, uow: FakeUnitOfWork, description
    ):
        with pytest.raises(MissingDescriptionError) as exc_info:
            await service.create_job(POSTER, description, IMAGE)

        assert exc_info.value.error_code == ErrorCode.MISSING_DESCRIPTION
        uow.jobs.create.assert_not_called()


# --- update_job ---


class TestUpdateJob:
    @pytest.mark.asyncio
    async def test_poster_updates_description(
        self, service: JobService, uow: FakeUnitOfWork, job: Job
    ):
        before = job.updated_at
        uow.jobs.get.return_value = job
        uow.jobs.update.side_effect = lambda j: j

        result = await service.update_job(job.id, POSTER, description="Senior engineer")

        assert result.description == "Senior engineer"
        assert result.updated_at >= before
        uow.jobs.update.assert_called_once_with(job)
        assert uow.committed

    @pytest.mark.asyncio
    async def test_media_alone_is_enough(
        self, service: JobService, uow: FakeUnitOfWork, job: Job
    ):
        uow.jobs.get.return_value = job
        uow.jobs.update.side_effect = lambda j: j

        result = await service.update_job(job.id, POSTER, media=IMAGE)

        assert result.description == "Backend engineer wanted"
        assert result.media == Media(type=MediaType.IMAGE, url=IMAGE["url"])

    @pytest.mark.asyncio
    async def test_null_media_clears_attachment(
        self, service: JobService, uow: FakeUnitOfWork
    ):
        job = Job(
            description="Backend engineer wanted",
            posted_by=POSTER,
            media=Media(type=MediaType.VIDEO, url="https://cdn.example.com/v.mp4"),
        )
        uow.jobs.get.return_value = job
        uow.jobs.update.side_effect = lambda j: j

        result = await service.update_job(
            job.id, POSTER, description="Still hiring", media={"type": None, "url": None}
        )

        assert result.media is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize("media", [None, {"type": "image"}, {"type": None, "url": None}])
    async def test_requires_description_or_complete_media(
        self, service: JobService, uow: FakeUnitOfWork, job: Job, media
    ):
        uow.jobs.get.return_value = job

        with pytest.raises(NoUpdateFieldsError) as exc_info:
            await service.update_job(job.id, POSTER, description="  ", media=media)

        assert exc_info.value.status_code == 400
        uow.jobs.update.assert_not_called()

    @pytest.mark.asyncio
    async def test_only_poster_can_update(
        self, service: JobService, uow: FakeUnitOfWork, job: Job
    ):
        uow.jobs.get.return_value = job

        with pytest.raises(UnauthorizedJobAccessError) as exc_info:
            await service.update_job(job.id, STRANGER, description="Mine now")

        assert exc_info.value.status_code == 403
        assert exc_info.value.message == "Not authorized to update this job"
        uow.jobs.update.assert_not_called()

    @pytest.mark.asyncio
    async def test_ownership_checked_before_payload(
        self, service: JobService, uow: FakeUnitOfWork, job: Job
    ):
        uow.jobs.get.return_value = job

        with pytest.raises(UnauthorizedJobAccessError):
            await service.update_job(job.id, STRANGER)

    @pytest.mark.asyncio
    async def test_malformed_id(self, service: JobService, uow: FakeUnitOfWork):
        with pytest.raises(InvalidJobIdError):
            await service.update_job("nope", POSTER, description="x")

        uow.jobs.get.assert_not_called()


# --- delete_job ---


class TestDeleteJob:
    @pytest.mark.asyncio
    async def test_poster_deletes(self, service: JobService, uow: FakeUnitOfWork, job: Job):
        uow.jobs.get.return_value = job
        uow.jobs.delete.return_value = True

        await service.delete_job(job.id, POSTER)

        uow.jobs.delete.assert_called_once_with(job.id)
        assert uow.committed

    @pytest.mark.asyncio
    async def test_only_poster_can_delete(
        self, service: JobService, uow: FakeUnitOfWork, job: Job
    ):
        uow.jobs.get.return_value = job

        with pytest.raises(UnauthorizedJobAccessError) as exc_info:
            await service.delete_job(job.id, STRANGER)

        assert exc_info.value.message == "Not authorized to delete this job"
        uow.jobs.delete.assert_not_called()
        assert not uow.committed

    @pytest.mark.asyncio
    async def test_missing_job(self, service: JobService, uow: FakeUnitOfWork):
        uow.jobs.get.return_value = None

        with pytest.raises(JobNotFoundError):
            await service.delete_job("0" * 24, POSTER)
