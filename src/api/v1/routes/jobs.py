"""Job board API routes."""

from fastapi import APIRouter, Depends, status

from api.dependencies.auth import CurrentUser
from api.v1.dependencies import get_job_service
from api.v1.schemas.common import AcknowledgementResponse
from api.v1.schemas.job import (
    JobCreate,
    JobDetailResponse,
    JobListResponse,
    JobResponse,
    JobUpdate,
)
from domain.services.job_service import JobService

router = APIRouter(prefix="/jobs", tags=["jobs"])


@router.get(
    "",
    response_model=JobListResponse,
    summary="List jobs",
)
async def list_jobs(
    service: JobService = Depends(get_job_service),
) -> JobListResponse:
    """List every job posting, newest first. No authentication required."""
    jobs = await service.list_jobs()
    data = [JobResponse.model_validate(j) for j in jobs]
    return JobListResponse(data=data, meta={"total": len(data)})


@router.get(
    "/my-jobs",
    response_model=JobListResponse,
    summary="Jobs I posted",
)
async def list_my_jobs(
    user: CurrentUser,
    service: JobService = Depends(get_job_service),
) -> JobListResponse:
    """List the caller's own postings, newest first."""
    jobs = await service.list_my_jobs(user.uid)
    data = [JobResponse.model_validate(j) for j in jobs]
    return JobListResponse(data=data, meta={"total": len(data)})


@router.get(
    "/{job_id}",
    response_model=JobDetailResponse,
    summary="Get a job",
    responses={
        200: {"description": "Job details"},
        400: {"description": "Malformed job ID"},
        404: {"description": "Job not found"},
    },
)
async def get_job(
    job_id: str,
    service: JobService = Depends(get_job_service),
) -> JobDetailResponse:
    """Get a job posting by ID."""
    job = await service.get_job(job_id)
    return JobDetailResponse(data=JobResponse.model_validate(job))


@router.post(
    "",
    response_model=JobDetailResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Post a job",
    responses={
        201: {"description": "Job posted"},
        400: {"description": "Description missing"},
    },
)
async def create_job(
    body: JobCreate,
    user: CurrentUser,
    service: JobService = Depends(get_job_service),
) -> JobDetailResponse:
    """Post a job. Media is kept only when both type and url are set."""
    job = await service.create_job(
        user_id=user.uid,
        description=body.description,
        media=body.media.model_dump(mode="json", exclude_unset=True) if body.media else None,
    )
    return JobDetailResponse(data=JobResponse.model_validate(job))


@router.put(
    "/{job_id}",
    response_model=JobDetailResponse,
    summary="Edit a job",
    responses={
        200: {"description": "Job updated"},
        400: {"description": "Malformed job ID or nothing to update"},
        403: {"description": "Caller did not post this job"},
        404: {"description": "Job not found"},
    },
)
async def update_job(
    job_id: str,
    body: JobUpdate,
    user: CurrentUser,
    service: JobService = Depends(get_job_service),
) -> JobDetailResponse:
    """Change the description and/or media of one of the caller's postings."""
    job = await service.update_job(
        job_id=job_id,
        user_id=user.uid,
        description=body.description,
        media=body.media.model_dump(mode="json", exclude_unset=True) if body.media else None,
    )
    return JobDetailResponse(data=JobResponse.model_validate(job))


@router.delete(
    "/{job_id}",
    response_model=AcknowledgementResponse,
    summary="Delete a job",
    responses={
        200: {"description": "Job deleted"},
        400: {"description": "Malformed job ID"},
        403: {"description": "Caller did not post this job"},
        404: {"description": "Job not found"},
    },
)
async def delete_job(
    job_id: str,
    user: CurrentUser,
    service: JobService = Depends(get_job_service),
) -> AcknowledgementResponse:
    """Delete one of the caller's postings."""
    await service.delete_job(job_id, user.uid)
    return AcknowledgementResponse(message="Job deleted")
