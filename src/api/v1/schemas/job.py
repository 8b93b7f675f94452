"""Pydantic schemas for Job board API."""

from datetime import datetime
from typing import Any

from pydantic import ConfigDict, Field

from api.v1.schemas.common import CamelModel, MediaResponse, MediaSchema, SuccessEnvelope


class JobCreate(CamelModel):
    """Schema for posting a job.

    A blank description is rejected by the service with ``MISSING_DESCRIPTION``.
    """

    description: str | None = Field(None, max_length=10000)
    media: MediaSchema | None = None


class JobUpdate(CamelModel):
    """Schema for editing a job.

    Send ``media: {type: null, url: null}`` together with a description to
    remove the attachment.
    """

    description: str | None = Field(None, max_length=10000)
    media: MediaSchema | None = None


class JobResponse(CamelModel):
    """Schema for Job response."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "66a1f0c2e4b0a1b2c3d4e5f6",
                "description": "Backend engineer, Python/FastAPI, remote-friendly.",
                "media": {"type": "image", "url": "https://cdn.example.com/job.png"},
                "postedBy": "Xk2d9Qm1LxVb",
                "createdAt": "2026-02-01T10:00:00",
                "updatedAt": "2026-02-01T10:00:00",
            }
        },
    )

    id: str
    description: str
    media: MediaResponse | None = None
    posted_by: str
    created_at: datetime
    updated_at: datetime


class JobDetailResponse(SuccessEnvelope):
    """Schema for a single job response."""

    data: JobResponse


class JobListResponse(SuccessEnvelope):
    """Schema for list of jobs response."""

    data: list[JobResponse]
    meta: dict[str, Any] = Field(default_factory=dict)
