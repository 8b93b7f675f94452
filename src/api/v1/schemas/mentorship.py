"""Pydantic schemas for Mentorship API."""

from datetime import datetime
from typing import Any

from pydantic import ConfigDict, Field

from api.v1.schemas.common import CamelModel, SuccessEnvelope
from api.v1.schemas.profile import ProfileResponse, ProfileSummary


class CreateMentorshipRequest(CamelModel):
    """Schema for requesting mentorship.

    Required fields are checked by the service so missing values produce
    ``MISSING_FIELDS`` rather than a generic validation error.
    """

    mentor_id: str | None = Field(None, description="Mentor's identity")
    area: str | None = Field(None, max_length=255)
    message: str | None = Field(None, max_length=2000)


class UpdateMentorshipStatus(CamelModel):
    """Schema for accepting or rejecting a request."""

    status: str | None = Field(None, description="accepted or rejected")


class MentorshipRequestResponse(CamelModel):
    """Schema for MentorshipRequest response."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "66a1f0c2e4b0a1b2c3d4e5f6",
                "mentorId": "Xk2d9Qm1LxVb",
                "studentId": "pQ7r3Tn8YwZa",
                "area": "Career",
                "message": "Would love advice on switching to backend work.",
                "status": "pending",
                "createdAt": "2026-02-01T10:00:00",
                "updatedAt": "2026-02-01T10:00:00",
            }
        },
    )

    id: str
    mentor_id: str
    student_id: str
    area: str
    message: str | None = None
    status: str
    created_at: datetime
    updated_at: datetime
    mentor: ProfileSummary | None = None
    student: ProfileSummary | None = None


class MentorshipRequestDetailResponse(SuccessEnvelope):
    """Schema for a single request response."""

    data: MentorshipRequestResponse


class MentorshipRequestListResponse(SuccessEnvelope):
    """Schema for list of requests response."""

    data: list[MentorshipRequestResponse]
    meta: dict[str, Any] = Field(default_factory=dict)


class MentorListResponse(SuccessEnvelope):
    """Schema for the mentor directory."""

    data: list[ProfileResponse]
    meta: dict[str, Any] = Field(default_factory=dict)
