"""Pydantic schemas for Profile API."""

from datetime import datetime
from typing import Any

from pydantic import ConfigDict, Field

from api.v1.schemas.common import CamelModel, SuccessEnvelope


class ExperienceSchema(CamelModel):
    """A position in a profile's career history."""

    job_title: str | None = Field(None, max_length=255)
    company: str | None = Field(None, max_length=255)
    start_date: str | None = Field(None, max_length=20, description="e.g. 2020-01")
    end_date: str | None = Field(None, max_length=20, description="Empty for current roles")
    description: str | None = None


class ProfileFields(CamelModel):
    """Optional profile fields shared by create and update."""

    photo_url: str | None = Field(None, max_length=500)
    degree: str | None = Field(None, max_length=255)
    major: str | None = Field(None, max_length=255)
    current_job_title: str | None = Field(None, max_length=255)
    company: str | None = Field(None, max_length=255)
    location: str | None = Field(None, max_length=255)
    bio: str | None = None
    linkedin: str | None = Field(None, max_length=500)
    twitter: str | None = Field(None, max_length=500)
    github: str | None = Field(None, max_length=500)
    website: str | None = Field(None, max_length=500)
    achievements: list[str] | None = None
    skills: list[str] | None = None
    experience: list[ExperienceSchema] | None = None
    is_mentor: bool | None = None
    mentorship_areas: list[str] | None = None


class ProfileCreate(ProfileFields):
    """Schema for creating a profile."""

    name: str = Field(..., min_length=1, max_length=255)
    email: str = Field(..., min_length=3, max_length=255)
    batch: str = Field(..., min_length=1, max_length=20)
    graduation_year: int = Field(..., ge=1900, le=2200)


class ProfileUpdate(ProfileFields):
    """Schema for updating a profile (all fields optional)."""

    name: str | None = Field(None, min_length=1, max_length=255)
    email: str | None = Field(None, min_length=3, max_length=255)
    batch: str | None = Field(None, min_length=1, max_length=20)
    graduation_year: int | None = Field(None, ge=1900, le=2200)


class ProfileResponse(CamelModel):
    """Schema for Profile response."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "66a1f0c2e4b0a1b2c3d4e5f6",
                "userId": "Xk2d9Qm1LxVb",
                "name": "Priya Raman",
                "email": "priya@example.com",
                "batch": "2015",
                "graduationYear": 2015,
                "major": "Computer Science",
                "currentJobTitle": "Staff Engineer",
                "isMentor": True,
                "mentorshipAreas": ["Career", "Interview prep"],
            }
        },
    )

    id: str
    user_id: str
    name: str
    email: str
    photo_url: str | None = None
    batch: str
    graduation_year: int
    degree: str | None = None
    major: str | None = None
    current_job_title: str | None = None
    company: str | None = None
    location: str | None = None
    bio: str | None = None
    linkedin: str | None = None
    twitter: str | None = None
    github: str | None = None
    website: str | None = None
    achievements: list[str] = Field(default_factory=list)
    skills: list[str] = Field(default_factory=list)
    experience: list[ExperienceSchema] = Field(default_factory=list)
    is_mentor: bool = False
    mentorship_areas: list[str] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime


class ProfileSummary(CamelModel):
    """Compact profile for directory listings and embedded references."""

    user_id: str
    name: str
    photo_url: str | None = None
    current_job_title: str | None = None
    company: str | None = None
    skills: list[str] = Field(default_factory=list)
    graduation_year: int
    major: str | None = None


class ProfileDetailResponse(SuccessEnvelope):
    """Schema for a single profile response."""

    data: ProfileResponse


class ProfileListResponse(SuccessEnvelope):
    """Schema for a flat list of profiles."""

    data: list[ProfileResponse]
    meta: dict[str, Any] = Field(default_factory=dict)


class ProfilesByBatchResponse(SuccessEnvelope):
    """Profiles grouped by batch."""

    data: dict[str, list[ProfileResponse]]


class ProfilesByBatchAndMajorResponse(SuccessEnvelope):
    """Profiles grouped by batch, then by major."""

    data: dict[str, dict[str, list[ProfileResponse]]]


class ProfileListingsResponse(SuccessEnvelope):
    """Compact directory listings."""

    data: list[ProfileSummary]
