"""Pydantic schemas for Events API."""

from datetime import datetime
from typing import Any

from pydantic import Field, HttpUrl

from api.v1.schemas.common import CamelModel, MediaResponse, MediaSchema, SuccessEnvelope


class EventMediaSchema(MediaSchema):
    """Event media; the url, when given, must be an http(s) URL."""

    url: HttpUrl | None = None  # type: ignore[assignment]


class EventCreate(CamelModel):
    """Schema for announcing an event."""

    description: str | None = Field(None, max_length=10000)
    media: EventMediaSchema | None = None


class EventResponse(CamelModel):
    """Schema for Event response."""

    id: str
    description: str
    media: MediaResponse | None = None
    organizer: str
    created_at: datetime


class EventDetailResponse(SuccessEnvelope):
    """Schema for a single event response."""

    data: EventResponse


class EventListResponse(SuccessEnvelope):
    """Schema for list of events response."""

    data: list[EventResponse]
    meta: dict[str, Any] = Field(default_factory=dict)
