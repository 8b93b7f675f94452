"""Common Pydantic schemas shared across the API."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from domain.entities.media import MediaType


class CamelModel(BaseModel):
    """Base schema exchanging camelCase keys with the client."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class SuccessEnvelope(CamelModel):
    """Fields shared by every successful response."""

    status: Literal["success"] = "success"
    message: str | None = None


class ErrorResponse(BaseModel):
    """Standardized error response."""

    status: Literal["error"] = "error"
    message: str
    code: str
    details: Any | None = None


class AcknowledgementResponse(SuccessEnvelope):
    """Response for operations that return no resource, e.g. deletes."""

    data: None = None


class MediaSchema(CamelModel):
    """Link to an image or video hosted elsewhere.

    Partial media (only one of type and url) is accepted and ignored.
    """

    type: MediaType | None = None
    url: str | None = Field(None, max_length=1000)


class MediaResponse(CamelModel):
    """Schema for an attached media link."""

    type: MediaType
    url: str
