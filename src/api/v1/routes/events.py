"""Events API routes."""

from fastapi import APIRouter, Depends, status

from api.dependencies.auth import CurrentUser
from api.v1.dependencies import get_event_service
from api.v1.schemas.common import AcknowledgementResponse
from api.v1.schemas.event import (
    EventCreate,
    EventDetailResponse,
    EventListResponse,
    EventResponse,
)
from domain.services.event_service import EventService

router = APIRouter(prefix="/events", tags=["events"])


@router.get(
    "",
    response_model=EventListResponse,
    summary="List events",
)
async def list_events(
    service: EventService = Depends(get_event_service),
) -> EventListResponse:
    """List every event, newest first. No authentication required."""
    events = await service.list_events()
    data = [EventResponse.model_validate(e) for e in events]
    return EventListResponse(data=data, meta={"total": len(data)})


@router.get(
    "/{event_id}",
    response_model=EventDetailResponse,
    summary="Get an event",
    responses={
        200: {"description": "Event details"},
        404: {"description": "Event not found"},
    },
)
async def get_event(
    event_id: str,
    service: EventService = Depends(get_event_service),
) -> EventDetailResponse:
    """Get an event by ID."""
    event = await service.get_event(event_id)
    return EventDetailResponse(data=EventResponse.model_validate(event))


@router.post(
    "",
    response_model=EventDetailResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Announce an event",
    responses={
        201: {"description": "Event created"},
        400: {"description": "Description too short"},
        422: {"description": "Media type or url not valid"},
    },
)
async def create_event(
    body: EventCreate,
    user: CurrentUser,
    service: EventService = Depends(get_event_service),
) -> EventDetailResponse:
    """Announce an event organized by the caller."""
    event = await service.create_event(
        organizer=user.uid,
        description=body.description,
        media=body.media.model_dump(mode="json", exclude_unset=True) if body.media else None,
    )
    return EventDetailResponse(data=EventResponse.model_validate(event))


@router.delete(
    "/{event_id}",
    response_model=AcknowledgementResponse,
    summary="Delete an event",
    responses={
        200: {"description": "Event deleted"},
        403: {"description": "Caller is not the organizer"},
        404: {"description": "Event not found"},
    },
)
async def delete_event(
    event_id: str,
    user: CurrentUser,
    service: EventService = Depends(get_event_service),
) -> AcknowledgementResponse:
    """Remove an event. Organizer only."""
    await service.delete_event(event_id, user.uid)
    return AcknowledgementResponse(message="Event deleted successfully")
