"""Mentorship API routes."""

from fastapi import APIRouter, Depends, status

from api.dependencies.auth import CurrentUser
from api.v1.dependencies import get_mentorship_service
from api.v1.schemas.mentorship import (
    CreateMentorshipRequest,
    MentorListResponse,
    MentorshipRequestDetailResponse,
    MentorshipRequestListResponse,
    MentorshipRequestResponse,
    UpdateMentorshipStatus,
)
from api.v1.schemas.profile import ProfileResponse, ProfileSummary
from domain.entities.mentorship import MentorshipRequest, MentorshipRequestDetails
from domain.services.mentorship_service import MentorshipService

router = APIRouter(prefix="/mentorship", tags=["mentorship"])


def _build_request_response(
    request: MentorshipRequest,
    details: MentorshipRequestDetails | None = None,
) -> MentorshipRequestResponse:
    """Build a response, embedding resolved profiles when available."""
    mentor = details.mentor if details else None
    student = details.student if details else None
    return MentorshipRequestResponse(
        id=request.id,
        mentor_id=request.mentor_id,
        student_id=request.student_id,
        area=request.area,
        message=request.message,
        status=request.status.value,
        created_at=request.created_at,
        updated_at=request.updated_at,
        mentor=ProfileSummary.model_validate(mentor) if mentor else None,
        student=ProfileSummary.model_validate(student) if student else None,
    )


@router.get(
    "/mentors",
    response_model=MentorListResponse,
    summary="List mentors",
    responses={
        200: {"description": "All profiles flagged as mentors"},
    },
)
async def list_mentors(
    service: MentorshipService = Depends(get_mentorship_service),
) -> MentorListResponse:
    """List every mentor profile. No authentication required."""
    mentors = await service.list_mentors()
    data = [ProfileResponse.model_validate(m) for m in mentors]
    return MentorListResponse(data=data, meta={"total": len(data)})


@router.post(
    "/request",
    response_model=MentorshipRequestDetailResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Request mentorship",
    responses={
        201: {"description": "Request created with status pending"},
        400: {"description": "Missing fields or an open request already exists"},
        404: {"description": "Mentor not found"},
    },
)
async def create_request(
    body: CreateMentorshipRequest,
    user: CurrentUser,
    service: MentorshipService = Depends(get_mentorship_service),
) -> MentorshipRequestDetailResponse:
    """Ask a mentor for mentorship in a given area."""
    request = await service.create_request(
        student_id=user.uid,
        mentor_id=body.mentor_id,
        area=body.area,
        message=body.message,
    )
    return MentorshipRequestDetailResponse(data=_build_request_response(request))


@router.get(
    "/requests/mentor",
    response_model=MentorshipRequestListResponse,
    summary="Requests addressed to me",
)
async def list_mentor_requests(
    user: CurrentUser,
    service: MentorshipService = Depends(get_mentorship_service),
) -> MentorshipRequestListResponse:
    """List requests where the caller is the mentor, newest first."""
    items = await service.list_for_mentor(user.uid)
    data = [_build_request_response(item.request, item) for item in items]
    return MentorshipRequestListResponse(data=data, meta={"total": len(data)})


@router.get(
    "/requests/student",
    response_model=MentorshipRequestListResponse,
    summary="Requests I made",
)
async def list_student_requests(
    user: CurrentUser,
    service: MentorshipService = Depends(get_mentorship_service),
) -> MentorshipRequestListResponse:
    """List requests where the caller is the student, newest first."""
    items = await service.list_for_student(user.uid)
    data = [_build_request_response(item.request, item) for item in items]
    return MentorshipRequestListResponse(data=data, meta={"total": len(data)})


@router.put(
    "/requests/{request_id}",
    response_model=MentorshipRequestDetailResponse,
    summary="Accept or reject a request",
    responses={
        200: {"description": "Request decided"},
        400: {"description": "Invalid status or request already decided"},
        403: {"description": "Caller is not the request's mentor"},
        404: {"description": "Request not found"},
    },
)
async def update_request_status(
    request_id: str,
    body: UpdateMentorshipStatus,
    user: CurrentUser,
    service: MentorshipService = Depends(get_mentorship_service),
) -> MentorshipRequestDetailResponse:
    """Move a pending request to accepted or rejected. Mentor only."""
    request = await service.update_status(
        request_id=request_id,
        mentor_id=user.uid,
        status=body.status,
    )
    return MentorshipRequestDetailResponse(data=_build_request_response(request))
