"""Profile directory API routes."""

from enum import StrEnum

from fastapi import APIRouter, Depends, Query, status

from api.dependencies.auth import CurrentUser
from api.v1.dependencies import get_profile_service
from api.v1.schemas.profile import (
    ProfileCreate,
    ProfileDetailResponse,
    ProfileListingsResponse,
    ProfileListResponse,
    ProfileResponse,
    ProfilesByBatchAndMajorResponse,
    ProfilesByBatchResponse,
    ProfileSummary,
    ProfileUpdate,
)
from domain.services.profile_service import (
    ProfileService,
    group_by_batch,
    group_by_batch_and_major,
)

router = APIRouter(prefix="/profiles", tags=["profiles"])


class GroupBy(StrEnum):
    """Directory grouping views."""

    BATCH = "batch"
    BATCH_AND_MAJOR = "batch_and_major"


@router.get(
    "",
    response_model=ProfileListResponse | ProfilesByBatchResponse | ProfilesByBatchAndMajorResponse,
    summary="List profiles",
    responses={
        200: {"description": "Flat list, or profiles grouped by batch (and major)"},
    },
)
async def list_profiles(
    service: ProfileService = Depends(get_profile_service),
    batch: str | None = Query(None, description="Only profiles from this batch"),
    group_by: GroupBy | None = Query(None, alias="groupBy", description="Grouping view"),
) -> ProfileListResponse | ProfilesByBatchResponse | ProfilesByBatchAndMajorResponse:
    """
    List the alumni directory.

    A `batch` filter takes precedence over grouping. Grouped views sort
    batches newest first with profiles missing a batch under `Unknown`, last.
    """
    profiles = await service.list_profiles(batch=batch)

    if batch or group_by is None:
        data = [ProfileResponse.model_validate(p) for p in profiles]
        return ProfileListResponse(data=data, meta={"total": len(data)})

    if group_by == GroupBy.BATCH:
        return ProfilesByBatchResponse(
            data={
                key: [ProfileResponse.model_validate(p) for p in members]
                for key, members in group_by_batch(profiles).items()
            }
        )

    return ProfilesByBatchAndMajorResponse(
        data={
            batch_key: {
                major: [ProfileResponse.model_validate(p) for p in members]
                for major, members in majors.items()
            }
            for batch_key, majors in group_by_batch_and_major(profiles).items()
        }
    )


@router.get(
    "/listings",
    response_model=ProfileListingsResponse,
    summary="Compact directory listings",
)
async def list_listings(
    service: ProfileService = Depends(get_profile_service),
) -> ProfileListingsResponse:
    """Get every profile reduced to the fields shown on directory cards."""
    profiles = await service.list_profiles()
    return ProfileListingsResponse(data=[ProfileSummary.model_validate(p) for p in profiles])


@router.get(
    "/{user_id}",
    response_model=ProfileDetailResponse,
    summary="Get a profile",
    responses={
        200: {"description": "Profile details"},
        404: {"description": "Profile not found"},
    },
)
async def get_profile(
    user_id: str,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileDetailResponse:
    """Get a profile by its owner's identity."""
    profile = await service.get_profile(user_id)
    return ProfileDetailResponse(data=ProfileResponse.model_validate(profile))


@router.post(
    "/{user_id}",
    response_model=ProfileDetailResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create own profile",
    responses={
        201: {"description": "Profile created"},
        400: {"description": "Profile already exists"},
        403: {"description": "Not your identity"},
        409: {"description": "Email already used"},
    },
)
async def create_profile(
    user_id: str,
    body: ProfileCreate,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileDetailResponse:
    """Create the caller's profile after first sign-in."""
    profile = await service.create_profile(
        user_id=user_id,
        caller_id=user.uid,
        data=body.model_dump(exclude_none=True),
    )
    return ProfileDetailResponse(data=ProfileResponse.model_validate(profile))


@router.put(
    "/{user_id}",
    response_model=ProfileDetailResponse,
    summary="Update own profile",
    responses={
        200: {"description": "Profile updated"},
        403: {"description": "Not your identity"},
        404: {"description": "Profile not found"},
        409: {"description": "Email already used"},
    },
)
async def update_profile(
    user_id: str,
    body: ProfileUpdate,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileDetailResponse:
    """Update fields of the caller's profile. Omitted fields are unchanged."""
    profile = await service.update_profile(
        user_id=user_id,
        caller_id=user.uid,
        changes=body.model_dump(exclude_unset=True, exclude_none=True),
    )
    return ProfileDetailResponse(data=ProfileResponse.model_validate(profile))
