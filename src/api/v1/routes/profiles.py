"""Profile API routes."""

from uuid import UUID

from fastapi import APIRouter, Depends, Request

from api.dependencies.auth import CurrentIdentity, OptionalIdentity
from api.v1.dependencies import get_profile_service
from api.v1.schemas.common import ErrorResponse
from api.v1.schemas.profile import (
    ProfileDetailResponse,
    ProfileResponse,
    ProfileUpdate,
    ProfileValidationResponse,
    ProfileViewDetailResponse,
    ProfileViewResponse,
)
from core.rate_limit import READ_LIMIT, WRITE_LIMIT, limiter
from domain.services.profile_service import ProfileService

router = APIRouter(prefix="/profiles", tags=["profiles"])


@router.get(
    "/me",
    response_model=ProfileViewDetailResponse,
    summary="Get my profile",
    responses={
        401: {"model": ErrorResponse, "description": "Not authenticated"},
        404: {"model": ErrorResponse, "description": "Profile not found"},
    },
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_my_profile(
    request: Request,
    identity: OptionalIdentity,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileViewDetailResponse:
    """Get the caller's own profile, looked up by owner identity."""
    view = await service.load(None, identity)
    return ProfileViewDetailResponse(data=ProfileViewResponse.from_entity(view))


@router.put(
    "/me",
    response_model=ProfileDetailResponse,
    summary="Update my profile",
    responses={
        401: {"model": ErrorResponse, "description": "Not authenticated"},
        404: {"model": ErrorResponse, "description": "Profile not found"},
        422: {"model": ErrorResponse, "description": "Field validation failed"},
        503: {"model": ErrorResponse, "description": "Profile could not be saved"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def update_my_profile(
    request: Request,
    body: ProfileUpdate,
    identity: CurrentIdentity,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileDetailResponse:
    """
    Overwrite the editable fields of the caller's profile.

    Input is normalized before validation. Email, verification and rating
    cannot be changed here.
    """
    profile = await service.update_profile(identity.id, body.to_fields())
    return ProfileDetailResponse(data=ProfileResponse.from_entity(profile))


@router.post(
    "/validate",
    response_model=ProfileValidationResponse,
    summary="Validate profile fields",
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def validate_profile(
    request: Request,
    body: ProfileUpdate,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileValidationResponse:
    """Return the normalized fields and any field errors without saving."""
    clean, errors = service.preview(body.to_fields().as_dict())
    return ProfileValidationResponse(data=clean, errors=errors, valid=not errors)


@router.get(
    "/{profile_id}",
    response_model=ProfileViewDetailResponse,
    summary="Get a profile",
    responses={
        404: {"model": ErrorResponse, "description": "Profile not found"},
    },
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_profile(
    request: Request,
    profile_id: UUID,
    identity: OptionalIdentity,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileViewDetailResponse:
    """Get any profile by its shareable id. Authentication is optional."""
    view = await service.load(profile_id, identity)
    return ProfileViewDetailResponse(data=ProfileViewResponse.from_entity(view))
