"""
Profile endpoints for API v1.

Profiles are created by logged in users, updated through their current
handle and deleted by id.  Only the owner may change or delete a
profile.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, status

from fritter_api.app.core.security import CurrentUser, get_current_user
from fritter_api.app.models import ProfileRecord, UserRecord
from fritter_api.app.presenters import construct_profile_response
from fritter_api.app.schemas.common import MessageResponse
from fritter_api.app.schemas.profile import ProfileBody, ProfileRead, ProfileResponse
from fritter_api.app.services.profile_service import ProfileService
from fritter_api.app.validators.profile import (
    is_handle_exists,
    is_profile_exists,
    is_valid_handle_modifier,
    is_valid_optional_profile_type,
    is_valid_profile_handle,
    is_valid_profile_modifier,
    is_valid_profile_type,
)
from fritter_api.app.validators.user import is_user_exists


router = APIRouter()


@router.get("/", response_model=List[ProfileRead], summary="List profiles")
async def list_profiles(
    user: Optional[UserRecord] = Depends(is_user_exists),
) -> List[ProfileRead]:
    """Return all profiles, most recently modified first.

    With ``?user=<username>`` only that user's profiles are returned;
    400 if the username is empty, 404 if no such user exists.
    """
    if user is None:
        profiles = await ProfileService.list_profiles()
    else:
        profiles = await ProfileService.list_by_username(user.username)
    return [construct_profile_response(p) for p in profiles]


@router.post(
    "/",
    response_model=ProfileResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[
        Depends(get_current_user),
        Depends(is_valid_profile_handle),
        Depends(is_valid_profile_type),
    ],
    summary="Create a profile",
)
async def create_profile(
    data: ProfileBody,
    current_user: CurrentUser = Depends(get_current_user),
) -> ProfileResponse:
    """Create a profile owned by the current user.

    403 if not logged in, 400 if the handle is blank, 413 if it is
    longer than 140 characters, 406 if the type is not ``business``,
    ``personal`` or ``private``.
    """
    try:
        profile = await ProfileService.create_profile(
            current_user.user_id, data.handle, data.type, data.bio
        )
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ProfileResponse(
        message="Your profile was created successfully.",
        profile=construct_profile_response(profile),
    )


@router.put(
    "/{handle}",
    response_model=ProfileResponse,
    dependencies=[
        Depends(get_current_user),
        Depends(is_handle_exists),
        Depends(is_valid_handle_modifier),
        Depends(is_valid_profile_handle),
        Depends(is_valid_optional_profile_type),
    ],
    summary="Change a profile",
)
async def update_profile(
    data: ProfileBody,
    profile: ProfileRecord = Depends(is_handle_exists),
) -> ProfileResponse:
    """Change the handle (and optionally bio and type) of the profile
    currently called ``handle``.
    """
    updated = await ProfileService.update_profile(profile.id, data.handle, data.bio, data.type)
    return ProfileResponse(
        message="Your profile was updated successfully.",
        profile=construct_profile_response(updated),
    )


@router.delete(
    "/{profile_id}",
    response_model=MessageResponse,
    dependencies=[
        Depends(get_current_user),
        Depends(is_profile_exists),
        Depends(is_valid_profile_modifier),
    ],
    summary="Delete a profile",
)
async def delete_profile(profile: ProfileRecord = Depends(is_profile_exists)) -> MessageResponse:
    await ProfileService.delete_profile(profile.id)
    return MessageResponse(message="Your profile was deleted successfully.")
