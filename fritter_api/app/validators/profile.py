"""
Validators for profiles.

Profiles are deleted by id but updated by their current handle, so the
existence and ownership checks come in both flavours.
"""

from typing import Callable

from fastapi import Depends

from fritter_api.app.core.db import parse_id
from fritter_api.app.core.security import CurrentUser, get_current_user
from fritter_api.app.models import ProfileRecord
from fritter_api.app.models.profile import MAX_HANDLE_LENGTH, PROFILE_TYPES
from fritter_api.app.schemas.profile import ProfileBody
from fritter_api.app.services.profile_service import ProfileService

from .common import check_length, ensure_choice, ensure_owner, not_found

INVALID_PROFILE_TYPE = "Profile type must be either `business`, `personal`, `private`."


async def is_profile_exists(profile_id: str) -> ProfileRecord:
    """Checks if a profile with ``profile_id`` from the path exists."""
    parsed = parse_id(profile_id)
    profile = await ProfileService.get_profile(parsed) if parsed is not None else None
    if profile is None:
        raise not_found("profileNotFound", f"Profile with profile ID {profile_id} does not exist.")
    return profile


async def is_handle_exists(handle: str) -> ProfileRecord:
    """Checks if a profile with the (current) ``handle`` from the path exists."""
    profile = await ProfileService.get_by_handle(handle) if handle.strip() else None
    if profile is None:
        raise not_found("profileNotFound", f"Profile with handle {handle} does not exist.")
    return profile


def profile_modifier(lookup: Callable) -> Callable:
    """Build an ownership check on top of an existence check."""

    async def _profile_modifier_dependency(
        profile: ProfileRecord = Depends(lookup),
        current_user: CurrentUser = Depends(get_current_user),
    ) -> None:
        ensure_owner(profile.user.id, current_user, "Cannot modify other users' profiles.")

    return _profile_modifier_dependency


is_valid_profile_modifier = profile_modifier(is_profile_exists)
is_valid_handle_modifier = profile_modifier(is_handle_exists)


async def is_valid_profile_handle(data: ProfileBody) -> None:
    """Checks that the handle is not blank and at most 140 characters."""
    check_length(data.handle, MAX_HANDLE_LENGTH, "Profile handle")


async def is_valid_profile_type(data: ProfileBody) -> None:
    ensure_choice(data.type, PROFILE_TYPES, INVALID_PROFILE_TYPE)


async def is_valid_optional_profile_type(data: ProfileBody) -> None:
    """On update the type may be omitted; if given it must be valid."""
    if data.type is not None:
        ensure_choice(data.type, PROFILE_TYPES, INVALID_PROFILE_TYPE)
