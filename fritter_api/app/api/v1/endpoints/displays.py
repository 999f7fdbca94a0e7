"""
Display preference endpoints for API v1.

Every user gets a ``default`` display when registering.  Anyone can
read displays; only the author may change or delete theirs.
"""

from typing import List, Optional, Union

from fastapi import APIRouter, Depends, HTTPException, status

from fritter_api.app.core.security import CurrentUser, get_current_user
from fritter_api.app.models import DisplayRecord, UserRecord
from fritter_api.app.presenters import construct_display_response
from fritter_api.app.schemas.common import MessageResponse
from fritter_api.app.schemas.display import DisplayBody, DisplayRead, DisplayResponse
from fritter_api.app.services.display_service import DisplayService
from fritter_api.app.validators.common import not_found
from fritter_api.app.validators.display import (
    is_display_exists,
    is_valid_display_content,
    is_valid_display_modifier,
    is_valid_optional_display_content,
)
from fritter_api.app.validators.user import is_author_exists


router = APIRouter()


@router.get(
    "/",
    response_model=Union[List[DisplayRead], DisplayRead],
    summary="List displays",
)
async def list_displays(
    author: Optional[UserRecord] = Depends(is_author_exists),
) -> Union[List[DisplayRead], DisplayRead]:
    """Return all displays, most recently modified first.

    With ``?author=<username>`` return that author's display instead;
    400 if the username is empty, 404 if the user does not exist or has
    no display.
    """
    if author is None:
        return [construct_display_response(d) for d in await DisplayService.list_displays()]
    display = await DisplayService.get_by_author_username(author.username)
    if display is None:
        raise not_found("displayNotFound", f"User {author.username} does not have a display.")
    return construct_display_response(display)


@router.post(
    "/",
    response_model=DisplayResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(get_current_user), Depends(is_valid_optional_display_content)],
    summary="Create a display",
)
async def create_display(
    data: DisplayBody,
    current_user: CurrentUser = Depends(get_current_user),
) -> DisplayResponse:
    """Create a display for the current user (``default`` if no type is given)."""
    try:
        display = await DisplayService.create_display(
            current_user.user_id, data.display_type or "default"
        )
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return DisplayResponse(
        message="Your display was created successfully.",
        display=construct_display_response(display),
    )


@router.put(
    "/{display_id}",
    response_model=DisplayResponse,
    dependencies=[
        Depends(get_current_user),
        Depends(is_display_exists),
        Depends(is_valid_display_modifier),
        Depends(is_valid_display_content),
    ],
    summary="Change a display",
)
async def update_display(
    data: DisplayBody,
    display: DisplayRecord = Depends(is_display_exists),
) -> DisplayResponse:
    """Set a new display type.

    403 if not logged in or not the author, 404 if the display does not
    exist, 406 if the type is not ``default``, ``dark`` or
    ``accessible``.
    """
    updated = await DisplayService.update_display(display.id, data.display_type)
    return DisplayResponse(
        message="Your display was updated successfully.",
        display=construct_display_response(updated),
    )


@router.delete(
    "/{display_id}",
    response_model=MessageResponse,
    dependencies=[
        Depends(get_current_user),
        Depends(is_display_exists),
        Depends(is_valid_display_modifier),
    ],
    summary="Delete a display",
)
async def delete_display(display: DisplayRecord = Depends(is_display_exists)) -> MessageResponse:
    await DisplayService.delete_display(display.id)
    return MessageResponse(message="Your display was deleted successfully.")
