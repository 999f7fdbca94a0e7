"""
Incognito session endpoints for API v1.

All operations act on the current user's own sessions.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, status

from fritter_api.app.core.security import CurrentUser, get_current_user
from fritter_api.app.models import IncognitoRecord
from fritter_api.app.presenters import construct_incognito_response
from fritter_api.app.schemas.common import MessageResponse
from fritter_api.app.schemas.incognito import IncognitoRead, IncognitoResponse
from fritter_api.app.services.incognito_service import IncognitoService
from fritter_api.app.validators.incognito import (
    incognito_query,
    is_user_incognito_exists,
    is_valid_incognito_modifier,
)


router = APIRouter()


@router.get("/", response_model=List[IncognitoRead], summary="List your incognito sessions")
async def list_incognitos(current_user: CurrentUser = Depends(get_current_user)) -> List[IncognitoRead]:
    sessions = await IncognitoService.list_by_user(current_user.user_id)
    return [construct_incognito_response(i) for i in sessions]


@router.post(
    "/",
    response_model=IncognitoResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Open an incognito session",
)
async def create_incognito(current_user: CurrentUser = Depends(get_current_user)) -> IncognitoResponse:
    try:
        incognito = await IncognitoService.create_incognito(current_user.user_id)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return IncognitoResponse(
        message="Your incognito session was created successfully.",
        incognito=construct_incognito_response(incognito),
    )


@router.delete(
    "/",
    response_model=MessageResponse,
    dependencies=[
        Depends(get_current_user),
        Depends(incognito_query),
        Depends(is_valid_incognito_modifier),
        Depends(is_user_incognito_exists),
    ],
    summary="Close one or all incognito sessions",
)
async def delete_incognitos(
    incognito: Optional[IncognitoRecord] = Depends(incognito_query),
    current_user: CurrentUser = Depends(get_current_user),
) -> MessageResponse:
    """Close the session given by ``?id=``, or all of yours without it.

    403 if not logged in or the session belongs to someone else; 404 if
    the session does not exist, or, for the bulk form, if you have no
    open sessions.
    """
    if incognito is not None:
        await IncognitoService.delete_incognito(incognito.id)
        return MessageResponse(message="Your incognito session was deleted successfully.")
    await IncognitoService.delete_all_by_owner(current_user.user_id)
    return MessageResponse(message="Your incognito sessions were deleted successfully.")
