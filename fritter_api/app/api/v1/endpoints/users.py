"""
User endpoints for API v1.

Provide registration, login, the current session and account deletion.
Deleting an account first removes everything the user owns (displays,
incognito sessions, profiles, reactions and posts).
"""

from fastapi import APIRouter, Depends, HTTPException, status

from fritter_api.app.core.security import CurrentUser, create_access_token, get_current_user
from fritter_api.app.presenters import construct_user_response
from fritter_api.app.schemas.common import MessageResponse
from fritter_api.app.schemas.user import TokenResponse, UserCreate, UserResponse
from fritter_api.app.services.user_service import UserService


router = APIRouter()


@router.post(
    "/",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a user",
)
async def register_user(data: UserCreate) -> UserResponse:
    """Create an account.

    The new user starts with a ``default`` display preference.  Returns
    409 if the username is taken (usernames are case insensitive).
    """
    try:
        user = await UserService.create_user(data.username, data.password)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    return UserResponse(
        message=f"Your account was created successfully. You have been logged in as {user.username}",
        user=construct_user_response(user),
    )


@router.post("/login", response_model=TokenResponse, summary="Log in")
async def login_user(data: UserCreate) -> TokenResponse:
    """Check the credentials and return a bearer token."""
    user = await UserService.authenticate(data.username, data.password)
    if not user:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid user login credentials provided.")
    token = create_access_token({"sub": user.username})
    return TokenResponse(
        message="You have logged in successfully",
        access_token=token,
        user=construct_user_response(user),
    )


@router.get("/session", response_model=UserResponse, summary="Current user")
async def get_session(current_user: CurrentUser = Depends(get_current_user)) -> UserResponse:
    user = await UserService.get_by_id(current_user.user_id)
    return UserResponse(message="Your session info was found successfully.", user=construct_user_response(user))


@router.delete("/session", response_model=MessageResponse, summary="Delete your account")
async def delete_account(current_user: CurrentUser = Depends(get_current_user)) -> MessageResponse:
    """Delete the current user and all records they own."""
    await UserService.delete_user(current_user.user_id)
    return MessageResponse(message="Your account has been deleted successfully.")
