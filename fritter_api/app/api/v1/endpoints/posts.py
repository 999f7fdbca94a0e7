"""
Post endpoints for API v1.

Posts are the targets of reactions.  Anyone can read them; only logged
in users can create them and only authors can delete them.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from fritter_api.app.core.security import CurrentUser, get_current_user
from fritter_api.app.models import PostRecord
from fritter_api.app.presenters import construct_post_response
from fritter_api.app.schemas.common import MessageResponse
from fritter_api.app.schemas.post import PostCreate, PostRead, PostResponse
from fritter_api.app.services.post_service import PostService
from fritter_api.app.validators.post import (
    is_post_exists,
    is_valid_post_content,
    is_valid_post_modifier,
)


router = APIRouter()


@router.get("/", response_model=List[PostRead], summary="List posts")
async def list_posts() -> List[PostRead]:
    """Return all posts, newest first."""
    return [construct_post_response(post) for post in await PostService.list_posts()]


@router.get(
    "/{post_id}",
    response_model=PostRead,
    summary="Get a post",
)
async def get_post(post: PostRecord = Depends(is_post_exists)) -> PostRead:
    return construct_post_response(post)


@router.post(
    "/",
    response_model=PostResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(get_current_user), Depends(is_valid_post_content)],
    summary="Create a post",
)
async def create_post(
    data: PostCreate,
    current_user: CurrentUser = Depends(get_current_user),
) -> PostResponse:
    try:
        post = await PostService.create_post(current_user.user_id, data.content)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return PostResponse(message="Your post was created successfully.", post=construct_post_response(post))


@router.delete(
    "/{post_id}",
    response_model=MessageResponse,
    dependencies=[
        Depends(get_current_user),
        Depends(is_post_exists),
        Depends(is_valid_post_modifier),
    ],
    summary="Delete a post",
)
async def delete_post(post: PostRecord = Depends(is_post_exists)) -> MessageResponse:
    """Delete a post and every reaction on it."""
    await PostService.delete_post(post.id)
    return MessageResponse(message="Your post was deleted successfully.")
