"""
Reaction endpoints for API v1.

Reactions are addressed by the post they target: ``POST``, ``PUT`` and
``DELETE /reactions/{post_id}`` act on the current user's reaction to
that post.  A user can hold at most one reaction per post.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, status

from fritter_api.app.core.security import CurrentUser, get_current_user
from fritter_api.app.models import PostRecord, ReactionRecord, UserRecord
from fritter_api.app.presenters import construct_reaction_response
from fritter_api.app.schemas.common import MessageResponse
from fritter_api.app.schemas.reaction import ReactionBody, ReactionRead, ReactionResponse
from fritter_api.app.services.reaction_service import ReactionService
from fritter_api.app.validators.post import is_post_exists, is_post_query_exists
from fritter_api.app.validators.reaction import (
    is_single_reaction,
    is_users_reaction_exists,
    is_valid_symbol_type,
)
from fritter_api.app.validators.user import is_user_exists


router = APIRouter()


@router.get("/", response_model=List[ReactionRead], summary="List reactions")
async def list_reactions(
    post: Optional[PostRecord] = Depends(is_post_query_exists),
    user: Optional[UserRecord] = Depends(is_user_exists),
) -> List[ReactionRead]:
    """Return reactions, most recently modified first.

    ``?post_id=<id>`` restricts the list to one post (404 if the post
    does not exist); ``?user=<username>`` to one user.  Without either,
    every reaction is returned.
    """
    if post is not None:
        reactions = await ReactionService.list_by_post(post.id)
        if user is not None:
            reactions = [r for r in reactions if r.user.id == user.id]
    elif user is not None:
        reactions = await ReactionService.list_by_username(user.username)
    else:
        reactions = await ReactionService.list_reactions()
    return [construct_reaction_response(r) for r in reactions]


@router.post(
    "/{post_id}",
    response_model=ReactionResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[
        Depends(get_current_user),
        Depends(is_post_exists),
        Depends(is_valid_symbol_type),
        Depends(is_single_reaction),
    ],
    summary="React to a post",
)
async def create_reaction(
    data: ReactionBody,
    post: PostRecord = Depends(is_post_exists),
    current_user: CurrentUser = Depends(get_current_user),
) -> ReactionResponse:
    """Create the current user's reaction on a post.

    403 if not logged in or if the user already reacted to the post,
    404 if the post does not exist, 406 for an unknown symbol.
    """
    try:
        reaction = await ReactionService.create_reaction(current_user.user_id, post.id, data.symbol)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ReactionResponse(
        message="Your reaction was created successfully.",
        reaction=construct_reaction_response(reaction),
    )


@router.put(
    "/{post_id}",
    response_model=ReactionResponse,
    dependencies=[
        Depends(get_current_user),
        Depends(is_post_exists),
        Depends(is_users_reaction_exists),
        Depends(is_valid_symbol_type),
    ],
    summary="Change your reaction",
)
async def update_reaction(
    data: ReactionBody,
    reaction: ReactionRecord = Depends(is_users_reaction_exists),
) -> ReactionResponse:
    updated = await ReactionService.update_reaction(reaction.id, data.symbol)
    return ReactionResponse(
        message="Your reaction was updated successfully.",
        reaction=construct_reaction_response(updated),
    )


@router.delete(
    "/{post_id}",
    response_model=MessageResponse,
    dependencies=[
        Depends(get_current_user),
        Depends(is_post_exists),
        Depends(is_users_reaction_exists),
    ],
    summary="Remove your reaction",
)
async def delete_reaction(
    reaction: ReactionRecord = Depends(is_users_reaction_exists),
) -> MessageResponse:
    await ReactionService.delete_reaction(reaction.id)
    return MessageResponse(message="Your reaction was deleted successfully.")
