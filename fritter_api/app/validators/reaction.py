"""
Validators for reactions.

Reactions are addressed by the post they target; the current user's
reaction on that post is the one being created, changed or removed.
"""

from fastapi import Depends, HTTPException, status

from fritter_api.app.core.security import CurrentUser, get_current_user
from fritter_api.app.models import PostRecord, ReactionRecord
from fritter_api.app.models.reaction import REACTION_SYMBOLS
from fritter_api.app.schemas.reaction import ReactionBody
from fritter_api.app.services.reaction_service import ReactionService

from .common import ensure_choice, not_found
from .post import is_post_exists


async def is_valid_symbol_type(data: ReactionBody) -> None:
    ensure_choice(
        data.symbol,
        REACTION_SYMBOLS,
        "Reaction symbol type must be either `heart`, `like`, `dislike`.",
    )


async def is_single_reaction(
    post: PostRecord = Depends(is_post_exists),
    current_user: CurrentUser = Depends(get_current_user),
) -> None:
    """Checks that the current user has not reacted to the post yet."""
    if await ReactionService.find_by_user_and_post(current_user.user_id, post.id):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Cannot have more than one reaction per post per user. Please modify your reaction.",
        )


async def is_users_reaction_exists(
    post: PostRecord = Depends(is_post_exists),
    current_user: CurrentUser = Depends(get_current_user),
) -> ReactionRecord:
    """Checks that the current user has a reaction on the post and returns it."""
    reaction = await ReactionService.find_by_user_and_post(current_user.user_id, post.id)
    if reaction is None:
        raise not_found(
            "reactionNotFound",
            f"You do not have a reaction on post with post ID {post.id}.",
        )
    return reaction
