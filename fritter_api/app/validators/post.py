"""
Validators for posts referenced by path or query string.
"""

from typing import Optional

from fastapi import Depends, Query

from fritter_api.app.core.db import parse_id
from fritter_api.app.core.security import CurrentUser, get_current_user
from fritter_api.app.models import PostRecord
from fritter_api.app.models.post import MAX_POST_LENGTH
from fritter_api.app.schemas.post import PostCreate
from fritter_api.app.services.post_service import PostService

from .common import check_length, ensure_owner, not_found, require_nonempty


async def _find_post(raw_id: str) -> PostRecord:
    post_id = parse_id(raw_id)
    post = await PostService.get_post(post_id) if post_id is not None else None
    if post is None:
        raise not_found("postNotFound", f"Post with post ID {raw_id} does not exist.")
    return post


async def is_post_exists(post_id: str) -> PostRecord:
    """Checks that the post in the path exists."""
    return await _find_post(post_id)


async def is_post_query_exists(
    post_id: Optional[str] = Query(None),
) -> Optional[PostRecord]:
    """Checks the post named by ``?post_id=``, if the parameter is given."""
    if post_id is None:
        return None
    return await _find_post(require_nonempty(post_id, "Provided post ID must be nonempty."))


async def is_valid_post_modifier(
    post: PostRecord = Depends(is_post_exists),
    current_user: CurrentUser = Depends(get_current_user),
) -> None:
    ensure_owner(post.author.id, current_user, "Cannot modify other users' posts.")


async def is_valid_post_content(data: PostCreate) -> None:
    """Post content must be non-blank and at most 140 characters."""
    check_length(data.content, MAX_POST_LENGTH, "Post content")
