"""
User lifecycle callbacks.

Resource stores never delete each other's rows implicitly.  Instead the
user service calls into this module when an account is created or
deleted, and this module calls the owner-scoped stores explicitly:

* ``on_user_created`` gives the new user a ``default`` display
  preference.
* ``on_user_deleted`` calls ``delete_all_by_owner`` on every store that
  holds rows referencing the user.  Reactions on the user's posts are
  removed with the posts.
"""

import logging

from fritter_api.app.models import UserRecord
from fritter_api.app.services.display_service import DisplayService
from fritter_api.app.services.incognito_service import IncognitoService
from fritter_api.app.services.post_service import PostService
from fritter_api.app.services.profile_service import ProfileService
from fritter_api.app.services.reaction_service import ReactionService

logger = logging.getLogger(__name__)

# Order matters: reactions reference posts, so they are removed before
# the user's posts.
OWNED_STORES = (
    DisplayService,
    IncognitoService,
    ProfileService,
    ReactionService,
    PostService,
)


async def on_user_created(user: UserRecord) -> None:
    await DisplayService.create_display(user.id)


async def on_user_deleted(user: UserRecord) -> None:
    for store in OWNED_STORES:
        removed = await store.delete_all_by_owner(user.id)
        logger.info("Removed %s %s row(s) owned by user %s", removed, store.__name__, user.id)
