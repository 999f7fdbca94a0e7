"""
Validators for user references in query strings.

Listing endpoints accept a username in the query string
(``?author=`` for displays, ``?user=`` for profiles and reactions).
When the parameter is absent the dependency returns ``None`` and the
handler lists everything; when present it must name an existing user.
"""

from typing import Callable, Optional

from fastapi import Query

from fritter_api.app.models import UserRecord
from fritter_api.app.services.user_service import UserService

from .common import not_found, require_nonempty


def user_query_exists(param: str) -> Callable:
    """Dependency factory checking the user named by query parameter ``param``.

    Use it as ``Depends(user_query_exists("author"))``.  Raises 400 for
    an empty value and 404 if no user has that username.
    """

    async def _user_query_dependency(
        value: Optional[str] = Query(None, alias=param),
    ) -> Optional[UserRecord]:
        if value is None:
            return None
        username = require_nonempty(value, f"Provided {param} username must be nonempty.")
        user = await UserService.get_by_username(username)
        if user is None:
            raise not_found("userNotFound", f"A user with username {username} does not exist.")
        return user

    return _user_query_dependency


is_author_exists = user_query_exists("author")
is_user_exists = user_query_exists("user")
