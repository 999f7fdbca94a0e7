"""
Validators for incognito sessions.

``DELETE /incognitos`` serves two operations: with ``?id=`` it closes a
single session, without it closes all of the current user's sessions.
``incognito_query`` returns ``None`` for the bulk form so the remaining
validators can tell which checks apply.
"""

from typing import Optional

from fastapi import Depends, Query

from fritter_api.app.core.db import parse_id
from fritter_api.app.core.security import CurrentUser, get_current_user
from fritter_api.app.models import IncognitoRecord
from fritter_api.app.services.incognito_service import IncognitoService

from .common import ensure_owner, not_found, require_nonempty


async def incognito_query(
    incognito_id: Optional[str] = Query(None, alias="id"),
) -> Optional[IncognitoRecord]:
    """Checks that the session named by ``?id=`` exists, if one is named."""
    if incognito_id is None:
        return None
    raw_id = require_nonempty(incognito_id, "Provided incognito ID must be nonempty.")
    parsed = parse_id(raw_id)
    incognito = await IncognitoService.get_incognito(parsed) if parsed is not None else None
    if incognito is None:
        raise not_found("incognitoNotFound", f"Incognito with incognito ID {raw_id} does not exist.")
    return incognito


async def is_valid_incognito_modifier(
    incognito: Optional[IncognitoRecord] = Depends(incognito_query),
    current_user: CurrentUser = Depends(get_current_user),
) -> None:
    """Checks that the current user owns the named session."""
    if incognito is not None:
        ensure_owner(incognito.user.id, current_user, "Cannot modify other users' incognito sessions.")


async def is_user_incognito_exists(
    incognito: Optional[IncognitoRecord] = Depends(incognito_query),
    current_user: CurrentUser = Depends(get_current_user),
) -> None:
    """For the bulk form, checks that the current user has open sessions."""
    if incognito is not None:
        return
    if not await IncognitoService.list_by_user(current_user.user_id):
        raise not_found("incognitoNotFound", "You do not have any open incognito sessions.")
