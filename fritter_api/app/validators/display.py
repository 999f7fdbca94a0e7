"""
Validators for display preferences.
"""

from fastapi import Depends

from fritter_api.app.core.db import parse_id
from fritter_api.app.core.security import CurrentUser, get_current_user
from fritter_api.app.models import DisplayRecord
from fritter_api.app.models.display import DISPLAY_TYPES
from fritter_api.app.schemas.display import DisplayBody
from fritter_api.app.services.display_service import DisplayService

from .common import ensure_choice, ensure_owner, not_found

INVALID_DISPLAY_TYPE = "Display type must be either `default`, `dark`, `accessible`."


async def is_display_exists(display_id: str) -> DisplayRecord:
    """Checks if a display with ``display_id`` from the path exists."""
    parsed = parse_id(display_id)
    display = await DisplayService.get_display(parsed) if parsed is not None else None
    if display is None:
        raise not_found("displayNotFound", f"Display with display ID {display_id} does not exist.")
    return display


async def is_valid_display_modifier(
    display: DisplayRecord = Depends(is_display_exists),
    current_user: CurrentUser = Depends(get_current_user),
) -> None:
    """Checks if the current user is the author of the display."""
    ensure_owner(display.author.id, current_user, "Cannot modify other users' displays.")


async def is_valid_display_content(data: DisplayBody) -> None:
    """Checks that ``display_type`` is one of the known types."""
    ensure_choice(data.display_type, DISPLAY_TYPES, INVALID_DISPLAY_TYPE)


async def is_valid_optional_display_content(data: DisplayBody) -> None:
    """Like :func:`is_valid_display_content`, but ``display_type`` may be omitted."""
    if data.display_type is not None:
        ensure_choice(data.display_type, DISPLAY_TYPES, INVALID_DISPLAY_TYPE)
