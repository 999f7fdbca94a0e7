"""
Helpers shared by the resource validators.
"""

from typing import Optional

from fastapi import HTTPException, status

from fritter_api.app.core.security import CurrentUser


def not_found(kind: str, message: str) -> HTTPException:
    """Build a 404 whose detail is keyed by ``kind`` (e.g. ``profileNotFound``)."""
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail={kind: message})


def ensure_owner(owner_id: int, current_user: CurrentUser, message: str) -> None:
    """Raise 403 unless ``current_user`` owns the record."""
    if current_user.user_id != owner_id:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=message)


def ensure_choice(value: Optional[str], choices: frozenset, message: str) -> None:
    """Raise 406 unless ``value`` (lower-cased) is one of ``choices``."""
    if value is None or value.lower() not in choices:
        raise HTTPException(status_code=status.HTTP_406_NOT_ACCEPTABLE, detail=message)


def require_nonempty(value: Optional[str], message: str) -> str:
    """Raise 400 if a query value is present but blank; return it trimmed."""
    if value is None or not value.strip():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=message)
    return value.strip()


def check_length(value: Optional[str], max_length: int, label: str) -> None:
    """Raise 400 for a missing or blank value and 413 if it is too long."""
    if value is None or not value.strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"{label} must be at least one character long.",
        )
    if len(value) > max_length:
        raise HTTPException(
            status_code=413,
            detail=f"{label} must be no more than {max_length} characters.",
        )
