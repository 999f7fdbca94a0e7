"""
Record types for stored entities.

Services return these dataclasses with the owner reference already
resolved to a :class:`UserRecord`.  Presenters turn them into the
pydantic response schemas; records never leave the API layer as-is.
"""

from .user import UserRecord
from .post import PostRecord
from .display import DisplayRecord
from .incognito import IncognitoRecord
from .profile import ProfileRecord
from .reaction import ReactionRecord

__all__ = [
    "UserRecord",
    "PostRecord",
    "DisplayRecord",
    "IncognitoRecord",
    "ProfileRecord",
    "ReactionRecord",
]
