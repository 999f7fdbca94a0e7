from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from .user import UserRecord

PROFILE_TYPES = frozenset({"business", "personal", "private"})
MAX_HANDLE_LENGTH = 140


@dataclass(frozen=True)
class ProfileRecord:
    """A public profile owned by a user.

    A user may own several profiles.  ``handle`` is looked up
    case-insensitively but stored as entered.
    """

    id: int
    user: UserRecord
    handle: str
    type: str
    bio: Optional[str]
    date_created: datetime
    date_modified: datetime
