from dataclasses import dataclass
from datetime import datetime

from .user import UserRecord

DISPLAY_TYPES = frozenset({"default", "dark", "accessible"})


@dataclass(frozen=True)
class DisplayRecord:
    """Display preference of a user."""

    id: int
    author: UserRecord
    display_type: str
    date_modified: datetime
