from dataclasses import dataclass
from datetime import datetime

from .user import UserRecord

MAX_POST_LENGTH = 140


@dataclass(frozen=True)
class PostRecord:
    """A short post that reactions can target."""

    id: int
    author: UserRecord
    content: str
    date_created: datetime
