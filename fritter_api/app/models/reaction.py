from dataclasses import dataclass
from datetime import datetime

from .user import UserRecord

REACTION_SYMBOLS = frozenset({"heart", "like", "dislike"})


@dataclass(frozen=True)
class ReactionRecord:
    """A user's reaction to a post; at most one per (user, post)."""

    id: int
    user: UserRecord
    post_id: int
    symbol: str
    date_created: datetime
    date_modified: datetime
