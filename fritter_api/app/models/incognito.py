from dataclasses import dataclass

from .user import UserRecord


@dataclass(frozen=True)
class IncognitoRecord:
    """An open incognito session.  Sessions carry no timestamps."""

    id: int
    user: UserRecord
