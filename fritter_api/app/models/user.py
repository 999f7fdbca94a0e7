from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class UserRecord:
    """A registered account.  The password hash is never loaded here."""

    id: int
    username: str
    date_joined: datetime
