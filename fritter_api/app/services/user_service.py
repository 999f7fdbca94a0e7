"""
Business logic for users.

Users are the owners every other resource points at.  The service
stores accounts in the ``users`` table, hashes passwords on creation
and resolves usernames case-insensitively.  Creating or deleting an
account runs the callbacks in :mod:`lifecycle` so the owner-scoped
stores can prepare or clean up their records.
"""

import logging
import sqlite3
from typing import Optional

from fritter_api.app.core.db import get_connection, now_iso, parse_timestamp
from fritter_api.app.core.security import hash_password, verify_password
from fritter_api.app.models import UserRecord

logger = logging.getLogger(__name__)


def row_to_user(row: sqlite3.Row, prefix: str = "") -> UserRecord:
    """Build a :class:`UserRecord` from a row.

    Services that join ``users`` alias its columns with a prefix
    (``owner_id``, ``owner_username``, ``owner_date_joined``) and pass
    ``prefix="owner_"``.
    """
    return UserRecord(
        id=row[f"{prefix}id"],
        username=row[f"{prefix}username"],
        date_joined=parse_timestamp(row[f"{prefix}date_joined"]),
    )


class UserService:
    """Service for user accounts."""

    @classmethod
    async def create_user(cls, username: str, password: str) -> UserRecord:
        """Register a new account and run the user-created callbacks.

        Raises ``ValueError`` if the username is already taken
        (case-insensitively).
        """
        from fritter_api.app.services import lifecycle

        conn = get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(
                "INSERT INTO users (username, password, date_joined) VALUES (?, ?, ?)",
                (username, hash_password(password), now_iso()),
            )
            user_id = cursor.lastrowid
            conn.commit()
        except sqlite3.IntegrityError:
            conn.rollback()
            raise ValueError(f"An account with username {username} already exists.")
        finally:
            conn.close()
        logger.info("Registered user %s (%s)", username, user_id)
        user = await cls.get_by_id(user_id)
        await lifecycle.on_user_created(user)
        return user

    @classmethod
    async def get_by_id(cls, user_id: int) -> Optional[UserRecord]:
        """Return the user with the given id, if any."""
        conn = get_connection()
        try:
            row = conn.execute(
                "SELECT id, username, date_joined FROM users WHERE id = ?",
                (user_id,),
            ).fetchone()
            return row_to_user(row) if row else None
        finally:
            conn.close()

    @classmethod
    async def get_by_username(cls, username: str) -> Optional[UserRecord]:
        """Return the user with the given username (case insensitive)."""
        conn = get_connection()
        try:
            row = conn.execute(
                "SELECT id, username, date_joined FROM users WHERE username = ? COLLATE NOCASE",
                (username.strip(),),
            ).fetchone()
            return row_to_user(row) if row else None
        finally:
            conn.close()

    @classmethod
    async def authenticate(cls, username: str, password: str) -> Optional[UserRecord]:
        """Return the user if the credentials match, otherwise ``None``."""
        conn = get_connection()
        try:
            row = conn.execute(
                "SELECT id, username, password, date_joined FROM users WHERE username = ? COLLATE NOCASE",
                (username.strip(),),
            ).fetchone()
        finally:
            conn.close()
        if not row or not verify_password(password, row["password"]):
            return None
        return row_to_user(row)

    @classmethod
    async def set_password(cls, user_id: int, password: str) -> bool:
        """Replace a user's password hash.  Returns whether the user exists."""
        conn = get_connection()
        try:
            cursor = conn.execute(
                "UPDATE users SET password = ? WHERE id = ?",
                (hash_password(password), user_id),
            )
            conn.commit()
            return cursor.rowcount > 0
        finally:
            conn.close()

    @classmethod
    async def delete_user(cls, user_id: int) -> bool:
        """Delete an account after running the user-deleted callbacks.

        The callbacks remove every record the user owns; the ``users``
        row goes last so foreign keys stay satisfied throughout.
        """
        from fritter_api.app.services import lifecycle

        user = await cls.get_by_id(user_id)
        if user is None:
            return False
        await lifecycle.on_user_deleted(user)
        conn = get_connection()
        try:
            cursor = conn.execute("DELETE FROM users WHERE id = ?", (user_id,))
            conn.commit()
        finally:
            conn.close()
        logger.info("Deleted user %s (%s)", user.username, user_id)
        return cursor.rowcount > 0
