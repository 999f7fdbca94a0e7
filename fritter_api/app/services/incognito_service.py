"""
Business logic for incognito sessions.

A user may open any number of incognito sessions and close them one at
a time or all at once.  Sessions have no timestamps, so listings are in
insertion order.
"""

import logging
import sqlite3
from typing import List, Optional

from fritter_api.app.core.db import get_connection
from fritter_api.app.models import IncognitoRecord
from fritter_api.app.services.user_service import UserService, row_to_user

logger = logging.getLogger(__name__)

_SELECT = (
    "SELECT i.id, "
    "u.id AS owner_id, u.username AS owner_username, u.date_joined AS owner_date_joined "
    "FROM incognitos i JOIN users u ON u.id = i.user_id"
)


class IncognitoService:
    """Service for incognito sessions."""

    @staticmethod
    def _row_to_incognito(row: sqlite3.Row) -> IncognitoRecord:
        return IncognitoRecord(id=row["id"], user=row_to_user(row, prefix="owner_"))

    @classmethod
    async def create_incognito(cls, user_id: int) -> IncognitoRecord:
        """Open a session for ``user_id``.  Raises ``ValueError`` for unknown users."""
        conn = get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute("INSERT INTO incognitos (user_id) VALUES (?)", (user_id,))
            incognito_id = cursor.lastrowid
            conn.commit()
            row = cursor.execute(f"{_SELECT} WHERE i.id = ?", (incognito_id,)).fetchone()
        except sqlite3.IntegrityError:
            conn.rollback()
            raise ValueError(f"User {user_id} does not exist")
        finally:
            conn.close()
        logger.info("User %s opened incognito session %s", user_id, incognito_id)
        return cls._row_to_incognito(row)

    @classmethod
    async def get_incognito(cls, incognito_id: int) -> Optional[IncognitoRecord]:
        conn = get_connection()
        try:
            row = conn.execute(f"{_SELECT} WHERE i.id = ?", (incognito_id,)).fetchone()
            return cls._row_to_incognito(row) if row else None
        finally:
            conn.close()

    @classmethod
    async def list_incognitos(cls) -> List[IncognitoRecord]:
        conn = get_connection()
        try:
            rows = conn.execute(f"{_SELECT} ORDER BY i.id ASC").fetchall()
            return [cls._row_to_incognito(row) for row in rows]
        finally:
            conn.close()

    @classmethod
    async def list_by_user(cls, user_id: int) -> List[IncognitoRecord]:
        conn = get_connection()
        try:
            rows = conn.execute(
                f"{_SELECT} WHERE i.user_id = ? ORDER BY i.id ASC", (user_id,)
            ).fetchall()
            return [cls._row_to_incognito(row) for row in rows]
        finally:
            conn.close()

    @classmethod
    async def list_by_username(cls, username: str) -> List[IncognitoRecord]:
        user = await UserService.get_by_username(username)
        if user is None:
            return []
        return await cls.list_by_user(user.id)

    @classmethod
    async def delete_incognito(cls, incognito_id: int) -> bool:
        conn = get_connection()
        try:
            cursor = conn.execute("DELETE FROM incognitos WHERE id = ?", (incognito_id,))
            conn.commit()
        finally:
            conn.close()
        logger.info("Closed incognito session %s", incognito_id)
        return cursor.rowcount > 0

    @classmethod
    async def delete_all_by_owner(cls, user_id: int) -> int:
        conn = get_connection()
        try:
            cursor = conn.execute("DELETE FROM incognitos WHERE user_id = ?", (user_id,))
            conn.commit()
        finally:
            conn.close()
        logger.info("Closed %s incognito session(s) of user %s", cursor.rowcount, user_id)
        return cursor.rowcount
