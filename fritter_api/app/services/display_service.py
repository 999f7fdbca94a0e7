"""
Business logic for display preferences.

Each user normally has exactly one display preference, created with
the ``default`` type when the account is registered.  The service does
not enforce the one-per-user rule; ``get_by_author_username`` returns
the oldest preference of the author.

Existence and ownership are checked by the validator chain before
``update_display`` and ``delete_display`` are called.
"""

import logging
import sqlite3
from typing import List, Optional

from fritter_api.app.core.db import get_connection, now_iso, parse_timestamp
from fritter_api.app.models import DisplayRecord
from fritter_api.app.services.user_service import UserService, row_to_user

logger = logging.getLogger(__name__)

_SELECT = (
    "SELECT d.id, d.display_type, d.date_modified, "
    "u.id AS owner_id, u.username AS owner_username, u.date_joined AS owner_date_joined "
    "FROM displays d JOIN users u ON u.id = d.author_id"
)


class DisplayService:
    """Service for display preferences."""

    @staticmethod
    def _row_to_display(row: sqlite3.Row) -> DisplayRecord:
        return DisplayRecord(
            id=row["id"],
            author=row_to_user(row, prefix="owner_"),
            display_type=row["display_type"],
            date_modified=parse_timestamp(row["date_modified"]),
        )

    @classmethod
    async def create_display(cls, author_id: int, display_type: str = "default") -> DisplayRecord:
        """Insert a display preference for ``author_id``.

        Raises ``ValueError`` if the author does not exist.
        """
        conn = get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(
                "INSERT INTO displays (author_id, display_type, date_modified) VALUES (?, ?, ?)",
                (author_id, display_type.lower(), now_iso()),
            )
            display_id = cursor.lastrowid
            conn.commit()
            row = cursor.execute(f"{_SELECT} WHERE d.id = ?", (display_id,)).fetchone()
        except sqlite3.IntegrityError:
            conn.rollback()
            raise ValueError(f"User {author_id} does not exist")
        finally:
            conn.close()
        logger.info("Display %s created for user %s", display_id, author_id)
        return cls._row_to_display(row)

    @classmethod
    async def get_display(cls, display_id: int) -> Optional[DisplayRecord]:
        conn = get_connection()
        try:
            row = conn.execute(f"{_SELECT} WHERE d.id = ?", (display_id,)).fetchone()
            return cls._row_to_display(row) if row else None
        finally:
            conn.close()

    @classmethod
    async def list_displays(cls) -> List[DisplayRecord]:
        """Return all displays, most recently modified first."""
        conn = get_connection()
        try:
            rows = conn.execute(f"{_SELECT} ORDER BY d.date_modified DESC, d.id DESC").fetchall()
            return [cls._row_to_display(row) for row in rows]
        finally:
            conn.close()

    @classmethod
    async def get_by_author_username(cls, username: str) -> Optional[DisplayRecord]:
        """Return the display of the user called ``username``, if any."""
        author = await UserService.get_by_username(username)
        if author is None:
            return None
        conn = get_connection()
        try:
            row = conn.execute(
                f"{_SELECT} WHERE d.author_id = ? ORDER BY d.id ASC LIMIT 1",
                (author.id,),
            ).fetchone()
            return cls._row_to_display(row) if row else None
        finally:
            conn.close()

    @classmethod
    async def update_display(cls, display_id: int, display_type: str) -> DisplayRecord:
        """Set a new display type and refresh ``date_modified``."""
        conn = get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(
                "UPDATE displays SET display_type = ?, date_modified = ? WHERE id = ?",
                (display_type.lower(), now_iso(), display_id),
            )
            conn.commit()
            row = cursor.execute(f"{_SELECT} WHERE d.id = ?", (display_id,)).fetchone()
        finally:
            conn.close()
        logger.info("Display %s set to %s", display_id, display_type.lower())
        return cls._row_to_display(row)

    @classmethod
    async def delete_display(cls, display_id: int) -> bool:
        conn = get_connection()
        try:
            cursor = conn.execute("DELETE FROM displays WHERE id = ?", (display_id,))
            conn.commit()
        finally:
            conn.close()
        logger.info("Deleted display %s", display_id)
        return cursor.rowcount > 0

    @classmethod
    async def delete_all_by_owner(cls, author_id: int) -> int:
        conn = get_connection()
        try:
            cursor = conn.execute("DELETE FROM displays WHERE author_id = ?", (author_id,))
            conn.commit()
            return cursor.rowcount
        finally:
            conn.close()
