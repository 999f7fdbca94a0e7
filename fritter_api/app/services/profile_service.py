"""
Business logic for profiles.

Profiles belong to users (one user may own several) and are addressed
either by id or by handle.  Handle lookups trim the input and compare
case-insensitively.  Handles are not required to be unique; when
several profiles share a handle, the oldest one wins the lookup.

Handle length, blank handles and the profile type are validated by the
validator chain, not here.  The type is stored lower-cased.
"""

import logging
import sqlite3
from typing import List, Optional

from fritter_api.app.core.db import get_connection, now_iso, parse_timestamp
from fritter_api.app.models import ProfileRecord
from fritter_api.app.services.user_service import UserService, row_to_user

logger = logging.getLogger(__name__)

_SELECT = (
    "SELECT p.id, p.handle, p.type, p.bio, p.date_created, p.date_modified, "
    "u.id AS owner_id, u.username AS owner_username, u.date_joined AS owner_date_joined "
    "FROM profiles p JOIN users u ON u.id = p.user_id"
)


class ProfileService:
    """Service for profiles."""

    @staticmethod
    def _row_to_profile(row: sqlite3.Row) -> ProfileRecord:
        return ProfileRecord(
            id=row["id"],
            user=row_to_user(row, prefix="owner_"),
            handle=row["handle"],
            type=row["type"],
            bio=row["bio"],
            date_created=parse_timestamp(row["date_created"]),
            date_modified=parse_timestamp(row["date_modified"]),
        )

    @classmethod
    async def create_profile(
        cls,
        user_id: int,
        handle: str,
        profile_type: str,
        bio: Optional[str],
    ) -> ProfileRecord:
        """Insert a profile.  Raises ``ValueError`` if the user does not exist."""
        date = now_iso()
        conn = get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(
                """
                INSERT INTO profiles (user_id, handle, type, bio, date_created, date_modified)
                VALUES (?, ?, ?, ?, ?, ?)
                """,
                (user_id, handle, profile_type.lower(), bio, date, date),
            )
            profile_id = cursor.lastrowid
            conn.commit()
            row = cursor.execute(f"{_SELECT} WHERE p.id = ?", (profile_id,)).fetchone()
        except sqlite3.IntegrityError:
            conn.rollback()
            raise ValueError(f"User {user_id} does not exist")
        finally:
            conn.close()
        logger.info("User %s created profile %s (%s)", user_id, profile_id, handle)
        return cls._row_to_profile(row)

    @classmethod
    async def get_profile(cls, profile_id: int) -> Optional[ProfileRecord]:
        conn = get_connection()
        try:
            row = conn.execute(f"{_SELECT} WHERE p.id = ?", (profile_id,)).fetchone()
            return cls._row_to_profile(row) if row else None
        finally:
            conn.close()

    @classmethod
    async def get_by_handle(cls, handle: str) -> Optional[ProfileRecord]:
        """Find a profile by handle (trimmed, case insensitive)."""
        conn = get_connection()
        try:
            row = conn.execute(
                f"{_SELECT} WHERE p.handle = ? COLLATE NOCASE ORDER BY p.id ASC LIMIT 1",
                (handle.strip(),),
            ).fetchone()
            return cls._row_to_profile(row) if row else None
        finally:
            conn.close()

    @classmethod
    async def list_profiles(cls) -> List[ProfileRecord]:
        """Return all profiles, most recently modified first."""
        conn = get_connection()
        try:
            rows = conn.execute(f"{_SELECT} ORDER BY p.date_modified DESC, p.id DESC").fetchall()
            return [cls._row_to_profile(row) for row in rows]
        finally:
            conn.close()

    @classmethod
    async def list_by_username(cls, username: str) -> List[ProfileRecord]:
        """Return the profiles of the user called ``username``."""
        user = await UserService.get_by_username(username)
        if user is None:
            return []
        conn = get_connection()
        try:
            rows = conn.execute(
                f"{_SELECT} WHERE p.user_id = ? ORDER BY p.date_modified DESC, p.id DESC",
                (user.id,),
            ).fetchall()
            return [cls._row_to_profile(row) for row in rows]
        finally:
            conn.close()

    @classmethod
    async def update_profile(
        cls,
        profile_id: int,
        handle: str,
        bio: Optional[str] = None,
        profile_type: Optional[str] = None,
    ) -> ProfileRecord:
        """Change the handle and optionally the bio and type.

        ``bio`` and ``profile_type`` keep their stored value when passed
        as ``None``.  ``date_modified`` is always refreshed.
        """
        conn = get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(
                """
                UPDATE profiles
                SET handle = ?,
                    bio = COALESCE(?, bio),
                    type = COALESCE(?, type),
                    date_modified = ?
                WHERE id = ?
                """,
                (
                    handle,
                    bio,
                    profile_type.lower() if profile_type is not None else None,
                    now_iso(),
                    profile_id,
                ),
            )
            conn.commit()
            row = cursor.execute(f"{_SELECT} WHERE p.id = ?", (profile_id,)).fetchone()
        finally:
            conn.close()
        logger.info("Profile %s updated (handle %s)", profile_id, handle)
        return cls._row_to_profile(row)

    @classmethod
    async def delete_profile(cls, profile_id: int) -> bool:
        conn = get_connection()
        try:
            cursor = conn.execute("DELETE FROM profiles WHERE id = ?", (profile_id,))
            conn.commit()
        finally:
            conn.close()
        logger.info("Deleted profile %s", profile_id)
        return cursor.rowcount > 0

    @classmethod
    async def delete_all_by_owner(cls, user_id: int) -> int:
        conn = get_connection()
        try:
            cursor = conn.execute("DELETE FROM profiles WHERE user_id = ?", (user_id,))
            conn.commit()
            return cursor.rowcount
        finally:
            conn.close()
