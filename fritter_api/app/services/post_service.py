"""
Business logic for posts.

Posts are the targets of reactions.  The service supports creating,
reading and deleting posts; deleting a post also removes the reactions
that target it.
"""

import logging
import sqlite3
from typing import List, Optional

from fritter_api.app.core.db import get_connection, now_iso, parse_timestamp
from fritter_api.app.models import PostRecord
from fritter_api.app.services.reaction_service import ReactionService
from fritter_api.app.services.user_service import row_to_user

logger = logging.getLogger(__name__)

_SELECT = (
    "SELECT p.id, p.content, p.date_created, "
    "u.id AS owner_id, u.username AS owner_username, u.date_joined AS owner_date_joined "
    "FROM posts p JOIN users u ON u.id = p.author_id"
)


class PostService:
    """Service for posts."""

    @staticmethod
    def _row_to_post(row: sqlite3.Row) -> PostRecord:
        return PostRecord(
            id=row["id"],
            author=row_to_user(row, prefix="owner_"),
            content=row["content"],
            date_created=parse_timestamp(row["date_created"]),
        )

    @classmethod
    async def create_post(cls, author_id: int, content: str) -> PostRecord:
        """Insert a post and return it with the author resolved."""
        conn = get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(
                "INSERT INTO posts (author_id, content, date_created) VALUES (?, ?, ?)",
                (author_id, content, now_iso()),
            )
            post_id = cursor.lastrowid
            conn.commit()
            row = cursor.execute(f"{_SELECT} WHERE p.id = ?", (post_id,)).fetchone()
        except sqlite3.IntegrityError:
            conn.rollback()
            raise ValueError(f"User {author_id} does not exist")
        finally:
            conn.close()
        logger.info("User %s created post %s", author_id, post_id)
        return cls._row_to_post(row)

    @classmethod
    async def get_post(cls, post_id: int) -> Optional[PostRecord]:
        conn = get_connection()
        try:
            row = conn.execute(f"{_SELECT} WHERE p.id = ?", (post_id,)).fetchone()
            return cls._row_to_post(row) if row else None
        finally:
            conn.close()

    @classmethod
    async def list_posts(cls) -> List[PostRecord]:
        """Return all posts, newest first."""
        conn = get_connection()
        try:
            rows = conn.execute(f"{_SELECT} ORDER BY p.date_created DESC, p.id DESC").fetchall()
            return [cls._row_to_post(row) for row in rows]
        finally:
            conn.close()

    @classmethod
    async def delete_post(cls, post_id: int) -> bool:
        """Delete a post and the reactions on it.  Returns whether it existed."""
        await ReactionService.delete_all_by_target(post_id)
        conn = get_connection()
        try:
            cursor = conn.execute("DELETE FROM posts WHERE id = ?", (post_id,))
            conn.commit()
        finally:
            conn.close()
        logger.info("Deleted post %s", post_id)
        return cursor.rowcount > 0

    @classmethod
    async def delete_all_by_owner(cls, author_id: int) -> int:
        """Delete every post by ``author_id`` along with reactions on them."""
        conn = get_connection()
        try:
            rows = conn.execute("SELECT id FROM posts WHERE author_id = ?", (author_id,)).fetchall()
        finally:
            conn.close()
        removed = 0
        for row in rows:
            if await cls.delete_post(row["id"]):
                removed += 1
        return removed
