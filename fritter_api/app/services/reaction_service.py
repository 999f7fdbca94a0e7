"""
Business logic for reactions.

A reaction records how a user feels about a post (``heart``, ``like``
or ``dislike``).  A user may hold at most one reaction per post.  That
rule is checked by the validator chain through
``find_by_user_and_post`` before ``create_reaction`` runs; the table has
no unique constraint, so two concurrent creates for the same pair can
both pass the check.

Reactions on a given post are addressed through the (user, post) pair,
which is how the router exposes them.
"""

import logging
import sqlite3
from typing import List, Optional

from fritter_api.app.core.db import get_connection, now_iso, parse_timestamp
from fritter_api.app.models import ReactionRecord
from fritter_api.app.services.user_service import UserService, row_to_user

logger = logging.getLogger(__name__)

_SELECT = (
    "SELECT r.id, r.post_id, r.symbol, r.date_created, r.date_modified, "
    "u.id AS owner_id, u.username AS owner_username, u.date_joined AS owner_date_joined "
    "FROM reactions r JOIN users u ON u.id = r.user_id"
)
_ORDER = "ORDER BY r.date_modified DESC, r.id DESC"


class ReactionService:
    """Service for reactions."""

    @staticmethod
    def _row_to_reaction(row: sqlite3.Row) -> ReactionRecord:
        return ReactionRecord(
            id=row["id"],
            user=row_to_user(row, prefix="owner_"),
            post_id=row["post_id"],
            symbol=row["symbol"],
            date_created=parse_timestamp(row["date_created"]),
            date_modified=parse_timestamp(row["date_modified"]),
        )

    @classmethod
    async def create_reaction(cls, user_id: int, post_id: int, symbol: str) -> ReactionRecord:
        """Insert a reaction.

        Raises ``ValueError`` if the user or the post does not exist.
        """
        date = now_iso()
        conn = get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(
                """
                INSERT INTO reactions (user_id, post_id, symbol, date_created, date_modified)
                VALUES (?, ?, ?, ?, ?)
                """,
                (user_id, post_id, symbol.lower(), date, date),
            )
            reaction_id = cursor.lastrowid
            conn.commit()
            row = cursor.execute(f"{_SELECT} WHERE r.id = ?", (reaction_id,)).fetchone()
        except sqlite3.IntegrityError:
            conn.rollback()
            raise ValueError(f"User {user_id} or post {post_id} does not exist")
        finally:
            conn.close()
        logger.info("User %s reacted %s to post %s", user_id, symbol.lower(), post_id)
        return cls._row_to_reaction(row)

    @classmethod
    async def get_reaction(cls, reaction_id: int) -> Optional[ReactionRecord]:
        conn = get_connection()
        try:
            row = conn.execute(f"{_SELECT} WHERE r.id = ?", (reaction_id,)).fetchone()
            return cls._row_to_reaction(row) if row else None
        finally:
            conn.close()

    @classmethod
    async def find_by_user_and_post(cls, user_id: int, post_id: int) -> Optional[ReactionRecord]:
        """Return the reaction of ``user_id`` on ``post_id``, if any."""
        conn = get_connection()
        try:
            row = conn.execute(
                f"{_SELECT} WHERE r.user_id = ? AND r.post_id = ? ORDER BY r.id ASC LIMIT 1",
                (user_id, post_id),
            ).fetchone()
            return cls._row_to_reaction(row) if row else None
        finally:
            conn.close()

    @classmethod
    async def list_reactions(cls) -> List[ReactionRecord]:
        """Return all reactions, most recently modified first."""
        conn = get_connection()
        try:
            rows = conn.execute(f"{_SELECT} {_ORDER}").fetchall()
            return [cls._row_to_reaction(row) for row in rows]
        finally:
            conn.close()

    @classmethod
    async def list_by_post(cls, post_id: int) -> List[ReactionRecord]:
        conn = get_connection()
        try:
            rows = conn.execute(f"{_SELECT} WHERE r.post_id = ? {_ORDER}", (post_id,)).fetchall()
            return [cls._row_to_reaction(row) for row in rows]
        finally:
            conn.close()

    @classmethod
    async def list_by_username(cls, username: str) -> List[ReactionRecord]:
        user = await UserService.get_by_username(username)
        if user is None:
            return []
        conn = get_connection()
        try:
            rows = conn.execute(f"{_SELECT} WHERE r.user_id = ? {_ORDER}", (user.id,)).fetchall()
            return [cls._row_to_reaction(row) for row in rows]
        finally:
            conn.close()

    @classmethod
    async def update_reaction(cls, reaction_id: int, symbol: str) -> ReactionRecord:
        """Change the symbol of a reaction and refresh ``date_modified``."""
        conn = get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(
                "UPDATE reactions SET symbol = ?, date_modified = ? WHERE id = ?",
                (symbol.lower(), now_iso(), reaction_id),
            )
            conn.commit()
            row = cursor.execute(f"{_SELECT} WHERE r.id = ?", (reaction_id,)).fetchone()
        finally:
            conn.close()
        logger.info("Reaction %s changed to %s", reaction_id, symbol.lower())
        return cls._row_to_reaction(row)

    @classmethod
    async def delete_reaction(cls, reaction_id: int) -> bool:
        conn = get_connection()
        try:
            cursor = conn.execute("DELETE FROM reactions WHERE id = ?", (reaction_id,))
            conn.commit()
        finally:
            conn.close()
        logger.info("Deleted reaction %s", reaction_id)
        return cursor.rowcount > 0

    @classmethod
    async def delete_all_by_owner(cls, user_id: int) -> int:
        conn = get_connection()
        try:
            cursor = conn.execute("DELETE FROM reactions WHERE user_id = ?", (user_id,))
            conn.commit()
            return cursor.rowcount
        finally:
            conn.close()

    @classmethod
    async def delete_all_by_target(cls, post_id: int) -> int:
        conn = get_connection()
        try:
            cursor = conn.execute("DELETE FROM reactions WHERE post_id = ?", (post_id,))
            conn.commit()
            return cursor.rowcount
        finally:
            conn.close()
