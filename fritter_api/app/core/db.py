"""
SQLite database integration and simple migration system.

This module provides functions for obtaining a database connection
(``get_connection``), applying migrations on application start
(``init_db``) and a few helpers shared by the service layer for
timestamps and identifiers.  It uses SQLite as a lightweight embedded
database; to switch to another DBMS you would replace connection logic
and adapt SQL syntax accordingly.

The migration mechanism stores applied migration versions in the
``migrations`` table and executes new migrations in order.
"""

import os
import sqlite3
from contextlib import contextmanager
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterator, Optional

from .config import settings


def get_database_path() -> str:
    """Compute the path to the SQLite database file.

    If ``settings.database_url`` is an absolute path, use it directly.
    Otherwise resolve it relative to the project root.
    """
    db_url = settings.database_url
    if os.path.isabs(db_url):
        return db_url
    base_dir = Path(__file__).resolve().parent.parent.parent  # fritter_api/
    return str((base_dir / db_url).resolve())


def get_connection() -> sqlite3.Connection:
    """Create and return a new SQLite connection.

    The connection uses a row factory to access columns by name.
    Timestamps are stored as ISO 8601 strings and parsed by the
    services, so no type detection is enabled here.
    """
    conn = sqlite3.connect(get_database_path())
    conn.row_factory = sqlite3.Row
    # Foreign key support is disabled by default in SQLite and must be
    # turned on per connection.  Owner references rely on it.
    conn.execute("PRAGMA foreign_keys = ON")
    return conn


@contextmanager
def get_cursor() -> Iterator[sqlite3.Cursor]:
    """Context manager that yields a cursor and closes the connection on exit."""
    conn = get_connection()
    try:
        yield conn.cursor()
        conn.commit()
    finally:
        conn.close()


# SQLite INTEGER PRIMARY KEY is a signed 64-bit value.
MAX_ID = 2 ** 63 - 1


def now_iso() -> str:
    """Return the current UTC time as an ISO string with microseconds.

    All stored timestamps carry the same ``+00:00`` offset, so they sort
    lexicographically in chronological order, which the
    ``ORDER BY date_modified DESC`` queries rely on.  Local wall-clock
    time is applied only when presenting.
    """
    return datetime.now(timezone.utc).isoformat(timespec="microseconds")


def parse_timestamp(value: str) -> datetime:
    """Parse a timestamp previously written by :func:`now_iso`.

    The result is always timezone aware; a value without an offset is
    taken to be UTC.
    """
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def parse_id(raw: Optional[str]) -> Optional[int]:
    """Return ``raw`` as an integer identifier, or ``None`` if malformed.

    Identifiers are generated by SQLite (``INTEGER PRIMARY KEY``), so a
    well-formed identifier is a non-empty string of ASCII digits no
    larger than :data:`MAX_ID`.
    """
    if raw is None:
        return None
    raw = raw.strip()
    if not raw or not raw.isascii() or not raw.isdigit():
        return None
    value = int(raw)
    if value > MAX_ID:
        return None
    return value


def init_db() -> None:
    """Initialise the database and apply pending migrations.

    Creates the ``migrations`` table if it does not exist, checks the
    current schema version, and applies any new migrations defined in
    the ``migrations`` list.  If you add a new migration, append it
    with an incremented version number.
    """
    migrations: list[tuple[int, str]] = [
        # Migration 1: users and posts
        (
            1,
            """
            CREATE TABLE IF NOT EXISTS users (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                username TEXT NOT NULL UNIQUE COLLATE NOCASE,
                password TEXT NOT NULL,
                date_joined TIMESTAMP NOT NULL
            );

            CREATE TABLE IF NOT EXISTS posts (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                author_id INTEGER NOT NULL,
                content TEXT NOT NULL,
                date_created TIMESTAMP NOT NULL,
                FOREIGN KEY(author_id) REFERENCES users(id)
            );
            """,
        ),
        # Migration 2: owner-scoped resources
        (
            2,
            """
            CREATE TABLE IF NOT EXISTS displays (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                author_id INTEGER NOT NULL,
                display_type TEXT NOT NULL,
                date_modified TIMESTAMP NOT NULL,
                FOREIGN KEY(author_id) REFERENCES users(id)
            );

            CREATE TABLE IF NOT EXISTS incognitos (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                user_id INTEGER NOT NULL,
                FOREIGN KEY(user_id) REFERENCES users(id)
            );

            CREATE TABLE IF NOT EXISTS profiles (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                user_id INTEGER NOT NULL,
                handle TEXT NOT NULL,
                type TEXT NOT NULL,
                bio TEXT,
                date_created TIMESTAMP NOT NULL,
                date_modified TIMESTAMP NOT NULL,
                FOREIGN KEY(user_id) REFERENCES users(id)
            );

            -- At most one reaction per (user, post) is enforced by the
            -- validator chain, not by a UNIQUE constraint.
            CREATE TABLE IF NOT EXISTS reactions (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                user_id INTEGER NOT NULL,
                post_id INTEGER NOT NULL,
                symbol TEXT NOT NULL,
                date_created TIMESTAMP NOT NULL,
                date_modified TIMESTAMP NOT NULL,
                FOREIGN KEY(user_id) REFERENCES users(id),
                FOREIGN KEY(post_id) REFERENCES posts(id)
            );
            """,
        ),
        # Migration 3: indices on owner and target columns
        (
            3,
            """
            CREATE INDEX IF NOT EXISTS idx_posts_author_id ON posts(author_id);
            CREATE INDEX IF NOT EXISTS idx_displays_author_id ON displays(author_id);
            CREATE INDEX IF NOT EXISTS idx_incognitos_user_id ON incognitos(user_id);
            CREATE INDEX IF NOT EXISTS idx_profiles_user_id ON profiles(user_id);
            CREATE INDEX IF NOT EXISTS idx_profiles_handle ON profiles(handle COLLATE NOCASE);
            CREATE INDEX IF NOT EXISTS idx_reactions_user_post ON reactions(user_id, post_id);
            CREATE INDEX IF NOT EXISTS idx_reactions_post_id ON reactions(post_id);
            """,
        ),
    ]

    with get_cursor() as cursor:
        cursor.execute(
            "CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)"
        )
        cursor.execute("SELECT MAX(version) as version FROM migrations")
        row = cursor.fetchone()
        current_version = row["version"] if row and row["version"] is not None else 0

        for version, sql in migrations:
            if version > current_version:
                cursor.executescript(sql)
                cursor.execute(
                    "INSERT INTO migrations (version) VALUES (?)", (version,)
                )
                current_version = version
