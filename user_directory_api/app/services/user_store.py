"""
Persistence for user records.

``UserStore`` wraps the SQLite file that holds the ``users`` table.
The application builds one store at start-up and hands it to the
request handlers through a FastAPI dependency; nothing in this module
keeps a global connection.  Each operation opens its own connection,
runs exactly one statement and commits.

SQLite failures are logged here and re-raised as ``StorageError``
(``DuplicateUserError`` when the name pair is already taken) so the
API layer never has to know about ``sqlite3``.
"""

from __future__ import annotations

import logging
import sqlite3
from typing import List, Optional

from ..core.db import get_cursor, init_db
from ..core.exceptions import DuplicateUserError, StorageError
from ..schemas.user import UserRecord
from .user_filters import UserCriteria

logger = logging.getLogger(__name__)


class UserStore:
    """Service class for reading and writing user records."""

    def __init__(self, db_path: str) -> None:
        self.db_path = db_path

    def init_schema(self) -> None:
        """Create the users table if needed."""
        try:
            init_db(self.db_path)
        except sqlite3.Error as exc:
            logger.error("Could not initialise database %s: %s", self.db_path, exc)
            raise StorageError(str(exc)) from exc
        logger.info("Database ready at %s", self.db_path)

    async def find(self, criteria: Optional[UserCriteria] = None) -> List[UserRecord]:
        """Return the records matching ``criteria``, ordered by id.

        ``None`` or empty criteria return every record.
        """
        where, params = (criteria or UserCriteria()).to_sql()
        sql = f"SELECT id, first_name, last_name FROM users{where} ORDER BY id"
        try:
            with get_cursor(self.db_path) as cursor:
                rows = cursor.execute(sql, params).fetchall()
        except sqlite3.Error as exc:
            logger.error("User lookup failed: %s", exc)
            raise StorageError(str(exc)) from exc
        return [
            UserRecord(id=row["id"], first_name=row["first_name"], last_name=row["last_name"])
            for row in rows
        ]

    async def insert(self, first_name: str, last_name: str) -> int:
        """Insert a user and return the id assigned by the database."""
        try:
            with get_cursor(self.db_path) as cursor:
                cursor.execute(
                    "INSERT INTO users (first_name, last_name) VALUES (?, ?)",
                    (first_name, last_name),
                )
                user_id = cursor.lastrowid
        except sqlite3.IntegrityError as exc:
            logger.error("Duplicate user %s %s: %s", first_name, last_name, exc)
            raise DuplicateUserError(str(exc)) from exc
        except sqlite3.Error as exc:
            logger.error("Creating user failed: %s", exc)
            raise StorageError(str(exc)) from exc
        logger.info("Created user %s", user_id)
        return user_id

    async def update(self, user_id: int, first_name: str, last_name: str) -> int:
        """Replace both names of a user.

        Returns the number of rows changed: 0 when no user has this id.
        """
        try:
            with get_cursor(self.db_path) as cursor:
                cursor.execute(
                    "UPDATE users SET first_name = ?, last_name = ? WHERE id = ?",
                    (first_name, last_name, user_id),
                )
                changes = cursor.rowcount
        except sqlite3.IntegrityError as exc:
            logger.error("Updating user %s would duplicate %s %s: %s", user_id, first_name, last_name, exc)
            raise DuplicateUserError(str(exc)) from exc
        except sqlite3.Error as exc:
            logger.error("Updating user %s failed: %s", user_id, exc)
            raise StorageError(str(exc)) from exc
        if changes:
            logger.info("Updated user %s", user_id)
        return changes

    async def delete(self, user_id: int) -> int:
        """Delete a user.  Returns the number of rows removed (0 or 1)."""
        try:
            with get_cursor(self.db_path) as cursor:
                cursor.execute("DELETE FROM users WHERE id = ?", (user_id,))
                changes = cursor.rowcount
        except sqlite3.Error as exc:
            logger.error("Deleting user %s failed: %s", user_id, exc)
            raise StorageError(str(exc)) from exc
        if changes:
            logger.info("Deleted user %s", user_id)
        return changes

    async def count(self) -> int:
        """Return the number of stored users."""
        try:
            with get_cursor(self.db_path) as cursor:
                row = cursor.execute("SELECT COUNT(*) AS count FROM users").fetchone()
        except sqlite3.Error as exc:
            logger.error("Counting users failed: %s", exc)
            raise StorageError(str(exc)) from exc
        return row["count"]
