"""SQL for the ``users`` table."""

import sqlite3
from typing import List, Optional

from ..core.db import NOW_SQL
from ..models.user import User
from .base import BaseMapper, parse_timestamp

_COLUMNS = "id, username, email, password, name, created_at, updated_at"


class UserMapper(BaseMapper):

    def insert(self, user: User) -> int:
        """Insert a user and return the generated id.

        Duplicate usernames or emails raise ``sqlite3.IntegrityError``.
        """
        cursor = self.conn.execute(
            """
            INSERT INTO users (username, email, password, name)
            VALUES (?, ?, ?, ?)
            """,
            (user.username, user.email, user.password, user.name),
        )
        return cursor.lastrowid

    def find_by_id(self, user_id: int) -> Optional[User]:
        row = self.conn.execute(f"SELECT {_COLUMNS} FROM users WHERE id = ?", (user_id,)).fetchone()
        return self._row_to_user(row) if row else None

    def find_by_username(self, username: str) -> Optional[User]:
        row = self.conn.execute(f"SELECT {_COLUMNS} FROM users WHERE username = ?", (username,)).fetchone()
        return self._row_to_user(row) if row else None

    def find_by_email(self, email: str) -> Optional[User]:
        row = self.conn.execute(f"SELECT {_COLUMNS} FROM users WHERE email = ?", (email,)).fetchone()
        return self._row_to_user(row) if row else None

    def find_all(self) -> List[User]:
        rows = self.conn.execute(f"SELECT {_COLUMNS} FROM users ORDER BY username").fetchall()
        return [self._row_to_user(row) for row in rows]

    def update(self, user: User) -> None:
        """Write email and name; username and password are left alone."""
        self.conn.execute(
            f"""
            UPDATE users
            SET email = ?,
                name = ?,
                updated_at = {NOW_SQL}
            WHERE id = ?
            """,
            (user.email, user.name, user.id),
        )

    def update_password(self, user_id: int, password: str) -> None:
        self.conn.execute(
            f"UPDATE users SET password = ?, updated_at = {NOW_SQL} WHERE id = ?",
            (password, user_id),
        )

    @staticmethod
    def _row_to_user(row: sqlite3.Row) -> User:
        return User(
            id=row["id"],
            username=row["username"],
            email=row["email"],
            password=row["password"],
            name=row["name"],
            created_at=parse_timestamp(row["created_at"]),
            updated_at=parse_timestamp(row["updated_at"]),
        )
