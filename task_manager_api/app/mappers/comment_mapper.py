"""SQL for the ``comments`` table."""

import sqlite3
from typing import List, Optional

from ..core.db import NOW_SQL
from ..models.comment import Comment, CommentDetail
from .base import BaseMapper, parse_timestamp


class CommentMapper(BaseMapper):

    def insert(self, comment: Comment) -> int:
        cursor = self.conn.execute(
            """
            INSERT INTO comments (task_id, user_id, content)
            VALUES (?, ?, ?)
            """,
            (comment.task_id, comment.user_id, comment.content),
        )
        return cursor.lastrowid

    def find_by_id(self, comment_id: int) -> Optional[Comment]:
        row = self.conn.execute("SELECT * FROM comments WHERE id = ?", (comment_id,)).fetchone()
        return self._row_to_comment(row) if row else None

    def find_by_task_id(self, task_id: int) -> List[CommentDetail]:
        """Comments on a task with their authors, newest first."""
        rows = self.conn.execute(
            """
            SELECT
                c.*,
                u.username,
                u.name AS user_name
            FROM comments c
            LEFT JOIN users u ON c.user_id = u.id
            WHERE c.task_id = ?
            ORDER BY c.created_at DESC, c.id DESC
            """,
            (task_id,),
        ).fetchall()
        return [
            CommentDetail(**self._row_to_comment(row).model_dump(), username=row["username"], user_name=row["user_name"])
            for row in rows
        ]

    def update(self, comment: Comment) -> None:
        self.conn.execute(
            f"""
            UPDATE comments
            SET content = ?,
                updated_at = {NOW_SQL}
            WHERE id = ?
            """,
            (comment.content, comment.id),
        )

    def delete_by_id(self, comment_id: int) -> None:
        self.conn.execute("DELETE FROM comments WHERE id = ?", (comment_id,))

    @staticmethod
    def _row_to_comment(row: sqlite3.Row) -> Comment:
        return Comment(
            id=row["id"],
            task_id=row["task_id"],
            user_id=row["user_id"],
            content=row["content"],
            created_at=parse_timestamp(row["created_at"]),
            updated_at=parse_timestamp(row["updated_at"]),
        )
