"""SQL for the ``tags`` and ``task_tags`` tables."""

import sqlite3
from typing import List, Optional

from ..models.tag import Tag, TaskTag
from .base import BaseMapper, parse_timestamp


class TagMapper(BaseMapper):

    def insert(self, tag: Tag) -> int:
        cursor = self.conn.execute(
            """
            INSERT INTO tags (name, color)
            VALUES (?, ?)
            """,
            (tag.name, tag.color),
        )
        return cursor.lastrowid

    def find_by_id(self, tag_id: int) -> Optional[Tag]:
        row = self.conn.execute("SELECT * FROM tags WHERE id = ?", (tag_id,)).fetchone()
        return self._row_to_tag(row) if row else None

    def find_all(self) -> List[Tag]:
        rows = self.conn.execute("SELECT * FROM tags ORDER BY name").fetchall()
        return [self._row_to_tag(row) for row in rows]

    def find_by_task_id(self, task_id: int) -> List[Tag]:
        rows = self.conn.execute(
            """
            SELECT t.*
            FROM tags t
            JOIN task_tags tt ON t.id = tt.tag_id
            WHERE tt.task_id = ?
            ORDER BY t.name
            """,
            (task_id,),
        ).fetchall()
        return [self._row_to_tag(row) for row in rows]

    def delete_by_id(self, tag_id: int) -> None:
        self.conn.execute("DELETE FROM tags WHERE id = ?", (tag_id,))

    @staticmethod
    def _row_to_tag(row: sqlite3.Row) -> Tag:
        return Tag(
            id=row["id"],
            name=row["name"],
            color=row["color"],
            created_at=parse_timestamp(row["created_at"]),
        )


class TaskTagMapper(BaseMapper):
    """Association rows keyed by (task_id, tag_id)."""

    def insert(self, link: TaskTag) -> None:
        """Link a tag to a task; linking twice raises ``sqlite3.IntegrityError``."""
        self.conn.execute(
            "INSERT INTO task_tags (task_id, tag_id) VALUES (?, ?)",
            (link.task_id, link.tag_id),
        )

    def find(self, task_id: int, tag_id: int) -> Optional[TaskTag]:
        row = self.conn.execute(
            "SELECT * FROM task_tags WHERE task_id = ? AND tag_id = ?",
            (task_id, tag_id),
        ).fetchone()
        if row is None:
            return None
        return TaskTag(
            task_id=row["task_id"],
            tag_id=row["tag_id"],
            created_at=parse_timestamp(row["created_at"]),
        )

    def delete(self, task_id: int, tag_id: int) -> None:
        self.conn.execute(
            "DELETE FROM task_tags WHERE task_id = ? AND tag_id = ?",
            (task_id, tag_id),
        )
