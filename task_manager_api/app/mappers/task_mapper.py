"""SQL for the ``tasks`` table."""

import sqlite3
from datetime import date
from typing import List, Optional

from ..core.db import NOW_SQL
from ..models.enums import Priority, TaskStatus
from ..models.task import Task, TaskDetail
from .base import BaseMapper, escape_like, format_date, has_column, parse_date, parse_timestamp

# Active work first: TODO, then IN_PROGRESS, then DONE; newest first
# inside each status.  Ranks mirror enums.TASK_STATUS_RANKS.
STATUS_ORDER_SQL = """
    CASE t.status
        WHEN 'TODO' THEN 1
        WHEN 'IN_PROGRESS' THEN 2
        WHEN 'DONE' THEN 3
    END,
    t.created_at DESC,
    t.id DESC
"""


class TaskMapper(BaseMapper):

    def insert(self, task: Task) -> int:
        cursor = self.conn.execute(
            """
            INSERT INTO tasks (project_id, title, description, status, priority, assignee_id, due_date)
            VALUES (?, ?, ?, ?, ?, ?, ?)
            """,
            (
                task.project_id,
                task.title,
                task.description,
                task.status.name,
                task.priority.name,
                task.assignee_id,
                format_date(task.due_date),
            ),
        )
        return cursor.lastrowid

    def find_by_id(self, task_id: int) -> Optional[Task]:
        row = self.conn.execute("SELECT * FROM tasks t WHERE t.id = ?", (task_id,)).fetchone()
        return self._row_to_task(row) if row else None

    def find_by_id_with_details(self, task_id: int) -> Optional[TaskDetail]:
        row = self.conn.execute(
            """
            SELECT
                t.*,
                p.name AS project_name,
                u.username AS assignee_name
            FROM tasks t
            LEFT JOIN projects p ON t.project_id = p.id
            LEFT JOIN users u ON t.assignee_id = u.id
            WHERE t.id = ?
            """,
            (task_id,),
        ).fetchone()
        return self._row_to_detail(row) if row else None

    def find_by_project_id(self, project_id: int) -> List[TaskDetail]:
        rows = self.conn.execute(
            f"""
            SELECT
                t.*,
                u.username AS assignee_name
            FROM tasks t
            LEFT JOIN users u ON t.assignee_id = u.id
            WHERE t.project_id = ?
            ORDER BY {STATUS_ORDER_SQL}
            """,
            (project_id,),
        ).fetchall()
        return [self._row_to_detail(row) for row in rows]

    def search(
        self,
        project_id: Optional[int] = None,
        status: Optional[TaskStatus] = None,
        priority: Optional[Priority] = None,
        keyword: Optional[str] = None,
    ) -> List[TaskDetail]:
        """Tasks matching every supplied filter.

        ``None`` filters are ignored.  ``keyword`` is a substring match
        on title or description; ``%`` and ``_`` in it match
        literally.  Ordering is the same as
        ``find_by_project_id``.
        """
        where_clauses: list[str] = []
        params: list = []
        if project_id is not None:
            where_clauses.append("t.project_id = ?")
            params.append(project_id)
        if status is not None:
            where_clauses.append("t.status = ?")
            params.append(status.name)
        if priority is not None:
            where_clauses.append("t.priority = ?")
            params.append(priority.name)
        if keyword:
            where_clauses.append("(t.title LIKE ? ESCAPE '\\' OR t.description LIKE ? ESCAPE '\\')")
            pattern = f"%{escape_like(keyword)}%"
            params.extend([pattern, pattern])

        query = """
            SELECT
                t.*,
                p.name AS project_name,
                u.username AS assignee_name
            FROM tasks t
            LEFT JOIN projects p ON t.project_id = p.id
            LEFT JOIN users u ON t.assignee_id = u.id
        """
        if where_clauses:
            query += " WHERE " + " AND ".join(where_clauses)
        query += f" ORDER BY {STATUS_ORDER_SQL}"
        rows = self.conn.execute(query, tuple(params)).fetchall()
        return [self._row_to_detail(row) for row in rows]

    def find_overdue_tasks(self, user_id: int, today: date) -> List[TaskDetail]:
        """Unfinished tasks assigned to ``user_id`` due before ``today``."""
        rows = self.conn.execute(
            """
            SELECT
                t.*,
                p.name AS project_name,
                u.username AS assignee_name
            FROM tasks t
            LEFT JOIN projects p ON t.project_id = p.id
            LEFT JOIN users u ON t.assignee_id = u.id
            WHERE t.assignee_id = ?
              AND t.due_date IS NOT NULL
              AND t.due_date < ?
              AND t.status != 'DONE'
            ORDER BY t.due_date ASC, t.id ASC
            """,
            (user_id, today.isoformat()),
        ).fetchall()
        return [self._row_to_detail(row) for row in rows]

    def update(self, task: Task) -> None:
        """Write every mutable column; ``project_id`` never changes."""
        self.conn.execute(
            f"""
            UPDATE tasks
            SET title = ?,
                description = ?,
                status = ?,
                priority = ?,
                assignee_id = ?,
                due_date = ?,
                updated_at = {NOW_SQL}
            WHERE id = ?
            """,
            (
                task.title,
                task.description,
                task.status.name,
                task.priority.name,
                task.assignee_id,
                format_date(task.due_date),
                task.id,
            ),
        )

    def update_status(self, task_id: int, status: TaskStatus) -> None:
        self.conn.execute(
            f"""
            UPDATE tasks
            SET status = ?,
                updated_at = {NOW_SQL}
            WHERE id = ?
            """,
            (status.name, task_id),
        )

    def delete_by_id(self, task_id: int) -> None:
        self.conn.execute("DELETE FROM tasks WHERE id = ?", (task_id,))

    @staticmethod
    def _row_to_task(row: sqlite3.Row) -> Task:
        return Task(
            id=row["id"],
            project_id=row["project_id"],
            title=row["title"],
            description=row["description"],
            status=TaskStatus[row["status"]],
            priority=Priority[row["priority"]],
            assignee_id=row["assignee_id"],
            due_date=parse_date(row["due_date"]),
            created_at=parse_timestamp(row["created_at"]),
            updated_at=parse_timestamp(row["updated_at"]),
        )

    @classmethod
    def _row_to_detail(cls, row: sqlite3.Row) -> TaskDetail:
        task = cls._row_to_task(row)
        return TaskDetail(
            **task.model_dump(),
            project_name=row["project_name"] if has_column(row, "project_name") else None,
            assignee_name=row["assignee_name"] if has_column(row, "assignee_name") else None,
        )
