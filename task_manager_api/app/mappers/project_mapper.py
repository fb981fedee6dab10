"""SQL for the ``projects`` table."""

import sqlite3
from typing import List, Optional

from ..core.db import NOW_SQL
from ..models.project import Project, ProjectDetail
from .base import BaseMapper, parse_timestamp


class ProjectMapper(BaseMapper):

    def insert(self, project: Project) -> int:
        cursor = self.conn.execute(
            """
            INSERT INTO projects (name, description, owner_id)
            VALUES (?, ?, ?)
            """,
            (project.name, project.description, project.owner_id),
        )
        return cursor.lastrowid

    def find_by_id(self, project_id: int) -> Optional[Project]:
        row = self.conn.execute("SELECT * FROM projects WHERE id = ?", (project_id,)).fetchone()
        return self._row_to_project(row) if row else None

    def find_by_id_with_details(self, project_id: int) -> Optional[ProjectDetail]:
        row = self.conn.execute(
            """
            SELECT
                p.*,
                u.username AS owner_name
            FROM projects p
            LEFT JOIN users u ON p.owner_id = u.id
            WHERE p.id = ?
            """,
            (project_id,),
        ).fetchone()
        return self._row_to_detail(row) if row else None

    def find_by_user_id(self, user_id: int) -> List[ProjectDetail]:
        """Projects the user owns or is a member of, newest first.

        The membership join can match a project more than once, hence
        ``DISTINCT``.
        """
        rows = self.conn.execute(
            """
            SELECT DISTINCT p.*, u.username AS owner_name
            FROM projects p
            LEFT JOIN users u ON p.owner_id = u.id
            LEFT JOIN project_members pm ON p.id = pm.project_id
            WHERE p.owner_id = ? OR pm.user_id = ?
            ORDER BY p.created_at DESC, p.id DESC
            """,
            (user_id, user_id),
        ).fetchall()
        return [self._row_to_detail(row) for row in rows]

    def update(self, project: Project) -> None:
        self.conn.execute(
            f"""
            UPDATE projects
            SET name = ?,
                description = ?,
                updated_at = {NOW_SQL}
            WHERE id = ?
            """,
            (project.name, project.description, project.id),
        )

    def delete_by_id(self, project_id: int) -> None:
        self.conn.execute("DELETE FROM projects WHERE id = ?", (project_id,))

    @staticmethod
    def _row_to_project(row: sqlite3.Row) -> Project:
        return Project(
            id=row["id"],
            name=row["name"],
            description=row["description"],
            owner_id=row["owner_id"],
            created_at=parse_timestamp(row["created_at"]),
            updated_at=parse_timestamp(row["updated_at"]),
        )

    @classmethod
    def _row_to_detail(cls, row: sqlite3.Row) -> ProjectDetail:
        project = cls._row_to_project(row)
        return ProjectDetail(**project.model_dump(), owner_name=row["owner_name"])
