"""SQL for the ``project_members`` table."""

import sqlite3
from typing import List, Optional

from ..models.enums import ProjectRole
from ..models.project_member import ProjectMember, ProjectMemberDetail
from .base import BaseMapper, parse_timestamp


class ProjectMemberMapper(BaseMapper):

    def insert(self, member: ProjectMember) -> int:
        """Add a membership; a second row for the same user and project
        raises ``sqlite3.IntegrityError``."""
        cursor = self.conn.execute(
            """
            INSERT INTO project_members (project_id, user_id, role)
            VALUES (?, ?, ?)
            """,
            (member.project_id, member.user_id, member.role.name),
        )
        return cursor.lastrowid

    def find_by_project_id(self, project_id: int) -> List[ProjectMemberDetail]:
        rows = self.conn.execute(
            """
            SELECT
                pm.*,
                u.username,
                u.name AS user_name
            FROM project_members pm
            LEFT JOIN users u ON pm.user_id = u.id
            WHERE pm.project_id = ?
            ORDER BY pm.joined_at ASC, pm.id ASC
            """,
            (project_id,),
        ).fetchall()
        return [
            ProjectMemberDetail(**self._row_to_member(row).model_dump(), username=row["username"], user_name=row["user_name"])
            for row in rows
        ]

    def find_by_project_and_user(self, project_id: int, user_id: int) -> Optional[ProjectMember]:
        row = self.conn.execute(
            "SELECT * FROM project_members WHERE project_id = ? AND user_id = ?",
            (project_id, user_id),
        ).fetchone()
        return self._row_to_member(row) if row else None

    def delete_by_project_and_user(self, project_id: int, user_id: int) -> None:
        self.conn.execute(
            "DELETE FROM project_members WHERE project_id = ? AND user_id = ?",
            (project_id, user_id),
        )

    @staticmethod
    def _row_to_member(row: sqlite3.Row) -> ProjectMember:
        return ProjectMember(
            id=row["id"],
            project_id=row["project_id"],
            user_id=row["user_id"],
            role=ProjectRole[row["role"]],
            joined_at=parse_timestamp(row["joined_at"]),
        )
