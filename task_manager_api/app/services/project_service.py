"""
Business logic for projects and project membership.

A project is owned by the user who created it.  Listing "my projects"
returns projects the user owns together with those they were added to
as a member.
"""

import logging
from typing import List

from ..core.db import transaction
from ..models.enums import ProjectRole, parse_enum
from ..models.project import Project, ProjectDetail
from ..models.project_member import ProjectMember, ProjectMemberDetail
from ..mappers.project_mapper import ProjectMapper
from ..mappers.project_member_mapper import ProjectMemberMapper
from ..mappers.user_mapper import UserMapper
from ..schemas.project import ProjectCreateRequest
from .base import require

logger = logging.getLogger(__name__)


class ProjectService:
    """Service for project CRUD and membership."""

    @classmethod
    async def create_project(cls, request: ProjectCreateRequest, username: str) -> ProjectDetail:
        """Create a project owned by ``username``.

        Raises ``NotFoundError`` without inserting anything when the
        username does not exist.
        """
        logger.info("User %s is creating project '%s'", username, request.name)
        with transaction() as conn:
            user = require(UserMapper(conn).find_by_username(username), f"User not found: {username}")
            mapper = ProjectMapper(conn)
            project_id = mapper.insert(
                Project(name=request.name, description=request.description, owner_id=user.id)
            )
            created = mapper.find_by_id_with_details(project_id)
        logger.info("Created project id=%s", project_id)
        return created

    @classmethod
    async def get_project_by_id(cls, project_id: int) -> ProjectDetail:
        with transaction() as conn:
            return cls._load(ProjectMapper(conn), project_id)

    @classmethod
    async def get_user_projects(cls, username: str) -> List[ProjectDetail]:
        """Projects owned by or shared with ``username``, newest first."""
        with transaction() as conn:
            user = require(UserMapper(conn).find_by_username(username), f"User not found: {username}")
            return ProjectMapper(conn).find_by_user_id(user.id)

    @classmethod
    async def update_project(cls, project_id: int, request: ProjectCreateRequest) -> ProjectDetail:
        logger.info("Updating project id=%s", project_id)
        with transaction() as conn:
            mapper = ProjectMapper(conn)
            project = cls._load(mapper, project_id)
            project.name = request.name
            project.description = request.description
            mapper.update(project)
            return mapper.find_by_id_with_details(project_id)

    @classmethod
    async def delete_project(cls, project_id: int) -> None:
        """Delete a project together with its tasks and memberships."""
        logger.info("Deleting project id=%s", project_id)
        with transaction() as conn:
            mapper = ProjectMapper(conn)
            cls._load(mapper, project_id)
            mapper.delete_by_id(project_id)

    # ------------------------------------------------------------------
    # Membership
    # ------------------------------------------------------------------
    @classmethod
    async def add_member(cls, project_id: int, username: str, role: str = "MEMBER") -> ProjectMember:
        """Add ``username`` to a project with the given role name.

        Both the project and the user must exist.  Adding the same user
        twice is rejected by the database (``sqlite3.IntegrityError``).
        """
        logger.info("Adding %s to project id=%s as %s", username, project_id, role)
        parsed_role = parse_enum(ProjectRole, role, "role")
        with transaction() as conn:
            cls._load(ProjectMapper(conn), project_id)
            user = require(UserMapper(conn).find_by_username(username), f"User not found: {username}")
            member = ProjectMember(project_id=project_id, user_id=user.id, role=parsed_role)
            member.id = ProjectMemberMapper(conn).insert(member)
        return member

    @classmethod
    async def get_project_members(cls, project_id: int) -> List[ProjectMemberDetail]:
        with transaction() as conn:
            return ProjectMemberMapper(conn).find_by_project_id(project_id)

    @classmethod
    async def remove_member(cls, project_id: int, user_id: int) -> None:
        """Remove a membership; raises ``NotFoundError`` if there is none."""
        logger.info("Removing user id=%s from project id=%s", user_id, project_id)
        with transaction() as conn:
            mapper = ProjectMemberMapper(conn)
            require(
                mapper.find_by_project_and_user(project_id, user_id),
                f"User id={user_id} is not a member of project id={project_id}",
            )
            mapper.delete_by_project_and_user(project_id, user_id)

    @staticmethod
    def _load(mapper: ProjectMapper, project_id: int) -> ProjectDetail:
        return require(mapper.find_by_id_with_details(project_id), f"Project not found: id={project_id}")
