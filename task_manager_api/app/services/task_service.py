"""
Business logic for tasks.

Creating a task requires its project to exist; status and priority
arrive as symbolic names and are coerced to enums before anything is
written.  Status changes are unrestricted: any status may follow any
other.  Listings use the status-rank ordering of ``TaskMapper``.
"""

import logging
from datetime import date
from typing import Dict, List, Optional

from ..core.db import transaction
from ..models.enums import Priority, TaskStatus, parse_enum
from ..models.task import Task, TaskDetail
from ..mappers.project_mapper import ProjectMapper
from ..mappers.task_mapper import TaskMapper
from ..schemas.task import TaskCreateRequest, TaskSearchCriteria
from .base import require

logger = logging.getLogger(__name__)


class TaskService:
    """Service for creating, searching, updating and deleting tasks."""

    @classmethod
    async def create_task(cls, request: TaskCreateRequest) -> TaskDetail:
        """Insert a task and return it with its generated id.

        Raises
        ------
        NotFoundError
            If ``request.project_id`` does not name a project.  Nothing
            is inserted.
        ValidationError
            If ``status`` or ``priority`` is not a known symbol.
        """
        logger.info("Creating task '%s' in project %s", request.title, request.project_id)
        with transaction() as conn:
            require(
                ProjectMapper(conn).find_by_id(request.project_id),
                f"Project not found: id={request.project_id}",
            )
            task = Task(
                project_id=request.project_id,
                title=request.title,
                description=request.description,
                status=parse_enum(TaskStatus, request.status, "status"),
                priority=parse_enum(Priority, request.priority, "priority"),
                assignee_id=request.assignee_id,
                due_date=request.due_date,
            )
            mapper = TaskMapper(conn)
            task_id = mapper.insert(task)
            created = mapper.find_by_id_with_details(task_id)
        logger.info("Created task id=%s", task_id)
        return created

    @classmethod
    async def get_task_by_id(cls, task_id: int) -> TaskDetail:
        """Return the task with project name and assignee username.

        Raises ``NotFoundError`` if the task does not exist.
        """
        with transaction() as conn:
            return cls._load(TaskMapper(conn), task_id)

    @classmethod
    async def get_project_tasks(cls, project_id: int) -> List[TaskDetail]:
        with transaction() as conn:
            return TaskMapper(conn).find_by_project_id(project_id)

    @classmethod
    async def search_tasks(cls, criteria: TaskSearchCriteria) -> List[TaskDetail]:
        """Return tasks matching all supplied criteria.

        Blank strings count as "not supplied".  A supplied status or
        priority must be a known symbol (``ValidationError`` otherwise).
        """
        logger.info("Searching tasks: %s", criteria.model_dump(exclude_none=True))
        status = parse_enum(TaskStatus, criteria.status, "status", "query") if criteria.status else None
        priority = parse_enum(Priority, criteria.priority, "priority", "query") if criteria.priority else None
        keyword = criteria.keyword.strip() if criteria.keyword else None
        with transaction() as conn:
            return TaskMapper(conn).search(
                project_id=criteria.project_id,
                status=status,
                priority=priority,
                keyword=keyword or None,
            )

    @classmethod
    async def get_overdue_tasks(cls, user_id: int, today: Optional[date] = None) -> List[TaskDetail]:
        """Unfinished tasks assigned to the user and due before ``today``."""
        with transaction() as conn:
            return TaskMapper(conn).find_overdue_tasks(user_id, today or date.today())

    @classmethod
    async def update_task(cls, task_id: int, request: TaskCreateRequest) -> TaskDetail:
        """Overwrite the mutable fields of a task and return the stored result."""
        logger.info("Updating task id=%s", task_id)
        with transaction() as conn:
            mapper = TaskMapper(conn)
            task = cls._load(mapper, task_id)
            task.title = request.title
            task.description = request.description
            task.status = parse_enum(TaskStatus, request.status, "status")
            task.priority = parse_enum(Priority, request.priority, "priority")
            task.assignee_id = request.assignee_id
            task.due_date = request.due_date
            mapper.update(task)
            updated = mapper.find_by_id_with_details(task_id)
        logger.info("Updated task id=%s", task_id)
        return updated

    @classmethod
    async def update_task_status(cls, task_id: int, status: str) -> None:
        """Change only the status of a task.

        The task must exist (``NotFoundError``) and ``status`` must be a
        known symbol (``ValidationError``) before the update is issued.
        """
        logger.info("Updating status of task id=%s to %s", task_id, status)
        with transaction() as conn:
            mapper = TaskMapper(conn)
            cls._load(mapper, task_id)
            mapper.update_status(task_id, parse_enum(TaskStatus, status, "status", "query"))

    @classmethod
    async def delete_task(cls, task_id: int) -> None:
        """Delete a task; deleting a missing id raises ``NotFoundError``."""
        logger.info("Deleting task id=%s", task_id)
        with transaction() as conn:
            mapper = TaskMapper(conn)
            cls._load(mapper, task_id)
            mapper.delete_by_id(task_id)

    @staticmethod
    def group_by_status(tasks: List[TaskDetail]) -> Dict[TaskStatus, List[TaskDetail]]:
        """Split tasks into one list per status, keeping their order."""
        groups: Dict[TaskStatus, List[TaskDetail]] = {status: [] for status in TaskStatus}
        for task in tasks:
            groups[task.status].append(task)
        return groups

    @staticmethod
    def _load(mapper: TaskMapper, task_id: int) -> TaskDetail:
        return require(mapper.find_by_id_with_details(task_id), f"Task not found: id={task_id}")
