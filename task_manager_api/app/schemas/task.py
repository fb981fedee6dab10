"""
Pydantic models for task requests and task screens.

``status`` and ``priority`` are accepted as their symbolic names
(``"TODO"``, ``"HIGH"``...).  Unknown names are rejected by the task
service with a per-field validation error before anything is written.
"""

from datetime import date
from typing import Dict, List, Optional

from pydantic import BaseModel, Field, field_validator

from ..models.comment import CommentDetail
from ..models.project import ProjectDetail
from ..models.tag import Tag
from ..models.task import TaskDetail
from .user import UserRead


class TaskForm(BaseModel):
    """Values shown in the task form; blank when creating."""

    project_id: int
    title: str = ""
    description: Optional[str] = None
    status: str = "TODO"
    priority: str = "MEDIUM"
    assignee_id: Optional[int] = None
    due_date: Optional[date] = None


class TaskCreateRequest(TaskForm):
    """Schema for creating or editing a task.

    ``project_id`` is only honoured on creation; a task never moves
    between projects.
    """

    title: str = Field(..., max_length=200)
    description: Optional[str] = Field(None, max_length=2000)

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Title is required")
        return value


class TaskSearchCriteria(BaseModel):
    """Filters for task search; every field left as ``None`` is ignored."""

    project_id: Optional[int] = None
    status: Optional[str] = None
    priority: Optional[str] = None
    keyword: Optional[str] = None


class TaskListPage(BaseModel):
    tasks: List[TaskDetail]
    projects: List[ProjectDetail]
    criteria: TaskSearchCriteria


class KanbanBoard(BaseModel):
    project: ProjectDetail
    todo_tasks: List[TaskDetail]
    in_progress_tasks: List[TaskDetail]
    done_tasks: List[TaskDetail]
    status_labels: Dict[str, str]


class TaskFormPage(BaseModel):
    """Data for the create/edit form; ``task_id`` is set when editing."""

    task: TaskForm
    task_id: Optional[int] = None
    project: ProjectDetail
    users: List[UserRead]


class TaskPage(BaseModel):
    task: TaskDetail
    status_label: str
    priority_label: str
    priority_color: str
    tags: List[Tag]
    comments: List[CommentDetail]
