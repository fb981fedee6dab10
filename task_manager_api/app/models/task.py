"""Task records."""

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel

from .enums import Priority, TaskStatus


class Task(BaseModel):
    id: Optional[int] = None
    project_id: int
    title: str
    description: Optional[str] = None
    status: TaskStatus = TaskStatus.TODO
    priority: Priority = Priority.MEDIUM
    assignee_id: Optional[int] = None
    due_date: Optional[date] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {
        "from_attributes": True,
    }


class TaskDetail(Task):
    """Task joined with its project name and assignee username.

    Either field is ``None`` when the query did not join that table or
    the referenced row is missing.
    """

    project_name: Optional[str] = None
    assignee_name: Optional[str] = None
