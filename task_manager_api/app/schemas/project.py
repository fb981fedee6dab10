"""
Pydantic models for projects and their members.

``ProjectCreateRequest`` is used for both creation and edits; the owner
is never taken from the payload but from the authenticated caller.
"""

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from ..models.project import ProjectDetail
from ..models.project_member import ProjectMemberDetail
from ..models.task import TaskDetail


class ProjectForm(BaseModel):
    name: str = ""
    description: Optional[str] = None


class ProjectCreateRequest(ProjectForm):
    name: str = Field(..., max_length=100)
    description: Optional[str] = Field(None, max_length=2000)

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Project name is required")
        return value


class MemberAddRequest(BaseModel):
    username: str
    # Symbolic ProjectRole name; checked by ProjectService.
    role: str = "MEMBER"


class ProjectFormPage(BaseModel):
    project: ProjectForm


class ProjectListPage(BaseModel):
    projects: List[ProjectDetail]


class ProjectPage(BaseModel):
    """Everything the project detail screen shows."""

    project: ProjectDetail
    tasks: List[TaskDetail]
    members: List[ProjectMemberDetail]
