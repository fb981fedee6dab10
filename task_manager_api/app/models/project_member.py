"""Project membership records."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from .enums import ProjectRole


class ProjectMember(BaseModel):
    id: Optional[int] = None
    project_id: int
    user_id: int
    role: ProjectRole = ProjectRole.MEMBER
    joined_at: Optional[datetime] = None

    model_config = {
        "from_attributes": True,
    }


class ProjectMemberDetail(ProjectMember):
    """Membership joined with the member's username and display name."""

    username: Optional[str] = None
    user_name: Optional[str] = None
