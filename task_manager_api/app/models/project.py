"""Project records."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class Project(BaseModel):
    id: Optional[int] = None
    name: str
    description: Optional[str] = None
    owner_id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {
        "from_attributes": True,
    }


class ProjectDetail(Project):
    """Project joined with its owner's username."""

    owner_name: Optional[str] = None
