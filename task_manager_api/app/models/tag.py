"""Tag records and the task/tag association."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class Tag(BaseModel):
    id: Optional[int] = None
    name: str
    color: str
    created_at: Optional[datetime] = None

    model_config = {
        "from_attributes": True,
    }


class TaskTag(BaseModel):
    """Link row identified by the (task_id, tag_id) pair."""

    task_id: int
    tag_id: int
    created_at: Optional[datetime] = None
