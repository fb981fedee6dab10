"""Comment records."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class Comment(BaseModel):
    id: Optional[int] = None
    task_id: int
    user_id: int
    content: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {
        "from_attributes": True,
    }


class CommentDetail(Comment):
    """Comment joined with the author's username and display name."""

    username: Optional[str] = None
    user_name: Optional[str] = None
