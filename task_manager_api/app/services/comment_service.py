"""Business logic for task comments."""

import logging
from typing import List

from ..core.db import transaction
from ..models.comment import Comment, CommentDetail
from ..mappers.comment_mapper import CommentMapper
from ..mappers.task_mapper import TaskMapper
from ..mappers.user_mapper import UserMapper
from ..schemas.comment import CommentRequest
from .base import require

logger = logging.getLogger(__name__)


class CommentService:
    """Service for adding, editing and removing comments on tasks."""

    @classmethod
    async def add_comment(cls, task_id: int, username: str, request: CommentRequest) -> Comment:
        """Attach a comment written by ``username`` to a task.

        The task and the user must both exist (``NotFoundError``).
        """
        with transaction() as conn:
            require(TaskMapper(conn).find_by_id(task_id), f"Task not found: id={task_id}")
            user = require(UserMapper(conn).find_by_username(username), f"User not found: {username}")
            mapper = CommentMapper(conn)
            comment_id = mapper.insert(Comment(task_id=task_id, user_id=user.id, content=request.content))
            created = mapper.find_by_id(comment_id)
        logger.info("User %s commented on task id=%s (comment id=%s)", username, task_id, comment_id)
        return created

    @classmethod
    async def get_comment_by_id(cls, comment_id: int) -> Comment:
        with transaction() as conn:
            return cls._load(CommentMapper(conn), comment_id)

    @classmethod
    async def get_task_comments(cls, task_id: int) -> List[CommentDetail]:
        """Comments on a task, newest first."""
        with transaction() as conn:
            return CommentMapper(conn).find_by_task_id(task_id)

    @classmethod
    async def update_comment(cls, comment_id: int, request: CommentRequest) -> Comment:
        logger.info("Updating comment id=%s", comment_id)
        with transaction() as conn:
            mapper = CommentMapper(conn)
            comment = cls._load(mapper, comment_id)
            comment.content = request.content
            mapper.update(comment)
            return mapper.find_by_id(comment_id)

    @classmethod
    async def delete_comment(cls, comment_id: int) -> Comment:
        """Delete a comment and return the removed record."""
        logger.info("Deleting comment id=%s", comment_id)
        with transaction() as conn:
            mapper = CommentMapper(conn)
            comment = cls._load(mapper, comment_id)
            mapper.delete_by_id(comment_id)
        return comment

    @staticmethod
    def _load(mapper: CommentMapper, comment_id: int) -> Comment:
        return require(mapper.find_by_id(comment_id), f"Comment not found: id={comment_id}")
