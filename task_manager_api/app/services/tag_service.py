"""Business logic for tags and their assignment to tasks."""

import logging
from typing import List

from ..core.db import transaction
from ..core.exceptions import NotFoundError
from ..models.tag import Tag, TaskTag
from ..mappers.tag_mapper import TagMapper, TaskTagMapper
from ..mappers.task_mapper import TaskMapper
from ..schemas.tag import TagCreateRequest
from .base import require

logger = logging.getLogger(__name__)


class TagService:
    """Service for the tag catalogue and task/tag links."""

    @classmethod
    async def create_tag(cls, request: TagCreateRequest) -> Tag:
        """Create a tag; duplicate names are rejected by the database."""
        with transaction() as conn:
            mapper = TagMapper(conn)
            tag_id = mapper.insert(Tag(name=request.name, color=request.color))
            created = mapper.find_by_id(tag_id)
        logger.info("Created tag '%s' id=%s", request.name, tag_id)
        return created

    @classmethod
    async def get_all_tags(cls) -> List[Tag]:
        with transaction() as conn:
            return TagMapper(conn).find_all()

    @classmethod
    async def get_tag_by_id(cls, tag_id: int) -> Tag:
        with transaction() as conn:
            return require(TagMapper(conn).find_by_id(tag_id), f"Tag not found: id={tag_id}")

    @classmethod
    async def get_task_tags(cls, task_id: int) -> List[Tag]:
        """Tags linked to a task, by name."""
        with transaction() as conn:
            return TagMapper(conn).find_by_task_id(task_id)

    @classmethod
    async def attach_tag(cls, task_id: int, tag_id: int) -> TaskTag:
        """Link an existing tag to an existing task and return the link.

        Linking a pair that is already linked raises
        ``sqlite3.IntegrityError``.
        """
        logger.info("Attaching tag id=%s to task id=%s", tag_id, task_id)
        with transaction() as conn:
            require(TaskMapper(conn).find_by_id(task_id), f"Task not found: id={task_id}")
            require(TagMapper(conn).find_by_id(tag_id), f"Tag not found: id={tag_id}")
            mapper = TaskTagMapper(conn)
            mapper.insert(TaskTag(task_id=task_id, tag_id=tag_id))
            return mapper.find(task_id, tag_id)

    @classmethod
    async def detach_tag(cls, task_id: int, tag_id: int) -> None:
        logger.info("Detaching tag id=%s from task id=%s", tag_id, task_id)
        with transaction() as conn:
            mapper = TaskTagMapper(conn)
            if mapper.find(task_id, tag_id) is None:
                raise NotFoundError(f"Tag id={tag_id} is not attached to task id={task_id}")
            mapper.delete(task_id, tag_id)

    @classmethod
    async def delete_tag(cls, tag_id: int) -> None:
        """Delete a tag and unlink it from every task."""
        logger.info("Deleting tag id=%s", tag_id)
        with transaction() as conn:
            mapper = TagMapper(conn)
            require(mapper.find_by_id(tag_id), f"Tag not found: id={tag_id}")
            mapper.delete_by_id(tag_id)
