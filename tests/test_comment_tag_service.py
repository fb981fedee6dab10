# tests/test_comment_tag_service.py

from __future__ import annotations

import sqlite3

import pytest

from task_manager_api.app.core.db import transaction
from task_manager_api.app.core.exceptions import NotFoundError
from task_manager_api.app.mappers.task_mapper import TaskMapper
from task_manager_api.app.models.task import Task
from task_manager_api.app.schemas.comment import CommentRequest
from task_manager_api.app.schemas.tag import TagCreateRequest
from task_manager_api.app.services.comment_service import CommentService
from task_manager_api.app.services.tag_service import TagService
from task_manager_api.app.services.task_service import TaskService


@pytest.fixture()
def task(make_user, make_project) -> Task:
    project = make_project(make_user("alice"))
    with transaction() as conn:
        mapper = TaskMapper(conn)
        return mapper.find_by_id(mapper.insert(Task(project_id=project.id, title="Discuss")))


@pytest.mark.asyncio
async def test_comment_lifecycle(task) -> None:
    first = await CommentService.add_comment(task.id, "alice", CommentRequest(content="Looks good"))
    second = await CommentService.add_comment(task.id, "alice", CommentRequest(content="Merged"))

    comments = await CommentService.get_task_comments(task.id)
    assert [c.id for c in comments] == [second.id, first.id]
    assert comments[0].username == "alice"

    edited = await CommentService.update_comment(first.id, CommentRequest(content="Looks great"))
    assert edited.content == "Looks great"
    assert edited.task_id == task.id

    removed = await CommentService.delete_comment(second.id)
    assert removed.task_id == task.id
    with pytest.raises(NotFoundError):
        await CommentService.get_comment_by_id(second.id)


@pytest.mark.asyncio
async def test_comment_requires_task_and_user(task) -> None:
    with pytest.raises(NotFoundError):
        await CommentService.add_comment(999, "alice", CommentRequest(content="?"))
    with pytest.raises(NotFoundError):
        await CommentService.add_comment(task.id, "nobody", CommentRequest(content="?"))
    assert await CommentService.get_task_comments(task.id) == []


@pytest.mark.asyncio
async def test_comments_are_removed_with_their_task(task) -> None:
    comment = await CommentService.add_comment(task.id, "alice", CommentRequest(content="bye"))

    await TaskService.delete_task(task.id)

    with pytest.raises(NotFoundError):
        await CommentService.get_comment_by_id(comment.id)


@pytest.mark.asyncio
async def test_tag_catalogue_and_links(task) -> None:
    urgent = await TagService.create_tag(TagCreateRequest(name="urgent", color="#ff0000"))
    docs = await TagService.create_tag(TagCreateRequest(name="docs"))
    assert docs.color == "#6c757d"
    assert [t.name for t in await TagService.get_all_tags()] == ["docs", "urgent"]

    link = await TagService.attach_tag(task.id, urgent.id)
    assert (link.task_id, link.tag_id) == (task.id, urgent.id)
    await TagService.attach_tag(task.id, docs.id)
    assert [t.name for t in await TagService.get_task_tags(task.id)] == ["docs", "urgent"]

    await TagService.detach_tag(task.id, urgent.id)
    assert [t.name for t in await TagService.get_task_tags(task.id)] == ["docs"]
    with pytest.raises(NotFoundError):
        await TagService.detach_tag(task.id, urgent.id)

    await TagService.delete_tag(docs.id)
    assert await TagService.get_task_tags(task.id) == []
    with pytest.raises(NotFoundError):
        await TagService.get_tag_by_id(docs.id)


@pytest.mark.asyncio
async def test_attach_tag_validation(task) -> None:
    tag = await TagService.create_tag(TagCreateRequest(name="dup"))

    with pytest.raises(NotFoundError):
        await TagService.attach_tag(task.id, 999)
    with pytest.raises(NotFoundError):
        await TagService.attach_tag(999, tag.id)

    await TagService.attach_tag(task.id, tag.id)
    with pytest.raises(sqlite3.IntegrityError):
        await TagService.attach_tag(task.id, tag.id)


@pytest.mark.asyncio
async def test_duplicate_tag_name_is_rejected(db) -> None:
    await TagService.create_tag(TagCreateRequest(name="same"))
    with pytest.raises(sqlite3.IntegrityError):
        await TagService.create_tag(TagCreateRequest(name="same"))
