# tests/test_project_service.py

from __future__ import annotations

import sqlite3

import pytest

from task_manager_api.app.core.db import transaction
from task_manager_api.app.core.exceptions import NotFoundError, ValidationError
from task_manager_api.app.models.enums import ProjectRole
from task_manager_api.app.schemas.project import ProjectCreateRequest
from task_manager_api.app.schemas.task import TaskCreateRequest
from task_manager_api.app.services.project_service import ProjectService
from task_manager_api.app.services.task_service import TaskService


@pytest.mark.asyncio
async def test_create_project_is_owned_by_caller(make_user) -> None:
    alice = make_user("alice")

    created = await ProjectService.create_project(ProjectCreateRequest(name="Website"), "alice")

    assert created.id is not None
    assert created.owner_id == alice.id
    assert created.owner_name == "alice"


@pytest.mark.asyncio
async def test_create_project_for_unknown_user_inserts_nothing(db) -> None:
    with pytest.raises(NotFoundError):
        await ProjectService.create_project(ProjectCreateRequest(name="Ghost"), "nobody")
    with transaction() as conn:
        assert conn.execute("SELECT COUNT(*) FROM projects").fetchone()[0] == 0


@pytest.mark.asyncio
async def test_user_projects_newest_first(make_user) -> None:
    make_user("alice")
    await ProjectService.create_project(ProjectCreateRequest(name="Older"), "alice")
    await ProjectService.create_project(ProjectCreateRequest(name="Newer"), "alice")

    projects = await ProjectService.get_user_projects("alice")

    assert [project.name for project in projects] == ["Newer", "Older"]


@pytest.mark.asyncio
async def test_update_project(make_user) -> None:
    make_user("alice")
    created = await ProjectService.create_project(ProjectCreateRequest(name="Draft"), "alice")

    updated = await ProjectService.update_project(
        created.id, ProjectCreateRequest(name="Final", description="Now with text")
    )

    assert updated.name == "Final"
    assert updated.description == "Now with text"


@pytest.mark.asyncio
async def test_delete_project_removes_its_tasks(make_user) -> None:
    make_user("alice")
    project = await ProjectService.create_project(ProjectCreateRequest(name="Doomed"), "alice")
    task = await TaskService.create_task(TaskCreateRequest(project_id=project.id, title="Gone too"))

    await ProjectService.delete_project(project.id)

    with pytest.raises(NotFoundError):
        await ProjectService.get_project_by_id(project.id)
    with pytest.raises(NotFoundError):
        await TaskService.get_task_by_id(task.id)


@pytest.mark.asyncio
async def test_members_can_be_added_listed_and_removed(make_user) -> None:
    make_user("alice")
    bob = make_user("bob")
    project = await ProjectService.create_project(ProjectCreateRequest(name="Team"), "alice")

    member = await ProjectService.add_member(project.id, "bob")
    assert member.id is not None
    assert member.role is ProjectRole.MEMBER

    members = await ProjectService.get_project_members(project.id)
    assert [m.username for m in members] == ["bob"]
    assert [p.name for p in await ProjectService.get_user_projects("bob")] == ["Team"]

    await ProjectService.remove_member(project.id, bob.id)
    assert await ProjectService.get_project_members(project.id) == []
    with pytest.raises(NotFoundError):
        await ProjectService.remove_member(project.id, bob.id)


@pytest.mark.asyncio
async def test_add_member_rejects_unknown_role_and_user(make_user) -> None:
    make_user("alice")
    project = await ProjectService.create_project(ProjectCreateRequest(name="Team"), "alice")

    with pytest.raises(ValidationError):
        await ProjectService.add_member(project.id, "alice", "ADMIN")
    with pytest.raises(NotFoundError):
        await ProjectService.add_member(project.id, "nobody")
    with pytest.raises(NotFoundError):
        await ProjectService.add_member(999, "alice")


@pytest.mark.asyncio
async def test_adding_a_member_twice_is_rejected_by_the_store(make_user) -> None:
    make_user("alice")
    make_user("bob")
    project = await ProjectService.create_project(ProjectCreateRequest(name="Team"), "alice")
    await ProjectService.add_member(project.id, "bob")

    with pytest.raises(sqlite3.IntegrityError):
        await ProjectService.add_member(project.id, "bob", "OWNER")
    assert len(await ProjectService.get_project_members(project.id)) == 1
