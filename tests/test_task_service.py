# tests/test_task_service.py

from __future__ import annotations

import asyncio
from datetime import date

import pytest

from task_manager_api.app.core.db import transaction
from task_manager_api.app.core.exceptions import NotFoundError, ValidationError
from task_manager_api.app.models.enums import Priority, TaskStatus
from task_manager_api.app.schemas.task import TaskCreateRequest, TaskSearchCriteria
from task_manager_api.app.services.task_service import TaskService


def _count_tasks() -> int:
    with transaction() as conn:
        return conn.execute("SELECT COUNT(*) FROM tasks").fetchone()[0]


@pytest.mark.asyncio
async def test_create_task_returns_generated_id_and_defaults(make_user, make_project) -> None:
    project = make_project(make_user("alice"), "Website")

    created = await TaskService.create_task(TaskCreateRequest(project_id=project.id, title="Landing page"))

    assert created.id is not None
    assert created.status is TaskStatus.TODO
    assert created.priority is Priority.MEDIUM
    assert created.project_name == "Website"
    assert (await TaskService.get_task_by_id(created.id)).title == "Landing page"


@pytest.mark.asyncio
async def test_create_task_in_missing_project_inserts_nothing(db) -> None:
    with pytest.raises(NotFoundError):
        await TaskService.create_task(TaskCreateRequest(project_id=999, title="Orphan"))
    assert _count_tasks() == 0


@pytest.mark.asyncio
async def test_create_task_with_unknown_status_is_rejected(make_user, make_project) -> None:
    project = make_project(make_user("alice"))

    with pytest.raises(ValidationError) as exc:
        await TaskService.create_task(TaskCreateRequest(project_id=project.id, title="x", status="BLOCKED"))

    assert exc.value.field == "status"
    assert _count_tasks() == 0


@pytest.mark.asyncio
async def test_get_missing_task_raises(db) -> None:
    with pytest.raises(NotFoundError):
        await TaskService.get_task_by_id(42)


@pytest.mark.asyncio
async def test_update_task_status_changes_status_and_timestamp(make_user, make_project) -> None:
    project = make_project(make_user("alice"))
    created = await TaskService.create_task(TaskCreateRequest(project_id=project.id, title="Ship it"))

    await asyncio.sleep(0.01)
    await TaskService.update_task_status(created.id, "DONE")

    updated = await TaskService.get_task_by_id(created.id)
    assert updated.status is TaskStatus.DONE
    assert updated.updated_at > created.updated_at
    assert updated.title == "Ship it"


@pytest.mark.asyncio
async def test_status_may_move_backwards(make_user, make_project) -> None:
    project = make_project(make_user("alice"))
    created = await TaskService.create_task(
        TaskCreateRequest(project_id=project.id, title="Reopen me", status="DONE")
    )

    await TaskService.update_task_status(created.id, "TODO")

    assert (await TaskService.get_task_by_id(created.id)).status is TaskStatus.TODO


@pytest.mark.asyncio
async def test_update_status_of_missing_task_raises(db) -> None:
    with pytest.raises(NotFoundError):
        await TaskService.update_task_status(7, "DONE")


@pytest.mark.asyncio
async def test_update_status_with_unknown_value_leaves_task_untouched(make_user, make_project) -> None:
    project = make_project(make_user("alice"))
    created = await TaskService.create_task(TaskCreateRequest(project_id=project.id, title="t"))

    with pytest.raises(ValidationError):
        await TaskService.update_task_status(created.id, "done")

    assert (await TaskService.get_task_by_id(created.id)).status is TaskStatus.TODO


@pytest.mark.asyncio
async def test_update_task_overwrites_fields_but_keeps_project(make_user, make_project) -> None:
    alice = make_user("alice")
    first = make_project(alice, "First")
    second = make_project(alice, "Second")
    created = await TaskService.create_task(TaskCreateRequest(project_id=first.id, title="Draft"))

    updated = await TaskService.update_task(
        created.id,
        TaskCreateRequest(
            project_id=second.id,
            title="Final",
            description="ready",
            status="IN_PROGRESS",
            priority="HIGH",
            assignee_id=alice.id,
            due_date=date(2026, 12, 24),
        ),
    )

    assert updated.title == "Final"
    assert updated.description == "ready"
    assert updated.status is TaskStatus.IN_PROGRESS
    assert updated.priority is Priority.HIGH
    assert updated.assignee_name == "alice"
    assert updated.due_date == date(2026, 12, 24)
    assert updated.project_id == first.id


@pytest.mark.asyncio
async def test_delete_task(make_user, make_project) -> None:
    project = make_project(make_user("alice"))
    created = await TaskService.create_task(TaskCreateRequest(project_id=project.id, title="Temp"))

    await TaskService.delete_task(created.id)

    with pytest.raises(NotFoundError):
        await TaskService.get_task_by_id(created.id)
    with pytest.raises(NotFoundError):
        await TaskService.delete_task(created.id)


@pytest.mark.asyncio
async def test_project_tasks_follow_status_rank(make_user, make_project) -> None:
    project = make_project(make_user("alice"))
    for title, status in [("c", "DONE"), ("b", "IN_PROGRESS"), ("a", "TODO")]:
        await TaskService.create_task(TaskCreateRequest(project_id=project.id, title=title, status=status))

    tasks = await TaskService.get_project_tasks(project.id)

    assert [task.status.rank for task in tasks] == [1, 2, 3]


@pytest.mark.asyncio
async def test_search_treats_blank_criteria_as_absent(make_user, make_project) -> None:
    project = make_project(make_user("alice"))
    await TaskService.create_task(TaskCreateRequest(project_id=project.id, title="Alpha", priority="LOW"))
    await TaskService.create_task(TaskCreateRequest(project_id=project.id, title="Beta", priority="HIGH"))

    everything = await TaskService.search_tasks(TaskSearchCriteria(status="", priority="", keyword="   "))
    high = await TaskService.search_tasks(TaskSearchCriteria(priority="HIGH"))
    keyword = await TaskService.search_tasks(TaskSearchCriteria(keyword=" alp "))

    assert len(everything) == 2
    assert [task.title for task in high] == ["Beta"]
    assert [task.title for task in keyword] == ["Alpha"]


@pytest.mark.asyncio
async def test_search_rejects_unknown_priority(db) -> None:
    with pytest.raises(ValidationError) as exc:
        await TaskService.search_tasks(TaskSearchCriteria(priority="URGENT"))
    assert exc.value.field == "priority"


@pytest.mark.asyncio
async def test_overdue_tasks_default_to_today(make_user, make_project) -> None:
    alice = make_user("alice")
    project = make_project(alice)
    await TaskService.create_task(
        TaskCreateRequest(project_id=project.id, title="Old", assignee_id=alice.id, due_date=date(2000, 1, 1))
    )
    await TaskService.create_task(
        TaskCreateRequest(project_id=project.id, title="Future", assignee_id=alice.id, due_date=date(2999, 1, 1))
    )

    overdue = await TaskService.get_overdue_tasks(alice.id)

    assert [task.title for task in overdue] == ["Old"]


@pytest.mark.asyncio
async def test_group_by_status_has_every_column(make_user, make_project) -> None:
    project = make_project(make_user("alice"))
    await TaskService.create_task(TaskCreateRequest(project_id=project.id, title="one"))
    await TaskService.create_task(TaskCreateRequest(project_id=project.id, title="two", status="DONE"))

    groups = TaskService.group_by_status(await TaskService.get_project_tasks(project.id))

    assert set(groups) == set(TaskStatus)
    assert [task.title for task in groups[TaskStatus.TODO]] == ["one"]
    assert groups[TaskStatus.IN_PROGRESS] == []
    assert [task.title for task in groups[TaskStatus.DONE]] == ["two"]


@pytest.mark.asyncio
async def test_get_task_round_trips_submitted_fields(make_user, make_project) -> None:
    alice = make_user("alice")
    project = make_project(alice)
    request = TaskCreateRequest(
        project_id=project.id,
        title="Round trip",
        description="all fields",
        status="IN_PROGRESS",
        priority="LOW",
        assignee_id=alice.id,
        due_date=date(2026, 7, 4),
    )

    created = await TaskService.create_task(request)
    loaded = await TaskService.get_task_by_id(created.id)

    assert loaded.project_id == request.project_id
    assert loaded.title == request.title
    assert loaded.description == request.description
    assert loaded.status.name == request.status
    assert loaded.priority.name == request.priority
    assert loaded.assignee_id == request.assignee_id
    assert loaded.due_date == request.due_date


@pytest.mark.asyncio
async def test_active_task_stays_ahead_of_finished_task(make_user, make_project) -> None:
    project = make_project(make_user("alice"))
    t1 = await TaskService.create_task(
        TaskCreateRequest(project_id=project.id, title="T1", status="TODO", priority="HIGH")
    )
    t2 = await TaskService.create_task(TaskCreateRequest(project_id=project.id, title="T2", status="DONE"))

    assert [task.id for task in await TaskService.get_project_tasks(project.id)] == [t1.id, t2.id]

    await TaskService.update_task_status(t1.id, "IN_PROGRESS")

    tasks = await TaskService.get_project_tasks(project.id)
    assert [task.id for task in tasks] == [t1.id, t2.id]
    assert tasks[0].status is TaskStatus.IN_PROGRESS


@pytest.mark.asyncio
async def test_search_keyword_underscore_is_not_a_wildcard(make_user, make_project) -> None:
    project = make_project(make_user("alice"))
    await TaskService.create_task(TaskCreateRequest(project_id=project.id, title="axb"))
    await TaskService.create_task(TaskCreateRequest(project_id=project.id, title="plain"))

    assert await TaskService.search_tasks(TaskSearchCriteria(keyword="a_b")) == []
    assert await TaskService.search_tasks(TaskSearchCriteria(keyword="%")) == []
