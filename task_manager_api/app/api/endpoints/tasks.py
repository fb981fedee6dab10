"""
Task endpoints.

Screens (list, kanban board, detail, forms) are returned as JSON
documents.  Form submissions redirect to the task page; the status
change used by the kanban board answers with a small JSON
acknowledgement instead.

Static paths (``/tasks/kanban``, ``/tasks/new``, ``/tasks/overdue``) are
declared before ``/tasks/{task_id}`` so they are matched first.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import RedirectResponse

from ...core.security import get_current_username
from ...models.enums import TASK_STATUS_LABELS, TaskStatus
from ...models.task import TaskDetail
from ...schemas.common import OperationResult
from ...schemas.task import (
    KanbanBoard,
    TaskCreateRequest,
    TaskForm,
    TaskFormPage,
    TaskListPage,
    TaskPage,
    TaskSearchCriteria,
)
from ...schemas.user import UserRead
from ...services.comment_service import CommentService
from ...services.project_service import ProjectService
from ...services.tag_service import TagService
from ...services.task_service import TaskService
from ...services.user_service import UserService
from ..responses import see_other

router = APIRouter()


async def _all_users() -> List[UserRead]:
    return [UserRead.model_validate(user) for user in await UserService.get_all_users()]


@router.get("/tasks", response_model=TaskListPage, summary="Search tasks")
async def list_tasks(
    project_id: Optional[int] = Query(None, alias="projectId"),
    status: Optional[str] = Query(None, description="TODO, IN_PROGRESS or DONE"),
    priority: Optional[str] = Query(None, description="LOW, MEDIUM or HIGH"),
    keyword: Optional[str] = Query(None, description="Substring of title or description"),
    username: str = Depends(get_current_username),
) -> TaskListPage:
    """Return tasks matching every supplied filter, plus the caller's
    projects for the filter drop-down."""
    criteria = TaskSearchCriteria(project_id=project_id, status=status, priority=priority, keyword=keyword)
    return TaskListPage(
        tasks=await TaskService.search_tasks(criteria),
        projects=await ProjectService.get_user_projects(username),
        criteria=criteria,
    )


@router.get("/tasks/kanban", response_model=KanbanBoard, summary="Kanban board of a project")
async def kanban_board(project_id: int = Query(..., alias="projectId")) -> KanbanBoard:
    project = await ProjectService.get_project_by_id(project_id)
    groups = TaskService.group_by_status(await TaskService.get_project_tasks(project_id))
    return KanbanBoard(
        project=project,
        todo_tasks=groups[TaskStatus.TODO],
        in_progress_tasks=groups[TaskStatus.IN_PROGRESS],
        done_tasks=groups[TaskStatus.DONE],
        status_labels={status.name: label for status, label in TASK_STATUS_LABELS.items()},
    )


@router.get("/tasks/new", response_model=TaskFormPage, summary="Empty task form")
async def new_task_form(project_id: int = Query(..., alias="projectId")) -> TaskFormPage:
    return TaskFormPage(
        task=TaskForm(project_id=project_id),
        project=await ProjectService.get_project_by_id(project_id),
        users=await _all_users(),
    )


@router.get("/tasks/overdue", response_model=List[TaskDetail], summary="Caller's overdue tasks")
async def overdue_tasks(username: str = Depends(get_current_username)) -> List[TaskDetail]:
    """Unfinished tasks assigned to the caller whose due date has passed."""
    user = await UserService.get_user_by_username(username)
    return await TaskService.get_overdue_tasks(user.id)


@router.post("/tasks", response_class=RedirectResponse, status_code=303, summary="Create a task")
async def create_task(request: TaskCreateRequest) -> RedirectResponse:
    created = await TaskService.create_task(request)
    return see_other(f"/tasks/{created.id}")


@router.get("/tasks/{task_id}", response_model=TaskPage, summary="Task detail")
async def task_detail(task_id: int) -> TaskPage:
    task = await TaskService.get_task_by_id(task_id)
    return TaskPage(
        task=task,
        status_label=task.status.display_name,
        priority_label=task.priority.display_name,
        priority_color=task.priority.color,
        tags=await TagService.get_task_tags(task_id),
        comments=await CommentService.get_task_comments(task_id),
    )


@router.get("/tasks/{task_id}/edit", response_model=TaskFormPage, summary="Task form filled from a task")
async def edit_task_form(task_id: int) -> TaskFormPage:
    task = await TaskService.get_task_by_id(task_id)
    form = TaskForm(
        project_id=task.project_id,
        title=task.title,
        description=task.description,
        status=task.status.name,
        priority=task.priority.name,
        assignee_id=task.assignee_id,
        due_date=task.due_date,
    )
    return TaskFormPage(
        task=form,
        task_id=task_id,
        project=await ProjectService.get_project_by_id(task.project_id),
        users=await _all_users(),
    )


@router.post("/tasks/{task_id}", response_class=RedirectResponse, status_code=303, summary="Update a task")
async def update_task(task_id: int, request: TaskCreateRequest) -> RedirectResponse:
    await TaskService.update_task(task_id, request)
    return see_other(f"/tasks/{task_id}")


@router.post("/tasks/{task_id}/status", response_model=OperationResult, summary="Change task status")
async def update_task_status(task_id: int, status: str = Query(...)) -> OperationResult:
    """Used by the kanban board when a card is dropped on another column."""
    await TaskService.update_task_status(task_id, status)
    return OperationResult(success=True, message="Status updated")


@router.post("/tasks/{task_id}/delete", response_class=RedirectResponse, status_code=303, summary="Delete a task")
async def delete_task(task_id: int) -> RedirectResponse:
    task = await TaskService.get_task_by_id(task_id)
    await TaskService.delete_task(task_id)
    return see_other(f"/projects/{task.project_id}")
