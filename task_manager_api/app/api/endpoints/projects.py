"""
Project endpoints.

The project list shows projects the caller owns or belongs to.  New
projects are owned by the caller.  Membership is managed from the
project page.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import RedirectResponse

from ...core.security import get_current_username
from ...schemas.project import (
    MemberAddRequest,
    ProjectCreateRequest,
    ProjectForm,
    ProjectFormPage,
    ProjectListPage,
    ProjectPage,
)
from ...services.project_service import ProjectService
from ...services.task_service import TaskService
from ..responses import see_other

router = APIRouter()


@router.get("/projects", response_model=ProjectListPage, summary="Caller's projects")
async def list_projects(username: str = Depends(get_current_username)) -> ProjectListPage:
    return ProjectListPage(projects=await ProjectService.get_user_projects(username))


@router.get("/projects/new", response_model=ProjectFormPage, summary="Empty project form")
async def new_project_form() -> ProjectFormPage:
    return ProjectFormPage(project=ProjectForm())


@router.post("/projects", response_class=RedirectResponse, status_code=303, summary="Create a project")
async def create_project(
    request: ProjectCreateRequest,
    username: str = Depends(get_current_username),
) -> RedirectResponse:
    created = await ProjectService.create_project(request, username)
    return see_other(f"/projects/{created.id}")


@router.get("/projects/{project_id}", response_model=ProjectPage, summary="Project detail")
async def project_detail(project_id: int) -> ProjectPage:
    """Project with its tasks (status-rank order) and members."""
    return ProjectPage(
        project=await ProjectService.get_project_by_id(project_id),
        tasks=await TaskService.get_project_tasks(project_id),
        members=await ProjectService.get_project_members(project_id),
    )


@router.post("/projects/{project_id}", response_class=RedirectResponse, status_code=303, summary="Update a project")
async def update_project(project_id: int, request: ProjectCreateRequest) -> RedirectResponse:
    await ProjectService.update_project(project_id, request)
    return see_other(f"/projects/{project_id}")


@router.post("/projects/{project_id}/delete", response_class=RedirectResponse, status_code=303, summary="Delete a project")
async def delete_project(project_id: int) -> RedirectResponse:
    await ProjectService.delete_project(project_id)
    return see_other("/projects")


@router.post("/projects/{project_id}/members", response_class=RedirectResponse, status_code=303, summary="Add a member")
async def add_member(project_id: int, request: MemberAddRequest) -> RedirectResponse:
    await ProjectService.add_member(project_id, request.username, request.role)
    return see_other(f"/projects/{project_id}")


@router.post(
    "/projects/{project_id}/members/{user_id}/delete",
    response_class=RedirectResponse,
    status_code=303,
    summary="Remove a member",
)
async def remove_member(project_id: int, user_id: int) -> RedirectResponse:
    await ProjectService.remove_member(project_id, user_id)
    return see_other(f"/projects/{project_id}")
