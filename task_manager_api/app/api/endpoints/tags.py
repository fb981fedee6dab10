"""
Tag endpoints.

Tags form one global catalogue; any tag can be attached to any task.
"""

from typing import List

from fastapi import APIRouter
from fastapi.responses import RedirectResponse

from ...models.tag import Tag
from ...schemas.tag import TagCreateRequest, TaskTagRequest
from ...services.tag_service import TagService
from ..responses import see_other

router = APIRouter()


@router.get("/tags", response_model=List[Tag], summary="All tags by name")
async def list_tags() -> List[Tag]:
    return await TagService.get_all_tags()


@router.post("/tags", response_class=RedirectResponse, status_code=303, summary="Create a tag")
async def create_tag(request: TagCreateRequest) -> RedirectResponse:
    await TagService.create_tag(request)
    return see_other("/tags")


@router.post("/tags/{tag_id}/delete", response_class=RedirectResponse, status_code=303, summary="Delete a tag")
async def delete_tag(tag_id: int) -> RedirectResponse:
    await TagService.delete_tag(tag_id)
    return see_other("/tags")


@router.post("/tasks/{task_id}/tags", response_class=RedirectResponse, status_code=303, summary="Attach a tag")
async def attach_tag(task_id: int, request: TaskTagRequest) -> RedirectResponse:
    await TagService.attach_tag(task_id, request.tag_id)
    return see_other(f"/tasks/{task_id}")


@router.post(
    "/tasks/{task_id}/tags/{tag_id}/delete",
    response_class=RedirectResponse,
    status_code=303,
    summary="Detach a tag",
)
async def detach_tag(task_id: int, tag_id: int) -> RedirectResponse:
    await TagService.detach_tag(task_id, tag_id)
    return see_other(f"/tasks/{task_id}")
