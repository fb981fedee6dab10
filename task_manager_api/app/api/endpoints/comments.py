"""
Comment endpoints.

Comments are written as the authenticated caller.  Every action sends
the browser back to the task the comment belongs to.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import RedirectResponse

from ...core.security import get_current_username
from ...schemas.comment import CommentRequest
from ...services.comment_service import CommentService
from ..responses import see_other

router = APIRouter()


@router.post("/tasks/{task_id}/comments", response_class=RedirectResponse, status_code=303, summary="Comment on a task")
async def add_comment(
    task_id: int,
    request: CommentRequest,
    username: str = Depends(get_current_username),
) -> RedirectResponse:
    await CommentService.add_comment(task_id, username, request)
    return see_other(f"/tasks/{task_id}")


@router.post("/comments/{comment_id}", response_class=RedirectResponse, status_code=303, summary="Edit a comment")
async def update_comment(comment_id: int, request: CommentRequest) -> RedirectResponse:
    comment = await CommentService.update_comment(comment_id, request)
    return see_other(f"/tasks/{comment.task_id}")


@router.post("/comments/{comment_id}/delete", response_class=RedirectResponse, status_code=303, summary="Delete a comment")
async def delete_comment(comment_id: int) -> RedirectResponse:
    comment = await CommentService.delete_comment(comment_id)
    return see_other(f"/tasks/{comment.task_id}")
