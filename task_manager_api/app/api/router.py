"""
Top-level router.

Everything except registration and login requires a bearer token, so
the authentication dependency is attached here rather than repeated on
every route.  Handlers that need the caller's username declare the
same dependency again; FastAPI resolves it once per request.
"""

from fastapi import APIRouter, Depends

from ..core.security import get_current_username
from .endpoints import comments, projects, tags, tasks, users

router = APIRouter()

authenticated = [Depends(get_current_username)]

router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(projects.router, tags=["projects"], dependencies=authenticated)
router.include_router(tasks.router, tags=["tasks"], dependencies=authenticated)
router.include_router(comments.router, tags=["comments"], dependencies=authenticated)
router.include_router(tags.router, tags=["tags"], dependencies=authenticated)
