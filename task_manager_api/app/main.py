"""
Main entrypoint for the Task Manager API.

This module assembles the FastAPI application: it sets up logging,
registers the error handlers that turn ``NotFoundError`` and
``ValidationError`` into 404/422 responses, and includes the routers.
``create_app`` builds the app, which is instantiated at import time as
``app`` so it can be served with::

    uvicorn task_manager_api.app.main:app --reload
"""

from fastapi import FastAPI

from .api.router import router
from .core.config import settings
from .core.db import init_db
from .core.exceptions import register_exception_handlers
from .core.logging_config import setup_logging


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured FastAPI instance whose startup hook applies
        pending database migrations.
    """
    # Configure logging before the app emits its first records.
    setup_logging(settings.log_level, settings.log_file, debug_sql=settings.debug)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    register_exception_handlers(app)
    app.include_router(router)

    @app.on_event("startup")
    async def startup_event() -> None:
        # Creates the database file on first run.
        init_db()

    return app


app = create_app()
