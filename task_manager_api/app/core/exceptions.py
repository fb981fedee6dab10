"""
Application error types and their HTTP rendering.

Services raise ``NotFoundError`` when an id, username or email does not
resolve to a record and ``ValidationError`` when a value fails domain
coercion (for example an unknown task status).  Both are translated to
JSON responses by the handlers registered in ``register_exception_handlers``.
Database constraint errors (``sqlite3.IntegrityError``) are not handled
here and surface as server errors.
"""

from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse


class NotFoundError(Exception):
    """A requested record does not exist."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(Exception):
    """A request value is not acceptable.

    ``field`` names the offending input so the error can be rendered
    next to the form field that caused it.  ``location`` is the part of
    the request the field came from: ``"body"`` or ``"query"``.
    """

    def __init__(self, message: str, field: Optional[str] = None, location: str = "body") -> None:
        super().__init__(message)
        self.message = message
        self.field = field
        self.location = location


async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": exc.message})


async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    """Render the error in the same per-field shape FastAPI uses for
    request validation failures."""
    loc = [exc.location, exc.field] if exc.field else [exc.location]
    return JSONResponse(
        status_code=422,
        content={"detail": [{"loc": loc, "msg": exc.message, "type": "value_error"}]},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(ValidationError, validation_error_handler)
