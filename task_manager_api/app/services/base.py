"""Helpers shared by the services."""

from typing import Optional, TypeVar

from ..core.exceptions import NotFoundError

T = TypeVar("T")


def require(record: Optional[T], message: str) -> T:
    """Return ``record`` or raise ``NotFoundError(message)`` when it is ``None``.

    Used as ``require(mapper.find_by_id(x), "Task not found: id=x")`` by
    every service method that reads a single record or mutates one.
    """
    if record is None:
        raise NotFoundError(message)
    return record
