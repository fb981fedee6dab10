"""
Enumerations stored in the database by their symbolic name.

Each enum is a closed set of symbols.  Display metadata (labels,
badge colors, sort ranks) lives in static lookup tables next to the
enum so the persisted value stays the bare symbol.  ``parse_enum`` is
the single entry point for turning request strings into members; it
rejects anything that is not an exact symbol name.
"""

from enum import Enum
from typing import Dict, Optional, Type, TypeVar

from ..core.exceptions import ValidationError


class TaskStatus(str, Enum):
    TODO = "TODO"
    IN_PROGRESS = "IN_PROGRESS"
    DONE = "DONE"

    @property
    def display_name(self) -> str:
        return TASK_STATUS_LABELS[self]

    @property
    def rank(self) -> int:
        """Position of the status on listings and the kanban board."""
        return TASK_STATUS_RANKS[self]


class Priority(str, Enum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"

    @property
    def display_name(self) -> str:
        return PRIORITY_LABELS[self]

    @property
    def color(self) -> str:
        return PRIORITY_COLORS[self]


class ProjectRole(str, Enum):
    OWNER = "OWNER"
    MEMBER = "MEMBER"

    @property
    def display_name(self) -> str:
        return PROJECT_ROLE_LABELS[self]


TASK_STATUS_LABELS: Dict[TaskStatus, str] = {
    TaskStatus.TODO: "Not started",
    TaskStatus.IN_PROGRESS: "In progress",
    TaskStatus.DONE: "Done",
}

# Must match the CASE expression used by TaskMapper ordering.
TASK_STATUS_RANKS: Dict[TaskStatus, int] = {
    TaskStatus.TODO: 1,
    TaskStatus.IN_PROGRESS: 2,
    TaskStatus.DONE: 3,
}

PRIORITY_LABELS: Dict[Priority, str] = {
    Priority.LOW: "Low",
    Priority.MEDIUM: "Medium",
    Priority.HIGH: "High",
}

PRIORITY_COLORS: Dict[Priority, str] = {
    Priority.LOW: "#6c757d",
    Priority.MEDIUM: "#ffc107",
    Priority.HIGH: "#dc3545",
}

PROJECT_ROLE_LABELS: Dict[ProjectRole, str] = {
    ProjectRole.OWNER: "Owner",
    ProjectRole.MEMBER: "Member",
}


E = TypeVar("E", bound=Enum)


def parse_enum(
    enum_cls: Type[E], value: Optional[str], field: Optional[str] = None, location: str = "body"
) -> E:
    """Return the member of ``enum_cls`` named ``value``.

    Matching is exact and case sensitive.  Raises ``ValidationError``
    (carrying ``field`` and ``location``) for ``None`` or any unknown
    name.
    """
    if value is not None and value in enum_cls.__members__:
        return enum_cls[value]
    allowed = ", ".join(enum_cls.__members__)
    raise ValidationError(
        f"Invalid {enum_cls.__name__} '{value}'; expected one of: {allowed}", field=field, location=location
    )
