# tests/test_enums.py

from __future__ import annotations

import pytest

from task_manager_api.app.core.exceptions import ValidationError
from task_manager_api.app.models.enums import Priority, ProjectRole, TaskStatus, parse_enum


def test_parse_enum_accepts_exact_symbol_names() -> None:
    assert parse_enum(TaskStatus, "IN_PROGRESS") is TaskStatus.IN_PROGRESS
    assert parse_enum(Priority, "HIGH") is Priority.HIGH
    assert parse_enum(ProjectRole, "OWNER") is ProjectRole.OWNER


@pytest.mark.parametrize("value", ["todo", "Done", "ARCHIVED", "", None])
def test_parse_enum_rejects_unknown_values(value) -> None:
    with pytest.raises(ValidationError) as exc:
        parse_enum(TaskStatus, value, "status")
    assert exc.value.field == "status"
    assert exc.value.location == "body"
    assert "TODO, IN_PROGRESS, DONE" in exc.value.message


def test_display_metadata() -> None:
    assert [s.rank for s in TaskStatus] == [1, 2, 3]
    assert TaskStatus.DONE.display_name == "Done"
    assert Priority.HIGH.color == "#dc3545"
    assert Priority.LOW.display_name == "Low"
    assert ProjectRole.MEMBER.display_name == "Member"
