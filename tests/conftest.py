# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from typing import Callable, Optional

import pytest
from fastapi.testclient import TestClient

from task_manager_api.app.core.config import settings
from task_manager_api.app.core.db import init_db, transaction
from task_manager_api.app.core.security import hash_password
from task_manager_api.app.mappers.project_mapper import ProjectMapper
from task_manager_api.app.mappers.user_mapper import UserMapper
from task_manager_api.app.models.project import Project
from task_manager_api.app.models.user import User

PASSWORD = "secret-pass"


@pytest.fixture()
def db(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Fresh, migrated SQLite file per test."""
    path = tmp_path / "tasks.sqlite3"
    monkeypatch.setattr(settings, "database_url", str(path))
    init_db()
    return path


@pytest.fixture()
def make_user(db: Path) -> Callable[..., User]:
    def _make(username: str = "alice", email: Optional[str] = None, name: Optional[str] = None) -> User:
        with transaction() as conn:
            mapper = UserMapper(conn)
            user_id = mapper.insert(
                User(
                    username=username,
                    email=email or f"{username}@example.com",
                    password=hash_password(PASSWORD),
                    name=name or username.title(),
                )
            )
            return mapper.find_by_id(user_id)

    return _make


@pytest.fixture()
def make_project(db: Path) -> Callable[..., Project]:
    def _make(owner: User, name: str = "Website") -> Project:
        with transaction() as conn:
            mapper = ProjectMapper(conn)
            project_id = mapper.insert(Project(name=name, description=f"{name} project", owner_id=owner.id))
            return mapper.find_by_id(project_id)

    return _make


@pytest.fixture()
def client(db: Path) -> TestClient:
    from task_manager_api.app.main import app

    return TestClient(app)


@pytest.fixture()
def auth_headers(client: TestClient, make_user: Callable[..., User]) -> dict[str, str]:
    make_user("alice")
    resp = client.post("/users/login", json={"username": "alice", "password": PASSWORD})
    assert resp.status_code == 200
    return {"Authorization": f"Bearer {resp.json()['access_token']}"}
