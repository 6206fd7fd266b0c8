# backend/tests/conftest.py

from __future__ import annotations

import pytest

from taskboard import create_app
from taskboard.modules.tasks.store import TaskStore


@pytest.fixture()
def store() -> TaskStore:
    return TaskStore()


@pytest.fixture()
def app(store: TaskStore):
    """App wired with a fresh store per test."""
    return create_app(task_store=store, config={"TESTING": True})


@pytest.fixture()
def client(app):
    return app.test_client()
