"""Shared test fixtures for todolist tests.

Provides:
- MockContext for isolating tests from global settings and TODOLIST_* env vars
- A fresh TaskStore per test
- A Flask app and test client bound to that store
"""

import os
from pathlib import Path
from typing import Callable, Generator

import pytest
from flask import Flask
from flask.testing import FlaskClient

from todolist.config import BaseSettings, set_settings
from todolist.tasks import Task, TaskStore
from todolist.web import create_app


class MockContext:
    """Context manager for isolating tests from global state.

    Handles:
    - Clearing TODOLIST_* environment variables
    - Running from a temporary working directory (no project JSON config)
    - Resetting the global settings singleton on exit

    Usage:
        with MockContext(tmp_path, port=9000) as ctx:
            assert ctx.settings.port == 9000
    """

    def __init__(self, workdir: Path, **settings_kwargs):
        self._workdir = workdir
        self._settings_kwargs = settings_kwargs
        self._settings: BaseSettings | None = None
        self._original_env: dict[str, str] = {}
        self._original_cwd: Path | None = None

    def __enter__(self) -> "MockContext":
        self._original_cwd = Path.cwd()
        os.chdir(self._workdir)

        for var in list(os.environ):
            if var.startswith("TODOLIST_"):
                self._original_env[var] = os.environ.pop(var)

        self._settings = BaseSettings(**self._settings_kwargs)
        set_settings(self._settings)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        for var in list(os.environ):
            if var.startswith("TODOLIST_"):
                del os.environ[var]
        os.environ.update(self._original_env)

        if self._original_cwd is not None:
            os.chdir(self._original_cwd)

        set_settings(None)

    @property
    def settings(self) -> BaseSettings:
        """Get the test settings instance."""
        if self._settings is None:
            raise RuntimeError("MockContext not entered")
        return self._settings


@pytest.fixture
def mock_context(tmp_path: Path) -> Generator[MockContext, None, None]:
    """Fixture providing an isolated settings context."""
    with MockContext(tmp_path) as ctx:
        yield ctx


@pytest.fixture
def store() -> TaskStore:
    """Fixture providing an empty task store."""
    return TaskStore()


@pytest.fixture
def app(mock_context: MockContext, store: TaskStore) -> Flask:
    """Fixture providing an app bound to the test store."""
    app = create_app(mock_context.settings, store)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app: Flask) -> FlaskClient:
    """Fixture providing a Flask test client."""
    return app.test_client()


@pytest.fixture
def seed(store: TaskStore) -> Callable[..., list[Task]]:
    """Fixture appending (description, status) pairs to the test store.

    Returns the renumbered list after seeding.
    """

    def _seed(*tasks: tuple[str, str]) -> list[Task]:
        for description, status in tasks:
            store.append(description, status)
        return store.list_tasks()

    return _seed
