"""Shared pytest fixtures."""

import pytest

from app.logging.context import clear_log_context
from app.persistence import close_database, init_database

ENV_VARS = ("DATABASE_URL", "LOG_LEVEL", "CAREERPATH_USER_ID", "ENVIRONMENT")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Isolate tests from the developer's environment variables."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def clean_log_context():
    clear_log_context()
    yield
    clear_log_context()


@pytest.fixture
def mock_env_vars(monkeypatch, tmp_path):
    """Set a complete, valid environment."""
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{tmp_path / 'env.db'}")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("CAREERPATH_USER_ID", "user-123")
    monkeypatch.setenv("ENVIRONMENT", "test")


@pytest.fixture
def database(tmp_path):
    """Initialize a throwaway SQLite database for the test."""
    db_url = f"sqlite:///{tmp_path / 'test.db'}"
    init_database(db_url)
    yield db_url
    close_database()
