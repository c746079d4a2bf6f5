"""Pytest configuration and fixtures."""

from collections.abc import Generator
from pathlib import Path

import git
import pytest
import structlog


@pytest.fixture(autouse=True)
def reset_structlog() -> Generator[None, None, None]:
    """Keep structlog configuration from leaking between tests."""
    yield
    structlog.contextvars.clear_contextvars()
    structlog.reset_defaults()


@pytest.fixture
def temp_repo(tmp_path: Path) -> Generator[tuple[Path, git.Repo], None, None]:
    """Create a temporary git repository for testing."""
    repo_path = tmp_path / "project"
    repo_path.mkdir()
    repo = git.Repo.init(repo_path)

    with repo.config_writer() as config:
        config.set_value("user", "name", "Test User")
        config.set_value("user", "email", "test@example.com")

    yield repo_path, repo
    repo.close()
