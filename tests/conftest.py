"""Test-suite configuration.

Layout:
    unit/          mocks and in-memory SQLite, no external services
    integration/   API through TestClient; PostgreSQL via Testcontainers
    shared/        fixtures and factories used across the tree

Tests marked ``integration`` need Docker and are skipped unless enabled
with ``--run-integration`` / ``RUN_INTEGRATION=1`` (or ``--run-all`` /
``RUN_ALL_TESTS=1``).
"""

import os
from pathlib import Path

import pytest
from dotenv import load_dotenv

from tests.shared.fixtures.database import (  # noqa: F401 - shared fixtures
    async_engine,
    db_session,
    postgres_container,
    sqlite_engine,
    sqlite_session,
)
from userhub_config import clear_settings_cache

TEST_ENV_FILE = Path(__file__).resolve().parents[1] / "config" / ".env.test"
if TEST_ENV_FILE.exists():
    load_dotenv(TEST_ENV_FILE)


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").lower() in ("1", "true", "yes")


def pytest_addoption(parser):
    group = parser.getgroup("userhub")
    group.addoption(
        "--run-integration",
        action="store_true",
        default=False,
        help="Also run tests marked integration (needs Docker)",
    )
    group.addoption(
        "--run-all",
        action="store_true",
        default=False,
        help="Run every collected test",
    )


def pytest_configure(config):
    config.addinivalue_line(
        "markers",
        "integration: Tests that need a PostgreSQL container (auto-skipped)",
    )


def _integration_enabled(config) -> bool:
    return (
        config.getoption("--run-all")
        or config.getoption("--run-integration")
        or _env_flag("RUN_ALL_TESTS")
        or _env_flag("RUN_INTEGRATION")
    )


def pytest_collection_modifyitems(config, items):
    if _integration_enabled(config):
        return

    skip = pytest.mark.skip(
        reason="needs PostgreSQL; enable with --run-integration or RUN_INTEGRATION=1",
    )
    for item in items:
        if item.get_closest_marker("integration") is not None:
            item.add_marker(skip)


@pytest.fixture(scope="session", autouse=True)
def fresh_settings():
    """Start and end the session without cached settings."""
    clear_settings_cache()
    yield
    clear_settings_cache()
