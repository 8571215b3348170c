"""Fixtures for exercising the HTTP API against a real SQLite file."""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from userhub.infrastructure.persistence.sqlalchemy.models import Base
from userhub.presentation.api.app import API_V1_PREFIX, create_app
from userhub.presentation.api.dependencies import get_db_session
from userhub_config.settings import Settings


@pytest.fixture
def api_v1_prefix() -> str:
    return API_V1_PREFIX


@pytest.fixture
def users_url(api_v1_prefix) -> str:
    return f"{api_v1_prefix}/users"


@pytest.fixture
def api_settings() -> Settings:
    """Debug-enabled settings that ignore any local env file."""
    return Settings(
        _env_file=None,
        api_host="127.0.0.1",
        api_debug=True,
        api_cors_origins="http://localhost:3000",
    )


@pytest.fixture
async def api_engine(tmp_path):
    """SQLite file per test.

    NullPool plus a file (rather than ``:memory:``) lets the TestClient's
    own event loop open fresh connections to the same data.
    """
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'api.db'}",
        poolclass=NullPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def test_client(api_settings, api_engine) -> TestClient:
    """TestClient whose requests use ``api_engine`` instead of the configured DB.

    The client is not entered as a context manager, so the startup hook
    (which would touch the configured database) does not run.
    """
    app = create_app(settings=api_settings)
    sessions = async_sessionmaker(
        api_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async def _session_for_test():
        async with sessions() as session:
            yield session

    app.dependency_overrides[get_db_session] = _session_for_test
    return TestClient(app)


@pytest.fixture
def john_data() -> dict:
    return {"name": "John", "email": "john@example.com", "password": "secret"}


@pytest.fixture
def john(test_client, users_url, john_data) -> dict:
    """John created through the API; returns the response body."""
    response = test_client.post(users_url, json=john_data)
    assert response.status_code == 201
    return response.json()
