"""Integration fixtures: a throwaway PostgreSQL migrated to head.

The container is started once per session with testcontainers. Each test
gets an app whose lifespan really runs: it opens the asyncpg pool and runs
`alembic upgrade head` (a no-op after the first test), so requests go through
the same path as in production.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import docker
import pytest
import pytest_asyncio
from asgi_lifespan import LifespanManager
from httpx import ASGITransport, AsyncClient
from testcontainers.postgres import PostgresContainer

from core.config import Settings


if TYPE_CHECKING:
    from collections.abc import AsyncGenerator, Generator

    from fastapi import FastAPI


def _docker_available() -> bool:
    try:
        docker.from_env().ping()
    except docker.errors.DockerException:
        return False
    return True


@pytest.fixture(scope="session")
def postgres_container() -> Generator[PostgresContainer]:
    """Start a PostgreSQL container for the test session."""
    if not _docker_available():
        pytest.skip("Docker is not available")
    with PostgresContainer("postgres:16-alpine") as postgres:
        yield postgres


@pytest.fixture(scope="session")
def database_url(postgres_container: PostgresContainer) -> str:
    host = postgres_container.get_container_host_ip()
    port = int(postgres_container.get_exposed_port(5432))
    return f"postgresql://test:test@{host}:{port}/test"


@pytest.fixture
def settings(database_url: str) -> Settings:
    """Settings for the containerized database, with migrations on."""
    return Settings(
        database_url=database_url,
        run_migrations=True,
        request_timeout_seconds=10.0,
    )


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient]:
    async with LifespanManager(app, startup_timeout=60):
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac
