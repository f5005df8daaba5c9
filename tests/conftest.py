from collections.abc import AsyncIterator

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from movie_catalog.config import Settings
from movie_catalog.main import create_app
from movie_catalog.repositories.movie import MovieRepository
from tests.factories import TEST_API_VERSION

# Pytest only picks up fixtures from conftest.py files. Fixtures defined in other
# modules (like tests/seeds.py) are invisible unless we register them here.
pytest_plugins = ["tests.seeds"]


@pytest.fixture
def settings() -> Settings:
    return Settings(rest_api_version=TEST_API_VERSION, log_level="WARNING", log_json=False)


@pytest.fixture
def repository() -> MovieRepository:
    """Empty store, fresh for every test."""
    return MovieRepository()


@pytest.fixture
def app(settings: Settings, repository: MovieRepository) -> FastAPI:
    return create_app(settings, repository)


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncIterator[AsyncClient]:
    """HTTP client bound to the app's store.

    raise_app_exceptions=False lets tests see the 500 envelope instead of the
    exception Starlette re-raises after rendering it.
    """
    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as client:
        yield client
