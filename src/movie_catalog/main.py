from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from movie_catalog.config import Settings, settings
from movie_catalog.dependencies import Repository
from movie_catalog.errors import add_exception_handlers
from movie_catalog.logging import configure_logging, get_logger
from movie_catalog.middleware import RequestIDMiddleware
from movie_catalog.repositories.movie import MovieRepository
from movie_catalog.routers.movie import router as movie_router

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Lifespan context manager: code before yield runs on startup, after yield on shutdown."""
    logger.info("startup", api_version=app.state.settings.rest_api_version)
    yield
    logger.info("shutdown", movies=app.state.movie_repository.count())


def create_app(
    app_settings: Settings | None = None,
    repository: MovieRepository | None = None,
) -> FastAPI:
    """Build the application around an explicitly owned store.

    Tests pass their own settings and repository; the module-level ``app``
    uses the environment settings and a fresh, empty store.
    """
    app_settings = app_settings or settings
    configure_logging(app_settings)

    app = FastAPI(title="Movie Catalog", version=app_settings.rest_api_version, lifespan=lifespan)
    app.state.settings = app_settings
    app.state.movie_repository = repository if repository is not None else MovieRepository()

    app.add_middleware(RequestIDMiddleware)
    add_exception_handlers(app)
    app.include_router(movie_router)

    @app.get("/health")
    async def health(repository: Repository) -> dict[str, object]:
        """Liveness probe; reports how many movies the store holds."""
        return {"status": "ok", "movies": repository.count()}

    return app


app = create_app()


def run() -> None:
    """Entry point for the ``movie-catalog`` console script."""
    uvicorn.run("movie_catalog.main:app", host=settings.host, port=settings.port)
