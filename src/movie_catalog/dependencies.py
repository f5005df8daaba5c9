"""Shared FastAPI dependencies.

Reusable type aliases and dependency functions that routers import.
Defined here (not in main.py) to avoid circular imports when routers
are registered in main.
"""

from typing import Annotated

from fastapi import Depends, Request

from movie_catalog.repositories.movie import MovieRepository


def get_movie_repository(request: Request) -> MovieRepository:
    """Return the store created by create_app() for this application."""
    return request.app.state.movie_repository  # type: ignore[no-any-return]


Repository = Annotated[MovieRepository, Depends(get_movie_repository)]
