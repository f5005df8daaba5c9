"""Factory functions for creating movies in tests."""

from movie_catalog.models import Movie

TEST_API_VERSION = "test-1.0"


def make_movie(*, title: str = "New movie", id: int | None = None) -> Movie:
    return Movie(id=id, title=title)
