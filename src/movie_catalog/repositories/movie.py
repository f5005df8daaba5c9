"""Movie data-access layer.

In-memory store, no business logic, no HTTP concerns. One instance is created
at startup and lives as long as the process.
"""

import dataclasses
import threading

from movie_catalog.exceptions import MovieAlreadyExistsException, MovieNotFoundException
from movie_catalog.models import Movie


class MovieRepository:
    """Append-only list of movies with lookups by id and by title."""

    def __init__(self) -> None:
        self._movies: list[Movie] = []
        # Held across the title check and the append in save_movie
        self._lock = threading.Lock()

    def get_movie_by_id(self, movie_id: int) -> Movie:
        """Return the movie with ``movie_id`` or raise MovieNotFoundException."""
        for movie in list(self._movies):
            if movie.id == movie_id:
                return movie
        raise MovieNotFoundException(movie_id)

    def get_movie_by_title(self, title: str) -> Movie | None:
        """Return the movie titled exactly ``title``, or None."""
        for movie in list(self._movies):
            if movie.title == title:
                return movie
        return None

    def save_movie(self, movie: Movie) -> Movie:
        """Store ``movie`` under the next sequential id and return the stored copy.

        Any id on the incoming movie is ignored. Raises
        MovieAlreadyExistsException, leaving the store unchanged, when the
        title is taken.
        """
        with self._lock:
            if self.get_movie_by_title(movie.title) is not None:
                raise MovieAlreadyExistsException(movie.title)
            stored = dataclasses.replace(movie, id=len(self._movies) + 1)
            self._movies.append(stored)
            return stored

    def count(self) -> int:
        """Return how many movies are stored."""
        return len(self._movies)
