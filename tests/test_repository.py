from concurrent.futures import ThreadPoolExecutor

import pytest

from movie_catalog.exceptions import MovieAlreadyExistsException, MovieNotFoundException
from movie_catalog.repositories.movie import MovieRepository
from tests.factories import make_movie


def test_save_assigns_sequential_ids(repository: MovieRepository) -> None:
    first = repository.save_movie(make_movie(title="First"))
    second = repository.save_movie(make_movie(title="Second"))

    assert first.id == 1
    assert second.id == 2
    assert repository.count() == 2


def test_save_ignores_client_supplied_id(repository: MovieRepository) -> None:
    stored = repository.save_movie(make_movie(title="First", id=42))
    assert stored.id == 1
    with pytest.raises(MovieNotFoundException):
        repository.get_movie_by_id(42)


def test_save_duplicate_title_raises_and_leaves_store_unchanged(
    seeded_repository: MovieRepository,
) -> None:
    with pytest.raises(MovieAlreadyExistsException) as excinfo:
        seeded_repository.save_movie(make_movie(title="First"))

    assert excinfo.value.title == "First"
    assert str(excinfo.value) == "Movie with [title=First] already exists"
    assert seeded_repository.count() == 2


def test_title_uniqueness_is_case_sensitive(seeded_repository: MovieRepository) -> None:
    stored = seeded_repository.save_movie(make_movie(title="first"))
    assert stored.id == 3


@pytest.mark.parametrize("movie_id", [0, 3, 100, -1])
def test_get_by_unknown_id_raises_with_that_id(
    seeded_repository: MovieRepository, movie_id: int
) -> None:
    with pytest.raises(MovieNotFoundException) as excinfo:
        seeded_repository.get_movie_by_id(movie_id)

    assert excinfo.value.movie_id == movie_id
    assert excinfo.value.message == f"Movie with [id={movie_id}] was not found."


def test_get_by_id_returns_stored_movie(seeded_repository: MovieRepository) -> None:
    assert seeded_repository.get_movie_by_id(2) == make_movie(title="Second", id=2)


@pytest.mark.parametrize("title", ["Third", "", "second", "First "])
def test_get_by_unknown_title_returns_none(
    seeded_repository: MovieRepository, title: str
) -> None:
    assert seeded_repository.get_movie_by_title(title) is None


def test_concurrent_saves_of_same_title_store_one_movie(repository: MovieRepository) -> None:
    def attempt(_: int) -> bool:
        try:
            repository.save_movie(make_movie(title="Race"))
        except MovieAlreadyExistsException:
            return False
        return True

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(attempt, range(32)))

    assert results.count(True) == 1
    assert repository.count() == 1
