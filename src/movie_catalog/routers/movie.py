"""Movie endpoints."""

from fastapi import APIRouter, Query, Request, Response
from fastapi.responses import JSONResponse

from movie_catalog.dependencies import Repository
from movie_catalog.errors import render_error, title_not_found
from movie_catalog.exceptions import MethodArgumentNotValidException, MovieAlreadyExistsException
from movie_catalog.logging import get_logger
from movie_catalog.schemas.movie import MovieIn, MovieOut
from movie_catalog.validation import validate_movie

logger = get_logger(__name__)

router = APIRouter(prefix="/movies", tags=["movies"])


@router.get("/{movie_id}", response_model=MovieOut, status_code=200)
async def get_movie_by_id(movie_id: int, repository: Repository) -> MovieOut:
    """Fetch a movie by id. A missing id reaches the global handler as a 404."""
    return MovieOut.model_validate(repository.get_movie_by_id(movie_id))


@router.get("", response_model=MovieOut, status_code=200)
async def get_movie_by_title(
    request: Request,
    repository: Repository,
    title: str = Query(...),
) -> MovieOut | JSONResponse:
    """Search a movie by exact title.

    A miss is not a failure of the store, so the 404 is rendered here
    instead of being raised.
    """
    movie = repository.get_movie_by_title(title)
    if movie is None:
        return render_error(request, title_not_found(title))
    return MovieOut.model_validate(movie)


@router.post("", status_code=200)
async def save_movie(request: Request, body: MovieIn, repository: Repository) -> Response:
    """Validate and store a movie.

    Validation runs first and short-circuits, so an invalid movie never
    reaches the store. A duplicate title is caught here and rendered through
    the same path the global handlers use.
    """
    movie = body.to_domain()
    violations = validate_movie(movie)
    if violations:
        raise MethodArgumentNotValidException(violations)

    try:
        stored = repository.save_movie(movie)
    except MovieAlreadyExistsException as exc:
        logger.warning("movie_save_rejected", title=exc.title)
        return render_error(request, exc)

    logger.info("movie_saved", movie_id=stored.id, total=repository.count())
    return Response(status_code=200)
