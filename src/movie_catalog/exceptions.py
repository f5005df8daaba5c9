"""Domain exceptions raised by the store, the validator and the routers.

Exception handlers in movie_catalog.errors translate them into the standard
error envelope: {"apiVersion", "status", "message", "path", "causes"}.
Class names are part of that envelope (each cause reports the name of the
failure it came from), so renaming a class changes the API.
"""

from movie_catalog.validation import Violation


class DomainError(Exception):
    """Base class for all domain exceptions."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class MovieNotFoundException(DomainError):
    """Raised when no movie has the requested id."""

    def __init__(self, movie_id: int) -> None:
        self.movie_id = movie_id
        super().__init__(f"Movie with [id={movie_id}] was not found.")


class MovieAlreadyExistsException(DomainError):
    """Raised when saving a movie whose title is already taken."""

    def __init__(self, title: str) -> None:
        self.title = title
        super().__init__(f"Movie with [title={title}] already exists")


class MethodArgumentNotValidException(DomainError):
    """Raised when a submitted movie breaks one or more validation rules.

    The violations drive the causes of the error response; ``message`` is
    only a summary for logs.
    """

    def __init__(self, violations: list[Violation]) -> None:
        self.violations = list(violations)
        super().__init__(f"{len(self.violations)} validation error(s)")
