"""Movie validation rules.

Each rule inspects a movie and returns a message when it is violated.
validate_movie() runs all of them in registration order, so adding a rule
never changes what callers receive: always a list, possibly empty.
"""

from collections.abc import Callable
from dataclasses import dataclass

from movie_catalog.models import Movie


@dataclass(frozen=True)
class Violation:
    """One broken rule: the rule name and the client-facing message."""

    rule: str
    message: str


Rule = Callable[[Movie], str | None]


def _title_not_blank(movie: Movie) -> str | None:
    if not movie.title.strip():
        return "Movie title can not be blank"
    return None


RULES: dict[str, Rule] = {
    "title_not_blank": _title_not_blank,
}


def validate_movie(movie: Movie) -> list[Violation]:
    """Return the violations of ``movie``, in rule order."""
    violations = []
    for name, rule in RULES.items():
        message = rule(movie)
        if message is not None:
            violations.append(Violation(rule=name, message=message))
    return violations
