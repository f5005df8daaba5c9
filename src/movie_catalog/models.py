"""Domain records.

Plain dataclasses: the store and the validator work on these, and only the
routers convert them to and from the Pydantic wire schemas.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Movie:
    """A catalog entry. ``id`` is None until the store assigns one."""

    id: int | None
    title: str
