"""Movie request and response schemas."""

from pydantic import BaseModel

from movie_catalog.models import Movie


class MovieIn(BaseModel):
    """Body of POST /movies. ``id`` is accepted but the store assigns its own."""

    id: int | None = None
    title: str

    def to_domain(self) -> Movie:
        return Movie(id=self.id, title=self.title)


class MovieOut(BaseModel):
    """A stored movie."""

    model_config = {"from_attributes": True}

    id: int
    title: str
