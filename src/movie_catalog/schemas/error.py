"""Error response schemas.

Every error response uses the same envelope:
{"apiVersion": "...", "status": 404, "message": "...", "path": "...", "causes": [...]}.
movie_catalog.errors builds these from exceptions; routers never construct
them by hand.
"""

from pydantic import BaseModel, ConfigDict, Field


class ErrorCause(BaseModel):
    """One contributing failure: its class name and message."""

    exception: str | None
    message: str | None


class ErrorResponse(BaseModel):
    """Top-level error envelope returned by all error responses."""

    model_config = ConfigDict(populate_by_name=True)

    api_version: str = Field(alias="apiVersion")
    status: int
    message: str
    path: str
    causes: list[ErrorCause] = Field(default_factory=list)
