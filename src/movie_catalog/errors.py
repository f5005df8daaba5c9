"""Failure classification and error rendering.

Every failed request, whether the failure is caught next to its source (the
try/except in POST /movies) or escapes a handler and reaches the global
exception handlers, is rendered through render_error(). classify() decides
status, message and causes from the failure's type alone; the request only
contributes the path and the configured API version.
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from movie_catalog.exceptions import (
    DomainError,
    MethodArgumentNotValidException,
    MovieAlreadyExistsException,
    MovieNotFoundException,
)
from movie_catalog.logging import get_logger
from movie_catalog.middleware import REQUEST_ID_HEADER
from movie_catalog.schemas.error import ErrorCause, ErrorResponse

logger = get_logger(__name__)

FALLBACK_MESSAGE = "Error while performing request"
SAVE_ERROR_MESSAGE = "Error while saving movie"
VALIDATION_ERROR_MESSAGE = "Validation error while saving movie"
MALFORMED_REQUEST_MESSAGE = "Malformed request"


@dataclass(frozen=True)
class Classification:
    """Status, message and causes of one failure, before request details are added."""

    status: int
    message: str
    causes: list[ErrorCause] = field(default_factory=list)


def cause_of(exc: BaseException) -> ErrorCause:
    """Describe a single failure as a cause entry."""
    return ErrorCause(exception=type(exc).__name__, message=str(exc) or None)


def error_causes(exc: BaseException) -> list[ErrorCause]:
    """Walk ``exc.__cause__`` links and describe each linked failure.

    The top-level failure itself is not included. The walk stops at the first
    missing link or at a failure already visited, so self-referential or
    cyclic chains terminate with the causes collected so far.
    """
    causes = []
    visited = {id(exc)}
    current = exc.__cause__
    while current is not None and id(current) not in visited:
        visited.add(id(current))
        causes.append(cause_of(current))
        current = current.__cause__
    return causes


def title_not_found(title: str) -> Classification:
    """Classification for a title search that matched nothing."""
    return Classification(status=404, message=f"Movie with title {title} was not found")


def _not_found(exc: MovieNotFoundException) -> Classification:
    return Classification(status=404, message=exc.message, causes=error_causes(exc))


def _already_exists(exc: MovieAlreadyExistsException) -> Classification:
    return Classification(
        status=409,
        message=SAVE_ERROR_MESSAGE,
        causes=[cause_of(exc), *error_causes(exc)],
    )


def _not_valid(exc: MethodArgumentNotValidException) -> Classification:
    name = type(exc).__name__
    return Classification(
        status=400,
        message=VALIDATION_ERROR_MESSAGE,
        causes=[ErrorCause(exception=name, message=v.message) for v in exc.violations],
    )


def _http_error(exc: StarletteHTTPException) -> Classification:
    message = str(exc.detail) if exc.detail else FALLBACK_MESSAGE
    return Classification(status=exc.status_code, message=message, causes=error_causes(exc))


def _request_not_valid(exc: RequestValidationError) -> Classification:
    name = type(exc).__name__
    causes = []
    for err in exc.errors():
        loc = " -> ".join(str(part) for part in err["loc"])
        causes.append(ErrorCause(exception=name, message=f"{loc}: {err['msg']}"))
    return Classification(status=400, message=MALFORMED_REQUEST_MESSAGE, causes=causes)


def _unclassified(exc: BaseException) -> Classification:
    return Classification(
        status=500,
        message=str(exc) or FALLBACK_MESSAGE,
        causes=error_causes(exc),
    )


# Looked up along the failure type's MRO, most specific class first
RULES: dict[type[BaseException], Callable[[Any], Classification]] = {
    MovieNotFoundException: _not_found,
    MovieAlreadyExistsException: _already_exists,
    MethodArgumentNotValidException: _not_valid,
    StarletteHTTPException: _http_error,
    RequestValidationError: _request_not_valid,
}


def classify(exc: BaseException) -> Classification:
    """Map any failure to its status, message and causes."""
    for klass in type(exc).__mro__:
        rule = RULES.get(klass)
        if rule is not None:
            return rule(exc)
    return _unclassified(exc)


def build_error_response(
    classification: Classification, *, path: str, api_version: str
) -> ErrorResponse:
    return ErrorResponse(
        api_version=api_version,
        status=classification.status,
        message=classification.message,
        path=path,
        causes=list(classification.causes),
    )


def render_error(request: Request, failure: BaseException | Classification) -> JSONResponse:
    """Render a failure (or a ready classification) as the JSON error envelope."""
    classification = failure if isinstance(failure, Classification) else classify(failure)
    body = build_error_response(
        classification,
        path=request.url.path,
        api_version=request.app.state.settings.rest_api_version,
    )
    return JSONResponse(
        status_code=classification.status,
        content=body.model_dump(by_alias=True),
    )


def add_exception_handlers(app: FastAPI) -> None:
    """Register the global handlers that route every failure through render_error.

    Overriding StarletteHTTPException and RequestValidationError also replaces
    FastAPI's default renderer for unrouted paths, unsupported methods and
    malformed requests, so those share the same envelope.
    """

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
        logger.warning(
            "domain_error",
            error=type(exc).__name__,
            message=exc.message,
            path=request.url.path,
        )
        return render_error(request, exc)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        logger.info(
            "http_error",
            status=exc.status_code,
            detail=exc.detail,
            path=request.url.path,
        )
        response = render_error(request, exc)
        # Keeps e.g. the Allow header of a 405
        if exc.headers:
            response.headers.update(exc.headers)
        return response

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        logger.info("request_validation_error", errors=len(exc.errors()), path=request.url.path)
        return render_error(request, exc)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Log the traceback and answer with the generic envelope.

        Tracebacks go to the log only; the body carries the exception message
        and its cause chain.
        """
        logger.exception("unhandled_exception", path=request.url.path, method=request.method)
        response = render_error(request, exc)
        # Runs outside RequestIDMiddleware, which never sees this response
        request_id = structlog.contextvars.get_contextvars().get("request_id")
        request_id = request_id or request.headers.get(REQUEST_ID_HEADER)
        if request_id:
            response.headers[REQUEST_ID_HEADER] = request_id
        return response
