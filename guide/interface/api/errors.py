"""Exception handlers mapping typed failures to HTTP responses.

Each domain failure gets its own status code:

- NotFoundError -> 404
- InvalidTransitionError -> 409
- SelfReferenceRejectedError -> 422
- ConcurrentModificationError -> 412
"""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from guide.domain.error import (
    ConcurrentModificationError,
    InvalidTransitionError,
    NotFoundError,
    SelfReferenceRejectedError,
)
from guide.interface.error import AuthenticationRequiredError


async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    logfire.warn(
        "Resource not found",
        resource=exc.resource,
        identifier=exc.identifier,
        path=request.url.path,
    )
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={
            "detail": str(exc),
            "resource": exc.resource,
            "identifier": exc.identifier,
        },
    )


async def invalid_transition_handler(
    request: Request, exc: InvalidTransitionError
) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content={"detail": str(exc), "kind": exc.kind, "present": exc.present},
    )


async def self_reference_handler(
    request: Request, exc: SelfReferenceRejectedError
) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"detail": str(exc), "kind": exc.kind},
    )


async def concurrent_modification_handler(
    request: Request, exc: ConcurrentModificationError
) -> JSONResponse:
    logfire.warn(
        "Concurrent modification",
        resource=exc.resource,
        identifier=exc.identifier,
        path=request.url.path,
    )
    return JSONResponse(
        status_code=status.HTTP_412_PRECONDITION_FAILED,
        content={"detail": str(exc), "resource": exc.resource},
    )


async def authentication_handler(
    request: Request, exc: AuthenticationRequiredError
) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED,
        content={"detail": exc.reason},
        headers={"WWW-Authenticate": "Bearer"},
    )


async def validation_handler(request: Request, exc: ValidationError) -> JSONResponse:
    # Domain model/value validation raised inside a use case
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "detail": exc.errors(
                include_url=False, include_context=False, include_input=False
            )
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register handlers for all typed failures on the app."""
    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(InvalidTransitionError, invalid_transition_handler)
    app.add_exception_handler(SelfReferenceRejectedError, self_reference_handler)
    app.add_exception_handler(
        ConcurrentModificationError, concurrent_modification_handler
    )
    app.add_exception_handler(AuthenticationRequiredError, authentication_handler)
    app.add_exception_handler(ValidationError, validation_handler)
