"""API error types and their JSON rendering."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class APIError(Exception):
    """Base class for errors that map to an HTTP response."""

    status_code: int = 500

    def __init__(self, message: str, details: Any = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details

    def to_body(self) -> dict[str, Any]:
        """Build the JSON body for this error."""
        body: dict[str, Any] = {"error": self.message}
        if self.details is not None:
            body["details"] = self.details
        return body


class ValidationError(APIError):
    """Missing or malformed input."""

    status_code = 400


class Conflict(APIError):
    """A unique field is already taken."""

    status_code = 400


class InvalidToken(APIError):
    """The bearer token failed verification."""

    status_code = 400


class MissingToken(APIError):
    """No bearer token was supplied."""

    status_code = 401


class Unauthorized(APIError):
    """The supplied credentials are wrong."""

    status_code = 401


class Forbidden(APIError):
    """The caller may not act on the target resource."""

    status_code = 403


class NotFound(APIError):
    status_code = 404


class InternalError(APIError):
    """Unhandled persistence or hashing failure."""

    status_code = 500


async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
    """Render an APIError as ``{"error": ...}``."""
    return JSONResponse(status_code=exc.status_code, content=exc.to_body())


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Render FastAPI request validation failures as 400 ValidationError bodies."""
    fields = [".".join(str(part) for part in err["loc"]) for err in exc.errors()]
    logger.warning("Rejected malformed request to %s: %s", request.url.path, fields)
    error = ValidationError("Invalid request", details=fields)
    return await api_error_handler(request, error)


def register_error_handlers(app: FastAPI) -> None:
    """Install the error handlers on ``app``."""
    app.add_exception_handler(APIError, api_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
