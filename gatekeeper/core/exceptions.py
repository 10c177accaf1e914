"""Error taxonomy and global exception handlers (no internal detail reaches clients)."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from gatekeeper.core.middleware import apply_security_headers

logger = logging.getLogger(__name__)

VALIDATION_FAILED = "Validation Failed"
EMAIL_EXISTS = "Email already exists"
INTERNAL_ERROR = "Internal server error"


class GatekeeperError(Exception):
    """Base class for errors raised by the authentication core."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ValidationFailure(GatekeeperError):
    """Request payload failed validation; user-correctable (400)."""

    def __init__(self, issues: list[str]) -> None:
        self.issues = list(issues)
        super().__init__(self.details)

    @property
    def details(self) -> str:
        """Per-field messages joined into a single display string."""
        if not self.issues:
            return VALIDATION_FAILED
        return ", ".join(self.issues)


class DuplicateUserError(GatekeeperError):
    """A user with this email already exists; user-correctable (409)."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(f"User with email {email} already exists")


class HashingError(GatekeeperError):
    """Password hashing primitive failed."""


class TokenError(GatekeeperError):
    """Token could not be signed, or failed verification (expired or invalid)."""


class StoreUnavailableError(GatekeeperError):
    """The user store could not be reached."""


def error_response(status_code: int, error: str, details: str | None = None) -> JSONResponse:
    """Build the uniform ``{"error": ..., "details"?: ...}`` response body."""
    content: dict[str, str] = {"error": error}
    if details is not None:
        content["details"] = details
    return JSONResponse(status_code=status_code, content=content)


async def _http_exception_handler(
    _request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    response = error_response(exc.status_code, str(exc.detail))
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def _request_validation_handler(
    _request: Request, exc: RequestValidationError
) -> JSONResponse:
    # Only reachable for undecodable bodies; field checks run in validate_signup.
    messages = [str(err.get("msg", "Invalid request")) for err in exc.errors()]
    return error_response(400, VALIDATION_FAILED, ", ".join(messages) or VALIDATION_FAILED)


async def _generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled exception on %s %s: %s", request.method, request.url.path, exc)
    response = error_response(500, INTERNAL_ERROR)
    # Starlette sends this response outside the middleware stack.
    apply_security_headers(response.headers)
    return response


def register_exception_handlers(app: FastAPI) -> None:
    """Attach all exception handlers to the FastAPI app."""
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, _request_validation_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, _generic_exception_handler)
