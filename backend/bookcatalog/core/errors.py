"""
API error taxonomy and the FastAPI handlers that render it.

Workflows raise ``ApiError`` subclasses; each carries its HTTP status and a
client-facing message. The handlers registered by
``register_exception_handlers`` turn them into JSON bodies of the form
``{"message": ..., "status": ...}`` and log the failure with request context.
"""
import logging
import traceback
from typing import Any, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from bookcatalog.config import get_settings

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Base class for errors that map onto an HTTP response."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    message: str = "Internal Server Error"

    def __init__(self, message: Optional[str] = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        return {"message": self.message, "status": self.status_code}


class ValidationError(ApiError):
    """Request data failed field-level validation."""

    status_code = status.HTTP_400_BAD_REQUEST
    message = "Validation failed"

    def __init__(
        self,
        errors: Optional[list[dict[str, str]]] = None,
        message: Optional[str] = None,
    ):
        super().__init__(message)
        self.errors = errors or []

    def to_dict(self) -> dict[str, Any]:
        body = super().to_dict()
        body["errors"] = self.errors
        return body


class DuplicateUsernameError(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Username already exists"


class InvalidCredentialsError(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Invalid credentials"


class MissingTokenError(ApiError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "No token, authorization denied"


class MalformedTokenError(ApiError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Invalid token format"


class InvalidTokenError(ApiError):
    status_code = status.HTTP_403_FORBIDDEN
    message = "Token is not valid"


class InvalidIdError(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Invalid book id"


class NotFoundError(ApiError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Book not found"


class ForbiddenError(ApiError):
    status_code = status.HTTP_403_FORBIDDEN
    message = "You are not allowed to modify this book"


class InternalError(ApiError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Internal Server Error"


def _request_context(request: Request) -> str:
    """Describe the request for log lines: method, path and actor."""
    actor = getattr(request.state, "actor", None) or "unauthenticated"
    return f"{request.method} {request.url.path} actor={actor}"


def _log(level: int, msg: str, *args: Any, **kwargs: Any) -> None:
    """Log an error path; a broken log handler must not replace the response."""
    try:
        logger.log(level, msg, *args, **kwargs)
    except Exception:
        pass


def _field_name(loc: tuple) -> str:
    # Drop the "body"/"query"/"path" prefix FastAPI puts in front of the field.
    parts = [str(part) for part in loc[1:]] or [str(part) for part in loc]
    return ".".join(parts)


def validation_error_from_pydantic(errors: list[dict[str, Any]]) -> ValidationError:
    """Build a field-tagged ValidationError from pydantic error dicts."""
    return ValidationError(
        errors=[
            {"field": _field_name(tuple(err.get("loc", ()))), "message": err.get("msg", "")}
            for err in errors
        ]
    )


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    """Render an ApiError raised by a workflow or dependency."""
    if exc.status_code >= 500:
        _log(
            logging.ERROR, "%s failed: %s", _request_context(request), exc.message, exc_info=exc
        )
    else:
        _log(
            logging.WARNING,
            "%s rejected (%s): %s",
            _request_context(request),
            exc.status_code,
            exc.message,
        )

    headers = None
    if exc.status_code == status.HTTP_401_UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer"}

    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict(),
        headers=headers,
    )


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Map FastAPI's 422 body/query validation onto our 400 ValidationError."""
    return await api_error_handler(request, validation_error_from_pydantic(exc.errors()))


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Render routing errors (unknown path, wrong method) in the ApiError shape."""
    error = ApiError(str(exc.detail))
    error.status_code = exc.status_code

    response = await api_error_handler(request, error)
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Normalize anything unexpected (store connectivity, serialization) to a
    generic 500. The traceback is only exposed in development mode.
    """
    _log(
        logging.ERROR,
        "%s raised unexpected error: %s",
        _request_context(request),
        exc,
        exc_info=exc,
    )

    error = InternalError()
    body = error.to_dict()
    if get_settings().debug:
        body["stack"] = "".join(
            traceback.format_exception(type(exc), exc, exc.__traceback__)
        )

    return JSONResponse(status_code=error.status_code, content=body)


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the error handlers to an application."""
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
