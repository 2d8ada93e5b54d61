"""
Error rendering for the API.

Two tiers:

- Soft errors. Business failures (bad input, unknown user, rejected write)
  come back from the service as failed ``Result`` values. ``render_result``
  turns them into an HTTP 200 ``{"error": message}`` body.
- Hard errors. Anything that escapes an endpoint (unmatched route,
  malformed body, storage violation, unexpected crash) is caught by the
  exception handlers registered with ``register_error_handlers`` and
  rendered as plain text with a non-2xx status.
"""

import logging
from typing import TypeVar, Union

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from constants import ErrorMessages, HTTPStatus
from exceptions import ApplicationError, StorageConstraintError
from schemas import ErrorResponse
from services.result import Result

logger = logging.getLogger(__name__)

T = TypeVar('T')


def render_result(result: Result[T], operation_name: str) -> Union[T, ErrorResponse]:
    """
    Render a service result as a response body.

    Args:
        result: Result returned by the service
        operation_name: Human-readable name of the operation, for the log

    Returns:
        The success value, or an ErrorResponse carrying the failure message
    """
    if result.ok:
        return result.value
    logger.warning(f"{operation_name} - {type(result.error).__name__}: {result.error.message}")
    return ErrorResponse(error=result.error.message)


def describe_error(exc: Exception) -> tuple[int, str]:
    """
    Map an escaped exception to a status code and plain-text message.

    Storage-schema violations are 400 with the first failing field's
    message. Other application errors use their own status. Anything else
    is 500.

    Args:
        exc: The exception that escaped the endpoint

    Returns:
        (status_code, message)
    """
    if isinstance(exc, StorageConstraintError):
        return HTTPStatus.BAD_REQUEST, exc.first_message
    if isinstance(exc, ApplicationError):
        return exc.status_code, exc.message or ErrorMessages.INTERNAL_SERVER_ERROR
    return HTTPStatus.INTERNAL_SERVER_ERROR, str(exc) or ErrorMessages.INTERNAL_SERVER_ERROR


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> PlainTextResponse:
    """Routing failures. Unmatched paths and methods are both a plain 404."""
    if exc.status_code in (HTTPStatus.NOT_FOUND, HTTPStatus.METHOD_NOT_ALLOWED):
        logger.info(f"No route for {request.method} {request.url.path}")
        return PlainTextResponse(ErrorMessages.NOT_FOUND, status_code=HTTPStatus.NOT_FOUND)
    return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=getattr(exc, "headers", None))


async def application_error_handler(request: Request, exc: ApplicationError) -> PlainTextResponse:
    status_code, message = describe_error(exc)
    if status_code >= HTTPStatus.INTERNAL_SERVER_ERROR:
        logger.error(f"{request.method} {request.url.path} - {type(exc).__name__}: {message}", exc_info=exc)
    else:
        logger.warning(f"{request.method} {request.url.path} - {type(exc).__name__}: {message}")
    return PlainTextResponse(message, status_code=status_code)


async def unhandled_error_handler(request: Request, exc: Exception) -> PlainTextResponse:
    status_code, message = describe_error(exc)
    logger.error(f"{request.method} {request.url.path} - Unexpected error: {exc}", exc_info=exc)
    return PlainTextResponse(message, status_code=status_code)


def register_error_handlers(app: FastAPI) -> None:
    """Install the hard-error handlers on an application."""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(ApplicationError, application_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
