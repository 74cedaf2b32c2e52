"""
Common decorators and helpers for API Gateway Lambda handlers.
"""

from __future__ import annotations

import traceback
from collections.abc import Callable
from functools import wraps
from http import HTTPStatus
from typing import Any

from aws_lambda_powertools import Logger

from core.models.errors import ConfigurationError
from core.utils.constants import ALLOWED_METHODS, SERVICE_NAME
from core.utils.response import ResponseBuilder

logger = Logger(service=SERVICE_NAME, utc=True)

JsonDict = dict[str, Any]


def _log_error(
    message: str,
    *,
    handler_name: str,
    request_id: str | None,
    exc: Exception,
    level: str = "warning",
) -> None:
    """
    Log error with consistent structure and full context.

    Args:
        message: Log message
        handler_name: Name of the handler function
        request_id: AWS request ID
        exc: Exception that was raised
        level: Log level ('warning' or 'exception')
    """
    log_extra = {
        "handler": handler_name,
        "request_id": request_id,
        "error": str(exc),
        "error_type": type(exc).__name__,
    }

    if level == "exception":
        # logger.exception automatically includes traceback
        logger.exception(message, extra=log_extra)
    else:
        log_extra["traceback"] = traceback.format_exc()
        logger.warning(message, extra=log_extra)


def _status_for(exc: Exception) -> tuple[HTTPStatus, str, str]:
    """Map an escaped exception to (status, log message, log level)."""
    if isinstance(exc, ConfigurationError):
        return HTTPStatus.INTERNAL_SERVER_ERROR, "Invalid configuration", "exception"

    if isinstance(exc, (ValueError, KeyError, TypeError, UnicodeError)):
        return HTTPStatus.BAD_REQUEST, "Validation error in handler", "warning"

    if isinstance(exc, (FileNotFoundError, LookupError)):
        return HTTPStatus.NOT_FOUND, "Resource not found", "warning"

    if isinstance(exc, TimeoutError):
        return HTTPStatus.GATEWAY_TIMEOUT, "Request timeout", "exception"

    if isinstance(exc, (ConnectionError, OSError)):
        return HTTPStatus.SERVICE_UNAVAILABLE, "Connection error", "exception"

    return HTTPStatus.INTERNAL_SERVER_ERROR, "Unexpected error in handler", "exception"


def html_page_handler(
    func: Callable[..., JsonDict],
) -> Callable[..., JsonDict]:
    """
    Decorator for API Gateway Lambda handlers that serve an HTML page.

    Provides:
    - Method filtering (GET and HEAD only, 405 otherwise)
    - Empty bodies for HEAD requests
    - Centralized exception handling rendered as the error alert page
    - Request ID tracking and structured logging

    Example:
        @html_page_handler
        def handler(event, context):
            return ResponseBuilder.html("<p>ok</p>")
    """

    @wraps(func)
    def wrapper(event: Any, context: Any) -> JsonDict:
        request_id = getattr(context, "aws_request_id", None)
        method = (event.get("httpMethod") or "GET").upper()

        if method not in ALLOWED_METHODS:
            logger.warning(
                "Method not allowed",
                extra={"http_method": method, "request_id": request_id},
            )
            return ResponseBuilder.method_not_allowed(request_id=request_id)

        try:
            response = func(event, context)
        except Exception as exc:
            status, message, level = _status_for(exc)
            _log_error(
                message,
                handler_name=func.__name__,
                request_id=request_id,
                exc=exc,
                level=level,
            )
            response = ResponseBuilder.error_page(status, request_id=request_id)

        if method == "HEAD":
            return ResponseBuilder.head(response)

        return response

    return wrapper
