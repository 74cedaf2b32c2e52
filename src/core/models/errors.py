"""Custom exception classes for the user directory page."""

from typing import Any

from core.utils.constants import (
    ERROR_CODE_CONFIGURATION,
    ERROR_CODE_UPSTREAM_HTTP,
    ERROR_CODE_UPSTREAM_TRANSPORT,
    TRANSPORT_ERROR_STATUS,
)


class UserDirectoryError(Exception):
    """
    Base exception for all user directory errors.

    All custom errors must inherit from this class.
    Callers must explicitly provide a message and error code.
    Optional contextual information can be supplied via `details`.
    """

    message: str
    error_code: str
    details: dict[str, Any]

    def __init__(
        self,
        *,
        message: str,
        error_code: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.error_code = error_code
        self.details = details or {}

        super().__init__(self.message)


class UpstreamHttpError(UserDirectoryError):
    """Raised when the users API answers with a non-success HTTP status.

    The status code is shown to the viewer unchanged.
    """

    status_code: int

    def __init__(
        self,
        *,
        status_code: int,
        message: str | None = None,
        error_code: str = ERROR_CODE_UPSTREAM_HTTP,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.status_code = status_code
        super().__init__(
            message=message or f"Users API responded with status {status_code}",
            error_code=error_code,
            details=details,
        )


class TransportError(UserDirectoryError):
    """Raised when the users API call itself fails.

    Covers connection and DNS failures, timeouts and response bodies
    that are not valid JSON or do not match the expected shape.
    """

    status_code: int = TRANSPORT_ERROR_STATUS

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_UPSTREAM_TRANSPORT,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class ConfigurationError(UserDirectoryError):
    """Raised when the users API settings are invalid."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_CONFIGURATION,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )
