"""Thin adapter for issuing GET requests to the users API."""

import os
from typing import Any, Protocol

import requests

from core.models.errors import ConfigurationError
from core.utils.constants import (
    DEFAULT_USERS_API_BASE_URL,
    ENV_USERS_API_BASE_URL,
    ENV_USERS_API_TIMEOUT_SECONDS,
)


class HttpAdapterProtocol(Protocol):
    """Minimal HTTP adapter protocol (repository-facing)."""

    base_url: str

    def get(self, path: str, *, params: dict[str, Any]) -> requests.Response: ...


def _resolve_base_url(base_url: str | None) -> str:
    value = (base_url or os.getenv(ENV_USERS_API_BASE_URL) or DEFAULT_USERS_API_BASE_URL).strip()

    if not value.startswith(("http://", "https://")):
        raise ConfigurationError(
            message="Users API base URL must start with http:// or https://",
            details={"base_url": value},
        )

    return value.rstrip("/")


def _resolve_timeout(timeout: float | None) -> float | None:
    if timeout is not None:
        raw: Any = timeout
    else:
        raw = os.getenv(ENV_USERS_API_TIMEOUT_SECONDS)
        if raw in (None, ""):
            return None

    try:
        value = float(raw)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(
            message=f"{ENV_USERS_API_TIMEOUT_SECONDS} must be a number",
            details={"timeout": raw},
        ) from exc

    if value <= 0:
        raise ConfigurationError(
            message=f"{ENV_USERS_API_TIMEOUT_SECONDS} must be positive",
            details={"timeout": raw},
        )

    return value


class HttpAdapter:
    """Low-level HTTP operations (mechanical, no error handling).

    This adapter:
    - Wraps requests
    - Resolves base URL and timeout from arguments or environment
    - Does NOT handle errors (lets them bubble up)
    - Domain implementations catch and translate errors
    """

    def __init__(
        self,
        base_url: str | None = None,
        *,
        timeout: float | None = None,
    ) -> None:
        """Create adapter from explicit settings or environment configuration."""
        self.base_url = _resolve_base_url(base_url)
        self.timeout = _resolve_timeout(timeout)

    def get(self, path: str, *, params: dict[str, Any]) -> requests.Response:
        """Issue a GET request relative to the base URL.
        Raises requests exceptions - caught by domain implementation.
        """
        with requests.Session() as session:
            return session.get(
                f"{self.base_url}{path}",
                params=params,
                headers={"Accept": "application/json"},
                timeout=self.timeout,
            )
