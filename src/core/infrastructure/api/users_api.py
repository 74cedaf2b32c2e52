"""HTTP-backed implementation of UsersRepository."""

from http import HTTPStatus

from aws_lambda_powertools import Logger
from pydantic import ValidationError
import requests

from core.infrastructure.adapters.http_adapter import HttpAdapter, HttpAdapterProtocol
from core.models.errors import TransportError, UpstreamHttpError
from core.models.user import UsersPageResponse
from core.repositories.users_repository import UsersRepository
from core.utils.constants import USERS_PAGES_PATH

logger = Logger(utc=True)


class UsersApi(UsersRepository):
    """Users listing backed by the upstream ``/users/pages`` endpoint."""

    def __init__(self, adapter: HttpAdapterProtocol | None = None) -> None:
        """Create repository using the provided HTTP adapter."""
        self._http = adapter or HttpAdapter()

    def fetch_page(self, *, page: int, limit: int) -> UsersPageResponse:
        """Fetch one page of users and parse the JSON body."""
        logger.debug(
            "Requesting users page",
            extra={"base_url": self._http.base_url, "page": page, "limit": limit},
        )

        try:
            response = self._http.get(
                USERS_PAGES_PATH,
                params={"page": page, "limit": limit},
            )
        except requests.RequestException as exc:
            logger.error(
                "Users API request failed",
                extra={"page": page, "limit": limit, "error": str(exc)},
            )
            raise TransportError(
                message="Unable to reach the users API",
                details={"page": page, "limit": limit},
            ) from exc

        if not HTTPStatus.OK <= response.status_code < HTTPStatus.MULTIPLE_CHOICES:
            logger.warning(
                "Users API returned an error status",
                extra={"page": page, "limit": limit, "status_code": response.status_code},
            )
            raise UpstreamHttpError(
                status_code=response.status_code,
                details={"page": page, "limit": limit},
            )

        try:
            return UsersPageResponse.model_validate(response.json())
        except ValueError as exc:
            # Covers invalid JSON as well as pydantic ValidationError
            logger.error(
                "Users API returned a malformed body",
                extra={
                    "page": page,
                    "limit": limit,
                    "errors": exc.errors() if isinstance(exc, ValidationError) else str(exc),
                },
            )
            raise TransportError(
                message="Users API returned a malformed response",
                details={"page": page, "limit": limit},
            ) from exc
