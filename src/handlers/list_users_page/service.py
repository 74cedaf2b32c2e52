"""
Business logic for loading one page of users.
"""

from aws_lambda_powertools import Logger, Tracer

from core.infrastructure.api.users_api import UsersApi
from core.models.errors import TransportError, UpstreamHttpError
from core.models.page_result import PageResult
from core.models.pagination import PaginationInfo
from core.repositories.users_repository import UsersRepository
from core.utils.constants import TRANSPORT_ERROR_STATUS

logger = Logger(utc=True)
tracer = Tracer()


class UsersPageLoader:
    """Application service that turns page/limit into a PageResult.

    This service:
    - Issues exactly one upstream call per load, without retries
    - Maps upstream HTTP failures to their status code
    - Maps every other failure to status 500
    """

    def __init__(self, users: UsersRepository | None = None) -> None:
        """Initialize loader with the users source (HTTP by default)."""
        self.users = users or UsersApi()

    @tracer.capture_method
    def load(self, *, page: int, limit: int) -> PageResult:
        """Load one page of users; never raises."""
        try:
            response = self.users.fetch_page(page=page, limit=limit)

        except UpstreamHttpError as exc:
            logger.warning(
                "Users page unavailable upstream",
                extra={"page": page, "limit": limit, "status_code": exc.status_code},
            )
            return PageResult.failure(exc.status_code)

        except TransportError as exc:
            logger.error(
                "Users page could not be fetched",
                extra={"page": page, "limit": limit, "error": exc.message},
            )
            return PageResult.failure(exc.status_code)

        except Exception:
            logger.exception(
                "Unexpected error loading users page",
                extra={"page": page, "limit": limit},
            )
            return PageResult.failure(TRANSPORT_ERROR_STATUS)

        logger.info(
            "Users page loaded",
            extra={
                "page": page,
                "limit": limit,
                "count": len(response.users),
                "total_pages": response.total_pages,
            },
        )

        return PageResult.success(
            response.users,
            PaginationInfo(total_pages=response.total_pages, current_page=page),
        )
