"""Abstract contract for paged user listings."""

from abc import ABC, abstractmethod

from core.models.user import UsersPageResponse


class UsersRepository(ABC):
    """Contract for fetching one page of users.

    The page loader depends on this interface, not the HTTP implementation,
    so tests can substitute an in-memory source.
    """

    @abstractmethod
    def fetch_page(self, *, page: int, limit: int) -> UsersPageResponse:
        """Fetch a single page of users.

        Args:
            page: 1-based page number
            limit: Page size

        Returns:
            Users on the page and the total page count

        Raises:
            UpstreamHttpError: If the source answers with a non-success status
            TransportError: If the source cannot be reached or its answer is malformed
        """
