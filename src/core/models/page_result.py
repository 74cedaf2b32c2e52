"""Outcome of loading one page of users."""

from http import HTTPStatus

from pydantic import BaseModel, ConfigDict, Field, StrictInt

from core.models.pagination import PaginationInfo
from core.models.user import UserRecord


class PageResult(BaseModel):
    """Tagged result handed from the page loader to the page view.

    A success always carries status 200 and pagination info; a failure
    carries the status to display, no users and no pagination.
    """

    model_config = ConfigDict(frozen=True)

    status_code: StrictInt = Field(..., description="200 on success, otherwise the failure status")
    users: tuple[UserRecord, ...] = Field(default=(), description="Users on this page, in upstream order")
    pagination: PaginationInfo | None = Field(None, description="Present only on success")

    @classmethod
    def success(
        cls,
        users: list[UserRecord] | tuple[UserRecord, ...],
        pagination: PaginationInfo,
    ) -> "PageResult":
        return cls(status_code=HTTPStatus.OK.value, users=tuple(users), pagination=pagination)

    @classmethod
    def failure(cls, status_code: int) -> "PageResult":
        return cls(status_code=status_code)

    @property
    def is_success(self) -> bool:
        return self.status_code == HTTPStatus.OK
