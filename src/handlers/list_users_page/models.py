"""
Pydantic model for users page query parameters.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from core.utils.constants import DEFAULT_LIMIT, DEFAULT_PAGE, MAX_LIMIT, MIN_LIMIT


def _positive_int_or_none(value: Any) -> int | None:
    """Parse a query value as a positive integer, or None if it is not one.

    Accepts ints and decimal digit strings ("3", " 3 "). Rejects
    everything else, including floats, "3.5", "0" and "-1".
    """
    if isinstance(value, bool):
        return None

    if isinstance(value, int):
        parsed = value
    elif isinstance(value, str) and value.strip().isdecimal():
        parsed = int(value.strip())
    else:
        return None

    return parsed if parsed >= 1 else None


class ListUsersPageRequest(BaseModel):
    """
    Query parameters of the users page.

    Invalid values never fail the request. They fall back to defaults:
    - page: missing, non-numeric or non-positive → 1
    - limit: missing, non-numeric or non-positive → 20; above 100 → 100
    """

    model_config = ConfigDict(frozen=True)

    page: int = Field(
        default=DEFAULT_PAGE,
        ge=1,
        description="1-based page number",
    )
    limit: int = Field(
        default=DEFAULT_LIMIT,
        ge=MIN_LIMIT,
        le=MAX_LIMIT,
        description=f"Results per page ({MIN_LIMIT}-{MAX_LIMIT})",
    )

    @field_validator("page", mode="before")
    @classmethod
    def parse_page(cls, value: Any) -> int:
        parsed = _positive_int_or_none(value)
        return DEFAULT_PAGE if parsed is None else parsed

    @field_validator("limit", mode="before")
    @classmethod
    def parse_limit(cls, value: Any) -> int:
        parsed = _positive_int_or_none(value)
        if parsed is None:
            return DEFAULT_LIMIT
        return min(parsed, MAX_LIMIT)

    @classmethod
    def from_query(cls, params: dict[str, Any] | None) -> "ListUsersPageRequest":
        """Build the request from API Gateway ``queryStringParameters``."""
        params = params or {}
        data = {key: params[key] for key in ("page", "limit") if key in params}
        return cls(**data)
