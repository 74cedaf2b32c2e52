"""Pagination model."""

from pydantic import BaseModel, ConfigDict, Field, StrictInt


class PaginationInfo(BaseModel):
    """Pagination metadata for a rendered users page."""

    model_config = ConfigDict(frozen=True)

    total_pages: StrictInt = Field(..., ge=0, description="Number of pages reported by the users API")
    current_page: StrictInt = Field(..., ge=1, description="Page number requested by the viewer")
