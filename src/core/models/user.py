"""User record models returned by the users API."""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, StrictInt, StrictStr, field_validator


class UserRecord(BaseModel):
    """One user row as returned by the users API.

    The upstream service has been seen emitting both ``firstName`` and
    ``firstname`` spellings, so both are accepted.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: StrictInt = Field(..., description="User identifier")
    first_name: StrictStr = Field(
        ...,
        validation_alias=AliasChoices("firstName", "firstname", "first_name"),
        description="First name",
    )
    last_name: StrictStr = Field(
        ...,
        validation_alias=AliasChoices("lastName", "lastname", "last_name"),
        description="Last name",
    )
    email: StrictStr = Field(..., description="Email address")
    phone: StrictStr = Field(..., description="Phone number")
    updated_at: StrictStr = Field(
        ...,
        validation_alias=AliasChoices("updatedAt", "updated_at"),
        description="Last update timestamp, as sent by the users API",
    )


class UsersPageResponse(BaseModel):
    """Body of a successful ``GET /users/pages`` call."""

    users: list[UserRecord] = Field(..., validation_alias="usersData")
    total_pages: StrictInt = Field(..., validation_alias="totalPages")

    @field_validator("total_pages")
    @classmethod
    def clamp_total_pages(cls, value: int) -> int:
        """Negative page counts are treated as an empty result set."""
        return max(0, value)
