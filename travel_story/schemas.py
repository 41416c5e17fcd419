from datetime import UTC, datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _as_utc(value: datetime | None) -> datetime | None:
    # Naive datetimes (clients, SQLite) are taken to be UTC
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


# ===== Requests =====
# Fields are optional at the schema level; routes answer missing or empty
# values with "All fields are required".


class UserRegister(BaseModel):
    full_name: str | None = Field(default=None, alias="fullName")
    email: str | None = None
    password: str | None = None

    model_config = ConfigDict(populate_by_name=True)


class UserLogin(BaseModel):
    email: str | None = None
    password: str | None = None


class CaptionCreate(BaseModel):
    title: str | None = None
    story: str | None = None
    visited_location: str | None = Field(default=None, alias="visitedLocation")
    image_url: str | None = Field(default=None, alias="imageUrl")
    visited_date: datetime | None = Field(default=None, alias="visitedDate")
    is_favourite: bool = Field(default=False, alias="isFavourite")

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("visited_date")
    @classmethod
    def visited_date_as_utc(cls, value: datetime | None) -> datetime | None:
        return _as_utc(value)


# ===== Responses =====


class APIModel(BaseModel):
    """Response model rendered with camelCase keys."""

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)


class UserInfo(APIModel):
    full_name: str = Field(..., alias="fullName")
    email: str


class AuthResponse(APIModel):
    error: bool = False
    user: UserInfo
    access_token: str = Field(..., alias="accessToken")
    message: str


class UserResponse(APIModel):
    error: bool = False
    user: UserInfo
    message: str


class CaptionInfo(APIModel):
    id: int
    user_id: UUID = Field(..., alias="userId")
    title: str
    story: str
    visited_location: str = Field(..., alias="visitedLocation")
    image_url: str = Field(..., alias="imageUrl")
    visited_date: datetime = Field(..., alias="visitedDate")
    is_favourite: bool = Field(..., alias="isFavourite")
    created_at: datetime = Field(..., alias="createdOn")

    @field_validator("visited_date", "created_at")
    @classmethod
    def timestamps_as_utc(cls, value: datetime) -> datetime:
        return _as_utc(value)


class CaptionResponse(APIModel):
    error: bool = False
    caption: CaptionInfo
    message: str


class CaptionListResponse(APIModel):
    stories: list[CaptionInfo]


class ImageUploadResponse(APIModel):
    image_url: str = Field(..., alias="imageUrl")


class HealthResponse(APIModel):
    status: str = "OK"
    message: str = "Server is running"
