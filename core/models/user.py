# =============================================================================
# core/models/user.py - User Schemas
# =============================================================================
# These models define the API contract for user operations:
# - UserCreate: Input for creating a user (name and email required)
# - UserUpdate: Partial input for updating a user
# - UserResponse: Output when returning user data to clients
#
# Uniqueness of name and email is NOT checked here. It is enforced by the
# unique indexes declared in USER_INDEXES, which MongoStore creates on connect.
# =============================================================================

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

# Collection that holds user documents
USERS_COLLECTION = "users"

# Unique indexes backing the "no two users share a name or email" rule
USER_INDEXES: list[dict[str, Any]] = [
    {"keys": "name", "unique": True, "name": "name_unique"},
    {"keys": "email", "unique": True, "name": "email_unique"},
]

# Everything MongoStore should index on connect, keyed by collection
MONGO_INDEXES: dict[str, list[dict[str, Any]]] = {USERS_COLLECTION: USER_INDEXES}


def normalize_timestamp(value: datetime) -> datetime:
    """
    Bring a datetime to the form MongoDB stores: UTC, millisecond precision.

    Naive values are taken to be UTC, which is what pymongo returns when the
    client is not tz_aware.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    else:
        value = value.astimezone(timezone.utc)
    return value.replace(microsecond=value.microsecond // 1000 * 1000)


def utc_now() -> datetime:
    """Current time, already in stored form."""
    return normalize_timestamp(datetime.now(timezone.utc))


class UserCreate(BaseModel):
    """
    Schema for creating a new user.

    Example:
        {
            "name": "alice",
            "email": "alice@example.com"
        }
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(
        ...,
        min_length=1,
        description="User name (unique across all users)"
    )

    email: str = Field(
        ...,
        min_length=1,
        description="Email address (unique across all users)"
    )


class UserUpdate(BaseModel):
    """
    Schema for updating a user.

    Both fields are optional but at least one must be provided.
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str | None = Field(default=None, min_length=1)
    email: str | None = Field(default=None, min_length=1)

    @model_validator(mode="after")
    def check_not_empty(self) -> "UserUpdate":
        if self.name is None and self.email is None:
            raise ValueError("Provide at least one of 'name' or 'email'")
        return self

    def to_changes(self) -> dict[str, str]:
        """Fields to $set, skipping those not provided."""
        return self.model_dump(exclude_none=True)


class UserResponse(BaseModel):
    """
    Schema for returning user data to clients.

    Timestamps are serialized as createdAt / updatedAt, always UTC with
    millisecond precision so writes and reads render identically.

    Example:
        {
            "id": "65a1f0c2e4b0a1b2c3d4e5f6",
            "name": "alice",
            "email": "alice@example.com",
            "createdAt": "2024-01-15T10:30:00Z",
            "updatedAt": "2024-01-15T10:30:00Z"
        }
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., description="User identifier (MongoDB ObjectId)")
    name: str
    email: str
    created_at: datetime = Field(..., alias="createdAt")
    updated_at: datetime = Field(..., alias="updatedAt")

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> "UserResponse":
        """Build a response from a raw MongoDB document."""
        return cls(
            id=str(document["_id"]),
            name=document["name"],
            email=document["email"],
            created_at=normalize_timestamp(document["createdAt"]),
            updated_at=normalize_timestamp(document["updatedAt"]),
        )
