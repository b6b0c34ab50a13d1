# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - user.py: User create/update/response schemas and index declarations
#
# These models define the "contract" between API and clients.
# =============================================================================

from .user import (
    MONGO_INDEXES,
    USER_INDEXES,
    USERS_COLLECTION,
    UserCreate,
    UserResponse,
    UserUpdate,
    normalize_timestamp,
    utc_now,
)

__all__ = [
    "MONGO_INDEXES",
    "USER_INDEXES",
    "USERS_COLLECTION",
    "UserCreate",
    "UserResponse",
    "UserUpdate",
    "normalize_timestamp",
    "utc_now",
]
