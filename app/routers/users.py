# =============================================================================
# app/routers/users.py - User CRUD Endpoints
# =============================================================================
# Standard REST endpoints over the User entity.
#
# Endpoints:
# - GET    /api/users            : List users
# - GET    /api/users/{user_id}  : Get one user
# - POST   /api/users            : Create a user
# - PUT    /api/users/{user_id}  : Update a user
# - DELETE /api/users/{user_id}  : Delete a user
#
# Handlers are plain `def` so the blocking pymongo calls run in FastAPI's
# threadpool instead of the event loop.
# =============================================================================

from typing import Annotated

from fastapi import APIRouter, Path, status
from pydantic import BaseModel, Field

from app.dependencies import UserServiceDep
from core.models.user import UserCreate, UserResponse, UserUpdate

router = APIRouter()

UserId = Annotated[str, Path(description="User ObjectId")]


class UserDeleteResponse(BaseModel):
    """Response when deleting a user."""
    id: str = Field(..., example="65a1f0c2e4b0a1b2c3d4e5f6")
    message: str = Field(default="User deleted successfully")


@router.get("", response_model=list[UserResponse])
def list_users(service: UserServiceDep):
    """List all users, newest first."""
    return service.list_users()


@router.get("/{user_id}", response_model=UserResponse)
def get_user(user_id: UserId, service: UserServiceDep):
    """Get a single user by id."""
    return service.get_user(user_id)


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def create_user(request: UserCreate, service: UserServiceDep):
    """
    Create a user.

    Returns 409 if the name or email is already taken.
    """
    return service.create_user(request)


@router.put("/{user_id}", response_model=UserResponse)
def update_user(user_id: UserId, request: UserUpdate, service: UserServiceDep):
    """Update a user's name and/or email."""
    return service.update_user(user_id, request)


@router.delete("/{user_id}", response_model=UserDeleteResponse)
def delete_user(user_id: UserId, service: UserServiceDep):
    """Delete a user."""
    service.delete_user(user_id)
    return UserDeleteResponse(id=user_id)
