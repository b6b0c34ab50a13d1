# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends().
#
# The MongoStore is created by the bootstrap sequencer and attached to
# app.state.store when the app is built, so nothing here opens connections.
# =============================================================================

from typing import Annotated

from fastapi import Depends, Request

from core.services.user_service import UserService
from lib.mongo_client import MongoStore


def get_store(request: Request) -> MongoStore:
    """Return the store attached to the running app."""
    return request.app.state.store


def get_user_service(store: Annotated[MongoStore, Depends(get_store)]) -> UserService:
    return UserService(store)


# Type aliases for dependency injection
StoreDep = Annotated[MongoStore, Depends(get_store)]
UserServiceDep = Annotated[UserService, Depends(get_user_service)]
