# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .user_service import UserService
from .seed_service import SAMPLE_USERS, SeedResult, SeedService

__all__ = [
    "UserService",
    "SeedService",
    "SeedResult",
    "SAMPLE_USERS",
]
