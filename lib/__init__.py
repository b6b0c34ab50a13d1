# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable utilities:
# - mongo_client.py: MongoStore, the single MongoDB connection shared by the app
# =============================================================================

from lib.mongo_client import MongoStore

__all__ = [
    "MongoStore",
]
