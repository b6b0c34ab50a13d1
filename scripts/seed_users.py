#!/usr/bin/env python3
# =============================================================================
# scripts/seed_users.py - Insert Sample Users
# =============================================================================
# Runs the sample-user seeder once against MONGODB_URI, whatever the
# environment. Safe to repeat: existing users are skipped.
#
# Usage:
#   python scripts/seed_users.py
# =============================================================================

import logging
import os
import sys

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.config import get_settings
from app.exceptions import StorageConnectionError
from app.main import configure_logging
from core.models.user import MONGO_INDEXES
from core.services.seed_service import SeedService
from lib.mongo_client import MongoStore

logger = logging.getLogger("scripts.seed_users")


def main() -> int:
    """Seed the users collection and report what happened."""
    settings = get_settings()
    configure_logging(settings.DEBUG)

    store = MongoStore(
        settings.MONGODB_URI,
        settings.MONGODB_DB_NAME,
        timeout_ms=settings.MONGODB_TIMEOUT_MS,
        indexes=MONGO_INDEXES,
    )
    try:
        store.connect()
    except StorageConnectionError as e:
        logger.error(str(e))
        return 1

    try:
        result = SeedService(store).insert_sample_users()
    finally:
        store.close()

    print(f"Inserted {result.inserted} sample users, skipped {result.skipped} existing.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
