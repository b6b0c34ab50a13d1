# =============================================================================
# core/services/seed_service.py - Sample User Seeding
# =============================================================================
# Inserts a fixed set of sample users for development environments.
#
# The insert is unordered, so users that don't collide with existing records
# are written even when others fail. Duplicate-key failures are expected on
# every run after the first and are only logged; anything else is re-raised.
#
# Usage:
#   result = SeedService(store).insert_sample_users()
#   print(result.inserted, result.skipped)
# =============================================================================

import logging
from copy import deepcopy
from dataclasses import dataclass
from typing import Any

from pymongo.errors import BulkWriteError

from app.exceptions import DUPLICATE_KEY_CODES
from core.models.user import USERS_COLLECTION, utc_now
from lib.mongo_client import MongoStore

logger = logging.getLogger(__name__)

# Sample users for development / seeding
SAMPLE_USERS: tuple[dict[str, str], ...] = (
    {"name": "alice", "email": "alice@example.com"},
    {"name": "bob", "email": "bob@example.com"},
    {"name": "carol", "email": "carol@example.com"},
    {"name": "dave", "email": "dave@example.com"},
)


@dataclass(frozen=True)
class SeedResult:
    """Outcome of one seeding run."""

    inserted: int
    skipped: int


class SeedService:
    """Writes SAMPLE_USERS into the users collection."""

    def __init__(self, store: MongoStore, sample_users: tuple[dict[str, str], ...] = SAMPLE_USERS):
        self.store = store
        self.sample_users = sample_users

    def _documents(self) -> list[dict[str, Any]]:
        now = utc_now()
        # insert_many adds _id to each dict, so never hand it the module constant
        return [
            {**deepcopy(user), "createdAt": now, "updatedAt": now}
            for user in self.sample_users
        ]

    def insert_sample_users(self) -> SeedResult:
        """
        Insert the sample users, ignoring ones that already exist.

        Returns:
            SeedResult with the number of users inserted and skipped

        Raises:
            BulkWriteError: If any write failed for a reason other than a
                duplicate key
            PyMongoError: On any other storage failure
        """
        documents = self._documents()
        collection = self.store.collection(USERS_COLLECTION)

        try:
            result = collection.insert_many(documents, ordered=False)
        except BulkWriteError as e:
            write_errors = e.details.get("writeErrors", [])
            unexpected = [err for err in write_errors if err.get("code") not in DUPLICATE_KEY_CODES]
            if unexpected or not write_errors:
                logger.error(f"Error inserting sample users: {e.details}")
                raise
            inserted = e.details.get("nInserted", len(documents) - len(write_errors))
            logger.info(
                f"Some sample users already existed; duplicates ignored "
                f"({inserted} inserted, {len(write_errors)} skipped)."
            )
            return SeedResult(inserted=inserted, skipped=len(write_errors))
        except Exception as e:
            logger.error(f"Error inserting sample users: {e}")
            raise

        inserted = len(result.inserted_ids)
        logger.info(f"Sample users inserted ({inserted} new).")
        return SeedResult(inserted=inserted, skipped=0)
