# =============================================================================
# tests/test_seed_service.py - Sample User Seeding Tests
# =============================================================================
# Tests for SeedService:
# - First run inserts all four sample users
# - Re-running is idempotent
# - Pre-existing collisions don't stop the other inserts
# - Non-duplicate failures are re-raised
# =============================================================================

from unittest.mock import MagicMock

import pytest
from pymongo.errors import BulkWriteError

from core.models.user import USERS_COLLECTION
from core.services.seed_service import SAMPLE_USERS, SeedResult, SeedService


def _names(store):
    return sorted(doc["name"] for doc in store.collection(USERS_COLLECTION).find())


class TestInsertSampleUsers:
    """Tests for SeedService.insert_sample_users."""

    def test_inserts_all_sample_users(self, mongo_store):
        result = SeedService(mongo_store).insert_sample_users()

        assert result == SeedResult(inserted=4, skipped=0)
        assert _names(mongo_store) == ["alice", "bob", "carol", "dave"]

    def test_documents_have_timestamps(self, mongo_store):
        SeedService(mongo_store).insert_sample_users()

        for doc in mongo_store.collection(USERS_COLLECTION).find():
            assert doc["createdAt"] is not None
            assert doc["updatedAt"] is not None

    def test_seeding_twice_is_idempotent(self, mongo_store):
        service = SeedService(mongo_store)

        service.insert_sample_users()
        second = service.insert_sample_users()

        assert second == SeedResult(inserted=0, skipped=4)
        assert mongo_store.collection(USERS_COLLECTION).count_documents({}) == 4
        assert _names(mongo_store) == ["alice", "bob", "carol", "dave"]

    def test_partial_success_with_existing_user(self, mongo_store, user_service):
        # Arrange: A user already holds bob's email under another name
        user_service.create_user({"name": "robert", "email": "bob@example.com"})

        # Act
        result = SeedService(mongo_store).insert_sample_users()

        # Assert: The three non-colliding users were still written
        assert result == SeedResult(inserted=3, skipped=1)
        assert _names(mongo_store) == ["alice", "carol", "dave", "robert"]

    def test_sample_users_constant_untouched(self, mongo_store):
        SeedService(mongo_store).insert_sample_users()

        assert all("_id" not in user for user in SAMPLE_USERS)


class TestSeedFailures:
    """Non-duplicate errors must reach the caller."""

    def _store_raising(self, error):
        store = MagicMock()
        store.collection.return_value.insert_many.side_effect = error
        return store

    def test_non_duplicate_write_error_reraised(self):
        error = BulkWriteError({
            "writeErrors": [
                {"index": 0, "code": 11000, "errmsg": "dup"},
                {"index": 1, "code": 121, "errmsg": "Document failed validation"},
            ],
            "nInserted": 2,
        })

        with pytest.raises(BulkWriteError):
            SeedService(self._store_raising(error)).insert_sample_users()

    def test_duplicate_only_bulk_error_swallowed(self):
        error = BulkWriteError({
            "writeErrors": [
                {"index": 0, "code": 11000, "errmsg": "dup"},
                {"index": 3, "code": 11001, "errmsg": "dup"},
            ],
            "nInserted": 2,
        })

        result = SeedService(self._store_raising(error)).insert_sample_users()

        assert result == SeedResult(inserted=2, skipped=2)

    def test_other_errors_reraised(self):
        with pytest.raises(RuntimeError):
            SeedService(self._store_raising(RuntimeError("boom"))).insert_sample_users()
