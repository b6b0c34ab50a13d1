# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the Users API:
# - test_models.py: Pydantic model validation
# - test_mongo_client.py: MongoStore connection and indexes
# - test_user_service.py / test_seed_service.py: Service layer
# - test_routes.py: HTTP endpoints and error handlers
# - test_bootstrap.py: Startup sequence and exit codes
#
# Run tests with: pytest
# =============================================================================
