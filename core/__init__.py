# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains the business logic behind the HTTP layer:
# - models/: Pydantic schemas for the User entity
# - services/: User CRUD and sample-data seeding
#
# Routes stay thin and delegate here. Services raise UsersApiException
# subclasses, which the app layer turns into HTTP responses.
# =============================================================================
