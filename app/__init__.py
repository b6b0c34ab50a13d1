# =============================================================================
# app/ - FastAPI Application Package
# =============================================================================
# This package contains the FastAPI web application:
# - bootstrap.py: Startup sequencer (connect -> seed -> mount routes -> listen)
# - main.py: App factory, middleware setup, logging
# - config.py: Environment variable loading and settings
# - exceptions.py: Error taxonomy and JSON error handlers
# - routers/: API endpoint definitions organized by feature
#
# The app layer is thin - it handles HTTP concerns and delegates
# business logic to the core/ package.
# =============================================================================
