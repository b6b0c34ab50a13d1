# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - users.py: User CRUD endpoints
# - products.py: Products placeholder endpoint
# - health.py: Health check endpoints
#
# Each router is mounted by app.main.create_app with a URL prefix.
# =============================================================================

from . import health
from . import products
from . import users

__all__ = [
    "health",
    "products",
    "users",
]
