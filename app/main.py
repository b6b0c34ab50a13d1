# =============================================================================
# app/main.py - FastAPI Application Factory
# =============================================================================
# Builds the FastAPI application around an already-connected MongoStore.
# Routers are included first, error handlers last, so every error raised
# by a route reaches the handlers.
#
# The app is not created at import time: the bootstrap sequencer connects
# storage first and only then calls create_app(). To run the server:
#   python -m app
# =============================================================================

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import Settings, settings as default_settings
from app.exceptions import register_exception_handlers
from app.routers import health, products, users
from lib.mongo_client import MongoStore

logger = logging.getLogger(__name__)


def configure_logging(debug: bool = False) -> None:
    """Configure root logging once for the process."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    - Startup: log the environment
    - Shutdown: close the MongoDB connection
    """
    logger.info(f"Users API started in {app.state.settings.ENVIRONMENT} mode")

    yield

    logger.info("Shutting down Users API")
    app.state.store.close()


def create_app(store: MongoStore, settings: Settings | None = None) -> FastAPI:
    """
    Create the Users API application.

    Args:
        store: Connected MongoStore shared by every request
        settings: Settings to use (defaults to the global settings)

    Returns:
        FastAPI app with routes and error handlers mounted
    """
    settings = settings or default_settings

    app = FastAPI(
        title="Users API",
        description="CRUD endpoints for users stored in MongoDB.",
        version="1.0.0",
        lifespan=lifespan,
        openapi_tags=[
            {"name": "Users", "description": "Create, read, update and delete users"},
            {"name": "Products", "description": "Products placeholder"},
            {"name": "Health", "description": "API health and readiness checks"},
        ],
    )
    app.state.store = store
    app.state.settings = settings

    # CORS middleware - allows cross-origin requests
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # -------------------------------------------------------------------------
    # Routers
    # -------------------------------------------------------------------------

    app.include_router(users.router, prefix="/api/users", tags=["Users"])
    app.include_router(products.router, prefix="/api/products", tags=["Products"])
    app.include_router(health.router, prefix="/api", tags=["Health"])

    # -------------------------------------------------------------------------
    # Error handlers (must come after every router)
    # -------------------------------------------------------------------------

    register_exception_handlers(app)

    return app
