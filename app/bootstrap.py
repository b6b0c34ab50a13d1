# =============================================================================
# app/bootstrap.py - Startup Sequencer
# =============================================================================
# Starts the service in a fixed order:
#
#   CONNECTING -> SEEDING -> ROUTES_MOUNTED -> LISTENING
#
# Any stage can end in FAILED. Only a storage connection failure is fatal:
# the process exits with status 1 and no server is ever started. Seeding
# failures are logged and startup carries on. There are no retries.
#
# Usage:
#   python -m app
#   python scripts/start_server.py
# =============================================================================

import logging
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Callable

import uvicorn
from fastapi import FastAPI

from app.config import Settings, get_settings
from app.exceptions import StorageConnectionError
from app.main import configure_logging, create_app
from core.models.user import MONGO_INDEXES
from core.services.seed_service import SeedService
from lib.mongo_client import MongoStore

logger = logging.getLogger(__name__)

ServeFunc = Callable[[FastAPI, str, int], None]


class BootstrapState(str, Enum):
    """Stages of the startup sequence."""
    PENDING = "pending"
    CONNECTING = "connecting"
    SEEDING = "seeding"
    ROUTES_MOUNTED = "routes_mounted"
    LISTENING = "listening"
    FAILED = "failed"


@dataclass(frozen=True)
class BootstrapConfig:
    """What the sequencer needs to know, decided before it runs."""

    enable_seeding: bool
    host: str = "0.0.0.0"
    port: int = 8000

    @classmethod
    def from_settings(cls, settings: Settings) -> "BootstrapConfig":
        return cls(
            enable_seeding=settings.seeding_enabled,
            host=settings.API_HOST,
            port=settings.PORT,
        )


def serve_with_uvicorn(app: FastAPI, host: str, port: int) -> None:
    """Run the app with uvicorn until the process is stopped."""
    config = uvicorn.Config(app, host=host, port=port, log_config=None)
    uvicorn.Server(config).run()


class BootstrapSequencer:
    """
    Runs the startup stages in order and records the current one.

    Example:
        sequencer = BootstrapSequencer(BootstrapConfig(enable_seeding=True), store)
        sequencer.run()  # blocks while the server is listening
    """

    def __init__(
        self,
        config: BootstrapConfig,
        store: MongoStore,
        settings: Settings | None = None,
        serve: ServeFunc = serve_with_uvicorn,
    ):
        self.config = config
        self.store = store
        self.settings = settings
        self.serve = serve
        self.state = BootstrapState.PENDING
        self.history: list[BootstrapState] = []
        self.app: FastAPI | None = None

    def _enter(self, state: BootstrapState) -> None:
        self.state = state
        self.history.append(state)
        logger.debug(f"Bootstrap state: {state.value}")

    def connect(self) -> None:
        self._enter(BootstrapState.CONNECTING)
        self.store.connect()

    def seed(self) -> None:
        if not self.config.enable_seeding:
            logger.info("Seeding disabled; skipping sample users")
            return

        self._enter(BootstrapState.SEEDING)
        try:
            SeedService(self.store).insert_sample_users()
        except Exception as e:
            logger.error(f"Seeding sample users failed: {e}")

    def mount_routes(self) -> FastAPI:
        self._enter(BootstrapState.ROUTES_MOUNTED)
        self.app = create_app(self.store, settings=self.settings)
        return self.app

    def listen(self) -> None:
        self._enter(BootstrapState.LISTENING)
        logger.info(f"Server is running on port: {self.config.port}")
        self.serve(self.app, self.config.host, self.config.port)

    def run(self) -> None:
        """
        Run every stage.

        Raises:
            StorageConnectionError: If MongoDB is unreachable (state is FAILED)
        """
        try:
            self.connect()
            self.seed()
            self.mount_routes()
            self.listen()
        except Exception:
            self._enter(BootstrapState.FAILED)
            raise


def run_server(
    settings: Settings | None = None,
    store: MongoStore | None = None,
    serve: ServeFunc = serve_with_uvicorn,
) -> int:
    """
    Build the sequencer from settings and run it.

    Returns:
        Process exit code: 0 after a normal shutdown, 1 if storage was unreachable
    """
    settings = settings or get_settings()
    store = store or MongoStore(
        settings.MONGODB_URI,
        settings.MONGODB_DB_NAME,
        timeout_ms=settings.MONGODB_TIMEOUT_MS,
        indexes=MONGO_INDEXES,
    )
    sequencer = BootstrapSequencer(
        BootstrapConfig.from_settings(settings),
        store,
        settings=settings,
        serve=serve,
    )

    try:
        sequencer.run()
    except StorageConnectionError as e:
        logger.error(f"Failed to start server: {e}")
        return 1

    return 0


def main() -> None:
    settings = get_settings()
    configure_logging(settings.DEBUG)
    sys.exit(run_server(settings))


if __name__ == "__main__":
    main()
