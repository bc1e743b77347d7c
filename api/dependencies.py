"""
API Dependencies - Singleton state management and FastAPI dependency injection

Holds the document repository and the write lock shared by every request
in this process.
"""

import asyncio
import logging
from typing import Optional
from contextlib import asynccontextmanager

from fastapi.concurrency import run_in_threadpool

from api.repositories.base import BaseRepository
from api.repositories.local import LocalFileRepository

logger = logging.getLogger(__name__)


class AppState:
    """
    Global application state - holds the repository and the write lock.

    Singleton pattern: one instance shared across all requests.
    """

    def __init__(self, repository: Optional[BaseRepository] = None):
        self.repository: Optional[BaseRepository] = repository

        # Serializes load -> mutate -> save so concurrent writers in this
        # process cannot overwrite each other. Other processes sharing the
        # same file are still last-write-wins.
        self.write_lock = asyncio.Lock()

        self._initialized = False
        self._initialization_lock = asyncio.Lock()

    async def initialize(self) -> None:
        """Create the repository (if not injected) and make sure the data file exists"""
        async with self._initialization_lock:
            if self._initialized:
                logger.debug("AppState already initialized")
                return

            logger.info("Initializing AppState...")
            try:
                if self.repository is None:
                    self.repository = LocalFileRepository()
                await run_in_threadpool(self.repository.ensure_initialized)
                self._initialized = True
                logger.info("AppState initialization complete")
            except Exception as e:
                logger.error(f"Failed to initialize AppState: {e}", exc_info=True)
                raise

    def is_ready(self) -> bool:
        """Check if app is ready to serve requests"""
        return self._initialized and self.repository is not None

    def get_status(self) -> dict:
        """Get current initialization status"""
        status = {"initialized": self._initialized}
        if self.repository is not None:
            status.update(self.repository.describe())
        return status


# Global singleton instance
app_state = AppState()


async def get_app_state() -> AppState:
    """
    FastAPI dependency to access app state.

    Usage in routers:
        @router.get("/example")
        async def example(state: AppState = Depends(get_app_state)):
            document = await run_in_threadpool(state.repository.load)
            ...
    """
    if not app_state.is_ready():
        logger.warning("AppState not initialized, initializing on first request...")
        await app_state.initialize()
    return app_state


@asynccontextmanager
async def lifespan_handler(app):
    """
    FastAPI lifespan context manager for startup/shutdown.

    Usage in main.py:
        app = FastAPI(lifespan=lifespan_handler)
    """
    logger.info("FastAPI starting up...")
    await app_state.initialize()

    yield  # App is now running

    logger.info("Shutdown complete")
