"""
Turno Mission Store - FastAPI Application

Main entry point for the API server.
Environment-agnostic: configuration reads from settings (.env file).
"""

import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from turno import __version__
from turno.logging_setup import setup_logging
from turno.settings import get_settings
from api.dependencies import lifespan_handler
from api.routers import missions, combinations, admin, health

# Get settings
cfg = get_settings()

# Configure logging
setup_logging(cfg.log_level)
logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """
    Application factory for creating FastAPI app.

    Configuration is loaded from settings (reads from .env file).

    Returns:
        Configured FastAPI application instance
    """
    cfg = get_settings()

    app = FastAPI(
        title="Turno Mission Store API",
        description="Persists missions and used value combinations in a single JSON document",
        version=__version__,
        lifespan=lifespan_handler  # Creates the data file on startup
    )

    logger.info(f"Configuring CORS with origins: {cfg.cors_origins}")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cfg.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Mount routers
    app.include_router(missions.router, prefix="/api", tags=["missions"])
    app.include_router(combinations.router, prefix="/api", tags=["combinations"])
    app.include_router(admin.router, prefix="/api", tags=["admin"])
    app.include_router(health.router, prefix="/api/health", tags=["health"])

    if cfg.static_dir is not None:
        # Browser client; mounted last so /api routes take precedence
        logger.info(f"Serving static files from {cfg.static_dir}")
        app.mount("/", StaticFiles(directory=cfg.static_dir, html=True), name="static")
    else:
        @app.get("/")
        async def root():
            """Root endpoint - API info"""
            return {
                "name": "Turno Mission Store API",
                "version": __version__,
                "environment": cfg.env,
                "status": "running",
                "docs": "/docs",
                "health": "/api/health/ready"
            }

    logger.info(f"FastAPI application created (env={cfg.env}, data_file={cfg.data_file})")

    return app


# Create app instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    logger.info(f"Starting API server on {cfg.api_host}:{cfg.api_port}")
    logger.info(f"Environment: {cfg.env}")
    logger.info(f"Data file: {cfg.data_file}")

    uvicorn.run(
        "api.main:app",
        host=cfg.api_host,
        port=cfg.api_port,
        reload=cfg.api_reload,
        workers=cfg.api_workers if not cfg.api_reload else 1,  # Workers only work without reload
        log_level=cfg.log_level.lower()
    )
