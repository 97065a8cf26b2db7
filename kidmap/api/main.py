"""Kid-friendly places API - FastAPI application."""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..config import AppConfig, configure_logging, get_config
from ..services.location_store import LocationStore
from ..services.overpass_service import OverpassService
from ..services.refresh_service import RefreshService
from .dependencies import get_app_config
from .routers import locations
from .schemas import ConfigResponse, HealthResponse


def create_app(
    config: Optional[AppConfig] = None,
    store: Optional[LocationStore] = None,
    overpass_service: Optional[OverpassService] = None,
) -> FastAPI:
    """Build the application with its own store and Overpass client.

    Args:
        config: Configuration (defaults to the global config)
        store: Location store to serve (a fresh empty store if omitted)
        overpass_service: Overpass client (built from config if omitted;
            a client built here is closed on shutdown)
    """
    config = config or get_config()
    owns_overpass = overpass_service is None
    if overpass_service is None:
        overpass_service = OverpassService(config.overpass_url, timeout=config.http_timeout)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan handler."""
        # Startup
        configure_logging(config.log_level)

        yield

        # Shutdown
        if owns_overpass:
            await overpass_service.aclose()

    app = FastAPI(
        title="Kid Map API",
        description="Kid-friendly places in San Francisco from OpenStreetMap",
        version=__version__,
        lifespan=lifespan,
    )

    app.state.config = config
    app.state.store = store if store is not None else LocationStore()
    app.state.refresh_service = RefreshService(
        app.state.store,
        overpass_service,
        bbox=config.region,
        query_timeout=config.query_timeout,
    )

    # CORS middleware - allow all origins in development
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(locations.router, prefix="/api/locations", tags=["locations"])

    @app.get("/api/health", response_model=HealthResponse)
    async def health_check():
        """Health check endpoint."""
        return HealthResponse(status="healthy", version=__version__)

    @app.get("/api/config", response_model=ConfigResponse)
    async def get_api_config(app_config: AppConfig = Depends(get_app_config)):
        """Get API configuration (non-sensitive)."""
        return ConfigResponse(
            overpass_url=app_config.overpass_url,
            http_timeout=app_config.http_timeout,
            query_timeout=app_config.query_timeout,
            region=app_config.region,
        )

    return app


app = create_app()
