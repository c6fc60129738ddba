import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from autolot.adapters.in_memory_vehicle_catalog_repository import (
    InMemoryVehicleCatalogRepository,
)
from autolot.entrypoints.http.exception_handlers import register_exception_handlers
from autolot.entrypoints.http.routes.catalog import router as catalog_router
from autolot.entrypoints.http.routes.geocoding import router as geocoding_router
from autolot.entrypoints.http.routes.health import router as health_router
from autolot.entrypoints.http.routes.vehicles import router as vehicles_router
from autolot.infra.config.settings import Settings, get_settings
from autolot.infra.logging.logger import configure_logging
from autolot.ports.vehicle_catalog_repository import VehicleCatalogRepository

logger = logging.getLogger(__name__)


def build_app(
    settings: Settings | None = None,
    catalog: VehicleCatalogRepository | None = None,
) -> FastAPI:
    """
    Create the API application.

    Args:
        settings: Overrides environment settings (tests)
        catalog: Pre-built catalog; when omitted a mock inventory of
            `settings.catalog_size` vehicles is generated at startup
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        # Published once; handlers only ever read it
        if catalog is not None:
            app.state.vehicle_catalog = catalog
        else:
            app.state.vehicle_catalog = InMemoryVehicleCatalogRepository.with_mock_inventory(
                settings.catalog_size, seed=settings.catalog_seed
            )
        logger.info(
            "Vehicle catalog ready",
            extra={"vehicle_count": app.state.vehicle_catalog.count(), "env": settings.app_env},
        )
        yield

    app = FastAPI(
        title="Autolot API",
        description="""
        Vehicle listing API for browsing and searching inventory.

        ## Features
        - Search the vehicle catalog with filters, sorting and pagination
        - Radius search around a point (haversine distance)
        - Filter menus, dealer and vehicle type counts
        - ZIP code geocoding

        ## Authentication
        None. The catalog is read-only.

        ## Error Handling
        All errors return structured JSON with `success: false`, a message
        and an error code.
        """,
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(vehicles_router, prefix="/v1")
    app.include_router(catalog_router, prefix="/v1")
    app.include_router(geocoding_router, prefix="/v1")

    return app


app = build_app()
