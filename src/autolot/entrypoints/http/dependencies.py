"""
Dependency injection for FastAPI routes.

Key principle: the vehicle catalog is built once at startup and published on
`app.state`; routes reach it through `get_vehicle_catalog` (or
`find_vehicle_catalog` for the listing), never through a module global.
Use cases are cheap and built per request.
Only stateless singletons should use lru_cache.
"""

from __future__ import annotations

from functools import lru_cache

from fastapi import Depends, Request

from autolot.adapters.static_zip_geocoder import StaticZipGeocoder
from autolot.domain.errors import InternalError
from autolot.ports.geocoder import Geocoder
from autolot.ports.vehicle_catalog_repository import VehicleCatalogRepository
from autolot.use_cases.geocode_zip import GeocodeZip
from autolot.use_cases.get_filter_options import GetFilterOptions
from autolot.use_cases.get_vehicle_by_id import GetVehicleById
from autolot.use_cases.list_catalog_facets import ListCatalogFacets
from autolot.use_cases.search_vehicle_catalog import SearchVehicleCatalog


def find_vehicle_catalog(request: Request) -> VehicleCatalogRepository | None:
    """Returns the catalog published during application startup, or None before it."""
    return getattr(request.app.state, "vehicle_catalog", None)


def get_vehicle_catalog(request: Request) -> VehicleCatalogRepository:
    """
    Returns the catalog snapshot published during application startup.

    Raises:
        InternalError: If the lifespan has not loaded a catalog yet
    """
    catalog = find_vehicle_catalog(request)
    if catalog is None:
        raise InternalError("Vehicle catalog is not loaded")
    return catalog


def get_search_vehicle_catalog_use_case(
    catalog: VehicleCatalogRepository | None = Depends(find_vehicle_catalog),
) -> SearchVehicleCatalog | None:
    """None before startup; the listing route answers that with its empty 500 envelope."""
    if catalog is None:
        return None
    return SearchVehicleCatalog(vehicle_catalog_repository=catalog)


def get_get_vehicle_by_id_use_case(
    catalog: VehicleCatalogRepository = Depends(get_vehicle_catalog),
) -> GetVehicleById:
    return GetVehicleById(vehicle_catalog_repository=catalog)


def get_filter_options_use_case(
    catalog: VehicleCatalogRepository = Depends(get_vehicle_catalog),
) -> GetFilterOptions:
    return GetFilterOptions(vehicle_catalog_repository=catalog)


def get_list_catalog_facets_use_case(
    catalog: VehicleCatalogRepository = Depends(get_vehicle_catalog),
) -> ListCatalogFacets:
    return ListCatalogFacets(vehicle_catalog_repository=catalog)


@lru_cache
def get_geocoder() -> Geocoder:
    return StaticZipGeocoder()


def get_geocode_zip_use_case(geocoder: Geocoder = Depends(get_geocoder)) -> GeocodeZip:
    return GeocodeZip(geocoder=geocoder)
