from __future__ import annotations

import logging
from dataclasses import dataclass, field

from autolot.domain.errors import FilterValidationError, UpstreamUnavailableError
from autolot.domain.geo import RadiusFilter
from autolot.domain.pagination import PageMeta
from autolot.domain.vehicle import (
    Paging,
    SortField,
    Sorting,
    Vehicle,
    VehicleFilters,
)
from autolot.ports.vehicle_catalog_repository import VehicleCatalogRepository

logger = logging.getLogger(__name__)

RADIUS_FALLBACK_NOTE = (
    "Location search is temporarily unavailable; showing results without distance filtering"
)


@dataclass(frozen=True, slots=True)
class SearchVehicleCatalogRequest:
    filters: VehicleFilters = field(default_factory=VehicleFilters)
    paging: Paging = field(default_factory=Paging)
    sorting: Sorting = field(default_factory=Sorting)
    radius: RadiusFilter | None = None


@dataclass(frozen=True, slots=True)
class SearchVehicleCatalogResponse:
    vehicles: list[Vehicle]
    meta: PageMeta
    distances: dict[int, float] = field(default_factory=dict)
    note: str | None = None  # Set when the search degraded to a fallback


class SearchVehicleCatalog:
    """
    Vehicle catalog search with filters, sorting, radius and pagination.

    This use case validates every input before touching the repository, so an
    invalid page never triggers a scan. Filtering and paging live in the
    repository adapter.

    A radius search whose backing source is unavailable degrades to the plain
    listing and reports it through `note`. Nothing else is retried.
    """

    def __init__(self, vehicle_catalog_repository: VehicleCatalogRepository) -> None:
        self._repository = vehicle_catalog_repository

    def execute(self, request: SearchVehicleCatalogRequest) -> SearchVehicleCatalogResponse:
        """
        Execute catalog search.

        Args:
            request: Search parameters (filters, paging, sorting, radius)

        Returns:
            Response containing the page of vehicles and pagination metadata

        Raises:
            PagingValidationError: If paging parameters are invalid
            FilterValidationError: If filter, sort or radius parameters are invalid
        """
        # Paging first: a bad page must never reach the filter pipeline
        request.paging.validate()
        request.filters.validate()
        if request.radius is not None:
            request.radius.validate()
        elif request.sorting.sort_by is SortField.DISTANCE:
            raise FilterValidationError("sorting by distance requires lat, lng and radius")

        try:
            result = self._repository.search(
                filters=request.filters,
                paging=request.paging,
                sorting=request.sorting,
                radius=request.radius,
            )
        except UpstreamUnavailableError as exc:
            if request.radius is None:
                raise
            logger.warning(
                "Radius search unavailable, falling back to plain listing",
                extra={"error": exc.message, "radius_miles": request.radius.radius_miles},
            )
            sorting = request.sorting
            if sorting.sort_by is SortField.DISTANCE:
                sorting = Sorting()
            result = self._repository.search(
                filters=request.filters,
                paging=request.paging,
                sorting=sorting,
                radius=None,
            )
            return SearchVehicleCatalogResponse(
                vehicles=result.vehicles,
                meta=result.meta,
                note=RADIUS_FALLBACK_NOTE,
            )

        return SearchVehicleCatalogResponse(
            vehicles=result.vehicles,
            meta=result.meta,
            distances=result.distances,
        )
