from __future__ import annotations

from enum import Enum

from autolot.domain.vehicle import FacetCount
from autolot.ports.vehicle_catalog_repository import VehicleCatalogRepository


class Facet(str, Enum):
    DEALER = "dealer"
    VEHICLE_TYPE = "vehicle_type"


class ListCatalogFacets:
    """Listing counts per dealer or per vehicle type, most common first."""

    def __init__(self, vehicle_catalog_repository: VehicleCatalogRepository) -> None:
        self._repository = vehicle_catalog_repository

    def execute(self, facet: Facet) -> list[FacetCount]:
        return self._repository.facet_counts(facet.value)
