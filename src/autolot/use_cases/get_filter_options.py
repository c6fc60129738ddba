from __future__ import annotations

from autolot.domain.vehicle import FilterOptions
from autolot.ports.vehicle_catalog_repository import VehicleCatalogRepository


class GetFilterOptions:
    """Values the filter menus can offer, derived from the current catalog."""

    def __init__(self, vehicle_catalog_repository: VehicleCatalogRepository) -> None:
        self._repository = vehicle_catalog_repository

    def execute(self) -> FilterOptions:
        return self._repository.filter_options()
