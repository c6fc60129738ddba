from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from autolot.domain.geo import RadiusFilter
from autolot.domain.pagination import PageMeta
from autolot.domain.vehicle import (
    FacetCount,
    FilterOptions,
    Paging,
    Sorting,
    Vehicle,
    VehicleFilters,
)


@dataclass(frozen=True)
class SearchResult:
    """One page of matching vehicles plus pagination metadata."""

    vehicles: list[Vehicle]
    meta: PageMeta
    distances: dict[int, float] = field(default_factory=dict)  # vehicle id -> miles, radius searches only


class VehicleCatalogRepository(ABC):
    """
    Port for catalog data access.

    Implementations must provide filtered, sorted, paginated search plus
    lookups used by the filter menus. The in-memory adapter is the canonical
    implementation; a persistent store can replace it without callers changing.

    Contract (Preconditions):
        - filters, paging, sorting and radius must be pre-validated by caller (UseCase)
        - Implementations trust inputs are valid and do not re-validate

    Implementations backed by a remote source raise UpstreamUnavailableError
    when that source cannot answer. The in-memory adapter never does, and no
    remote adapter exists yet; SearchVehicleCatalog already degrades a radius
    search on that error so one can be plugged in without touching callers.
    """

    @abstractmethod
    def search(
        self,
        filters: VehicleFilters,
        paging: Paging,
        sorting: Sorting,
        radius: RadiusFilter | None = None,
    ) -> SearchResult:
        """
        Search catalog with filters, sorting and paging.

        Args:
            filters: Filter criteria (AND across fields, OR within list fields)
            paging: Page number and size
            sorting: Sort field and direction, ties broken by id descending
            radius: Optional radius search; vehicles without coordinates are excluded

        Returns:
            SearchResult containing the requested page and its metadata
        """
        ...

    @abstractmethod
    def get_by_id(self, vehicle_id: int) -> Vehicle | None: ...

    @abstractmethod
    def count(self) -> int: ...

    @abstractmethod
    def filter_options(self) -> FilterOptions: ...

    @abstractmethod
    def facet_counts(self, facet: str) -> list[FacetCount]:
        """Listing counts grouped by a facet ("dealer" or "vehicle_type")."""
        ...
