from __future__ import annotations

import random
from collections import Counter
from functools import cached_property
from typing import Callable, Iterable

from autolot.adapters.mock_inventory import generate_inventory
from autolot.domain.filtering import matches
from autolot.domain.geo import RadiusFilter
from autolot.domain.pagination import paginate
from autolot.domain.vehicle import (
    DRIVE_TYPE_GROUPS,
    FacetCount,
    FilterOptions,
    Paging,
    SortField,
    Sorting,
    Vehicle,
    VehicleFilters,
)
from autolot.ports.vehicle_catalog_repository import SearchResult, VehicleCatalogRepository

FACETS: dict[str, Callable[[Vehicle], str]] = {
    "dealer": lambda vehicle: vehicle.seller.dealer_name,
    "vehicle_type": lambda vehicle: vehicle.body_style,
}


class InMemoryVehicleCatalogRepository(VehicleCatalogRepository):
    """
    Canonical contract implementation over an immutable snapshot.

    - Holds vehicles in a tuple built once; never mutated afterwards
    - Applies AND-semantics filtering, then the optional radius
    - Sorts newest first by default, explicit sorts tie-break on id descending
    - Applies paging AFTER filtering and sorting
    """

    def __init__(self, vehicles: Iterable[Vehicle]) -> None:
        self._vehicles = tuple(vehicles)
        self._by_id = {vehicle.id: vehicle for vehicle in self._vehicles}

        if len(self._by_id) != len(self._vehicles):
            raise ValueError("vehicle ids must be unique")

    @classmethod
    def with_mock_inventory(
        cls, count: int, seed: int | None = None
    ) -> InMemoryVehicleCatalogRepository:
        return cls(generate_inventory(count, rng=random.Random(seed)))

    def search(
        self,
        filters: VehicleFilters,
        paging: Paging,
        sorting: Sorting,
        radius: RadiusFilter | None = None,
    ) -> SearchResult:
        # Trust that UseCase has validated inputs (contract programming)
        candidates = [vehicle for vehicle in self._vehicles if matches(vehicle, filters)]

        distances: dict[int, float] = {}
        if radius is not None:
            within = []
            for vehicle in candidates:
                distance = radius.distance_to(vehicle)
                if radius.contains(distance):
                    distances[vehicle.id] = distance
                    within.append(vehicle)
            candidates = within

        ordered = self._sort(candidates, sorting, distances)
        page = paginate(ordered, paging)

        return SearchResult(
            vehicles=page.items,
            meta=page.meta,
            distances={v.id: distances[v.id] for v in page.items if v.id in distances},
        )

    def get_by_id(self, vehicle_id: int) -> Vehicle | None:
        return self._by_id.get(vehicle_id)

    def count(self) -> int:
        return len(self._vehicles)

    @cached_property
    def _filter_options(self) -> FilterOptions:
        models: dict[str, set[str]] = {}
        for vehicle in self._vehicles:
            models.setdefault(vehicle.make, set()).add(vehicle.model)

        return FilterOptions(
            makes=sorted(models),
            models={make: sorted(names) for make, names in sorted(models.items())},
            trims=sorted({v.trim for v in self._vehicles}),
            conditions=sorted({v.condition.value for v in self._vehicles}),
            drive_types=list(DRIVE_TYPE_GROUPS),
            vehicle_types=sorted({v.body_style for v in self._vehicles}),
            exterior_colors=sorted({v.exterior_color for v in self._vehicles}),
            seller_types=sorted({v.seller.seller_type.value for v in self._vehicles}),
        )

    def filter_options(self) -> FilterOptions:
        return self._filter_options

    def facet_counts(self, facet: str) -> list[FacetCount]:
        try:
            key = FACETS[facet]
        except KeyError:
            raise ValueError(f"Unknown facet: {facet}") from None

        counts = Counter(key(vehicle) for vehicle in self._vehicles)
        return [
            FacetCount(name=name, count=count)
            for name, count in sorted(counts.items(), key=lambda item: (-item[1], item[0]))
        ]

    def _sort(
        self, vehicles: list[Vehicle], sorting: Sorting, distances: dict[int, float]
    ) -> list[Vehicle]:
        # Canonical order: newest generated first
        ordered = sorted(vehicles, key=lambda vehicle: vehicle.id, reverse=True)

        if sorting.sort_by is SortField.ID:
            return ordered if sorting.descending else ordered[::-1]

        key = self._sort_key(sorting.sort_by, distances)
        valued = [vehicle for vehicle in ordered if key(vehicle) is not None]
        missing = [vehicle for vehicle in ordered if key(vehicle) is None]

        # sort() is stable with reverse=True too, so ties keep id-descending order
        valued.sort(key=key, reverse=sorting.descending)
        return valued + missing

    @staticmethod
    def _sort_key(sort_by: SortField, distances: dict[int, float]) -> Callable[[Vehicle], object]:
        if sort_by is SortField.PRICE:
            return lambda vehicle: vehicle.sale_price
        if sort_by is SortField.PAYMENT:
            return lambda vehicle: vehicle.payment
        if sort_by is SortField.MILEAGE:
            return lambda vehicle: vehicle.mileage
        if sort_by is SortField.YEAR:
            return lambda vehicle: vehicle.year
        if sort_by is SortField.DISTANCE:
            return lambda vehicle: distances.get(vehicle.id)
        raise ValueError(f"Unsupported sort field: {sort_by}")
