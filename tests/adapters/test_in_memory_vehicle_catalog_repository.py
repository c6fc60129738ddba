"""
Contract tests for the in-memory vehicle catalog.

Covers filtering, radius search, sort order and tie-breaking, paging after
filtering, facet counts and filter options.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Callable

import pytest

from autolot.adapters.in_memory_vehicle_catalog_repository import (
    InMemoryVehicleCatalogRepository,
)
from autolot.domain.geo import RadiusFilter
from autolot.domain.vehicle import (
    Condition,
    Drivetrain,
    Location,
    Paging,
    Seller,
    SellerType,
    SortField,
    SortOrder,
    Sorting,
    Vehicle,
    VehicleFilters,
)

VehicleFactory = Callable[..., Vehicle]

SEATTLE = Location(label="Seattle, WA 98101", latitude=47.6101, longitude=-122.3344)
PORTLAND = Location(label="Portland, OR 97201", latitude=45.5152, longitude=-122.6784)


@pytest.fixture
def vehicles(make_vehicle: VehicleFactory) -> list[Vehicle]:
    return [
        make_vehicle(
            1,
            make="Audi",
            model="Q5",
            condition=Condition.NEW,
            mileage=10,
            sale_price=Decimal("52000"),
            payment=Decimal("910"),
            drivetrain=Drivetrain.AWD,
            location=SEATTLE,
            body_style="SUV / Crossover",
        ),
        make_vehicle(2, make="Honda", sale_price=None, mileage=80_000, location=PORTLAND),
        make_vehicle(
            3,
            make="Audi",
            model="A4",
            sale_price=Decimal("30000"),
            mileage=45_000,
            location=Location(label="Unknown"),
        ),
        make_vehicle(
            4,
            make="Ford",
            model="F-150",
            sale_price=Decimal("30000"),
            mileage=110_000,
            drivetrain=Drivetrain.FOUR_WD,
            body_style="Truck",
            seller=Seller(
                dealer_name="Bayside Ford",
                seller_type=SellerType.DEALER,
                account_number="ACCT3000",
            ),
        ),
        make_vehicle(5, make="Honda", sale_price=Decimal("18000"), payment=Decimal("315")),
    ]


@pytest.fixture
def repo(vehicles: list[Vehicle]) -> InMemoryVehicleCatalogRepository:
    return InMemoryVehicleCatalogRepository(vehicles)


def _ids(result) -> list[int]:
    return [vehicle.id for vehicle in result.vehicles]


def _search(repo, filters=None, paging=None, sorting=None, radius=None):
    return repo.search(
        filters=filters or VehicleFilters(),
        paging=paging or Paging(page=1, page_size=50),
        sorting=sorting or Sorting(),
        radius=radius,
    )


# ==============================================================================
# Construction & lookups
# ==============================================================================


def test_duplicate_ids_are_rejected(make_vehicle: VehicleFactory) -> None:
    with pytest.raises(ValueError, match="vehicle ids must be unique"):
        InMemoryVehicleCatalogRepository([make_vehicle(1), make_vehicle(1)])


def test_get_by_id(repo: InMemoryVehicleCatalogRepository) -> None:
    assert repo.get_by_id(3).model == "A4"
    assert repo.get_by_id(999) is None


def test_count(repo: InMemoryVehicleCatalogRepository) -> None:
    assert repo.count() == 5


def test_with_mock_inventory_is_seeded() -> None:
    first = InMemoryVehicleCatalogRepository.with_mock_inventory(20, seed=11)
    second = InMemoryVehicleCatalogRepository.with_mock_inventory(20, seed=11)

    assert first.count() == 20
    assert first.get_by_id(20) == second.get_by_id(20)


# ==============================================================================
# Filtering & paging
# ==============================================================================


def test_default_order_is_newest_first(repo: InMemoryVehicleCatalogRepository) -> None:
    assert _ids(_search(repo)) == [5, 4, 3, 2, 1]


def test_and_semantics(repo: InMemoryVehicleCatalogRepository) -> None:
    result = _search(repo, filters=VehicleFilters(condition=("New",), make=("Audi",)))

    assert _ids(result) == [1]


def test_no_matches_yields_zero_pages(repo: InMemoryVehicleCatalogRepository) -> None:
    result = _search(repo, filters=VehicleFilters(make=("Tesla",)))

    assert result.vehicles == []
    assert result.meta.total_records == 0
    assert result.meta.total_pages == 0
    assert result.meta.has_next_page is False


def test_paging_applies_after_filtering(repo: InMemoryVehicleCatalogRepository) -> None:
    result = _search(
        repo,
        filters=VehicleFilters(make=("Honda", "Audi")),
        paging=Paging(page=2, page_size=2),
    )

    assert _ids(result) == [2, 1]
    assert result.meta.total_records == 4
    assert result.meta.total_pages == 2
    assert result.meta.has_previous_page is True
    assert result.meta.has_next_page is False


def test_price_bound_excludes_unpriced(repo: InMemoryVehicleCatalogRepository) -> None:
    result = _search(repo, filters=VehicleFilters(price_max=Decimal("1000000")))

    assert 2 not in _ids(result)
    assert len(result.vehicles) == 4


def test_grouped_drive_type(repo: InMemoryVehicleCatalogRepository) -> None:
    result = _search(repo, filters=VehicleFilters(drive_type=("AWD/4WD",)))

    assert _ids(result) == [4, 1]


# ==============================================================================
# Radius search
# ==============================================================================


def test_radius_excludes_far_and_uncoordinated(repo: InMemoryVehicleCatalogRepository) -> None:
    # Centered on Seattle; Tacoma (~25mi) is in, Portland (~145mi) is out
    radius = RadiusFilter(latitude=47.6101, longitude=-122.3344, radius_miles=50)

    result = _search(repo, radius=radius)

    assert _ids(result) == [5, 4, 1]
    assert result.distances[1] == 0.0
    assert 20 < result.distances[5] < 30


def test_radius_zero_keeps_exact_location(repo: InMemoryVehicleCatalogRepository) -> None:
    radius = RadiusFilter(latitude=47.6101, longitude=-122.3344, radius_miles=0)

    assert _ids(_search(repo, radius=radius)) == [1]


def test_distances_only_cover_the_returned_page(repo: InMemoryVehicleCatalogRepository) -> None:
    radius = RadiusFilter(latitude=47.6101, longitude=-122.3344, radius_miles=500)

    result = _search(repo, radius=radius, paging=Paging(page=1, page_size=1))

    assert set(result.distances) == {result.vehicles[0].id}


def test_sort_by_distance(repo: InMemoryVehicleCatalogRepository) -> None:
    radius = RadiusFilter(latitude=47.6101, longitude=-122.3344, radius_miles=500)

    result = _search(
        repo,
        radius=radius,
        sorting=Sorting(sort_by=SortField.DISTANCE, order=SortOrder.ASC),
    )

    # Seattle first, then the Tacoma listings (newest first), then Portland
    assert _ids(result) == [1, 5, 4, 2]


# ==============================================================================
# Sorting
# ==============================================================================


def test_id_ascending(repo: InMemoryVehicleCatalogRepository) -> None:
    result = _search(repo, sorting=Sorting(sort_by=SortField.ID, order=SortOrder.ASC))

    assert _ids(result) == [1, 2, 3, 4, 5]


def test_price_ascending_ties_break_on_id_desc_and_unpriced_last(
    repo: InMemoryVehicleCatalogRepository,
) -> None:
    result = _search(repo, sorting=Sorting(sort_by=SortField.PRICE, order=SortOrder.ASC))

    assert _ids(result) == [5, 4, 3, 1, 2]


def test_price_descending_keeps_unpriced_last(repo: InMemoryVehicleCatalogRepository) -> None:
    result = _search(repo, sorting=Sorting(sort_by=SortField.PRICE, order=SortOrder.DESC))

    assert _ids(result) == [1, 4, 3, 5, 2]


def test_mileage_ascending(repo: InMemoryVehicleCatalogRepository) -> None:
    result = _search(repo, sorting=Sorting(sort_by=SortField.MILEAGE, order=SortOrder.ASC))

    assert _ids(result) == [1, 5, 3, 2, 4]


def test_payment_sort_puts_missing_payment_last(repo: InMemoryVehicleCatalogRepository) -> None:
    result = _search(repo, sorting=Sorting(sort_by=SortField.PAYMENT, order=SortOrder.ASC))

    # Vehicles 3 and 4 carry the factory default payment of 525
    assert _ids(result) == [5, 4, 3, 1, 2]


# ==============================================================================
# Filter options & facets
# ==============================================================================


def test_filter_options(repo: InMemoryVehicleCatalogRepository) -> None:
    options = repo.filter_options()

    assert options.makes == ["Audi", "Ford", "Honda"]
    assert options.models == {"Audi": ["A4", "Q5"], "Ford": ["F-150"], "Honda": ["Civic"]}
    assert options.conditions == ["New", "Used"]
    assert options.drive_types == ["AWD/4WD", "FWD", "RWD"]
    assert options.vehicle_types == ["SUV / Crossover", "Sedan", "Truck"]
    assert options.seller_types == ["Dealer"]


def test_facet_counts_sorted_by_count_then_name(repo: InMemoryVehicleCatalogRepository) -> None:
    counts = repo.facet_counts("dealer")

    assert [(facet.name, facet.count) for facet in counts] == [
        ("Downtown Honda", 4),
        ("Bayside Ford", 1),
    ]


def test_vehicle_type_facet(repo: InMemoryVehicleCatalogRepository) -> None:
    counts = repo.facet_counts("vehicle_type")

    assert [(facet.name, facet.count) for facet in counts] == [
        ("Sedan", 3),
        ("SUV / Crossover", 1),
        ("Truck", 1),
    ]


def test_unknown_facet(repo: InMemoryVehicleCatalogRepository) -> None:
    with pytest.raises(ValueError, match="Unknown facet: color"):
        repo.facet_counts("color")
