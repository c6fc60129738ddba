"""Predicate evaluation for catalog searches.

A vehicle matches when every populated dimension of the filters matches
(AND). List dimensions match when any listed value matches (OR).
"""

from __future__ import annotations

from autolot.domain.vehicle import (
    DRIVE_TYPE_GROUPS,
    MILEAGE_OVER_100K,
    MILEAGE_SENTINEL_FLOOR,
    Vehicle,
    VehicleFilters,
)


def matches(vehicle: Vehicle, filters: VehicleFilters) -> bool:
    if filters.condition and vehicle.condition.value not in filters.condition:
        return False
    if filters.make and vehicle.make not in filters.make:
        return False
    if filters.model and vehicle.model not in filters.model:
        return False
    if filters.trim and vehicle.trim not in filters.trim:
        return False
    if filters.vehicle_type and vehicle.body_style not in filters.vehicle_type:
        return False
    if filters.exterior_color and vehicle.exterior_color not in filters.exterior_color:
        return False
    if filters.seller_type and vehicle.seller.seller_type.value not in filters.seller_type:
        return False
    if filters.drive_type and not _matches_drive_type(vehicle, filters.drive_type):
        return False
    if filters.search and not _matches_search(vehicle, filters.search):
        return False
    if filters.mileage is not None and not _matches_mileage(vehicle, filters.mileage):
        return False
    if filters.has_price_bounds and not _within(
        vehicle.sale_price, filters.price_min, filters.price_max
    ):
        return False
    if filters.has_payment_bounds and not _within(
        vehicle.payment, filters.payment_min, filters.payment_max
    ):
        return False
    return True


def _matches_drive_type(vehicle: Vehicle, drive_types: tuple[str, ...]) -> bool:
    drivetrain = vehicle.drivetrain.value
    return any(drivetrain in DRIVE_TYPE_GROUPS.get(value, (value,)) for value in drive_types)


def _matches_search(vehicle: Vehicle, search: str) -> bool:
    needle = search.strip().lower()
    if not needle:
        return True
    return any(
        needle in haystack.lower() for haystack in (vehicle.title, vehicle.make, vehicle.model)
    )


def _matches_mileage(vehicle: Vehicle, mileage: int) -> bool:
    if mileage == MILEAGE_OVER_100K:
        return vehicle.mileage > MILEAGE_SENTINEL_FLOOR
    return vehicle.mileage <= mileage


def _within(value, minimum, maximum) -> bool:
    # A listing without the value never satisfies a bound
    if value is None:
        return False
    if minimum is not None and value < minimum:
        return False
    if maximum is not None and value > maximum:
        return False
    return True
