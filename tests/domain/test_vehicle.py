"""
Tests for the vehicle record and the search value objects.

Covers:
- Vehicle invariants (payment requires a price) and the derived title
- Payment estimate rounding
- VehicleFilters.validate() guardrails
- Paging.validate() bounds and offset
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from autolot.domain.errors import FilterValidationError, PagingValidationError
from autolot.domain.vehicle import (
    Paging,
    SortField,
    SortOrder,
    Sorting,
    VehicleFilters,
    estimate_monthly_payment,
)


# ==============================================================================
# Vehicle
# ==============================================================================


def test_title_is_year_make_model_trim(make_vehicle) -> None:
    vehicle = make_vehicle(1, year=2023, make="Audi", model="Q5", trim="Premium")

    assert vehicle.title == "2023 Audi Q5 Premium"


def test_payment_without_price_is_rejected(make_vehicle) -> None:
    with pytest.raises(ValueError, match="payment requires a sale_price"):
        make_vehicle(1, sale_price=None, payment=Decimal("500"))


def test_vehicle_without_price_has_no_payment(make_vehicle) -> None:
    vehicle = make_vehicle(1, sale_price=None)

    assert vehicle.sale_price is None
    assert vehicle.payment is None


def test_vehicle_is_immutable(make_vehicle) -> None:
    vehicle = make_vehicle(1)

    with pytest.raises(AttributeError):
        vehicle.mileage = 0  # type: ignore[misc]


@pytest.mark.parametrize(
    "price,expected",
    [
        (Decimal("60000"), Decimal("1050")),
        (Decimal("30000"), Decimal("525")),
        # 10001 * 1.05 / 60 = 175.0175 -> 175
        (Decimal("10001"), Decimal("175")),
        # 10030 * 1.05 / 60 = 175.525 -> 176 (half up)
        (Decimal("10030"), Decimal("176")),
    ],
)
def test_estimate_monthly_payment(price: Decimal, expected: Decimal) -> None:
    assert estimate_monthly_payment(price) == expected


# ==============================================================================
# VehicleFilters
# ==============================================================================


def test_empty_filters_are_valid() -> None:
    VehicleFilters().validate()


def test_filters_reject_float_money_bounds() -> None:
    filters = VehicleFilters(price_min=1000.0)  # type: ignore[arg-type]

    with pytest.raises(FilterValidationError, match="price_min must be Decimal"):
        filters.validate()


def test_filters_reject_inverted_price_range() -> None:
    filters = VehicleFilters(price_min=Decimal("50000"), price_max=Decimal("20000"))

    with pytest.raises(FilterValidationError, match="price_min cannot be greater than price_max"):
        filters.validate()


def test_filters_reject_inverted_payment_range() -> None:
    filters = VehicleFilters(payment_min=Decimal("900"), payment_max=Decimal("300"))

    with pytest.raises(FilterValidationError, match="payment_min"):
        filters.validate()


def test_filters_reject_negative_mileage() -> None:
    with pytest.raises(FilterValidationError, match="mileage must be >= 0"):
        VehicleFilters(mileage=-1).validate()


def test_equal_bounds_are_valid() -> None:
    VehicleFilters(price_min=Decimal("30000"), price_max=Decimal("30000")).validate()


def test_bound_flags() -> None:
    assert VehicleFilters(price_max=Decimal("1")).has_price_bounds
    assert not VehicleFilters(price_max=Decimal("1")).has_payment_bounds
    assert VehicleFilters(payment_min=Decimal("1")).has_payment_bounds


# ==============================================================================
# Paging & Sorting
# ==============================================================================


def test_paging_defaults() -> None:
    paging = Paging()

    assert paging.page == 1
    assert paging.page_size == 20
    assert paging.offset == 0


def test_paging_offset() -> None:
    assert Paging(page=3, page_size=25).offset == 50


@pytest.mark.parametrize("page", [0, -1])
def test_paging_rejects_page_below_one(page: int) -> None:
    with pytest.raises(PagingValidationError, match="Page number must be greater than 0"):
        Paging(page=page).validate()


@pytest.mark.parametrize("page_size", [0, 101])
def test_paging_rejects_page_size_out_of_range(page_size: int) -> None:
    with pytest.raises(PagingValidationError, match="Page size must be between 1 and 100"):
        Paging(page_size=page_size).validate()


def test_paging_accepts_bounds() -> None:
    Paging(page=1, page_size=1).validate()
    Paging(page=1, page_size=100).validate()


def test_default_sorting_is_newest_first() -> None:
    sorting = Sorting()

    assert sorting.sort_by is SortField.ID
    assert sorting.order is SortOrder.DESC
    assert sorting.descending
