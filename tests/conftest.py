"""Shared fixtures: a factory for hand-built vehicles."""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Callable

import pytest

from autolot.domain.vehicle import (
    Condition,
    Drivetrain,
    Location,
    Seller,
    SellerType,
    Vehicle,
)

TACOMA = Location(label="Tacoma, WA 98402", latitude=47.2529, longitude=-122.4443)


def build_vehicle(vehicle_id: int, **overrides: Any) -> Vehicle:
    """Vehicle with sensible defaults; any field can be overridden."""
    price = overrides.pop("sale_price", Decimal("30000"))
    fields: dict[str, Any] = {
        "id": vehicle_id,
        "condition": Condition.USED,
        "make": "Honda",
        "model": "Civic",
        "year": 2021,
        "trim": "EX",
        "drivetrain": Drivetrain.FWD,
        "mileage": 25_000,
        "seller": Seller(
            dealer_name="Downtown Honda",
            seller_type=SellerType.DEALER,
            account_number="ACCT1000",
        ),
        "location": TACOMA,
        "sale_price": price,
        "payment": Decimal("525") if price is not None else None,
    }
    fields.update(overrides)
    return Vehicle(**fields)


@pytest.fixture
def make_vehicle() -> Callable[..., Vehicle]:
    return build_vehicle
