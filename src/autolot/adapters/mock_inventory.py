"""
Synthetic vehicle inventory.

Produces schema-consistent listings for demos and tests. Fields are drawn
independently except for a few couplings:
- model always belongs to the drawn make
- New vehicles get near-zero mileage
- payment exists only when a sale price exists
- coordinates always belong to the drawn location label
"""

from __future__ import annotations

import logging
import random
from decimal import Decimal

from autolot.domain.vehicle import (
    Condition,
    Drivetrain,
    Location,
    Seller,
    SellerType,
    Vehicle,
    estimate_monthly_payment,
)

logger = logging.getLogger(__name__)


# ==============================================================================
# Reference data
# ==============================================================================

MODELS_BY_MAKE: dict[str, list[str]] = {
    "Audi": ["A3", "A4", "A6", "Q5", "Q7", "Q8"],
    "BMW": ["3 Series", "5 Series", "X3", "X5", "X7"],
    "Chevrolet": ["Silverado", "Equinox", "Malibu", "Traverse", "Camaro", "Tahoe"],
    "Ford": ["F-150", "Escape", "Explorer", "Mustang", "Edge", "Expedition", "Ranger"],
    "Honda": ["Civic", "Accord", "CR-V", "Pilot", "HR-V"],
    "Hyundai": ["Elantra", "Sonata", "Tucson", "Santa Fe", "Palisade"],
    "Mercedes-Benz": ["C-Class", "E-Class", "GLC", "GLE", "S-Class", "A-Class"],
    "Nissan": ["Altima", "Sentra", "Rogue", "Pathfinder", "Murano"],
}
MAKES = sorted(MODELS_BY_MAKE)

TRIMS = [
    "Base", "LX", "EX", "EX-L", "Touring", "Sport", "Limited", "Premium",
    "Luxury", "SE", "SL", "SR", "Platinum", "Lariat", "XLT",
]
BODY_STYLES = [
    "Sedan", "SUV / Crossover", "Truck", "Coupe", "Convertible",
    "Hatchback", "Van / Minivan", "Wagon",
]
EXTERIOR_COLORS = ["White", "Black", "Silver", "Gray", "Blue", "Red", "Green", "Brown"]
TRANSMISSIONS = ["Auto", "CVT", "Manual"]
DOORS = ["2 doors", "4 doors"]

DEALERS = [
    "Bayside Ford", "Premium Auto Group", "Downtown Honda", "City Toyota",
    "Luxury Motors", "Northwest Chevrolet", "Eastside BMW", "Metro Audi",
    "Pacific Mercedes-Benz", "Summit Hyundai", "Valley Nissan",
]

# label -> (latitude, longitude)
LOCATIONS: dict[str, tuple[float, float]] = {
    "Lakewood, WA 98499": (47.1718, -122.5185),
    "Tacoma, WA 98402": (47.2529, -122.4443),
    "Federal Way, WA 98003": (47.3223, -122.3126),
    "Seattle, WA 98101": (47.6101, -122.3344),
    "Bellevue, WA 98004": (47.6148, -122.2010),
    "Everett, WA 98201": (47.9790, -122.2021),
    "Renton, WA 98057": (47.4829, -122.2171),
    "Kent, WA 98032": (47.3809, -122.2348),
    "Redmond, WA 98052": (47.6740, -122.1215),
    "Bothell, WA 98011": (47.7601, -122.2054),
    "Tukwila, WA 98168": (47.4740, -122.2610),
}

SAMPLE_IMAGES = [
    "https://images.unsplash.com/photo-1552519507-da3b142c6e3d?w=450&h=300&fit=crop",
    "https://images.unsplash.com/photo-1618843479313-40f8afb4b4d8?w=450&h=300&fit=crop",
    "https://images.unsplash.com/photo-1617788138017-80ad40651399?w=450&h=300&fit=crop",
    "https://images.unsplash.com/photo-1606664515524-ed2f786a0bd6?w=450&h=300&fit=crop",
    "https://images.unsplash.com/photo-1563720223185-11003d516935?w=450&h=300&fit=crop",
    "https://images.unsplash.com/photo-1550355191-aa8a80b41353?w=450&h=300&fit=crop",
]

YEAR_MIN = 2018
YEAR_MAX = 2025
PRICING_REFERENCE_YEAR = 2024

NEW_MILEAGE_RANGE = (0, 50)
USED_MILEAGE_RANGE = (1_000, 120_000)

PRICED_PROBABILITY = 0.85
FEATURED_PROBABILITY = 0.15
VIEWED_PROBABILITY = 0.30


# ==============================================================================
# Generation
# ==============================================================================


def calculate_price(rng: random.Random, condition: Condition, year: int) -> Decimal:
    """
    Base price depreciated by age for non-new vehicles.

    - Base: 25k-85k
    - Used/Certified lose 8% per year, floored at 40% of base
    """
    base_price = rng.randint(25_000, 85_000)
    if condition is Condition.NEW:
        factor = 1.0
    else:
        factor = max(0.4, 1 - (PRICING_REFERENCE_YEAR - year) * 0.08)
    return Decimal(round(base_price * factor))


def generate_vehicle(vehicle_id: int, rng: random.Random) -> Vehicle:
    make = rng.choice(MAKES)
    model = rng.choice(MODELS_BY_MAKE[make])
    year = rng.randint(YEAR_MIN, YEAR_MAX)
    condition = rng.choice(list(Condition))
    drivetrain = rng.choice(list(Drivetrain))

    if condition is Condition.NEW:
        mileage = rng.randint(*NEW_MILEAGE_RANGE)
    else:
        mileage = rng.randint(*USED_MILEAGE_RANGE)

    price = calculate_price(rng, condition, year)
    has_price = rng.random() < PRICED_PROBABILITY

    badges = [condition.value]
    if drivetrain is not Drivetrain.FWD:
        badges.append(drivetrain.value)

    label = rng.choice(list(LOCATIONS))
    latitude, longitude = LOCATIONS[label]

    return Vehicle(
        id=vehicle_id,
        condition=condition,
        make=make,
        model=model,
        year=year,
        trim=rng.choice(TRIMS),
        drivetrain=drivetrain,
        mileage=mileage,
        body_style=rng.choice(BODY_STYLES),
        exterior_color=rng.choice(EXTERIOR_COLORS),
        transmission=rng.choice(TRANSMISSIONS),
        doors=rng.choice(DOORS),
        sale_price=price if has_price else None,
        payment=estimate_monthly_payment(price) if has_price else None,
        seller=Seller(
            dealer_name=rng.choice(DEALERS),
            seller_type=rng.choice(list(SellerType)),
            account_number=f"ACCT{rng.randint(1000, 9999)}",
            phone=f"({rng.randint(200, 999)}) {rng.randint(100, 999)}-{rng.randint(1000, 9999)}",
        ),
        location=Location(label=label, latitude=latitude, longitude=longitude),
        badges=tuple(badges),
        featured=rng.random() < FEATURED_PROBABILITY,
        viewed=rng.random() < VIEWED_PROBABILITY,
        images=(rng.choice(SAMPLE_IMAGES),),
    )


def generate_inventory(count: int, rng: random.Random | None = None) -> list[Vehicle]:
    """Generate exactly `count` vehicles with ids 1..count."""
    rng = rng or random.Random()
    vehicles = [generate_vehicle(vehicle_id, rng) for vehicle_id in range(1, count + 1)]

    logger.info("Generated mock inventory", extra={"vehicle_count": len(vehicles)})
    return vehicles
