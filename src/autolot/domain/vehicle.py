from __future__ import annotations

from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum

from autolot.domain.errors import FilterValidationError, PagingValidationError


class Condition(str, Enum):
    NEW = "New"
    USED = "Used"
    CERTIFIED = "Certified"


class Drivetrain(str, Enum):
    FOUR_WD = "4WD"
    AWD = "AWD"
    FWD = "FWD"
    RWD = "RWD"


class SellerType(str, Enum):
    DEALER = "Dealer"
    PRIVATE_SELLER = "Private Seller"


# Mileage menu: the top entry reads "100,000 or more" but is sent as this value.
MILEAGE_OVER_100K = 100001
MILEAGE_SENTINEL_FLOOR = 100_000

# Drive type menu groups AWD and 4WD into a single choice.
DRIVE_TYPE_GROUPS: dict[str, tuple[str, ...]] = {
    "AWD/4WD": (Drivetrain.AWD.value, Drivetrain.FOUR_WD.value),
    "FWD": (Drivetrain.FWD.value,),
    "RWD": (Drivetrain.RWD.value,),
}

PAYMENT_MARKUP = Decimal("1.05")
PAYMENT_TERM_MONTHS = 60

MAX_PAGE_SIZE = 100


def estimate_monthly_payment(price: Decimal) -> Decimal:
    """Rough financing estimate shown next to the sale price (whole dollars)."""
    return (price * PAYMENT_MARKUP / PAYMENT_TERM_MONTHS).quantize(
        Decimal("1"), rounding=ROUND_HALF_UP
    )


@dataclass(frozen=True, slots=True)
class Seller:
    dealer_name: str
    seller_type: SellerType
    account_number: str
    phone: str | None = None


@dataclass(frozen=True, slots=True)
class Location:
    label: str
    latitude: float | None = None
    longitude: float | None = None

    @property
    def has_coordinates(self) -> bool:
        return self.latitude is not None and self.longitude is not None


@dataclass(frozen=True, slots=True)
class Vehicle:
    id: int
    condition: Condition
    make: str
    model: str
    year: int
    trim: str
    drivetrain: Drivetrain
    mileage: int
    seller: Seller
    location: Location
    body_style: str = "Sedan"
    exterior_color: str = "White"
    transmission: str = "Auto"
    doors: str = "4 doors"
    sale_price: Decimal | None = None
    payment: Decimal | None = None
    badges: tuple[str, ...] = ()
    featured: bool = False
    viewed: bool = False
    images: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if self.sale_price is None and self.payment is not None:
            raise ValueError("payment requires a sale_price")

    @property
    def title(self) -> str:
        return f"{self.year} {self.make} {self.model} {self.trim}".strip()


@dataclass(frozen=True, slots=True)
class VehicleFilters:
    """
    Sparse search criteria.

    List fields use OR semantics within the field and AND semantics across
    fields. ``None`` (or an empty tuple) means "no constraint".
    """

    condition: tuple[str, ...] = ()
    make: tuple[str, ...] = ()
    model: tuple[str, ...] = ()
    trim: tuple[str, ...] = ()
    vehicle_type: tuple[str, ...] = ()
    drive_type: tuple[str, ...] = ()
    exterior_color: tuple[str, ...] = ()
    seller_type: tuple[str, ...] = ()
    search: str | None = None
    mileage: int | None = None
    price_min: Decimal | None = None
    price_max: Decimal | None = None
    payment_min: Decimal | None = None
    payment_max: Decimal | None = None

    @property
    def has_price_bounds(self) -> bool:
        return self.price_min is not None or self.price_max is not None

    @property
    def has_payment_bounds(self) -> bool:
        return self.payment_min is not None or self.payment_max is not None

    def validate(self) -> None:
        """
        Validate filter parameters.

        Raises:
            FilterValidationError: If filter parameters are invalid
        """
        # Guardrails: prevent float leakage past boundary
        for name in ("price_min", "price_max", "payment_min", "payment_max"):
            value = getattr(self, name)
            if value is not None and not isinstance(value, Decimal):
                raise FilterValidationError(
                    f"{name} must be Decimal or None (no floats past the boundary)"
                )

        if self.mileage is not None and self.mileage < 0:
            raise FilterValidationError("mileage must be >= 0")

        if (
            self.price_min is not None
            and self.price_max is not None
            and self.price_min > self.price_max
        ):
            raise FilterValidationError("price_min cannot be greater than price_max")
        if (
            self.payment_min is not None
            and self.payment_max is not None
            and self.payment_min > self.payment_max
        ):
            raise FilterValidationError("payment_min cannot be greater than payment_max")


@dataclass(frozen=True, slots=True)
class Paging:
    page: int = 1
    page_size: int = 20

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size

    def validate(self) -> None:
        """
        Validate paging parameters.

        Raises:
            PagingValidationError: If paging parameters are invalid
        """
        if self.page < 1:
            raise PagingValidationError("Page number must be greater than 0")
        if self.page_size < 1 or self.page_size > MAX_PAGE_SIZE:
            raise PagingValidationError(f"Page size must be between 1 and {MAX_PAGE_SIZE}")


class SortField(str, Enum):
    ID = "id"
    PRICE = "price"
    PAYMENT = "payment"
    MILEAGE = "mileage"
    YEAR = "year"
    DISTANCE = "distance"


class SortOrder(str, Enum):
    ASC = "ASC"
    DESC = "DESC"


@dataclass(frozen=True, slots=True)
class Sorting:
    sort_by: SortField = SortField.ID
    order: SortOrder = SortOrder.DESC

    @property
    def descending(self) -> bool:
        return self.order is SortOrder.DESC


@dataclass(frozen=True, slots=True)
class FacetCount:
    name: str
    count: int


@dataclass(frozen=True, slots=True)
class FilterOptions:
    makes: list[str] = field(default_factory=list)
    models: dict[str, list[str]] = field(default_factory=dict)
    trims: list[str] = field(default_factory=list)
    conditions: list[str] = field(default_factory=list)
    drive_types: list[str] = field(default_factory=list)
    vehicle_types: list[str] = field(default_factory=list)
    exterior_colors: list[str] = field(default_factory=list)
    seller_types: list[str] = field(default_factory=list)
