from __future__ import annotations

from pydantic import ConfigDict, Field

from autolot.domain.vehicle import MAX_PAGE_SIZE, MILEAGE_OVER_100K, SortField, SortOrder
from autolot.entrypoints.http.dtos.base import CamelDTO

MONEY_PATTERN = r"^\$?\d[\d,]*(\.\d{1,2})?$"


class VehicleSearchQueryDTO(CamelDTO):
    """Query parameters for searching the vehicle catalog.

    Bound with `Annotated[VehicleSearchQueryDTO, Query()]`, so the camelCase
    aliases are the query string names. List filters arrive comma-separated
    (e.g. `condition=New,Certified`) and are kept raw here; the mapper splits
    them. Unknown parameters are ignored.
    """

    page: int = Field(default=1, ge=1, description="Page number (1-based)")
    page_size: int = Field(default=20, ge=1, le=MAX_PAGE_SIZE, description="Results per page")
    search: str | None = Field(default=None, description="Substring of title, make or model")
    condition: str | None = Field(default=None, description="Comma-separated: New,Used,Certified")
    make: str | None = Field(default=None, description="Comma-separated makes", examples=["Audi,BMW"])
    model: str | None = Field(default=None, description="Comma-separated models")
    trim: str | None = Field(default=None, description="Comma-separated trims")
    vehicle_type: str | None = Field(default=None, description="Comma-separated body styles")
    drive_type: str | None = Field(
        default=None, description="Comma-separated: AWD/4WD,FWD,RWD (or a literal drivetrain)"
    )
    exterior_color: str | None = Field(default=None, description="Comma-separated colors")
    seller_type: str | None = Field(default=None, description="Comma-separated: Dealer,Private Seller")
    mileage: int | None = Field(
        default=None,
        ge=0,
        description=f"Mileage ceiling; {MILEAGE_OVER_100K} means '100,000 or more'",
    )
    price_min: str | None = Field(default=None, pattern=MONEY_PATTERN)
    price_max: str | None = Field(default=None, pattern=MONEY_PATTERN)
    payment_min: str | None = Field(default=None, pattern=MONEY_PATTERN)
    payment_max: str | None = Field(default=None, pattern=MONEY_PATTERN)
    lat: str | None = Field(default=None, description="Search center latitude")
    lng: str | None = Field(default=None, description="Search center longitude")
    radius: str | None = Field(default=None, description="Search radius in miles")
    sort_by: SortField = SortField.ID
    sort_order: SortOrder = SortOrder.DESC


class VehicleResponseDTO(CamelDTO):
    id: int
    title: str
    year: int
    make: str
    model: str
    trim: str
    condition: str
    vehicle_type: str
    exterior_color: str
    drivetrain: str
    transmission: str
    doors: str
    mileage: int
    sale_price: str | None = None  # None means "call for pricing"
    payment: str | None = None
    dealer: str
    seller_type: str
    seller_account_number: str
    phone: str | None = None
    location: str
    latitude: float | None = None
    longitude: float | None = None
    distance_miles: float | None = None
    badges: list[str]
    featured: bool
    viewed: bool
    images: list[str]


class PageMetaDTO(CamelDTO):
    total_records: int
    total_pages: int
    current_page: int
    page_size: int
    has_next_page: bool
    has_previous_page: bool


class VehicleSearchResponseDTO(CamelDTO):
    success: bool = True
    data: list[VehicleResponseDTO]
    meta: PageMetaDTO
    message: str | None = None
    note: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "success": True,
                "data": [
                    {
                        "id": 50000,
                        "title": "2023 Audi Q5 Premium",
                        "year": 2023,
                        "make": "Audi",
                        "model": "Q5",
                        "trim": "Premium",
                        "condition": "Used",
                        "vehicleType": "SUV / Crossover",
                        "exteriorColor": "Black",
                        "drivetrain": "AWD",
                        "transmission": "Auto",
                        "doors": "4 doors",
                        "mileage": 18250,
                        "salePrice": "41230",
                        "payment": "722",
                        "dealer": "Metro Audi",
                        "sellerType": "Dealer",
                        "sellerAccountNumber": "ACCT4821",
                        "phone": "(253) 555-0142",
                        "location": "Tacoma, WA 98402",
                        "latitude": 47.2529,
                        "longitude": -122.4443,
                        "distanceMiles": None,
                        "badges": ["Used", "AWD"],
                        "featured": False,
                        "viewed": True,
                        "images": ["https://images.unsplash.com/photo-1552519507-da3b142c6e3d"],
                    }
                ],
                "meta": {
                    "totalRecords": 50000,
                    "totalPages": 2500,
                    "currentPage": 1,
                    "pageSize": 20,
                    "hasNextPage": True,
                    "hasPreviousPage": False,
                },
            }
        }
    )


class VehicleDetailResponseDTO(CamelDTO):
    success: bool = True
    data: VehicleResponseDTO
