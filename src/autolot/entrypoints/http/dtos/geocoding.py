from pydantic import ConfigDict, Field

from autolot.entrypoints.http.dtos.base import CamelDTO


class GeoLocationDTO(CamelDTO):
    lat: float
    lng: float
    city: str
    state: str


class GeocodeResponseDTO(CamelDTO):
    success: bool = True
    data: GeoLocationDTO

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "success": True,
                "data": {"lat": 47.0379, "lng": -122.9015, "city": "Lakewood", "state": "WA"},
            }
        }
    )


class GeocodeBatchRequestDTO(CamelDTO):
    zips: list[str] = Field(description="ZIP codes to resolve (1-50)", examples=[["98498", "90210"]])


class GeocodeBatchItemDTO(CamelDTO):
    zip: str
    success: bool
    data: GeoLocationDTO | None = None
    error: str | None = None


class GeocodeBatchResponseDTO(CamelDTO):
    success: bool = True
    data: list[GeocodeBatchItemDTO]
