from __future__ import annotations

from autolot.domain.errors import InternalError
from autolot.entrypoints.http.dtos.geocoding import (
    GeocodeBatchItemDTO,
    GeocodeBatchResponseDTO,
    GeocodeResponseDTO,
    GeoLocationDTO,
)
from autolot.ports.geocoder import GeoLocation
from autolot.use_cases.geocode_zip import GeocodeResult


class GeocodingMapper:
    @staticmethod
    def to_location(location: GeoLocation) -> GeoLocationDTO:
        return GeoLocationDTO(
            lat=location.lat,
            lng=location.lng,
            city=location.city,
            state=location.state,
        )

    @staticmethod
    def to_response(result: GeocodeResult) -> GeocodeResponseDTO:
        if result.location is None:
            raise InternalError("Geocode result has no location", zip=result.zip_code)
        return GeocodeResponseDTO(data=GeocodingMapper.to_location(result.location))

    @staticmethod
    def to_batch_response(results: list[GeocodeResult]) -> GeocodeBatchResponseDTO:
        return GeocodeBatchResponseDTO(
            data=[
                GeocodeBatchItemDTO(
                    zip=result.zip_code,
                    success=result.success,
                    data=GeocodingMapper.to_location(result.location) if result.location else None,
                    error=result.error,
                )
                for result in results
            ]
        )
