from fastapi import APIRouter, Depends

from autolot.entrypoints.http.dependencies import get_geocode_zip_use_case
from autolot.entrypoints.http.dtos.geocoding import (
    GeocodeBatchRequestDTO,
    GeocodeBatchResponseDTO,
    GeocodeResponseDTO,
)
from autolot.entrypoints.http.error_responses import ErrorResponse
from autolot.entrypoints.http.mappers.geocoding_mapper import GeocodingMapper
from autolot.use_cases.geocode_zip import GeocodeZip

router = APIRouter(tags=["Geocoding"])


@router.post(
    "/geocode/batch",
    response_model=GeocodeBatchResponseDTO,
    summary="Geocode several ZIP codes",
    description="Resolves 1-50 ZIP codes. Malformed entries fail individually.",
    responses={400: {"model": ErrorResponse, "description": "Empty or oversized batch"}},
)
def geocode_batch(
    payload: GeocodeBatchRequestDTO,
    use_case: GeocodeZip = Depends(get_geocode_zip_use_case),
) -> GeocodeBatchResponseDTO:
    return GeocodingMapper.to_batch_response(use_case.execute_batch(payload.zips))


@router.get(
    "/geocode/{zip_code}",
    response_model=GeocodeResponseDTO,
    summary="Geocode a ZIP code",
    description="""
    Convert a ZIP code to coordinates for radius searches.

    - Accepts `98498` or `98498-1234` (first five digits are used)
    - Unknown ZIPs resolve to the geographic center of the US
    """,
    responses={400: {"model": ErrorResponse, "description": "Malformed ZIP code"}},
)
def geocode_zip(
    zip_code: str,
    use_case: GeocodeZip = Depends(get_geocode_zip_use_case),
) -> GeocodeResponseDTO:
    return GeocodingMapper.to_response(use_case.execute(zip_code))
