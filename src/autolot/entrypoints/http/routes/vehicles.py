import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import JSONResponse

from autolot.domain.errors import DomainError, InternalError
from autolot.entrypoints.http.dependencies import (
    get_filter_options_use_case,
    get_get_vehicle_by_id_use_case,
    get_search_vehicle_catalog_use_case,
)
from autolot.entrypoints.http.dtos.catalog import FilterOptionsResponseDTO
from autolot.entrypoints.http.dtos.vehicle_search import (
    VehicleDetailResponseDTO,
    VehicleSearchQueryDTO,
    VehicleSearchResponseDTO,
)
from autolot.entrypoints.http.error_responses import ErrorResponse
from autolot.entrypoints.http.exception_handlers import STATUS_CODE_MAP
from autolot.entrypoints.http.mappers.catalog_mapper import CatalogMapper
from autolot.entrypoints.http.mappers.vehicle_search_mapper import VehicleSearchMapper
from autolot.use_cases.get_filter_options import GetFilterOptions
from autolot.use_cases.get_vehicle_by_id import GetVehicleById, GetVehicleByIdRequest
from autolot.use_cases.search_vehicle_catalog import SearchVehicleCatalog

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Vehicles"])


@router.get(
    "/vehicles",
    response_model=VehicleSearchResponseDTO,
    summary="Search vehicle catalog",
    description="""
    Search the vehicle catalog with optional filters, sorting and pagination.

    ## Filters
    - List filters are comma-separated; a vehicle matches any listed value
    - Different filters combine with AND
    - `driveType=AWD/4WD` matches both AWD and 4WD
    - `mileage=100001` means "100,000 or more", any other value is a ceiling
    - Any price/payment bound excludes listings without a price

    ## Distance
    - `lat`, `lng` and `radius` (miles) together enable a radius search
    - Each result then carries `distanceMiles`

    ## Pagination
    - `page` starts at 1, `pageSize` 1-100 (default 20)
    - Default order: newest listing first

    ## Example
    ```
    GET /v1/vehicles?condition=New&make=Audi,BMW&priceMax=60000&page=1&pageSize=20
    ```
    """,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid pagination or filters"},
        500: {"model": VehicleSearchResponseDTO, "description": "Unexpected failure, empty envelope"},
        503: {"model": VehicleSearchResponseDTO, "description": "Catalog source unavailable, empty envelope"},
    },
)
def get_vehicles(
    query: Annotated[VehicleSearchQueryDTO, Query()],
    use_case: SearchVehicleCatalog | None = Depends(get_search_vehicle_catalog_use_case),
) -> VehicleSearchResponseDTO | JSONResponse:
    """Search vehicles endpoint following parse → execute → map → return pattern."""
    # Client errors go to the exception handlers; every server-side failure
    # still answers with a well-formed (empty) envelope
    try:
        if use_case is None:
            raise InternalError("Vehicle catalog is not loaded")

        # 1. Map to domain request
        request = VehicleSearchMapper.to_domain_request(query)

        # 2. Execute use case
        result = use_case.execute(request)
    except DomainError as exc:
        status_code = STATUS_CODE_MAP.get(exc.error_code, status.HTTP_400_BAD_REQUEST)
        if status_code < 500:
            raise
        logger.error(
            "Vehicle search failed",
            extra={"error_code": exc.error_code, "error_message": exc.message, "page": query.page},
        )
        return _failure_response(query, status_code)
    except Exception:
        logger.exception("Vehicle search failed", extra={"page": query.page})
        return _failure_response(query, status.HTTP_500_INTERNAL_SERVER_ERROR)

    # 3. Map to response
    return VehicleSearchMapper.to_response(result)


def _failure_response(query: VehicleSearchQueryDTO, status_code: int) -> JSONResponse:
    failure = VehicleSearchMapper.to_failure_response(
        VehicleSearchMapper.to_domain_paging(query), "Failed to fetch vehicles"
    )
    return JSONResponse(status_code=status_code, content=failure.model_dump(mode="json", by_alias=True))


@router.get(
    "/vehicles/filters",
    response_model=FilterOptionsResponseDTO,
    summary="Available filter options",
)
def get_vehicle_filters(
    use_case: GetFilterOptions = Depends(get_filter_options_use_case),
) -> FilterOptionsResponseDTO:
    return CatalogMapper.to_filter_options_response(use_case.execute())


@router.get(
    "/vehicles/{vehicle_id}",
    response_model=VehicleDetailResponseDTO,
    summary="Get vehicle by ID",
    responses={
        400: {"model": ErrorResponse, "description": "Invalid vehicle ID"},
        404: {"model": ErrorResponse, "description": "Vehicle not found"},
    },
)
def get_vehicle(
    vehicle_id: int,
    use_case: GetVehicleById = Depends(get_get_vehicle_by_id_use_case),
) -> VehicleDetailResponseDTO:
    result = use_case.execute(GetVehicleByIdRequest(vehicle_id=vehicle_id))
    return VehicleDetailResponseDTO(data=VehicleSearchMapper.to_vehicle_response(result.vehicle))
