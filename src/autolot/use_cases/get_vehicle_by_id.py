"""Get vehicle by ID use case."""

from __future__ import annotations

from dataclasses import dataclass

from autolot.domain.errors import NotFoundError, ValidationError
from autolot.domain.vehicle import Vehicle
from autolot.ports.vehicle_catalog_repository import VehicleCatalogRepository


@dataclass(frozen=True, slots=True)
class GetVehicleByIdRequest:
    """Request to get a vehicle by ID."""

    vehicle_id: int


@dataclass(frozen=True, slots=True)
class GetVehicleByIdResponse:
    """Response containing the requested vehicle."""

    vehicle: Vehicle


class GetVehicleById:
    """
    Use case for retrieving a single vehicle by ID.

    Responsibilities:
    - Validate vehicle_id (must be a positive integer)
    - Delegate to repository for data access
    - Raise NotFoundError if the vehicle doesn't exist
    """

    def __init__(self, vehicle_catalog_repository: VehicleCatalogRepository) -> None:
        self._repository = vehicle_catalog_repository

    def execute(self, request: GetVehicleByIdRequest) -> GetVehicleByIdResponse:
        """
        Execute the get vehicle by ID use case.

        Raises:
            ValidationError: If vehicle_id is < 1
            NotFoundError: If vehicle with given ID doesn't exist
        """
        if request.vehicle_id < 1:
            raise ValidationError(
                errors=[
                    {
                        "field": "vehicle_id",
                        "message": "Must be a positive integer",
                        "code": "INVALID_VEHICLE_ID",
                    }
                ]
            )

        vehicle = self._repository.get_by_id(request.vehicle_id)

        if vehicle is None:
            raise NotFoundError(resource="Vehicle", identifier=str(request.vehicle_id))

        return GetVehicleByIdResponse(vehicle=vehicle)
