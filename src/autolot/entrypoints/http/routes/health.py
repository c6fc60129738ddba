from fastapi import APIRouter, Depends

from autolot.entrypoints.http.dependencies import get_vehicle_catalog
from autolot.ports.vehicle_catalog_repository import VehicleCatalogRepository

router = APIRouter(tags=["Health"])


@router.get("/health")
def health(catalog: VehicleCatalogRepository = Depends(get_vehicle_catalog)) -> dict[str, str | int]:
    return {"status": "ok", "totalRecords": catalog.count()}
