from fastapi import APIRouter, Depends

from autolot.entrypoints.http.dependencies import get_list_catalog_facets_use_case
from autolot.entrypoints.http.dtos.catalog import FacetListResponseDTO
from autolot.entrypoints.http.mappers.catalog_mapper import CatalogMapper
from autolot.use_cases.list_catalog_facets import Facet, ListCatalogFacets

router = APIRouter(tags=["Catalog"])


@router.get(
    "/dealers",
    response_model=FacetListResponseDTO,
    summary="Dealers with listing counts",
)
def get_dealers(
    use_case: ListCatalogFacets = Depends(get_list_catalog_facets_use_case),
) -> FacetListResponseDTO:
    return CatalogMapper.to_facet_response(use_case.execute(Facet.DEALER))


@router.get(
    "/vehicle-types",
    response_model=FacetListResponseDTO,
    summary="Vehicle types with listing counts",
)
def get_vehicle_types(
    use_case: ListCatalogFacets = Depends(get_list_catalog_facets_use_case),
) -> FacetListResponseDTO:
    return CatalogMapper.to_facet_response(use_case.execute(Facet.VEHICLE_TYPE))
