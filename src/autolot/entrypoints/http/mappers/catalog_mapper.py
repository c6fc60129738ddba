from __future__ import annotations

from autolot.domain.vehicle import FacetCount, FilterOptions
from autolot.entrypoints.http.dtos.catalog import (
    FacetCountDTO,
    FacetListResponseDTO,
    FilterOptionsDTO,
    FilterOptionsResponseDTO,
)


class CatalogMapper:
    """Maps filter menus and facet counts to REST DTOs."""

    @staticmethod
    def to_filter_options_response(options: FilterOptions) -> FilterOptionsResponseDTO:
        return FilterOptionsResponseDTO(
            data=FilterOptionsDTO(
                makes=options.makes,
                models=options.models,
                trims=options.trims,
                conditions=options.conditions,
                drive_types=options.drive_types,
                vehicle_types=options.vehicle_types,
                exterior_colors=options.exterior_colors,
                seller_types=options.seller_types,
            )
        )

    @staticmethod
    def to_facet_response(facets: list[FacetCount]) -> FacetListResponseDTO:
        return FacetListResponseDTO(
            data=[FacetCountDTO(name=facet.name, count=facet.count) for facet in facets]
        )
