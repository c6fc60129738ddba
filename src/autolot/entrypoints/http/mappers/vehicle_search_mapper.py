from __future__ import annotations

import math
from decimal import Decimal

from autolot.domain.geo import RadiusFilter
from autolot.domain.pagination import PageMeta
from autolot.domain.vehicle import Paging, Sorting, Vehicle, VehicleFilters
from autolot.entrypoints.http.dtos.vehicle_search import (
    PageMetaDTO,
    VehicleResponseDTO,
    VehicleSearchQueryDTO,
    VehicleSearchResponseDTO,
)
from autolot.use_cases.search_vehicle_catalog import (
    SearchVehicleCatalogRequest,
    SearchVehicleCatalogResponse,
)


def split_list(raw: str | None) -> tuple[str, ...]:
    """'New, Certified' → ('New', 'Certified'); blanks are dropped."""
    if not raw:
        return ()
    return tuple(part.strip() for part in raw.split(",") if part.strip())


def parse_money(raw: str | None) -> Decimal | None:
    """'$25,000' → Decimal('25000'). Format is already checked by the DTO."""
    if not raw:
        return None
    return Decimal(raw.replace("$", "").replace(",", ""))


def parse_coordinate(raw: str | None) -> float | None:
    if raw is None:
        return None
    try:
        value = float(raw)
    except ValueError:
        return None
    return value if math.isfinite(value) else None


class VehicleSearchMapper:
    """Maps between REST DTOs and domain models for vehicle search."""

    @staticmethod
    def to_domain_filters(dto: VehicleSearchQueryDTO) -> VehicleFilters:
        """
        Converts query params to domain filters.

        Comma-separated lists become tuples, money strings become Decimal.
        """
        return VehicleFilters(
            condition=split_list(dto.condition),
            make=split_list(dto.make),
            model=split_list(dto.model),
            trim=split_list(dto.trim),
            vehicle_type=split_list(dto.vehicle_type),
            drive_type=split_list(dto.drive_type),
            exterior_color=split_list(dto.exterior_color),
            seller_type=split_list(dto.seller_type),
            search=dto.search or None,
            mileage=dto.mileage,
            price_min=parse_money(dto.price_min),
            price_max=parse_money(dto.price_max),
            payment_min=parse_money(dto.payment_min),
            payment_max=parse_money(dto.payment_max),
        )

    @staticmethod
    def to_domain_paging(dto: VehicleSearchQueryDTO) -> Paging:
        return Paging(page=dto.page, page_size=dto.page_size)

    @staticmethod
    def to_domain_sorting(dto: VehicleSearchQueryDTO) -> Sorting:
        return Sorting(sort_by=dto.sort_by, order=dto.sort_order)

    @staticmethod
    def to_domain_radius(dto: VehicleSearchQueryDTO) -> RadiusFilter | None:
        """
        Builds a radius filter only when lat, lng and radius all parse and radius > 0.

        Anything else means a plain listing; partial or garbled location
        parameters are ignored rather than rejected.
        """
        lat = parse_coordinate(dto.lat)
        lng = parse_coordinate(dto.lng)
        radius = parse_coordinate(dto.radius)

        if lat is None or lng is None or radius is None or radius <= 0:
            return None
        return RadiusFilter(latitude=lat, longitude=lng, radius_miles=radius)

    @staticmethod
    def to_domain_request(dto: VehicleSearchQueryDTO) -> SearchVehicleCatalogRequest:
        return SearchVehicleCatalogRequest(
            filters=VehicleSearchMapper.to_domain_filters(dto),
            paging=VehicleSearchMapper.to_domain_paging(dto),
            sorting=VehicleSearchMapper.to_domain_sorting(dto),
            radius=VehicleSearchMapper.to_domain_radius(dto),
        )

    @staticmethod
    def to_vehicle_response(
        vehicle: Vehicle, distance_miles: float | None = None
    ) -> VehicleResponseDTO:
        """
        Converts a domain Vehicle to the flat REST shape.

        Handles Decimal → str conversion at the boundary.
        """
        return VehicleResponseDTO(
            id=vehicle.id,
            title=vehicle.title,
            year=vehicle.year,
            make=vehicle.make,
            model=vehicle.model,
            trim=vehicle.trim,
            condition=vehicle.condition.value,
            vehicle_type=vehicle.body_style,
            exterior_color=vehicle.exterior_color,
            drivetrain=vehicle.drivetrain.value,
            transmission=vehicle.transmission,
            doors=vehicle.doors,
            mileage=vehicle.mileage,
            sale_price=str(vehicle.sale_price) if vehicle.sale_price is not None else None,
            payment=str(vehicle.payment) if vehicle.payment is not None else None,
            dealer=vehicle.seller.dealer_name,
            seller_type=vehicle.seller.seller_type.value,
            seller_account_number=vehicle.seller.account_number,
            phone=vehicle.seller.phone,
            location=vehicle.location.label,
            latitude=vehicle.location.latitude,
            longitude=vehicle.location.longitude,
            distance_miles=round(distance_miles, 1) if distance_miles is not None else None,
            badges=list(vehicle.badges),
            featured=vehicle.featured,
            viewed=vehicle.viewed,
            images=list(vehicle.images),
        )

    @staticmethod
    def to_meta(meta: PageMeta) -> PageMetaDTO:
        return PageMetaDTO(
            total_records=meta.total_records,
            total_pages=meta.total_pages,
            current_page=meta.current_page,
            page_size=meta.page_size,
            has_next_page=meta.has_next_page,
            has_previous_page=meta.has_previous_page,
        )

    @staticmethod
    def to_response(result: SearchVehicleCatalogResponse) -> VehicleSearchResponseDTO:
        return VehicleSearchResponseDTO(
            success=True,
            data=[
                VehicleSearchMapper.to_vehicle_response(vehicle, result.distances.get(vehicle.id))
                for vehicle in result.vehicles
            ],
            meta=VehicleSearchMapper.to_meta(result.meta),
            note=result.note,
        )

    @staticmethod
    def to_failure_response(paging: Paging, message: str) -> VehicleSearchResponseDTO:
        """Envelope for unexpected failures: no data, zeroed meta."""
        return VehicleSearchResponseDTO(
            success=False,
            data=[],
            meta=VehicleSearchMapper.to_meta(PageMeta.empty(paging)),
            message=message,
        )
