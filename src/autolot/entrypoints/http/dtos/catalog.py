from autolot.entrypoints.http.dtos.base import CamelDTO


class FilterOptionsDTO(CamelDTO):
    makes: list[str]
    models: dict[str, list[str]]
    trims: list[str]
    conditions: list[str]
    drive_types: list[str]
    vehicle_types: list[str]
    exterior_colors: list[str]
    seller_types: list[str]


class FilterOptionsResponseDTO(CamelDTO):
    success: bool = True
    data: FilterOptionsDTO


class FacetCountDTO(CamelDTO):
    name: str
    count: int


class FacetListResponseDTO(CamelDTO):
    success: bool = True
    data: list[FacetCountDTO]
