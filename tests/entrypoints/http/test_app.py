"""
Unit tests for FastAPI application setup and configuration.

This test suite verifies the application structure and wiring:
- build_app() creates a properly configured FastAPI instance
- Application metadata (title, version, docs URLs)
- Router registration (health without prefix, the rest under /v1)
- The catalog is built during startup and published on app.state
"""

from __future__ import annotations

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from autolot.adapters.in_memory_vehicle_catalog_repository import (
    InMemoryVehicleCatalogRepository,
)
from autolot.entrypoints.http.app import build_app
from autolot.infra.config.settings import Settings


@pytest.fixture
def settings() -> Settings:
    """Small, seeded catalog so startup stays fast."""
    return Settings(catalog_size=25, catalog_seed=3)


@pytest.fixture
def app(settings: Settings) -> FastAPI:
    return build_app(settings=settings)


# ==============================================================================
# Application Creation
# ==============================================================================


def test_build_app_creates_new_instance_each_call(settings: Settings) -> None:
    app1 = build_app(settings=settings)
    app2 = build_app(settings=settings)

    assert isinstance(app1, FastAPI)
    assert app1 is not app2


def test_app_metadata(app: FastAPI) -> None:
    assert app.title == "Autolot API"
    assert app.version == "0.1.0"
    assert "Vehicle listing API" in app.description
    assert app.docs_url == "/docs"
    assert app.redoc_url == "/redoc"
    assert app.openapi_url == "/openapi.json"


def test_app_documentation_endpoints_are_accessible(app: FastAPI) -> None:
    client = TestClient(app)

    assert client.get("/docs").status_code == 200
    assert client.get("/redoc").status_code == 200

    response = client.get("/openapi.json")
    assert response.status_code == 200
    assert response.headers["content-type"] == "application/json"


# ==============================================================================
# Router Registration
# ==============================================================================


def test_routes_registered_with_prefixes(app: FastAPI) -> None:
    paths = app.openapi()["paths"]

    assert "/health" in paths
    assert "/vehicles" not in paths
    for path in (
        "/v1/vehicles",
        "/v1/vehicles/filters",
        "/v1/vehicles/{vehicle_id}",
        "/v1/dealers",
        "/v1/vehicle-types",
        "/v1/geocode/{zip_code}",
        "/v1/geocode/batch",
    ):
        assert path in paths


def test_openapi_documents_vehicle_search(app: FastAPI) -> None:
    operation = app.openapi()["paths"]["/v1/vehicles"]["get"]

    assert operation["tags"] == ["Vehicles"]
    assert operation["summary"] == "Search vehicle catalog"

    param_names = {p["name"] for p in operation["parameters"]}
    assert {"page", "pageSize", "make", "driveType", "priceMin", "sortBy", "lat"} <= param_names


def test_openapi_query_constraints_come_from_query_model(app: FastAPI) -> None:
    parameters = {
        p["name"]: p for p in app.openapi()["paths"]["/v1/vehicles"]["get"]["parameters"]
    }

    assert "page_size" not in parameters
    assert parameters["pageSize"]["in"] == "query"
    assert parameters["pageSize"]["schema"]["maximum"] == 100
    assert parameters["pageSize"]["schema"]["minimum"] == 1


def test_unknown_routes_return_404(app: FastAPI) -> None:
    client = TestClient(app)

    assert client.get("/unknown").status_code == 404
    assert client.get("/v1/unknown").status_code == 404


# ==============================================================================
# Startup
# ==============================================================================


def test_lifespan_builds_catalog_from_settings(app: FastAPI) -> None:
    with TestClient(app) as client:
        assert isinstance(app.state.vehicle_catalog, InMemoryVehicleCatalogRepository)
        assert client.get("/health").json() == {"status": "ok", "totalRecords": 25}


def test_seeded_catalog_is_reproducible(settings: Settings) -> None:
    with TestClient(build_app(settings=settings)) as first:
        listing_a = first.get("/v1/vehicles").json()["data"]
    with TestClient(build_app(settings=settings)) as second:
        listing_b = second.get("/v1/vehicles").json()["data"]

    assert listing_a == listing_b


def test_injected_catalog_is_used(settings: Settings) -> None:
    catalog = InMemoryVehicleCatalogRepository([])

    with TestClient(build_app(settings=settings, catalog=catalog)) as client:
        assert client.get("/health").json()["totalRecords"] == 0


def test_first_page_over_default_sized_catalog() -> None:
    app = build_app(settings=Settings(catalog_size=50_000, catalog_seed=1))

    with TestClient(app) as client:
        data = client.get("/v1/vehicles", params={"page": 1, "pageSize": 20}).json()

    assert len(data["data"]) == 20
    assert data["meta"]["totalRecords"] == 50_000
    assert data["meta"]["totalPages"] == 2_500
    assert data["meta"]["hasNextPage"] is True
    assert data["meta"]["hasPreviousPage"] is False


def test_app_module_exports_app_instance() -> None:
    from autolot.entrypoints.http.app import app

    assert isinstance(app, FastAPI)
    assert app.title == "Autolot API"
