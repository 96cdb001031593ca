"""Shared fixtures for API tests.

The catalog service is replaced with a mock through FastAPI dependency
overrides, so no database is needed.
"""

from collections.abc import Generator
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from catalog_api.api.dependencies import get_catalog_service
from catalog_api.application.catalog_service import CatalogService
from catalog_api.catalog.dtos import CatalogBrandDto, CatalogItemDto, CatalogTypeDto
from catalog_api.infrastructure.config import settings
from catalog_api.main import app


@pytest.fixture
def catalog_service() -> MagicMock:
    """Create a mock catalog service."""
    service = MagicMock(spec=CatalogService)

    service.get_catalog_items = AsyncMock()
    service.get_by_id = AsyncMock()
    service.get_by_brand = AsyncMock()
    service.get_by_type = AsyncMock()
    service.get_brands = AsyncMock()
    service.get_types = AsyncMock()
    service.create_product = AsyncMock()
    service.update_item = AsyncMock()
    service.remove_item = AsyncMock()
    service.add_brand = AsyncMock()
    service.update_brand = AsyncMock()
    service.remove_brand = AsyncMock()
    service.add_type = AsyncMock()
    service.update_type = AsyncMock()
    service.remove_type = AsyncMock()

    return service


@pytest.fixture(autouse=True)
def override_catalog_service(catalog_service: MagicMock) -> Generator[None, None, None]:
    """Route every request to the mock service."""
    app.dependency_overrides[get_catalog_service] = lambda: catalog_service
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def client() -> TestClient:
    """Create test client without authentication."""
    return TestClient(app)


@pytest.fixture
def auth_client() -> TestClient:
    """Create test client with valid API key authentication."""
    return TestClient(
        app,
        headers={"Authorization": f"Bearer {settings.catalog_api_key}"},
    )


@pytest.fixture
def item_dto() -> CatalogItemDto:
    """Create a sample item DTO."""
    return CatalogItemDto(
        id=1,
        name=".NET Bot Black Hoodie",
        description="Hoodie",
        price=Decimal("19.50"),
        picture_url="http://localhost:5002/assets/images/1.png",
        catalog_brand=CatalogBrandDto(id=2, brand=".NET"),
        catalog_type=CatalogTypeDto(id=3, type="T-Shirt"),
        available_stock=100,
    )
