"""Shared fixtures for catalog service tests."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from catalog_api.application.catalog_service import CatalogService
from catalog_api.catalog.interfaces import (
    CatalogBrandRepositoryInterface,
    CatalogItemRepositoryInterface,
    CatalogTypeRepositoryInterface,
)
from catalog_api.catalog.mappers import CatalogMapper
from catalog_api.infrastructure.database import DatabaseContext


@pytest.fixture
def item_repository() -> MagicMock:
    """Create a mock catalog item repository."""
    repository = MagicMock(spec=CatalogItemRepositoryInterface)

    repository.get_by_page = AsyncMock()
    repository.get_by_brand = AsyncMock()
    repository.get_by_type = AsyncMock()
    repository.get_by_id = AsyncMock()
    repository.add = AsyncMock()
    repository.update = AsyncMock()
    repository.remove = AsyncMock()

    return repository


@pytest.fixture
def brand_repository() -> MagicMock:
    """Create a mock catalog brand repository."""
    repository = MagicMock(spec=CatalogBrandRepositoryInterface)

    repository.get_by_page = AsyncMock()
    repository.get_by_id = AsyncMock()
    repository.add = AsyncMock()
    repository.update = AsyncMock()
    repository.remove = AsyncMock()

    return repository


@pytest.fixture
def type_repository() -> MagicMock:
    """Create a mock catalog type repository."""
    repository = MagicMock(spec=CatalogTypeRepositoryInterface)

    repository.get_by_page = AsyncMock()
    repository.get_by_id = AsyncMock()
    repository.add = AsyncMock()
    repository.update = AsyncMock()
    repository.remove = AsyncMock()

    return repository


@pytest.fixture
def mapper() -> MagicMock:
    """Create a mock entity to DTO mapper."""
    return MagicMock(spec=CatalogMapper)


@pytest.fixture
def transaction() -> MagicMock:
    """Create a mock database transaction."""
    transaction = MagicMock()
    transaction.commit = AsyncMock()
    transaction.rollback = AsyncMock()
    return transaction


@pytest.fixture
def db_context(transaction: MagicMock) -> MagicMock:
    """Create a mock unit of work returning ``transaction``."""
    context = MagicMock(spec=DatabaseContext)
    context.begin_transaction = AsyncMock(return_value=transaction)
    return context


@pytest.fixture
def catalog_service(
    db_context: MagicMock,
    item_repository: MagicMock,
    brand_repository: MagicMock,
    type_repository: MagicMock,
    mapper: MagicMock,
) -> CatalogService:
    """Create CatalogService with mocked collaborators."""
    return CatalogService(
        db_context,
        item_repository,
        brand_repository,
        type_repository,
        mapper,
    )
