"""Product catalog.

Entities, DTOs, mapping, paging types and repositories for
catalog items, brands and types.
"""

from catalog_api.catalog.dtos import CatalogBrandDto, CatalogItemDto, CatalogTypeDto
from catalog_api.catalog.interfaces import (
    CatalogBrandRepositoryInterface,
    CatalogItemRepositoryInterface,
    CatalogTypeRepositoryInterface,
)
from catalog_api.catalog.mappers import CatalogMapper
from catalog_api.catalog.models import CatalogBrand, CatalogItem, CatalogType
from catalog_api.catalog.pagination import PaginatedItems, PaginatedItemsResponse
from catalog_api.catalog.repository import (
    CatalogBrandRepository,
    CatalogItemRepository,
    CatalogTypeRepository,
)

__all__ = [
    # Models
    "CatalogBrand",
    "CatalogItem",
    "CatalogType",
    # DTOs
    "CatalogBrandDto",
    "CatalogItemDto",
    "CatalogTypeDto",
    # Mapping
    "CatalogMapper",
    # Paging
    "PaginatedItems",
    "PaginatedItemsResponse",
    # Repositories
    "CatalogBrandRepository",
    "CatalogBrandRepositoryInterface",
    "CatalogItemRepository",
    "CatalogItemRepositoryInterface",
    "CatalogTypeRepository",
    "CatalogTypeRepositoryInterface",
]
