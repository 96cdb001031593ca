"""Public catalog read endpoints.

Provides endpoints for browsing the catalog:
- GET /catalog-bff/items - list items (paginated)
- GET /catalog-bff/items/{id} - item details
- GET /catalog-bff/items/by-brand/{brand} - items of a brand (paginated)
- GET /catalog-bff/items/by-type/{type_name} - items of a type (paginated)
- GET /catalog-bff/brands - list brands (paginated)
- GET /catalog-bff/types - list types (paginated)
"""

from fastapi import APIRouter

from catalog_api.api.dependencies import (
    DEFAULT_PAGE_SIZE,
    CatalogServiceDep,
    PageIndex,
    PageSize,
    not_found,
)
from catalog_api.api.schemas import ErrorResponse
from catalog_api.catalog.dtos import CatalogBrandDto, CatalogItemDto, CatalogTypeDto
from catalog_api.catalog.pagination import PaginatedItemsResponse

router = APIRouter(prefix="/catalog-bff", tags=["Catalog"])


@router.get(
    "/items",
    response_model=PaginatedItemsResponse[CatalogItemDto],
    responses={404: {"model": ErrorResponse}},
)
async def list_items(
    service: CatalogServiceDep,
    page_index: PageIndex = 0,
    page_size: PageSize = DEFAULT_PAGE_SIZE,
) -> PaginatedItemsResponse[CatalogItemDto]:
    """List catalog items."""
    result = await service.get_catalog_items(page_size, page_index)
    if result is None:
        raise not_found("ITEMS_NOT_FOUND", "Catalog items are not available")
    return result


@router.get(
    "/items/by-brand/{brand}",
    response_model=PaginatedItemsResponse[CatalogItemDto],
    responses={404: {"model": ErrorResponse}},
)
async def list_items_by_brand(
    brand: str,
    service: CatalogServiceDep,
    page_index: PageIndex = 0,
    page_size: PageSize = DEFAULT_PAGE_SIZE,
) -> PaginatedItemsResponse[CatalogItemDto]:
    """List catalog items of one brand."""
    result = await service.get_by_brand(page_size, page_index, brand)
    if result is None:
        raise not_found("ITEMS_NOT_FOUND", f"Catalog items are not available for brand: {brand}")
    return result


@router.get(
    "/items/by-type/{type_name}",
    response_model=PaginatedItemsResponse[CatalogItemDto],
    responses={404: {"model": ErrorResponse}},
)
async def list_items_by_type(
    type_name: str,
    service: CatalogServiceDep,
    page_index: PageIndex = 0,
    page_size: PageSize = DEFAULT_PAGE_SIZE,
) -> PaginatedItemsResponse[CatalogItemDto]:
    """List catalog items of one type."""
    result = await service.get_by_type(page_size, page_index, type_name)
    if result is None:
        raise not_found("ITEMS_NOT_FOUND", f"Catalog items are not available for type: {type_name}")
    return result


@router.get(
    "/items/{item_id}",
    response_model=CatalogItemDto,
    responses={404: {"model": ErrorResponse}},
)
async def get_item(item_id: int, service: CatalogServiceDep) -> CatalogItemDto:
    """Get a catalog item by ID."""
    item = await service.get_by_id(item_id)
    if item is None:
        raise not_found("ITEM_NOT_FOUND", f"Catalog item not found: {item_id}")
    return item


@router.get(
    "/brands",
    response_model=PaginatedItemsResponse[CatalogBrandDto],
    responses={404: {"model": ErrorResponse}},
)
async def list_brands(
    service: CatalogServiceDep,
    page_index: PageIndex = 0,
    page_size: PageSize = DEFAULT_PAGE_SIZE,
) -> PaginatedItemsResponse[CatalogBrandDto]:
    """List catalog brands."""
    result = await service.get_brands(page_size, page_index)
    if result is None:
        raise not_found("BRANDS_NOT_FOUND", "Catalog brands are not available")
    return result


@router.get(
    "/types",
    response_model=PaginatedItemsResponse[CatalogTypeDto],
    responses={404: {"model": ErrorResponse}},
)
async def list_types(
    service: CatalogServiceDep,
    page_index: PageIndex = 0,
    page_size: PageSize = DEFAULT_PAGE_SIZE,
) -> PaginatedItemsResponse[CatalogTypeDto]:
    """List catalog types."""
    result = await service.get_types(page_size, page_index)
    if result is None:
        raise not_found("TYPES_NOT_FOUND", "Catalog types are not available")
    return result
