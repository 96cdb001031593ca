"""Catalog item management endpoints.

- POST /catalog-items - create an item
- PUT /catalog-items/{id} - update an item
- DELETE /catalog-items/{id} - remove an item
"""

from fastapi import APIRouter, status

from catalog_api.api.dependencies import CatalogServiceDep, create_failed, not_found
from catalog_api.api.schemas import (
    CatalogItemRequest,
    CreatedResponse,
    ErrorResponse,
    StatusResponse,
)

router = APIRouter(prefix="/catalog-items", tags=["Catalog Items"])


@router.post(
    "",
    response_model=CreatedResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
async def create_item(
    request: CatalogItemRequest, service: CatalogServiceDep
) -> CreatedResponse:
    """Create a catalog item."""
    item_id = await service.create_product(
        request.name,
        request.description,
        request.price,
        request.available_stock,
        request.catalog_brand_id,
        request.catalog_type_id,
        request.picture_file_name,
    )
    if item_id is None:
        raise create_failed("Catalog item was not created")
    return CreatedResponse(id=item_id)


@router.put(
    "/{item_id}",
    response_model=StatusResponse,
    responses={404: {"model": ErrorResponse}},
)
async def update_item(
    item_id: int, request: CatalogItemRequest, service: CatalogServiceDep
) -> StatusResponse:
    """Update a catalog item."""
    result = await service.update_item(
        item_id,
        request.name,
        request.description,
        request.price,
        request.available_stock,
        request.catalog_brand_id,
        request.catalog_type_id,
        request.picture_file_name,
    )
    if result is None:
        raise not_found("ITEM_NOT_FOUND", f"Catalog item not found: {item_id}")
    return StatusResponse(status=result)


@router.delete(
    "/{item_id}",
    response_model=StatusResponse,
    responses={404: {"model": ErrorResponse}},
)
async def remove_item(item_id: int, service: CatalogServiceDep) -> StatusResponse:
    """Remove a catalog item."""
    result = await service.remove_item(item_id)
    if result is None:
        raise not_found("ITEM_NOT_FOUND", f"Catalog item not found: {item_id}")
    return StatusResponse(status=result)
