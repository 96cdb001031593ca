"""Catalog brand management endpoints."""

from fastapi import APIRouter, status

from catalog_api.api.dependencies import CatalogServiceDep, create_failed, not_found
from catalog_api.api.schemas import (
    CatalogBrandRequest,
    CreatedResponse,
    ErrorResponse,
    StatusResponse,
)

router = APIRouter(prefix="/catalog-brands", tags=["Catalog Brands"])


@router.post(
    "",
    response_model=CreatedResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
async def create_brand(
    request: CatalogBrandRequest, service: CatalogServiceDep
) -> CreatedResponse:
    """Create a brand."""
    brand_id = await service.add_brand(request.brand)
    if brand_id is None:
        raise create_failed("Catalog brand was not created")
    return CreatedResponse(id=brand_id)


@router.put(
    "/{brand_id}",
    response_model=StatusResponse,
    responses={404: {"model": ErrorResponse}},
)
async def update_brand(
    brand_id: int, request: CatalogBrandRequest, service: CatalogServiceDep
) -> StatusResponse:
    """Rename a brand."""
    result = await service.update_brand(brand_id, request.brand)
    if result is None:
        raise not_found("BRAND_NOT_FOUND", f"Catalog brand not found: {brand_id}")
    return StatusResponse(status=result)


@router.delete(
    "/{brand_id}",
    response_model=StatusResponse,
    responses={404: {"model": ErrorResponse}},
)
async def remove_brand(brand_id: int, service: CatalogServiceDep) -> StatusResponse:
    """Remove a brand."""
    result = await service.remove_brand(brand_id)
    if result is None:
        raise not_found("BRAND_NOT_FOUND", f"Catalog brand not found: {brand_id}")
    return StatusResponse(status=result)
