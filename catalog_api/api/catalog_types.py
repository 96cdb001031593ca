"""Catalog type management endpoints."""

from fastapi import APIRouter, status

from catalog_api.api.dependencies import CatalogServiceDep, create_failed, not_found
from catalog_api.api.schemas import (
    CatalogTypeRequest,
    CreatedResponse,
    ErrorResponse,
    StatusResponse,
)

router = APIRouter(prefix="/catalog-types", tags=["Catalog Types"])


@router.post(
    "",
    response_model=CreatedResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
async def create_type(
    request: CatalogTypeRequest, service: CatalogServiceDep
) -> CreatedResponse:
    """Create a type."""
    type_id = await service.add_type(request.type)
    if type_id is None:
        raise create_failed("Catalog type was not created")
    return CreatedResponse(id=type_id)


@router.put(
    "/{type_id}",
    response_model=StatusResponse,
    responses={404: {"model": ErrorResponse}},
)
async def update_type(
    type_id: int, request: CatalogTypeRequest, service: CatalogServiceDep
) -> StatusResponse:
    """Rename a type."""
    result = await service.update_type(type_id, request.type)
    if result is None:
        raise not_found("TYPE_NOT_FOUND", f"Catalog type not found: {type_id}")
    return StatusResponse(status=result)


@router.delete(
    "/{type_id}",
    response_model=StatusResponse,
    responses={404: {"model": ErrorResponse}},
)
async def remove_type(type_id: int, service: CatalogServiceDep) -> StatusResponse:
    """Remove a type."""
    result = await service.remove_type(type_id)
    if result is None:
        raise not_found("TYPE_NOT_FOUND", f"Catalog type not found: {type_id}")
    return StatusResponse(status=result)
