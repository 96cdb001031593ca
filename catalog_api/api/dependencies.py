"""FastAPI dependencies for the catalog routers."""

from typing import Annotated

from fastapi import Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_api.application.catalog_service import CatalogService
from catalog_api.catalog.repository import (
    CatalogBrandRepository,
    CatalogItemRepository,
    CatalogTypeRepository,
)
from catalog_api.infrastructure.database import DatabaseContext, get_session

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100


def get_catalog_service(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> CatalogService:
    """Build a catalog service bound to the request's session."""
    return CatalogService(
        DatabaseContext(session),
        CatalogItemRepository(session),
        CatalogBrandRepository(session),
        CatalogTypeRepository(session),
    )


CatalogServiceDep = Annotated[CatalogService, Depends(get_catalog_service)]
PageIndex = Annotated[int, Query(ge=0, description="Zero-based page index")]
PageSize = Annotated[
    int, Query(ge=1, le=MAX_PAGE_SIZE, description="Items per page")
]


def not_found(error_code: str, message: str) -> HTTPException:
    """Build a 404 error in the standard error format."""
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail={"error_code": error_code, "message": message},
    )


def create_failed(message: str) -> HTTPException:
    """Build a 400 error for a create that produced no identity."""
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail={"error_code": "CREATE_FAILED", "message": message},
    )
