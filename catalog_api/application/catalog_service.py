"""Catalog application service.

Orchestrates catalog queries and mutations:
- Paginated listings of items (optionally by brand or type), brands and types
- Single item lookup
- Create/update/remove for items, brands and types

Every operation issues one repository call inside a transaction. Failures
are reported as ``None``; exceptions never reach the caller.
"""

from collections.abc import Awaitable, Callable
from decimal import Decimal
from typing import TypeVar

import structlog

from catalog_api.catalog.dtos import CatalogBrandDto, CatalogItemDto, CatalogTypeDto
from catalog_api.catalog.interfaces import (
    CatalogBrandRepositoryInterface,
    CatalogItemRepositoryInterface,
    CatalogTypeRepositoryInterface,
)
from catalog_api.catalog.mappers import CatalogMapper
from catalog_api.catalog.pagination import PaginatedItems, PaginatedItemsResponse
from catalog_api.infrastructure.database import DatabaseContext

logger = structlog.get_logger()

TResult = TypeVar("TResult")
TEntity = TypeVar("TEntity")
TDto = TypeVar("TDto")


def build_page_response(
    page: PaginatedItems[TEntity],
    convert: Callable[[TEntity], TDto],
    page_index: int,
    page_size: int,
) -> PaginatedItemsResponse[TDto]:
    """Wrap a repository page in the caller-facing envelope.

    Args:
        page: Repository result.
        convert: Entity to DTO conversion.
        page_index: Page index from the request.
        page_size: Page size from the request.

    Returns:
        Envelope echoing the request paging with the repository's total count.
    """
    return PaginatedItemsResponse(
        page_index=page_index,
        page_size=page_size,
        count=page.total_count,
        data=[convert(entity) for entity in page.data],
    )


class CatalogService:
    """Application service for the product catalog.

    Example usage:
        async with async_session_factory() as session:
            service = CatalogService(
                DatabaseContext(session),
                CatalogItemRepository(session),
                CatalogBrandRepository(session),
                CatalogTypeRepository(session),
            )
            page = await service.get_catalog_items(page_size=10, page_index=0)
    """

    def __init__(
        self,
        db_context: DatabaseContext,
        item_repository: CatalogItemRepositoryInterface,
        brand_repository: CatalogBrandRepositoryInterface,
        type_repository: CatalogTypeRepositoryInterface,
        mapper: CatalogMapper | None = None,
    ) -> None:
        """Initialize service.

        Args:
            db_context: Unit of work scoping each operation.
            item_repository: Catalog item repository.
            brand_repository: Catalog brand repository.
            type_repository: Catalog type repository.
            mapper: Entity to DTO mapper.
        """
        self.db_context = db_context
        self.item_repository = item_repository
        self.brand_repository = brand_repository
        self.type_repository = type_repository
        self.mapper = mapper or CatalogMapper()

    async def _execute_safe(
        self,
        operation: str,
        action: Callable[[], Awaitable[TResult | None]],
    ) -> TResult | None:
        """Run ``action`` in a transaction.

        Commits on success. On any exception the transaction is rolled back,
        the error is logged and None is returned.
        """
        transaction = await self.db_context.begin_transaction()
        try:
            result = await action()
            await transaction.commit()
            return result
        except Exception as e:
            await transaction.rollback()
            logger.error(
                "Catalog operation failed, transaction rolled back",
                operation=operation,
                error=str(e),
                exc_info=True,
            )
            return None

    # ========================================================================
    # Item queries
    # ========================================================================

    async def get_catalog_items(
        self, page_size: int, page_index: int
    ) -> PaginatedItemsResponse[CatalogItemDto] | None:
        """Get a page of catalog items.

        Args:
            page_size: Items per page.
            page_index: Zero-based page index.

        Returns:
            Page envelope, or None if the repository returned nothing.
        """

        async def action() -> PaginatedItemsResponse[CatalogItemDto] | None:
            page = await self.item_repository.get_by_page(page_index, page_size)
            if page is None:
                return None
            return build_page_response(page, self.mapper.to_item_dto, page_index, page_size)

        return await self._execute_safe("get_catalog_items", action)

    async def get_by_id(self, item_id: int) -> CatalogItemDto | None:
        """Get a catalog item by ID.

        Args:
            item_id: Item identifier.

        Returns:
            Item DTO if found.
        """

        async def action() -> CatalogItemDto | None:
            item = await self.item_repository.get_by_id(item_id)
            if item is None:
                logger.info("Catalog item not found", item_id=item_id)
                return None
            return self.mapper.to_item_dto(item)

        return await self._execute_safe("get_by_id", action)

    async def get_by_brand(
        self, page_size: int, page_index: int, brand: str
    ) -> PaginatedItemsResponse[CatalogItemDto] | None:
        """Get a page of items of one brand.

        Args:
            page_size: Items per page.
            page_index: Zero-based page index.
            brand: Brand name to match.

        Returns:
            Page envelope, or None if the repository returned nothing.
        """

        async def action() -> PaginatedItemsResponse[CatalogItemDto] | None:
            page = await self.item_repository.get_by_brand(page_index, page_size, brand)
            if page is None:
                return None
            return build_page_response(page, self.mapper.to_item_dto, page_index, page_size)

        return await self._execute_safe("get_by_brand", action)

    async def get_by_type(
        self, page_size: int, page_index: int, type_name: str
    ) -> PaginatedItemsResponse[CatalogItemDto] | None:
        """Get a page of items of one type.

        Args:
            page_size: Items per page.
            page_index: Zero-based page index.
            type_name: Type name to match.

        Returns:
            Page envelope, or None if the repository returned nothing.
        """

        async def action() -> PaginatedItemsResponse[CatalogItemDto] | None:
            page = await self.item_repository.get_by_type(page_index, page_size, type_name)
            if page is None:
                return None
            return build_page_response(page, self.mapper.to_item_dto, page_index, page_size)

        return await self._execute_safe("get_by_type", action)

    # ========================================================================
    # Brand and type queries
    # ========================================================================

    async def get_brands(
        self, page_size: int, page_index: int
    ) -> PaginatedItemsResponse[CatalogBrandDto] | None:
        """Get a page of brands."""

        async def action() -> PaginatedItemsResponse[CatalogBrandDto] | None:
            page = await self.brand_repository.get_by_page(page_index, page_size)
            if page is None:
                return None
            return build_page_response(page, self.mapper.to_brand_dto, page_index, page_size)

        return await self._execute_safe("get_brands", action)

    async def get_types(
        self, page_size: int, page_index: int
    ) -> PaginatedItemsResponse[CatalogTypeDto] | None:
        """Get a page of types."""

        async def action() -> PaginatedItemsResponse[CatalogTypeDto] | None:
            page = await self.type_repository.get_by_page(page_index, page_size)
            if page is None:
                return None
            return build_page_response(page, self.mapper.to_type_dto, page_index, page_size)

        return await self._execute_safe("get_types", action)

    # ========================================================================
    # Item commands
    # ========================================================================

    async def create_product(
        self,
        name: str,
        description: str | None,
        price: Decimal,
        available_stock: int,
        catalog_brand_id: int,
        catalog_type_id: int,
        picture_file_name: str | None,
    ) -> int | None:
        """Create a catalog item.

        Returns:
            New item ID, or None if the insert produced no identity.
        """
        result = await self._execute_safe(
            "create_product",
            lambda: self.item_repository.add(
                name,
                description,
                price,
                available_stock,
                catalog_brand_id,
                catalog_type_id,
                picture_file_name,
            ),
        )
        if result is not None:
            logger.info("Catalog item created", item_id=result)
        return result

    async def update_item(
        self,
        item_id: int,
        name: str,
        description: str | None,
        price: Decimal,
        available_stock: int,
        catalog_brand_id: int,
        catalog_type_id: int,
        picture_file_name: str | None,
    ) -> str | None:
        """Update a catalog item.

        Returns:
            Repository status token, or None on failure.
        """
        return await self._execute_safe(
            "update_item",
            lambda: self.item_repository.update(
                item_id,
                name,
                description,
                price,
                available_stock,
                catalog_brand_id,
                catalog_type_id,
                picture_file_name,
            ),
        )

    async def remove_item(self, item_id: int) -> str | None:
        """Remove a catalog item.

        Returns:
            Repository status token, or None on failure.
        """
        return await self._execute_safe(
            "remove_item",
            lambda: self.item_repository.remove(item_id),
        )

    # ========================================================================
    # Brand commands
    # ========================================================================

    async def add_brand(self, brand: str) -> int | None:
        """Create a brand and return its ID."""
        return await self._execute_safe(
            "add_brand",
            lambda: self.brand_repository.add(brand),
        )

    async def update_brand(self, brand_id: int, brand: str) -> str | None:
        """Rename a brand."""
        return await self._execute_safe(
            "update_brand",
            lambda: self.brand_repository.update(brand_id, brand),
        )

    async def remove_brand(self, brand_id: int) -> str | None:
        """Remove a brand."""
        return await self._execute_safe(
            "remove_brand",
            lambda: self.brand_repository.remove(brand_id),
        )

    # ========================================================================
    # Type commands
    # ========================================================================

    async def add_type(self, type_name: str) -> int | None:
        """Create a type and return its ID."""
        return await self._execute_safe(
            "add_type",
            lambda: self.type_repository.add(type_name),
        )

    async def update_type(self, type_id: int, type_name: str) -> str | None:
        """Rename a type."""
        return await self._execute_safe(
            "update_type",
            lambda: self.type_repository.update(type_id, type_name),
        )

    async def remove_type(self, type_id: int) -> str | None:
        """Remove a type."""
        return await self._execute_safe(
            "remove_type",
            lambda: self.type_repository.remove(type_id),
        )
