"""Catalog repositories for database operations.

SQLAlchemy implementations of the catalog repository interfaces.
Repositories flush but never commit; the caller owns the transaction.
"""

from decimal import Decimal
from typing import Any

import structlog
from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from catalog_api.catalog.interfaces import (
    CatalogBrandRepositoryInterface,
    CatalogItemRepositoryInterface,
    CatalogTypeRepositoryInterface,
)
from catalog_api.catalog.models import CatalogBrand, CatalogItem, CatalogType
from catalog_api.catalog.pagination import PaginatedItems

logger = structlog.get_logger()

SUCCESS = "Success"


async def _fetch_page(
    session: AsyncSession,
    query: Select[Any],
    count_query: Select[Any],
    page_index: int,
    page_size: int,
) -> PaginatedItems[Any]:
    """Run a paged query and its count query.

    Args:
        session: Async SQLAlchemy session.
        query: Ordered entity query, without limit/offset.
        count_query: Query returning the total number of matching rows.
        page_index: Zero-based page index.
        page_size: Items per page.

    Returns:
        Page of entities with the total count.
    """
    total_count = (await session.execute(count_query)).scalar_one()

    result = await session.execute(
        query.offset(page_index * page_size).limit(page_size)
    )
    return PaginatedItems(total_count=total_count, data=list(result.scalars().all()))


class CatalogItemRepository(CatalogItemRepositoryInterface):
    """Repository for CatalogItem database operations.

    Items are always returned with brand and type resolved.

    Example usage:
        async with async_session_factory() as session:
            repo = CatalogItemRepository(session)
            page = await repo.get_by_brand(0, 10, "Acme")
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async SQLAlchemy session.
        """
        self.session = session

    def _items_query(self) -> Select[Any]:
        # populate_existing so items already in the session get their relations loaded
        return (
            select(CatalogItem)
            .options(
                selectinload(CatalogItem.catalog_brand),
                selectinload(CatalogItem.catalog_type),
            )
            .execution_options(populate_existing=True)
        )

    async def get_by_page(
        self, page_index: int, page_size: int
    ) -> PaginatedItems[CatalogItem]:
        return await _fetch_page(
            self.session,
            self._items_query().order_by(CatalogItem.id),
            select(func.count(CatalogItem.id)),
            page_index,
            page_size,
        )

    async def get_by_brand(
        self, page_index: int, page_size: int, brand: str
    ) -> PaginatedItems[CatalogItem]:
        condition = CatalogBrand.brand == brand
        return await _fetch_page(
            self.session,
            self._items_query()
            .join(CatalogItem.catalog_brand)
            .where(condition)
            .order_by(CatalogItem.id),
            select(func.count(CatalogItem.id))
            .join(CatalogItem.catalog_brand)
            .where(condition),
            page_index,
            page_size,
        )

    async def get_by_type(
        self, page_index: int, page_size: int, type_name: str
    ) -> PaginatedItems[CatalogItem]:
        condition = CatalogType.type == type_name
        return await _fetch_page(
            self.session,
            self._items_query()
            .join(CatalogItem.catalog_type)
            .where(condition)
            .order_by(CatalogItem.id),
            select(func.count(CatalogItem.id))
            .join(CatalogItem.catalog_type)
            .where(condition),
            page_index,
            page_size,
        )

    async def get_by_id(self, item_id: int) -> CatalogItem | None:
        result = await self.session.execute(
            self._items_query().where(CatalogItem.id == item_id)
        )
        return result.scalar_one_or_none()

    async def add(
        self,
        name: str,
        description: str | None,
        price: Decimal,
        available_stock: int,
        catalog_brand_id: int,
        catalog_type_id: int,
        picture_file_name: str | None,
    ) -> int | None:
        item = CatalogItem(
            name=name,
            description=description,
            price=price,
            available_stock=available_stock,
            catalog_brand_id=catalog_brand_id,
            catalog_type_id=catalog_type_id,
            picture_file_name=picture_file_name,
        )
        self.session.add(item)
        await self.session.flush()

        logger.debug("Catalog item inserted", item_id=item.id)
        return item.id

    async def update(
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
        item = await self.session.get(CatalogItem, item_id)
        if item is None:
            return None

        item.name = name
        item.description = description
        item.price = price
        item.available_stock = available_stock
        item.catalog_brand_id = catalog_brand_id
        item.catalog_type_id = catalog_type_id
        item.picture_file_name = picture_file_name
        await self.session.flush()
        return SUCCESS

    async def remove(self, item_id: int) -> str | None:
        item = await self.session.get(CatalogItem, item_id)
        if item is None:
            return None

        await self.session.delete(item)
        await self.session.flush()
        return SUCCESS


class CatalogBrandRepository(CatalogBrandRepositoryInterface):
    """Repository for CatalogBrand database operations."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get_by_page(
        self, page_index: int, page_size: int
    ) -> PaginatedItems[CatalogBrand]:
        return await _fetch_page(
            self.session,
            select(CatalogBrand).order_by(CatalogBrand.id),
            select(func.count(CatalogBrand.id)),
            page_index,
            page_size,
        )

    async def get_by_id(self, brand_id: int) -> CatalogBrand | None:
        return await self.session.get(CatalogBrand, brand_id)

    async def add(self, brand: str) -> int | None:
        entity = CatalogBrand(brand=brand)
        self.session.add(entity)
        await self.session.flush()
        return entity.id

    async def update(self, brand_id: int, brand: str) -> str | None:
        entity = await self.session.get(CatalogBrand, brand_id)
        if entity is None:
            return None

        entity.brand = brand
        await self.session.flush()
        return SUCCESS

    async def remove(self, brand_id: int) -> str | None:
        entity = await self.session.get(CatalogBrand, brand_id)
        if entity is None:
            return None

        await self.session.delete(entity)
        await self.session.flush()
        return SUCCESS


class CatalogTypeRepository(CatalogTypeRepositoryInterface):
    """Repository for CatalogType database operations."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get_by_page(
        self, page_index: int, page_size: int
    ) -> PaginatedItems[CatalogType]:
        return await _fetch_page(
            self.session,
            select(CatalogType).order_by(CatalogType.id),
            select(func.count(CatalogType.id)),
            page_index,
            page_size,
        )

    async def get_by_id(self, type_id: int) -> CatalogType | None:
        return await self.session.get(CatalogType, type_id)

    async def add(self, type_name: str) -> int | None:
        entity = CatalogType(type=type_name)
        self.session.add(entity)
        await self.session.flush()
        return entity.id

    async def update(self, type_id: int, type_name: str) -> str | None:
        entity = await self.session.get(CatalogType, type_id)
        if entity is None:
            return None

        entity.type = type_name
        await self.session.flush()
        return SUCCESS

    async def remove(self, type_id: int) -> str | None:
        entity = await self.session.get(CatalogType, type_id)
        if entity is None:
            return None

        await self.session.delete(entity)
        await self.session.flush()
        return SUCCESS
