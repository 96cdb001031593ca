"""Abstract base classes for catalog repository interfaces.

The catalog service depends on these interfaces (not concrete classes)
so tests can substitute doubles at the service boundary.
"""

from abc import ABC, abstractmethod
from decimal import Decimal

from catalog_api.catalog.models import CatalogBrand, CatalogItem, CatalogType
from catalog_api.catalog.pagination import PaginatedItems


class CatalogItemRepositoryInterface(ABC):
    """Abstract interface for catalog item storage and retrieval."""

    @abstractmethod
    async def get_by_page(
        self, page_index: int, page_size: int
    ) -> PaginatedItems[CatalogItem] | None:
        """Get one page of items.

        Args:
            page_index: Zero-based page index
            page_size: Items per page

        Returns:
            Page with total count, or None on failure
        """
        ...

    @abstractmethod
    async def get_by_brand(
        self, page_index: int, page_size: int, brand: str
    ) -> PaginatedItems[CatalogItem] | None:
        """Get one page of items whose brand name equals ``brand``.

        Args:
            page_index: Zero-based page index
            page_size: Items per page
            brand: Brand name to match

        Returns:
            Page with total count of matching items, or None on failure
        """
        ...

    @abstractmethod
    async def get_by_type(
        self, page_index: int, page_size: int, type_name: str
    ) -> PaginatedItems[CatalogItem] | None:
        """Get one page of items whose type name equals ``type_name``.

        Args:
            page_index: Zero-based page index
            page_size: Items per page
            type_name: Type name to match

        Returns:
            Page with total count of matching items, or None on failure
        """
        ...

    @abstractmethod
    async def get_by_id(self, item_id: int) -> CatalogItem | None:
        """Get an item by its ID.

        Args:
            item_id: Item identifier

        Returns:
            CatalogItem if found, None otherwise
        """
        ...

    @abstractmethod
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
        """Insert a new item.

        Returns:
            New item ID, or None if no identity was produced
        """
        ...

    @abstractmethod
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
        """Update an existing item.

        Returns:
            Status token, or None if the item was not found
        """
        ...

    @abstractmethod
    async def remove(self, item_id: int) -> str | None:
        """Delete an item by ID.

        Returns:
            Status token, or None if the item was not found
        """
        ...


class CatalogBrandRepositoryInterface(ABC):
    """Abstract interface for catalog brand storage and retrieval."""

    @abstractmethod
    async def get_by_page(
        self, page_index: int, page_size: int
    ) -> PaginatedItems[CatalogBrand] | None:
        """Get one page of brands."""
        ...

    @abstractmethod
    async def get_by_id(self, brand_id: int) -> CatalogBrand | None:
        """Get a brand by its ID."""
        ...

    @abstractmethod
    async def add(self, brand: str) -> int | None:
        """Insert a new brand and return its ID."""
        ...

    @abstractmethod
    async def update(self, brand_id: int, brand: str) -> str | None:
        """Rename a brand; None if not found."""
        ...

    @abstractmethod
    async def remove(self, brand_id: int) -> str | None:
        """Delete a brand; None if not found."""
        ...


class CatalogTypeRepositoryInterface(ABC):
    """Abstract interface for catalog type storage and retrieval."""

    @abstractmethod
    async def get_by_page(
        self, page_index: int, page_size: int
    ) -> PaginatedItems[CatalogType] | None:
        """Get one page of types."""
        ...

    @abstractmethod
    async def get_by_id(self, type_id: int) -> CatalogType | None:
        """Get a type by its ID."""
        ...

    @abstractmethod
    async def add(self, type_name: str) -> int | None:
        """Insert a new type and return its ID."""
        ...

    @abstractmethod
    async def update(self, type_id: int, type_name: str) -> str | None:
        """Rename a type; None if not found."""
        ...

    @abstractmethod
    async def remove(self, type_id: int) -> str | None:
        """Delete a type; None if not found."""
        ...
