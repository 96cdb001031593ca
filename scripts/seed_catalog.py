#!/usr/bin/env python3
"""Seed catalog script.

Creates the catalog tables and fills them with demo brands, types and
items through the catalog service.

Usage:
    python scripts/seed_catalog.py
    python scripts/seed_catalog.py --skip-items
"""

import argparse
import asyncio
from decimal import Decimal

import structlog

from catalog_api.application.catalog_service import CatalogService
from catalog_api.catalog.repository import (
    CatalogBrandRepository,
    CatalogItemRepository,
    CatalogTypeRepository,
)
from catalog_api.infrastructure.database import (
    Base,
    DatabaseContext,
    async_session_factory,
    engine,
)
from catalog_api.infrastructure.logging import configure_logging

logger = structlog.get_logger()

BRANDS = ["Azure", ".NET", "Visual Studio", "SQL Server", "Other"]
TYPES = ["Mug", "T-Shirt", "Sheet", "USB Memory Stick"]

# (name, description, price, stock, brand, type, picture)
ITEMS = [
    (".NET Bot Black Hoodie", ".NET Bot Black Hoodie", "19.50", 100, ".NET", "T-Shirt", "1.png"),
    (".NET Black & White Mug", ".NET Black & White Mug", "8.50", 89, ".NET", "Mug", "2.png"),
    ("Prism White T-Shirt", "Prism White T-Shirt", "12.00", 56, "Other", "T-Shirt", "3.png"),
    (".NET Foundation T-shirt", ".NET Foundation T-shirt", "12.00", 120, ".NET", "T-Shirt", "4.png"),
    ("Roslyn Red Sheet", "Roslyn Red Sheet", "8.50", 55, "Other", "Sheet", "5.png"),
    (".NET Blue Hoodie", ".NET Blue Hoodie", "12.00", 17, ".NET", "T-Shirt", "6.png"),
    ("Roslyn Red T-Shirt", "Roslyn Red T-Shirt", "12.00", 8, "Other", "T-Shirt", "7.png"),
    ("Kudu Purple Hoodie", "Kudu Purple Hoodie", "8.50", 34, "Other", "T-Shirt", "8.png"),
    ("Cup<T> White Mug", "Cup<T> White Mug", "12.00", 76, "Other", "Mug", "9.png"),
    (".NET Foundation Sheet", ".NET Foundation Sheet", "12.00", 11, ".NET", "Sheet", "10.png"),
    ("Cup<T> Sheet", "Cup<T> Sheet", "8.50", 3, "Other", "Sheet", "11.png"),
    ("Prism White TShirt", "Prism White TShirt", "12.00", 0, "Other", "T-Shirt", "12.png"),
]


async def create_tables() -> None:
    """Create database tables if they don't exist."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def seed(with_items: bool = True) -> dict[str, int]:
    """Seed brands, types and optionally items.

    Args:
        with_items: Whether to insert demo items.

    Returns:
        Number of rows created per entity kind.
    """
    counts = {"brands": 0, "types": 0, "items": 0}

    async with async_session_factory() as session:
        service = CatalogService(
            DatabaseContext(session),
            CatalogItemRepository(session),
            CatalogBrandRepository(session),
            CatalogTypeRepository(session),
        )

        brand_ids: dict[str, int] = {}
        for brand in BRANDS:
            brand_id = await service.add_brand(brand)
            if brand_id is not None:
                brand_ids[brand] = brand_id
                counts["brands"] += 1

        type_ids: dict[str, int] = {}
        for type_name in TYPES:
            type_id = await service.add_type(type_name)
            if type_id is not None:
                type_ids[type_name] = type_id
                counts["types"] += 1

        if with_items:
            for name, description, price, stock, brand, type_name, picture in ITEMS:
                if brand not in brand_ids or type_name not in type_ids:
                    logger.warning("Skipping item with unknown brand or type", name=name)
                    continue

                item_id = await service.create_product(
                    name,
                    description,
                    Decimal(price),
                    stock,
                    brand_ids[brand],
                    type_ids[type_name],
                    picture,
                )
                if item_id is not None:
                    counts["items"] += 1

    return counts


async def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Seed the product catalog")
    parser.add_argument(
        "--skip-items",
        action="store_true",
        help="Only seed brands and types",
    )
    args = parser.parse_args()

    configure_logging()

    await create_tables()
    logger.info("Tables ready")

    counts = await seed(with_items=not args.skip_items)
    logger.info("Seeding complete", **counts)

    await engine.dispose()


if __name__ == "__main__":
    asyncio.run(main())
