"""Shared fixtures for catalog persistence tests.

Repositories run against in-memory SQLite through aiosqlite.
"""

from collections.abc import AsyncGenerator
from decimal import Decimal

import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from catalog_api.catalog.models import CatalogBrand, CatalogItem, CatalogType
from catalog_api.infrastructure.database import Base


@pytest_asyncio.fixture
async def session() -> AsyncGenerator[AsyncSession, None]:
    """Create a session on a fresh in-memory database."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session

    await engine.dispose()


@pytest_asyncio.fixture
async def seeded_session(session: AsyncSession) -> AsyncSession:
    """Session over a database with two brands, two types and three items.

    Item ids are 1..3; brand ".NET" has items 1 and 3, type "Mug" has item 2.
    """
    dotnet = CatalogBrand(brand=".NET")
    other = CatalogBrand(brand="Other")
    tshirt = CatalogType(type="T-Shirt")
    mug = CatalogType(type="Mug")
    session.add_all([dotnet, other, tshirt, mug])
    await session.flush()

    session.add_all(
        [
            CatalogItem(
                name=".NET Bot Black Hoodie",
                description="Hoodie",
                price=Decimal("19.50"),
                available_stock=100,
                catalog_brand_id=dotnet.id,
                catalog_type_id=tshirt.id,
                picture_file_name="1.png",
            ),
            CatalogItem(
                name="Cup<T> White Mug",
                price=Decimal("12.00"),
                available_stock=76,
                catalog_brand_id=other.id,
                catalog_type_id=mug.id,
                picture_file_name="9.png",
            ),
            CatalogItem(
                name=".NET Foundation T-shirt",
                price=Decimal("12.00"),
                available_stock=120,
                catalog_brand_id=dotnet.id,
                catalog_type_id=tshirt.id,
                picture_file_name="4.png",
            ),
        ]
    )
    await session.commit()
    session.expunge_all()
    return session
