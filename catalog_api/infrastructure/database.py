"""Database configuration and session management.

Provides async SQLAlchemy engine, session factory and the
unit-of-work wrapper used by application services.
"""

from collections.abc import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncSession,
    AsyncSessionTransaction,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import declarative_base

from catalog_api.infrastructure.config import settings

# Create async engine
engine = create_async_engine(
    settings.database_url,
    echo=settings.debug,
    pool_pre_ping=True,
)

# Session factory
async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)

# Base class for models
Base = declarative_base()


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """Get database session.

    Yields:
        AsyncSession for database operations.
    """
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


class DatabaseContext:
    """Unit of work over a single session.

    Repositories and the service share the same session; the service
    scopes each operation with ``begin_transaction``.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize context with database session.

        Args:
            session: Async SQLAlchemy session.
        """
        self.session = session

    async def begin_transaction(self) -> AsyncSessionTransaction:
        """Begin a transaction on the session.

        Returns:
            Started transaction; the caller commits or rolls it back.
        """
        return await self.session.begin()
