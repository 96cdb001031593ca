"""SQLAlchemy models for the product catalog.

Defines CatalogItem, CatalogBrand and CatalogType tables.
"""

from decimal import Decimal

from sqlalchemy import ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from catalog_api.infrastructure.database import Base


class CatalogBrand(Base):
    """Brand a catalog item belongs to.

    Attributes:
        id: Brand identifier.
        brand: Brand name.
    """

    __tablename__ = "catalog_brand"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    brand: Mapped[str] = mapped_column(String(100), nullable=False)

    def __repr__(self) -> str:
        """String representation."""
        return f"<CatalogBrand(id={self.id}, brand={self.brand})>"


class CatalogType(Base):
    """Type (category) of a catalog item.

    Attributes:
        id: Type identifier.
        type: Type name.
    """

    __tablename__ = "catalog_type"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    type: Mapped[str] = mapped_column(String(100), nullable=False)

    def __repr__(self) -> str:
        """String representation."""
        return f"<CatalogType(id={self.id}, type={self.type})>"


class CatalogItem(Base):
    """Product in the catalog.

    Attributes:
        id: Item identifier.
        name: Item name.
        description: Item description.
        price: Unit price.
        available_stock: Quantity in stock.
        catalog_brand_id: Brand foreign key.
        catalog_type_id: Type foreign key.
        picture_file_name: Picture file name relative to the picture host.
    """

    __tablename__ = "catalog_item"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    price: Mapped[Decimal] = mapped_column(Numeric(18, 2), nullable=False)
    available_stock: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    catalog_brand_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("catalog_brand.id"),
        nullable=False,
        index=True,
    )
    catalog_type_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("catalog_type.id"),
        nullable=False,
        index=True,
    )
    picture_file_name: Mapped[str | None] = mapped_column(String(255), nullable=True)

    # Relationships
    catalog_brand: Mapped["CatalogBrand"] = relationship("CatalogBrand")
    catalog_type: Mapped["CatalogType"] = relationship("CatalogType")

    def __repr__(self) -> str:
        """String representation."""
        return f"<CatalogItem(id={self.id}, name={self.name})>"
