"""Transport objects returned by the catalog service."""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict


class CatalogBrandDto(BaseModel):
    """Brand data transfer object."""

    model_config = ConfigDict(frozen=True)

    id: int
    brand: str


class CatalogTypeDto(BaseModel):
    """Type data transfer object."""

    model_config = ConfigDict(frozen=True)

    id: int
    type: str


class CatalogItemDto(BaseModel):
    """Catalog item data transfer object.

    Brand and type are nested DTOs rather than foreign keys.
    """

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    description: str | None = None
    price: Decimal
    picture_url: str | None = None
    catalog_brand: CatalogBrandDto | None = None
    catalog_type: CatalogTypeDto | None = None
    available_stock: int
