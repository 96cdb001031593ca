"""Entity to DTO conversion."""

from catalog_api.catalog.dtos import CatalogBrandDto, CatalogItemDto, CatalogTypeDto
from catalog_api.catalog.models import CatalogBrand, CatalogItem, CatalogType
from catalog_api.infrastructure.config import settings


class CatalogMapper:
    """Field-by-field mapping from persistence entities to DTOs.

    Callers must only pass present entities; absence is handled by the
    service before mapping.
    """

    def __init__(self, picture_base_url: str | None = None) -> None:
        """Initialize mapper.

        Args:
            picture_base_url: Base URL prepended to picture file names.
                Defaults to ``settings.picture_base_url``.
        """
        base_url = picture_base_url if picture_base_url is not None else settings.picture_base_url
        self.picture_base_url = base_url.rstrip("/")

    def to_brand_dto(self, brand: CatalogBrand) -> CatalogBrandDto:
        """Convert a brand entity."""
        return CatalogBrandDto(id=brand.id, brand=brand.brand)

    def to_type_dto(self, catalog_type: CatalogType) -> CatalogTypeDto:
        """Convert a type entity."""
        return CatalogTypeDto(id=catalog_type.id, type=catalog_type.type)

    def to_item_dto(self, item: CatalogItem) -> CatalogItemDto:
        """Convert an item entity, including its resolved brand and type.

        Args:
            item: Item with ``catalog_brand``/``catalog_type`` loaded, or unset.

        Returns:
            Item DTO; nested DTOs are None when the relation is not resolved.
        """
        brand = item.catalog_brand
        catalog_type = item.catalog_type

        return CatalogItemDto(
            id=item.id,
            name=item.name,
            description=item.description,
            price=item.price,
            picture_url=self.picture_url(item.picture_file_name),
            catalog_brand=self.to_brand_dto(brand) if brand is not None else None,
            catalog_type=self.to_type_dto(catalog_type) if catalog_type is not None else None,
            available_stock=item.available_stock,
        )

    def picture_url(self, picture_file_name: str | None) -> str | None:
        """Build the public picture URL for a file name."""
        if not picture_file_name:
            return None
        return f"{self.picture_base_url}/{picture_file_name}"
