"""Application services."""

from catalog_api.application.catalog_service import CatalogService

__all__ = ["CatalogService"]
