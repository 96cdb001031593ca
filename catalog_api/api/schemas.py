"""API schemas for the catalog API.

Pydantic models for request/response validation and serialization.
Catalog DTOs and page envelopes are returned as-is.
"""

from decimal import Decimal

from pydantic import BaseModel, Field


# ============================================================================
# Common Schemas
# ============================================================================


class ErrorDetail(BaseModel):
    """Detailed error information."""

    field: str | None = Field(default=None, description="Field that caused the error")
    message: str = Field(..., description="Error message")


class ErrorResponse(BaseModel):
    """Standard error response.

    All API errors follow this format for consistency.
    """

    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")
    details: list[ErrorDetail] = Field(
        default_factory=list, description="Additional error details"
    )
    request_id: str | None = Field(
        default=None, description="Request ID for correlation"
    )


class CreatedResponse(BaseModel):
    """Identity of a newly created entity."""

    id: int = Field(..., description="Identifier of the created entity")


class StatusResponse(BaseModel):
    """Outcome of an update or remove."""

    status: str = Field(..., description="Status token reported by storage")


# ============================================================================
# Item Schemas
# ============================================================================


class CatalogItemRequest(BaseModel):
    """Create or update request for a catalog item."""

    name: str = Field(..., min_length=1, max_length=100, description="Item name")
    description: str | None = Field(default=None, description="Item description")
    price: Decimal = Field(..., ge=0, description="Unit price")
    available_stock: int = Field(default=0, ge=0, description="Quantity in stock")
    catalog_brand_id: int = Field(..., description="Brand identifier")
    catalog_type_id: int = Field(..., description="Type identifier")
    picture_file_name: str | None = Field(default=None, description="Picture file name")


# ============================================================================
# Brand / Type Schemas
# ============================================================================


class CatalogBrandRequest(BaseModel):
    """Create or update request for a brand."""

    brand: str = Field(..., min_length=1, max_length=100, description="Brand name")


class CatalogTypeRequest(BaseModel):
    """Create or update request for a type."""

    type: str = Field(..., min_length=1, max_length=100, description="Type name")
