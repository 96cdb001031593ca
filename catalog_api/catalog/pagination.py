"""Paging types shared by repositories and the catalog service."""

from dataclasses import dataclass, field
from typing import Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


@dataclass
class PaginatedItems(Generic[T]):
    """One page of entities as returned by a repository.

    Attributes:
        total_count: Number of rows matching the query, before paging.
        data: Entities on the requested page.
    """

    total_count: int
    data: list[T] = field(default_factory=list)


class PaginatedItemsResponse(BaseModel, Generic[T]):
    """Caller-facing page envelope.

    ``page_index`` and ``page_size`` echo the request; ``count`` is the
    repository's total count.
    """

    page_index: int = Field(..., description="Zero-based page index requested")
    page_size: int = Field(..., description="Page size requested")
    count: int = Field(..., description="Total number of items available")
    data: list[T] = Field(..., description="Page of results")
