"""Pagination schemas for offset-based pagination."""

from typing import Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class PageParams(BaseModel):
    """Offset/size window into an ordered result set."""

    offset: int = Field(default=0, ge=0)
    size: int = Field(default=20, ge=1)


class Page(BaseModel, Generic[T]):
    """Generic paginated response.

    `total_count` is the size of the full match set, not of `items`, so
    clients can compute the number of pages.
    """

    items: list[T]
    total_count: int = Field(ge=0, description="Number of matches across all pages.")
    offset: int = Field(ge=0)
    size: int = Field(ge=1)
