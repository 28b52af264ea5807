"""Pagination request and page models."""

import math
from typing import Generic, TypeVar

from pydantic import Field, computed_field, field_validator

from blog_api.models.base import CamelModel

T = TypeVar("T")

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 50


class PaginationRequest(CamelModel):
    """Requested page. Oversized ``page_size`` is clamped, never rejected."""

    page_number: int = Field(default=1, ge=1)
    page_size: int = Field(default=DEFAULT_PAGE_SIZE, ge=1)

    @field_validator("page_size")
    @classmethod
    def clamp_page_size(cls, value: int) -> int:
        return min(value, MAX_PAGE_SIZE)


class Page(CamelModel, Generic[T]):
    """A slice of an ordered collection plus metadata about the whole."""

    items: list[T]
    page_number: int
    page_size: int
    total_count: int

    @computed_field(alias="totalPages")
    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_count / self.page_size)

    @computed_field(alias="hasPrevious")
    @property
    def has_previous(self) -> bool:
        return self.page_number > 1

    @computed_field(alias="hasNext")
    @property
    def has_next(self) -> bool:
        return self.page_number < self.total_pages
