"""Turn an ordered sequence into a single page of results."""

from collections.abc import Sequence
from typing import TypeVar

from blog_api.models.pagination import Page, PaginationRequest

T = TypeVar("T")


def paginate(items: Sequence[T], request: PaginationRequest) -> Page[T]:
    """Return the requested page of *items*.

    Metadata is computed from the full sequence. A page number past the end
    yields an empty ``items`` list rather than an error.
    """
    start = (request.page_number - 1) * request.page_size
    end = start + request.page_size
    return Page(
        items=list(items[start:end]),
        page_number=request.page_number,
        page_size=request.page_size,
        total_count=len(items),
    )
