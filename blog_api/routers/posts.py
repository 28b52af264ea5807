"""Blog post CRUD endpoints."""

import logging
import re

from fastapi import APIRouter, Depends, Query, Request, Response
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from blog_api.dependencies import get_blog_service
from blog_api.models.base import CamelModel
from blog_api.models.blog import BlogPost
from blog_api.models.pagination import DEFAULT_PAGE_SIZE, PaginationRequest
from blog_api.models.response import ApiResult
from blog_api.services.blog_service import (
    BlogPostService,
    NotFound,
    ValidationFailed,
)
from blog_api.services.search import is_blank

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/posts", tags=["posts"])

INVALID_ID_MESSAGE = "Invalid post ID format"
INVALID_BODY_MESSAGE = "Invalid request body"

# Ids and page values are 32-bit signed integers
INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
_INT_RE = re.compile(r"^\s*([+-]?)0*([0-9]{1,10})\s*$")


def _json(body: CamelModel | list[CamelModel], status_code: int = 200) -> JSONResponse:
    """Serialise a model (or list of models) with camelCase keys, nulls dropped."""
    if isinstance(body, list):
        content = [item.to_json_dict() for item in body]
    else:
        content = body.to_json_dict()
    return JSONResponse(content=content, status_code=status_code)


def _parse_int(value: str | None) -> int | None:
    """Parse a 32-bit integer query/path value, or None if it isn't one."""
    match = _INT_RE.match(value) if value is not None else None
    if match is None:
        return None
    # Leading zeros are dropped so int() never sees an over-long string
    number = int(match.group(1) + match.group(2))
    if not INT32_MIN <= number <= INT32_MAX:
        return None
    return number


def _invalid_id() -> JSONResponse:
    return _json(ApiResult[BlogPost].error([INVALID_ID_MESSAGE]), status_code=400)


def _invalid_body() -> JSONResponse:
    return _json(ApiResult[BlogPost].error([INVALID_BODY_MESSAGE]), status_code=400)


def _not_found(post_id: int) -> JSONResponse:
    return _json(
        ApiResult[BlogPost].not_found(f"Blog post with ID {post_id} not found"),
        status_code=404,
    )


@router.get("")
async def list_posts(
    page_number: str | None = Query(
        default=None, alias="pageNumber", description="Page number for pagination"
    ),
    page_size: str | None = Query(
        default=None, alias="pageSize", description="Number of items per page"
    ),
    search: str | None = Query(
        default=None, description="Optional search term to filter posts"
    ),
    service: BlogPostService = Depends(get_blog_service),
):
    """List posts, optionally paginated and/or filtered by a search term.

    Pagination only applies when both ``pageNumber`` and ``pageSize`` are
    integers; the page object is returned as-is. Search without pagination
    returns the bare list of matches. With neither, every post is returned
    wrapped in an ``ApiResult``.
    """
    logger.info(
        "List posts request: pageNumber=%s pageSize=%s search=%s",
        page_number,
        page_size,
        search,
    )
    number = _parse_int(page_number)
    size = _parse_int(page_size)

    if number is not None and size is not None:
        request = PaginationRequest(
            page_number=number if number > 0 else 1,
            page_size=size if size > 0 else DEFAULT_PAGE_SIZE,
        )
        if not is_blank(search):
            return _json(await service.search_posts_page(search, request))
        return _json(await service.get_posts(request))

    if not is_blank(search):
        return _json(await service.search_posts(search))

    posts = await service.get_all_posts()
    return _json(ApiResult[list[BlogPost]].ok(posts))


@router.get("/{post_id}")
async def get_post(
    post_id: str, service: BlogPostService = Depends(get_blog_service)
):
    """Get a single post by ID."""
    pid = _parse_int(post_id)
    if pid is None:
        logger.warning("Rejected non-integer post ID: %s", post_id)
        return _invalid_id()

    post = await service.get_post(pid)
    if post is None:
        return _not_found(pid)
    return _json(ApiResult[BlogPost].ok(post))


@router.post("", status_code=201)
async def create_post(
    post: BlogPost, service: BlogPostService = Depends(get_blog_service)
):
    """Create a post. Client-supplied ``id`` and timestamps are ignored."""
    outcome = await service.create_post(post)
    if isinstance(outcome, ValidationFailed):
        return _json(
            ApiResult[BlogPost].error(outcome.errors, "Validation failed"),
            status_code=400,
        )
    return _json(
        ApiResult[BlogPost].ok(outcome.post, "Blog post created successfully"),
        status_code=201,
    )


@router.put("/{post_id}")
async def update_post(
    post_id: str,
    request: Request,
    service: BlogPostService = Depends(get_blog_service),
):
    """Replace a post. Fields left out of the body are cleared, not kept.

    The body is read by hand so a bad ID is reported before a bad body.
    """
    pid = _parse_int(post_id)
    if pid is None:
        logger.warning("Rejected non-integer post ID: %s", post_id)
        return _invalid_id()

    try:
        post = BlogPost.model_validate_json(await request.body())
    except ValidationError as exc:
        logger.warning("Invalid request body for post %d: %s", pid, exc.errors())
        return _invalid_body()

    outcome = await service.update_post(pid, post)
    if isinstance(outcome, NotFound):
        return _json(ApiResult[BlogPost].not_found(outcome.message), status_code=404)
    if isinstance(outcome, ValidationFailed):
        return _json(
            ApiResult[BlogPost].error(outcome.errors, "Validation failed"),
            status_code=400,
        )
    return _json(ApiResult[BlogPost].ok(outcome.post, "Blog post updated successfully"))


@router.delete("/{post_id}", status_code=204)
async def delete_post(
    post_id: str, service: BlogPostService = Depends(get_blog_service)
):
    """Delete a post. Responds 204 with no body on success."""
    pid = _parse_int(post_id)
    if pid is None:
        logger.warning("Rejected non-integer post ID: %s", post_id)
        return _invalid_id()

    if not await service.delete_post(pid):
        return _not_found(pid)
    return Response(status_code=204)
