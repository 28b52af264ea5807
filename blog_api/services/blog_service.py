"""Blog post use cases: validation in front of the repository."""

import logging
from dataclasses import dataclass

from blog_api.models.blog import BlogPost
from blog_api.models.pagination import Page, PaginationRequest
from blog_api.services.repository import InMemoryBlogPostRepository
from blog_api.services.validator import PostValidator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Saved:
    """The write succeeded; ``post`` is the stored record."""

    post: BlogPost


@dataclass(frozen=True)
class ValidationFailed:
    """The submitted post broke one or more rules."""

    errors: list[str]


@dataclass(frozen=True)
class NotFound:
    """The post to update does not exist."""

    post_id: int

    @property
    def message(self) -> str:
        return f"Blog post with ID {self.post_id} not found"


WriteOutcome = Saved | ValidationFailed | NotFound


class BlogPostService:
    """Stateless orchestration over a repository and a validator.

    Reads pass straight through. Writes are validated first and the
    repository is only touched when the post is valid.
    """

    def __init__(
        self, repository: InMemoryBlogPostRepository, validator: PostValidator
    ) -> None:
        self._repository = repository
        self._validator = validator

    async def get_all_posts(self) -> list[BlogPost]:
        logger.info("Getting all blog posts")
        return self._repository.get_all()

    async def get_posts(self, request: PaginationRequest) -> Page[BlogPost]:
        logger.info(
            "Getting paged blog posts - Page: %d, Size: %d",
            request.page_number,
            request.page_size,
        )
        return self._repository.get_page(request)

    async def search_posts(self, term: str) -> list[BlogPost]:
        logger.info("Searching blog posts with term: %s", term)
        return self._repository.search(term)

    async def search_posts_page(
        self, term: str, request: PaginationRequest
    ) -> Page[BlogPost]:
        logger.info(
            "Searching paged blog posts with term: %s - Page: %d, Size: %d",
            term,
            request.page_number,
            request.page_size,
        )
        return self._repository.search_page(term, request)

    async def get_post(self, post_id: int) -> BlogPost | None:
        logger.info("Getting blog post with ID: %d", post_id)
        return self._repository.get_by_id(post_id)

    async def create_post(self, post: BlogPost) -> Saved | ValidationFailed:
        logger.info("Creating new blog post with title: %s", post.title)
        errors = self._validator.validate(post)
        if errors:
            logger.warning("Blog post validation failed: %s", "; ".join(errors))
            return ValidationFailed(errors=errors)
        return Saved(post=self._repository.create(post))

    async def update_post(self, post_id: int, post: BlogPost) -> WriteOutcome:
        logger.info("Updating blog post with ID: %d", post_id)
        errors = self._validator.validate(post)
        if errors:
            logger.warning(
                "Blog post validation failed for update: %s", "; ".join(errors)
            )
            return ValidationFailed(errors=errors)
        updated = self._repository.update(post_id, post)
        if updated is None:
            return NotFound(post_id=post_id)
        return Saved(post=updated)

    async def delete_post(self, post_id: int) -> bool:
        logger.info("Deleting blog post with ID: %d", post_id)
        return self._repository.delete(post_id)
