"""Composition root: process-wide repository and the service built on it."""

from blog_api.config import get_settings
from blog_api.services.blog_service import BlogPostService
from blog_api.services.repository import InMemoryBlogPostRepository
from blog_api.services.validator import BlogPostValidator

# Lazy singleton, lives for the process lifetime
_repository: InMemoryBlogPostRepository | None = None


def get_repository() -> InMemoryBlogPostRepository:
    """Return the shared repository, creating it on first call."""
    global _repository
    if _repository is None:
        _repository = InMemoryBlogPostRepository(
            seed=get_settings().seed_sample_data
        )
    return _repository


def get_blog_service() -> BlogPostService:
    """Build the service with the default validator."""
    return BlogPostService(get_repository(), BlogPostValidator())
