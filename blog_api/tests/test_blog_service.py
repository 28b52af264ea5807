"""Tests for BlogPostService orchestration."""

from unittest.mock import MagicMock

import pytest

from blog_api.models.blog import BlogPost
from blog_api.models.pagination import PaginationRequest
from blog_api.services.blog_service import (
    BlogPostService,
    NotFound,
    Saved,
    ValidationFailed,
)
from blog_api.services.repository import InMemoryBlogPostRepository
from blog_api.services.validator import BlogPostValidator


class StubValidator:
    """Validator double returning a fixed list of errors."""

    def __init__(self, errors: list[str] | None = None) -> None:
        self.errors = errors or []
        self.calls: list[BlogPost] = []

    def validate(self, post: BlogPost) -> list[str]:
        self.calls.append(post)
        return list(self.errors)


def _post(**overrides) -> BlogPost:
    fields = {"title": "Test Post", "content": "Test Content", "author": "Tester"}
    fields.update(overrides)
    return BlogPost(**fields)


@pytest.fixture
def service(repository):
    return BlogPostService(repository, BlogPostValidator())


class TestCreate:
    async def test_valid_post_is_saved(self, service):
        outcome = await service.create_post(_post(id=999))
        assert isinstance(outcome, Saved)
        assert outcome.post.id == 1
        assert await service.get_post(outcome.post.id) == outcome.post

    async def test_invalid_post_never_reaches_repository(self):
        repo = MagicMock(spec=InMemoryBlogPostRepository)
        service = BlogPostService(repo, StubValidator(["Title is required."]))

        outcome = await service.create_post(_post(title=""))

        assert outcome == ValidationFailed(errors=["Title is required."])
        repo.create.assert_not_called()

    async def test_uses_injected_validator(self, repository):
        validator = StubValidator()
        service = BlogPostService(repository, validator)
        post = _post()
        await service.create_post(post)
        assert validator.calls == [post]


class TestUpdate:
    async def test_missing_post_is_not_found_not_validation(self, service):
        outcome = await service.update_post(99999, _post())
        assert isinstance(outcome, NotFound)
        assert outcome.post_id == 99999
        assert outcome.message == "Blog post with ID 99999 not found"

    async def test_validation_checked_before_lookup(self, service):
        outcome = await service.update_post(99999, _post(content=""))
        assert outcome == ValidationFailed(errors=["Content is required."])

    async def test_not_found_wording_in_validation_message_is_still_validation(
        self, repository
    ):
        service = BlogPostService(repository, StubValidator(["Tag not found"]))
        outcome = await service.update_post(1, _post())
        assert isinstance(outcome, ValidationFailed)

    async def test_valid_update_is_saved(self, service):
        created = (await service.create_post(_post())).post
        outcome = await service.update_post(created.id, _post(title="Renamed"))
        assert isinstance(outcome, Saved)
        assert outcome.post.title == "Renamed"
        assert outcome.post.created_at == created.created_at


class TestReads:
    async def test_reads_pass_through(self, seeded_repository):
        service = BlogPostService(seeded_repository, StubValidator())
        request = PaginationRequest(page_number=1, page_size=2)

        assert len(await service.get_all_posts()) == 4
        assert (await service.get_posts(request)).total_count == 4
        assert len(await service.search_posts("azure")) == 2
        assert (await service.search_posts_page("azure", request)).total_count == 2
        assert await service.get_post(12345) is None

    async def test_delete(self, service):
        created = (await service.create_post(_post())).post
        assert await service.delete_post(created.id) is True
        assert await service.delete_post(created.id) is False
