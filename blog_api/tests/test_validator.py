"""Tests for BlogPostValidator rules."""

from blog_api.models.blog import BlogPost
from blog_api.services.validator import BlogPostValidator


def _valid(**overrides) -> BlogPost:
    fields = {
        "title": "A title",
        "content": "Some content",
        "author": "Someone",
        "tags": ["one"],
    }
    fields.update(overrides)
    return BlogPost(**fields)


def test_valid_post_has_no_errors():
    assert BlogPostValidator().validate(_valid()) == []


def test_collects_every_violation():
    post = _valid(title="", content="", author="x" * 51)
    errors = BlogPostValidator().validate(post)
    assert len(errors) == 3
    assert "Title is required." in errors
    assert "Content is required." in errors
    assert "Author name must not exceed 50 characters." in errors


def test_title_length_limit():
    assert BlogPostValidator().validate(_valid(title="t" * 100)) == []
    assert BlogPostValidator().validate(_valid(title="t" * 101)) == [
        "Title must not exceed 100 characters."
    ]


def test_author_length_limit():
    assert BlogPostValidator().validate(_valid(author="a" * 50)) == []


def test_whitespace_only_fields_count_as_empty():
    errors = BlogPostValidator().validate(_valid(title="   ", content="\n", author=" "))
    assert errors == [
        "Title is required.",
        "Content is required.",
        "Author is required.",
    ]


def test_tag_limit():
    assert BlogPostValidator().validate(_valid(tags=[str(i) for i in range(10)])) == []
    assert BlogPostValidator().validate(_valid(tags=[str(i) for i in range(11)])) == [
        "A blog post can have at most 10 tags."
    ]


def test_no_tags_is_valid():
    assert BlogPostValidator().validate(_valid(tags=[])) == []


def test_validation_does_not_modify_post():
    post = _valid(title="")
    before = post.model_dump()
    BlogPostValidator().validate(post)
    assert post.model_dump() == before
