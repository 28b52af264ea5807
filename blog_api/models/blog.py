"""Blog post data models."""

from datetime import datetime

from pydantic import field_validator

from blog_api.models.base import CamelModel


class BlogPost(CamelModel):
    """A blog post.

    ``id``, ``created_at`` and ``updated_at`` are owned by the repository;
    values sent by clients are accepted for parsing and then discarded.
    Business rules (required fields, lengths, tag count) are checked by
    ``BlogPostValidator`` rather than here, so that every violation can be
    reported together.
    """

    id: int = 0
    title: str = ""
    content: str = ""
    author: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None
    tags: list[str] = []

    @field_validator("title", "content", "author", mode="before")
    @classmethod
    def null_text_to_empty(cls, value):
        """JSON null means "not given"; the validator reports it as missing."""
        return "" if value is None else value

    @field_validator("tags", mode="before")
    @classmethod
    def null_tags_to_empty(cls, value):
        return [] if value is None else value
