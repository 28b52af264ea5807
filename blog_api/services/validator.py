"""Business rules for blog posts."""

from typing import Protocol

from blog_api.models.blog import BlogPost

MAX_TITLE_LENGTH = 100
MAX_AUTHOR_LENGTH = 50
MAX_TAGS = 10


class PostValidator(Protocol):
    """Anything that can check a post and list what is wrong with it."""

    def validate(self, post: BlogPost) -> list[str]: ...


def _is_empty(value: str) -> bool:
    return not value.strip()


class BlogPostValidator:
    """Default rule set.

    Every rule is evaluated, so a post with several problems gets one
    message per problem. An empty list means the post is valid.
    """

    def validate(self, post: BlogPost) -> list[str]:
        errors: list[str] = []

        if _is_empty(post.title):
            errors.append("Title is required.")
        if len(post.title) > MAX_TITLE_LENGTH:
            errors.append(
                f"Title must not exceed {MAX_TITLE_LENGTH} characters."
            )

        if _is_empty(post.content):
            errors.append("Content is required.")

        if _is_empty(post.author):
            errors.append("Author is required.")
        if len(post.author) > MAX_AUTHOR_LENGTH:
            errors.append(
                f"Author name must not exceed {MAX_AUTHOR_LENGTH} characters."
            )

        if len(post.tags) > MAX_TAGS:
            errors.append(f"A blog post can have at most {MAX_TAGS} tags.")

        return errors
