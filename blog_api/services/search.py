"""Case-insensitive free-text search over blog posts."""

from collections.abc import Iterable

from blog_api.models.blog import BlogPost


def is_blank(term: str | None) -> bool:
    """True when *term* is missing or whitespace only (meaning: no filter)."""
    return term is None or not term.strip()


def matches(post: BlogPost, term: str) -> bool:
    """True if *term* occurs in the title, content, author or any tag."""
    needle = term.lower()
    return (
        needle in post.title.lower()
        or needle in post.content.lower()
        or needle in post.author.lower()
        or any(needle in tag.lower() for tag in post.tags)
    )


def search_posts(posts: Iterable[BlogPost], term: str | None) -> list[BlogPost]:
    """Filter *posts* by *term*, keeping their order.

    A blank term returns every post.
    """
    if is_blank(term):
        return list(posts)
    return [post for post in posts if matches(post, term)]
