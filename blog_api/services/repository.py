"""In-memory blog post store.

Posts live in a process-wide list and are lost on restart. The list and the
id counter are guarded by one lock so request handlers running on different
threads see a consistent store; concurrent writes to the same post are
last-writer-wins.
"""

import logging
import threading
from collections.abc import Callable
from datetime import datetime, timedelta, timezone

from blog_api.models.blog import BlogPost
from blog_api.models.pagination import Page, PaginationRequest
from blog_api.services.pagination import paginate
from blog_api.services.search import is_blank, search_posts

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]

# (days before start-up, post fields)
_SAMPLE_POSTS: list[tuple[int, dict]] = [
    (
        5,
        {
            "title": "Getting Started with Azure Functions",
            "content": (
                "Azure Functions is a serverless compute service that enables you "
                "to run code on-demand without having to explicitly provision or "
                "manage infrastructure."
            ),
            "author": "John Doe",
            "tags": ["Azure", "Serverless", "Cloud"],
        },
    ),
    (
        2,
        {
            "title": "Clean Architecture in .NET",
            "content": (
                "Clean Architecture is a software design philosophy that separates "
                "the elements of a design into ring levels."
            ),
            "author": "Jane Smith",
            "tags": [".NET", "Architecture", "Best Practices"],
        },
    ),
    (
        10,
        {
            "title": "Dependency Injection in .NET",
            "content": (
                "Dependency injection is a design pattern that allows the creation "
                "of dependent objects outside of a class and provides those objects "
                "to a class through different ways."
            ),
            "author": "Bob Johnson",
            "tags": [".NET", "Design Patterns", "Best Practices"],
        },
    ),
    (
        7,
        {
            "title": "Working with Azure Cosmos DB",
            "content": (
                "Azure Cosmos DB is a fully managed NoSQL database service for modern "
                "app development. It offers multi-master replication, guaranteed "
                "single-digit millisecond response times, and 99.999-percent "
                "availability."
            ),
            "author": "Alice Williams",
            "tags": ["Azure", "Database", "NoSQL", "Cosmos DB"],
        },
    ),
]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _by_newest(posts: list[BlogPost]) -> list[BlogPost]:
    return sorted(posts, key=lambda p: p.created_at, reverse=True)


class InMemoryBlogPostRepository:
    """Sole owner of the authoritative post collection.

    Usage::

        repo = InMemoryBlogPostRepository(seed=False)
        post = repo.create(BlogPost(title="Hi", content="...", author="Me"))
        repo.get_by_id(post.id)  # -> copy of the stored post, or None
    """

    def __init__(self, *, seed: bool = True, clock: Clock = utc_now) -> None:
        self._clock = clock
        self._lock = threading.Lock()
        self._posts: list[BlogPost] = []
        self._next_id = 1
        if seed:
            self._seed()

    def _seed(self) -> None:
        now = self._clock()
        for days_ago, fields in _SAMPLE_POSTS:
            self._posts.append(
                BlogPost(
                    id=self._next_id,
                    created_at=now - timedelta(days=days_ago),
                    **fields,
                )
            )
            self._next_id += 1
        logger.info("Seeded repository with %d sample posts", len(self._posts))

    def _snapshot(self) -> list[BlogPost]:
        """Copy the stored posts so callers can't mutate the store."""
        with self._lock:
            return [p.model_copy(deep=True) for p in self._posts]

    def count(self) -> int:
        with self._lock:
            return len(self._posts)

    def get_all(self) -> list[BlogPost]:
        """Return every post in insertion order."""
        posts = self._snapshot()
        logger.info("Getting all %d blog posts from repository", len(posts))
        return posts

    def get_page(self, request: PaginationRequest) -> Page[BlogPost]:
        """Return one page of posts, newest first."""
        logger.info(
            "Getting paged blog posts - Page: %d, Size: %d",
            request.page_number,
            request.page_size,
        )
        return paginate(_by_newest(self._snapshot()), request)

    def search(self, term: str | None) -> list[BlogPost]:
        """Return posts matching *term* in insertion order."""
        logger.info("Searching blog posts with term: %s", term)
        return search_posts(self._snapshot(), term)

    def search_page(
        self, term: str | None, request: PaginationRequest
    ) -> Page[BlogPost]:
        """Return one page of posts matching *term*, newest first."""
        logger.info(
            "Searching paged blog posts with term: %s - Page: %d, Size: %d",
            term,
            request.page_number,
            request.page_size,
        )
        if is_blank(term):
            return self.get_page(request)
        return paginate(_by_newest(search_posts(self._snapshot(), term)), request)

    def get_by_id(self, post_id: int) -> BlogPost | None:
        logger.info("Getting blog post with ID %d from repository", post_id)
        with self._lock:
            for post in self._posts:
                if post.id == post_id:
                    return post.model_copy(deep=True)
        return None

    def create(self, post: BlogPost) -> BlogPost:
        """Store a new post.

        The id and ``created_at`` are assigned here; any values the caller
        set for ``id``, ``created_at`` or ``updated_at`` are dropped.
        """
        with self._lock:
            stored = BlogPost(
                id=self._next_id,
                title=post.title,
                content=post.content,
                author=post.author,
                tags=list(post.tags),
                created_at=self._clock(),
                updated_at=None,
            )
            self._next_id += 1
            self._posts.append(stored)
        logger.info("Created new blog post with ID %d", stored.id)
        return stored.model_copy(deep=True)

    def update(self, post_id: int, post: BlogPost) -> BlogPost | None:
        """Replace the post with *post_id* entirely.

        Keeps the original ``id`` and ``created_at``; every other field comes
        from *post*. Returns None if there is no such post.
        """
        logger.info("Updating blog post with ID %d", post_id)
        with self._lock:
            for index, existing in enumerate(self._posts):
                if existing.id == post_id:
                    break
            else:
                logger.warning("Blog post with ID %d not found for update", post_id)
                return None

            updated = BlogPost(
                id=existing.id,
                title=post.title,
                content=post.content,
                author=post.author,
                tags=list(post.tags),
                created_at=existing.created_at,
                updated_at=self._clock(),
            )
            self._posts[index] = updated
        return updated.model_copy(deep=True)

    def delete(self, post_id: int) -> bool:
        """Remove the post with *post_id*. Returns whether anything was removed."""
        logger.info("Deleting blog post with ID %d", post_id)
        with self._lock:
            before = len(self._posts)
            self._posts = [p for p in self._posts if p.id != post_id]
            removed = len(self._posts) < before
        if not removed:
            logger.warning("Blog post with ID %d not found for deletion", post_id)
        return removed
