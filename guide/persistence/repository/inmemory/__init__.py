"""In-memory repository implementations for testing."""

from .article import InMemoryArticleRepository
from .category import InMemoryCategoryRepository
from .comment import InMemoryCommentRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryArticleRepository",
    "InMemoryCategoryRepository",
    "InMemoryCommentRepository",
    "InMemoryUserRepository",
]
