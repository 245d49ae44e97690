"""PostgreSQL repository implementations."""

from guide.persistence.repository.article import PostgresArticleRepository
from guide.persistence.repository.category import PostgresCategoryRepository
from guide.persistence.repository.comment import PostgresCommentRepository
from guide.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresArticleRepository",
    "PostgresCategoryRepository",
    "PostgresCommentRepository",
    "PostgresUserRepository",
]
