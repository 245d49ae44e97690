"""Repository interfaces for Guidepedia domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from guide.domain.repository.article import ArticleRepository
from guide.domain.repository.category import CategoryRepository
from guide.domain.repository.comment import CommentRepository
from guide.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
    "ArticleRepository",
    "CategoryRepository",
    "CommentRepository",
]
