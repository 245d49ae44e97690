"""Domain value objects for Guidepedia."""

from guide.domain.value.identifiers import ArticleId, CategoryId, CommentId, UserId
from guide.domain.value.types import CategoryName, EntityType, Login, RelationKind

__all__ = [
    # Identifiers
    "UserId",
    "ArticleId",
    "CategoryId",
    "CommentId",
    # Types
    "CategoryName",
    "EntityType",
    "Login",
    "RelationKind",
]
