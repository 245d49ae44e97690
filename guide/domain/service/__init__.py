"""Domain services."""

from .aggregation_service import AggregationService
from .article_service import ArticleService
from .base import Service
from .category_service import CategoryService
from .comment_service import CommentService
from .jwt_service import JWTService
from .lookup_service import LookupService
from .relationship_service import (
    RELATIONS,
    Relation,
    RelationshipService,
    ToggleResult,
    is_member,
)
from .user_service import UserService

__all__ = [
    "AggregationService",
    "ArticleService",
    "CategoryService",
    "CommentService",
    "JWTService",
    "LookupService",
    "RELATIONS",
    "Relation",
    "RelationshipService",
    "Service",
    "ToggleResult",
    "UserService",
    "is_member",
]
