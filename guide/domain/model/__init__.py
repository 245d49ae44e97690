"""Domain model entities for Guidepedia."""

from guide.domain.model.article import Article
from guide.domain.model.category import Category
from guide.domain.model.comment import Comment
from guide.domain.model.user import User

__all__ = [
    "User",
    "Article",
    "Category",
    "Comment",
]
