"""Article use cases."""

from .create_article import (
    CreateArticleRequest,
    CreateArticleResponse,
    CreateArticleUseCase,
)
from .get_article import GetArticleRequest, GetArticleResponse, GetArticleUseCase
from .list_category_articles import (
    ListCategoryArticlesRequest,
    ListCategoryArticlesResponse,
    ListCategoryArticlesUseCase,
)

__all__ = [
    "CreateArticleRequest",
    "CreateArticleResponse",
    "CreateArticleUseCase",
    "GetArticleRequest",
    "GetArticleResponse",
    "GetArticleUseCase",
    "ListCategoryArticlesRequest",
    "ListCategoryArticlesResponse",
    "ListCategoryArticlesUseCase",
]
