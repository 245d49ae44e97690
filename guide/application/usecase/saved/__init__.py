"""Saved article use cases."""

from .list_saved_articles import (
    ListSavedArticlesRequest,
    ListSavedArticlesResponse,
    ListSavedArticlesUseCase,
)
from .toggle_saved_article import (
    ToggleSavedArticleRequest,
    ToggleSavedArticleResponse,
    ToggleSavedArticleUseCase,
)

__all__ = [
    "ListSavedArticlesRequest",
    "ListSavedArticlesResponse",
    "ListSavedArticlesUseCase",
    "ToggleSavedArticleRequest",
    "ToggleSavedArticleResponse",
    "ToggleSavedArticleUseCase",
]
