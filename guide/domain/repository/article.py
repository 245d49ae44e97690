"""Article repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from guide.domain.model.article import Article
from guide.domain.value import ArticleId, CategoryId


class ArticleRepository(ABC):
    """Repository for Article aggregate."""

    @abstractmethod
    async def find_by_id(self, article_id: ArticleId) -> Optional[Article]:
        """Find an article by ID.

        Args:
            article_id: The article's unique identifier

        Returns:
            The article if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, article_ids: Sequence[ArticleId]) -> list[Article]:
        """Find several articles in one query.

        Args:
            article_ids: Identifiers to look up

        Returns:
            Found articles ordered by creation time (missing ids are skipped)
        """
        pass

    @abstractmethod
    async def find_by_category(self, category_id: CategoryId) -> list[Article]:
        """Find published articles in a category, newest first.

        Drafts are never listed.

        Args:
            category_id: Category identifier

        Returns:
            List of articles
        """
        pass

    @abstractmethod
    async def save(self, article: Article) -> Article:
        """Save an article (create or update).

        The stored version must equal ``article.version``; the returned
        article carries the incremented version.

        Args:
            article: The article to save

        Returns:
            The saved article

        Raises:
            ConcurrentModificationError: If the stored version has moved on
        """
        pass
