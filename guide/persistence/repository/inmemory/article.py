"""In-memory article repository for testing."""

from typing import Optional, Sequence

from guide.domain.error import ConcurrentModificationError
from guide.domain.model.article import Article
from guide.domain.repository.article import ArticleRepository
from guide.domain.value import ArticleId, CategoryId


class InMemoryArticleRepository(ArticleRepository):
    """In-memory implementation of ArticleRepository for testing."""

    def __init__(self) -> None:
        self._articles: dict[ArticleId, Article] = {}

    async def find_by_id(self, article_id: ArticleId) -> Optional[Article]:
        """Find an article by ID."""
        return self._articles.get(article_id)

    async def find_by_ids(self, article_ids: Sequence[ArticleId]) -> list[Article]:
        """Find several articles, ordered by creation time."""
        articles = [
            self._articles[aid] for aid in set(article_ids) if aid in self._articles
        ]
        articles.sort(key=lambda a: a.created_at)
        return articles

    async def find_by_category(self, category_id: CategoryId) -> list[Article]:
        """Find published articles in a category, newest first."""
        articles = [
            a
            for a in self._articles.values()
            if a.category_id == category_id and not a.is_draft
        ]
        articles.sort(key=lambda a: a.created_at, reverse=True)
        return articles

    async def save(self, article: Article) -> Article:
        """Save or update an article, checking the stored version."""
        existing = self._articles.get(article.id)
        if existing and existing.version != article.version:
            raise ConcurrentModificationError("Article", str(article.id))

        stored = article.model_copy(update={"version": article.version + 1})
        self._articles[article.id] = stored
        return stored
