"""Article domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from guide.domain.model import Article, User
from guide.domain.repository import ArticleRepository
from guide.domain.value import ArticleId, CategoryId, CategoryName

from .base import Service
from .lookup_service import LookupService


class ArticleService(Service):
    """Domain service for article authoring and listing."""

    def __init__(
        self, article_repository: ArticleRepository, lookup_service: LookupService
    ) -> None:
        """Initialize article service.

        Args:
            article_repository: Article repository
            lookup_service: Lookup domain service
        """
        self.article_repository = article_repository
        self.lookup_service = lookup_service

    async def create_article(
        self,
        author: User,
        category_name: CategoryName,
        title: str,
        text: str,
        description: str = "",
        is_draft: bool = False,
    ) -> Article:
        """Create an article authored by the given user.

        Args:
            author: Resolved acting user
            category_name: Name of an existing category
            title: Article title
            text: Article body
            description: Short description
            is_draft: Whether the article is a draft

        Returns:
            Created article with empty relationship sets

        Raises:
            NotFoundError: If the category is not registered (nothing is saved)
        """
        with logfire.span(
            "article_service.create_article",
            author_id=str(author.id),
            category_name=category_name.root,
            title=title,
        ):
            category = await self.lookup_service.category_by_name(category_name)

            article = Article(
                id=ArticleId(uuid4()),
                author_id=author.id,
                category_id=category.id,
                title=title,
                text=text,
                description=description,
                is_draft=is_draft,
                created_at=datetime.now(),
            )

            saved = await self.article_repository.save(article)
            logfire.info(
                "Article created",
                article_id=str(saved.id),
                author_id=str(author.id),
                category_id=str(category.id),
                is_draft=is_draft,
            )
            return saved

    async def list_by_category(self, category_id: CategoryId) -> list[Article]:
        """List published articles in a category, newest first.

        Raises:
            NotFoundError: If category not found
        """
        with logfire.span(
            "article_service.list_by_category", category_id=str(category_id)
        ):
            await self.lookup_service.category(category_id)
            articles = await self.article_repository.find_by_category(category_id)
            logfire.info(
                "Category articles listed",
                category_id=str(category_id),
                count=len(articles),
            )
            return articles
