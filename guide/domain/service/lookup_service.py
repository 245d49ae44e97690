"""Lookup domain service.

Resolves identifiers to entities or fails with ``NotFoundError``. Every
operation that touches relationship state resolves its entities here first,
so callers never see ``None`` for a missing user, article or category.
"""

import logfire

from guide.domain.error import NotFoundError
from guide.domain.model import Article, Category, User
from guide.domain.repository import (
    ArticleRepository,
    CategoryRepository,
    UserRepository,
)
from guide.domain.value import (
    ArticleId,
    CategoryId,
    CategoryName,
    EntityType,
    UserId,
)

from .base import Service


class LookupService(Service):
    """Domain service resolving identifiers to entities."""

    def __init__(
        self,
        user_repository: UserRepository,
        article_repository: ArticleRepository,
        category_repository: CategoryRepository,
    ) -> None:
        """Initialize lookup service.

        Args:
            user_repository: User repository
            article_repository: Article repository
            category_repository: Category repository
        """
        self.user_repository = user_repository
        self.article_repository = article_repository
        self.category_repository = category_repository

    async def user(self, user_id: UserId) -> User:
        """Resolve a user by ID.

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("lookup_service.user", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            return self._require(user, EntityType.USER, str(user_id))

    async def article(self, article_id: ArticleId) -> Article:
        """Resolve an article by ID.

        Raises:
            NotFoundError: If article not found
        """
        with logfire.span("lookup_service.article", article_id=str(article_id)):
            article = await self.article_repository.find_by_id(article_id)
            return self._require(article, EntityType.ARTICLE, str(article_id))

    async def category(self, category_id: CategoryId) -> Category:
        """Resolve a category by ID.

        Raises:
            NotFoundError: If category not found
        """
        with logfire.span("lookup_service.category", category_id=str(category_id)):
            category = await self.category_repository.find_by_id(category_id)
            return self._require(category, EntityType.CATEGORY, str(category_id))

    async def category_by_name(self, name: CategoryName) -> Category:
        """Resolve a category by its unique name.

        Raises:
            NotFoundError: If no category is registered under this name
        """
        with logfire.span("lookup_service.category_by_name", category_name=name.root):
            category = await self.category_repository.find_by_name(name)
            return self._require(category, EntityType.CATEGORY, name.root)

    @staticmethod
    def _require(entity, entity_type: EntityType, identifier: str):
        if entity is None:
            logfire.warn(
                "Entity not found",
                entity_type=entity_type.value,
                identifier=identifier,
            )
            raise NotFoundError(entity_type.value, identifier)
        return entity
