"""Aggregation domain service.

Read-only queries derived from relationship sets: reaction counts,
subscriber / subscription / saved-article listings and per-viewer
membership flags. Counts are always computed from the sets themselves,
never from a stored counter.
"""

import logfire

from guide.domain.model import Article, User
from guide.domain.repository import ArticleRepository, UserRepository
from guide.domain.value import ArticleId, RelationKind, UserId

from .base import Service
from .lookup_service import LookupService
from .relationship_service import is_member


class AggregationService(Service):
    """Domain service for relationship read models."""

    def __init__(
        self,
        lookup_service: LookupService,
        user_repository: UserRepository,
        article_repository: ArticleRepository,
    ) -> None:
        """Initialize aggregation service.

        Args:
            lookup_service: Lookup domain service
            user_repository: User repository
            article_repository: Article repository
        """
        self.lookup_service = lookup_service
        self.user_repository = user_repository
        self.article_repository = article_repository

    async def reaction_count(self, article_id: ArticleId) -> int:
        """Count reactions on an article.

        Args:
            article_id: Article ID

        Returns:
            Number of users who reacted to the article

        Raises:
            NotFoundError: If article not found
        """
        with logfire.span(
            "aggregation_service.reaction_count", article_id=str(article_id)
        ):
            article = await self.lookup_service.article(article_id)
            count = len(article.reactor_ids)
            logfire.info("Reactions counted", article_id=str(article_id), count=count)
            return count

    async def list_subscribers(self, user_id: UserId) -> list[User]:
        """List users who subscribe to the given user.

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span(
            "aggregation_service.list_subscribers", user_id=str(user_id)
        ):
            user = await self.lookup_service.user(user_id)
            subscribers = await self.user_repository.find_by_ids(
                sorted(user.subscriber_ids)
            )
            logfire.info(
                "Subscribers listed", user_id=str(user_id), count=len(subscribers)
            )
            return subscribers

    async def list_subscriptions(self, user_id: UserId) -> list[User]:
        """List users the given user subscribes to.

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span(
            "aggregation_service.list_subscriptions", user_id=str(user_id)
        ):
            user = await self.lookup_service.user(user_id)
            subscriptions = await self.user_repository.find_by_ids(
                sorted(user.subscription_ids)
            )
            logfire.info(
                "Subscriptions listed", user_id=str(user_id), count=len(subscriptions)
            )
            return subscriptions

    async def list_saved_articles(self, user_id: UserId) -> list[Article]:
        """List articles the given user saved.

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span(
            "aggregation_service.list_saved_articles", user_id=str(user_id)
        ):
            user = await self.lookup_service.user(user_id)
            articles = await self.article_repository.find_by_ids(
                sorted(user.saved_article_ids)
            )
            logfire.info(
                "Saved articles listed", user_id=str(user_id), count=len(articles)
            )
            return articles

    @staticmethod
    def is_subscribed(target: User, viewer_id: UserId) -> bool:
        """Whether the viewer subscribes to the target user."""
        return is_member(RelationKind.SUBSCRIPTION, target, viewer_id)

    @staticmethod
    def has_reacted(article: Article, viewer_id: UserId) -> bool:
        """Whether the viewer reacted to the article."""
        return is_member(RelationKind.REACTION, article, viewer_id)

    @staticmethod
    def has_saved(article: Article, viewer_id: UserId) -> bool:
        """Whether the viewer saved the article."""
        return is_member(RelationKind.SAVE, article, viewer_id)
