"""Unit tests for AggregationService."""

from uuid import uuid4

import pytest

from guide.domain.error import NotFoundError
from guide.domain.repository import (
    ArticleRepository,
    CategoryRepository,
    UserRepository,
)
from guide.domain.service import AggregationService, RelationshipService
from guide.domain.value import ArticleId, UserId
from tests.factories import make_article, make_category, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestReactionCount:
    """Tests for reaction_count."""

    @pytest.mark.asyncio
    async def test_new_article_has_no_reactions(self, unit_env):
        # Arrange
        aggregation = await unit_env.get(AggregationService)
        user_repo = await unit_env.get(UserRepository)
        article_repo = await unit_env.get(ArticleRepository)
        category_repo = await unit_env.get(CategoryRepository)

        author = await make_user(user_repo, "author")
        category = await make_category(category_repo)
        article = await make_article(article_repo, author, category)

        # Act & Assert
        assert await aggregation.reaction_count(article.id) == 0

    @pytest.mark.asyncio
    async def test_missing_article_raises_not_found(self, unit_env):
        aggregation = await unit_env.get(AggregationService)

        with pytest.raises(NotFoundError, match="Article not found"):
            await aggregation.reaction_count(ArticleId(uuid4()))


class TestListings:
    """Tests for subscriber, subscription and saved-article listings."""

    @pytest.mark.asyncio
    async def test_list_subscribers_and_subscriptions(self, unit_env):
        # Arrange
        aggregation = await unit_env.get(AggregationService)
        relationships = await unit_env.get(RelationshipService)
        user_repo = await unit_env.get(UserRepository)

        publisher = await make_user(user_repo, "publisher")
        first = await make_user(user_repo, "first", created_offset=1)
        second = await make_user(user_repo, "second", created_offset=2)
        await relationships.toggle_subscription(publisher.id, second.id, True)
        await relationships.toggle_subscription(publisher.id, first.id, True)

        # Act
        subscribers = await aggregation.list_subscribers(publisher.id)
        subscriptions = await aggregation.list_subscriptions(first.id)

        # Assert - ordered by creation time
        assert [u.id for u in subscribers] == [first.id, second.id]
        assert [u.id for u in subscriptions] == [publisher.id]

    @pytest.mark.asyncio
    async def test_empty_listings(self, unit_env):
        aggregation = await unit_env.get(AggregationService)
        user_repo = await unit_env.get(UserRepository)
        loner = await make_user(user_repo, "loner")

        assert await aggregation.list_subscribers(loner.id) == []
        assert await aggregation.list_subscriptions(loner.id) == []
        assert await aggregation.list_saved_articles(loner.id) == []

    @pytest.mark.asyncio
    async def test_list_saved_articles(self, unit_env):
        # Arrange
        aggregation = await unit_env.get(AggregationService)
        relationships = await unit_env.get(RelationshipService)
        user_repo = await unit_env.get(UserRepository)
        article_repo = await unit_env.get(ArticleRepository)
        category_repo = await unit_env.get(CategoryRepository)

        author = await make_user(user_repo, "author")
        reader = await make_user(user_repo, "reader")
        category = await make_category(category_repo)
        kept = await make_article(article_repo, author, category, title="Kept")
        skipped = await make_article(article_repo, author, category, title="Skipped")
        await relationships.toggle_saved_article(kept.id, reader.id, True)

        # Act
        saved = await aggregation.list_saved_articles(reader.id)

        # Assert
        assert [a.id for a in saved] == [kept.id]
        assert skipped.id not in {a.id for a in saved}

    @pytest.mark.asyncio
    async def test_listing_for_missing_user_raises_not_found(self, unit_env):
        aggregation = await unit_env.get(AggregationService)

        with pytest.raises(NotFoundError, match="User not found"):
            await aggregation.list_subscribers(UserId(uuid4()))


class TestMembershipFlags:
    """Tests for the per-viewer membership annotations."""

    @pytest.mark.asyncio
    async def test_flags_follow_relationship_sets(self, unit_env):
        # Arrange
        relationships = await unit_env.get(RelationshipService)
        user_repo = await unit_env.get(UserRepository)
        article_repo = await unit_env.get(ArticleRepository)
        category_repo = await unit_env.get(CategoryRepository)

        author = await make_user(user_repo, "author")
        reader = await make_user(user_repo, "reader")
        category = await make_category(category_repo)
        article = await make_article(article_repo, author, category)

        await relationships.toggle_reaction(article.id, reader.id, True)
        await relationships.toggle_subscription(author.id, reader.id, True)

        stored_article = await article_repo.find_by_id(article.id)
        stored_author = await user_repo.find_by_id(author.id)

        # Act & Assert
        assert AggregationService.has_reacted(stored_article, reader.id)
        assert not AggregationService.has_saved(stored_article, reader.id)
        assert AggregationService.is_subscribed(stored_author, reader.id)
        assert not AggregationService.is_subscribed(stored_author, author.id)
