"""Unit tests for RelationshipService."""

import random
from uuid import uuid4

import pytest

from guide.domain.error import (
    ConcurrentModificationError,
    InvalidTransitionError,
    NotFoundError,
    SelfReferenceRejectedError,
)
from guide.domain.model import User
from guide.domain.repository import (
    ArticleRepository,
    CategoryRepository,
    UserRepository,
)
from guide.domain.service import (
    RELATIONS,
    AggregationService,
    LookupService,
    RelationshipService,
    is_member,
)
from guide.domain.value import ArticleId, EntityType, RelationKind, UserId
from guide.persistence.repository.inmemory import (
    InMemoryArticleRepository,
    InMemoryCategoryRepository,
    InMemoryUserRepository,
)
from tests.factories import make_article, make_category, make_user
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()


class TestToggleReaction:
    """Tests for toggle_reaction."""

    @pytest.mark.asyncio
    async def test_reaction_updates_both_sides(self, unit_env):
        """Reacting adds the user to the article and the article to the user."""
        # Arrange
        service = await unit_env.get(RelationshipService)
        aggregation = await unit_env.get(AggregationService)
        user_repo = await unit_env.get(UserRepository)
        article_repo = await unit_env.get(ArticleRepository)
        category_repo = await unit_env.get(CategoryRepository)

        author = await make_user(user_repo, "author")
        reader = await make_user(user_repo, "reader")
        category = await make_category(category_repo)
        article = await make_article(article_repo, author, category)

        # Act
        result = await service.toggle_reaction(article.id, reader.id, True)

        # Assert
        assert result.present is True
        assert result.target.reactor_ids == {reader.id}
        assert result.actor.reacted_article_ids == {article.id}
        assert await aggregation.reaction_count(article.id) == 1

        stored_reader = await user_repo.find_by_id(reader.id)
        assert article.id in stored_reader.reacted_article_ids

    @pytest.mark.asyncio
    async def test_reacting_twice_is_rejected(self, unit_env):
        """A second identical reaction fails and changes nothing."""
        # Arrange
        service = await unit_env.get(RelationshipService)
        user_repo = await unit_env.get(UserRepository)
        article_repo = await unit_env.get(ArticleRepository)
        category_repo = await unit_env.get(CategoryRepository)

        author = await make_user(user_repo, "author")
        reader = await make_user(user_repo, "reader")
        category = await make_category(category_repo)
        article = await make_article(article_repo, author, category)
        await service.toggle_reaction(article.id, reader.id, True)

        # Act & Assert
        with pytest.raises(InvalidTransitionError) as exc_info:
            await service.toggle_reaction(article.id, reader.id, True)

        assert exc_info.value.present is True
        stored = await article_repo.find_by_id(article.id)
        assert stored.reactor_ids == {reader.id}

    @pytest.mark.asyncio
    async def test_removing_absent_reaction_is_rejected(self, unit_env):
        """Removing a reaction that was never added fails."""
        # Arrange
        service = await unit_env.get(RelationshipService)
        user_repo = await unit_env.get(UserRepository)
        article_repo = await unit_env.get(ArticleRepository)
        category_repo = await unit_env.get(CategoryRepository)

        author = await make_user(user_repo, "author")
        category = await make_category(category_repo)
        article = await make_article(article_repo, author, category)

        # Act & Assert
        with pytest.raises(InvalidTransitionError, match="already absent"):
            await service.toggle_reaction(article.id, author.id, False)

    @pytest.mark.asyncio
    async def test_authors_may_react_to_their_own_articles(self, unit_env):
        """Self-reference is only forbidden for subscriptions."""
        # Arrange
        service = await unit_env.get(RelationshipService)
        user_repo = await unit_env.get(UserRepository)
        article_repo = await unit_env.get(ArticleRepository)
        category_repo = await unit_env.get(CategoryRepository)

        author = await make_user(user_repo, "author")
        category = await make_category(category_repo)
        article = await make_article(article_repo, author, category)

        # Act
        result = await service.toggle_reaction(article.id, author.id, True)

        # Assert
        assert result.target.reactor_ids == {author.id}

    @pytest.mark.asyncio
    async def test_round_trip_restores_both_sets(self, unit_env):
        """Adding then removing a reaction leaves both sets as they were."""
        # Arrange
        service = await unit_env.get(RelationshipService)
        user_repo = await unit_env.get(UserRepository)
        article_repo = await unit_env.get(ArticleRepository)
        category_repo = await unit_env.get(CategoryRepository)

        author = await make_user(user_repo, "author")
        reader = await make_user(user_repo, "reader")
        other = await make_user(user_repo, "other")
        category = await make_category(category_repo)
        article = await make_article(article_repo, author, category)
        await service.toggle_reaction(article.id, other.id, True)

        before_article = await article_repo.find_by_id(article.id)
        before_reader = await user_repo.find_by_id(reader.id)

        # Act
        await service.toggle_reaction(article.id, reader.id, True)
        await service.toggle_reaction(article.id, reader.id, False)

        # Assert
        after_article = await article_repo.find_by_id(article.id)
        after_reader = await user_repo.find_by_id(reader.id)
        assert after_article.reactor_ids == before_article.reactor_ids
        assert after_reader.reacted_article_ids == before_reader.reacted_article_ids

    @pytest.mark.asyncio
    async def test_missing_article_raises_not_found(self, unit_env):
        """Reacting to an unknown article fails with NotFoundError."""
        # Arrange
        service = await unit_env.get(RelationshipService)
        user_repo = await unit_env.get(UserRepository)
        reader = await make_user(user_repo, "reader")
        missing_id = ArticleId(uuid4())

        # Act & Assert
        with pytest.raises(NotFoundError) as exc_info:
            await service.toggle_reaction(missing_id, reader.id, True)

        assert exc_info.value.resource == "Article"
        assert exc_info.value.identifier == str(missing_id)

    @pytest.mark.asyncio
    async def test_missing_actor_raises_not_found(self, unit_env):
        """An unknown viewer fails with NotFoundError before anything else."""
        # Arrange
        service = await unit_env.get(RelationshipService)

        # Act & Assert
        with pytest.raises(NotFoundError) as exc_info:
            await service.toggle_reaction(ArticleId(uuid4()), UserId(uuid4()), True)

        assert exc_info.value.resource == "User"


class TestToggleSavedArticle:
    """Tests for toggle_saved_article."""

    @pytest.mark.asyncio
    async def test_save_and_unsave(self, unit_env):
        """Saving mirrors on both sides; unsaving clears both."""
        # Arrange
        service = await unit_env.get(RelationshipService)
        user_repo = await unit_env.get(UserRepository)
        article_repo = await unit_env.get(ArticleRepository)
        category_repo = await unit_env.get(CategoryRepository)

        author = await make_user(user_repo, "author")
        reader = await make_user(user_repo, "reader")
        category = await make_category(category_repo)
        article = await make_article(article_repo, author, category)

        # Act
        saved = await service.toggle_saved_article(article.id, reader.id, True)
        removed = await service.toggle_saved_article(article.id, reader.id, False)

        # Assert
        assert saved.target.saved_by_ids == {reader.id}
        assert saved.actor.saved_article_ids == {article.id}
        assert removed.target.saved_by_ids == frozenset()
        assert removed.actor.saved_article_ids == frozenset()

    @pytest.mark.asyncio
    async def test_saving_missing_article_raises_not_found(self, unit_env):
        """Saving an unknown article fails with NotFound(Article, id)."""
        # Arrange
        service = await unit_env.get(RelationshipService)
        user_repo = await unit_env.get(UserRepository)
        reader = await make_user(user_repo, "reader")
        missing_id = ArticleId(uuid4())

        # Act & Assert
        with pytest.raises(NotFoundError) as exc_info:
            await service.toggle_saved_article(missing_id, reader.id, True)

        assert exc_info.value.resource == "Article"
        assert exc_info.value.identifier == str(missing_id)
        stored = await user_repo.find_by_id(reader.id)
        assert stored.saved_article_ids == frozenset()


class TestToggleSubscription:
    """Tests for toggle_subscription."""

    @pytest.mark.asyncio
    async def test_subscribe_and_unsubscribe(self, unit_env):
        """Subscription sets mirror each other and clear together."""
        # Arrange
        service = await unit_env.get(RelationshipService)
        user_repo = await unit_env.get(UserRepository)
        publisher = await make_user(user_repo, "publisher")
        subscriber = await make_user(user_repo, "subscriber")

        # Act
        await service.toggle_subscription(publisher.id, subscriber.id, True)

        # Assert
        stored_publisher = await user_repo.find_by_id(publisher.id)
        stored_subscriber = await user_repo.find_by_id(subscriber.id)
        assert stored_publisher.subscriber_ids == {subscriber.id}
        assert stored_subscriber.subscription_ids == {publisher.id}

        # Act
        await service.toggle_subscription(publisher.id, subscriber.id, False)

        # Assert
        stored_publisher = await user_repo.find_by_id(publisher.id)
        stored_subscriber = await user_repo.find_by_id(subscriber.id)
        assert stored_publisher.subscriber_ids == frozenset()
        assert stored_subscriber.subscription_ids == frozenset()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("desired_present", [True, False])
    async def test_self_subscription_is_rejected(self, unit_env, desired_present):
        """Subscribing to yourself fails and mutates nothing."""
        # Arrange
        service = await unit_env.get(RelationshipService)
        user_repo = await unit_env.get(UserRepository)
        user = await make_user(user_repo, "narcissus")

        # Act & Assert
        with pytest.raises(SelfReferenceRejectedError):
            await service.toggle_subscription(user.id, user.id, desired_present)

        stored = await user_repo.find_by_id(user.id)
        assert stored.subscriber_ids == frozenset()
        assert stored.subscription_ids == frozenset()
        assert stored.version == user.version

    @pytest.mark.asyncio
    async def test_self_subscription_rejected_regardless_of_other_state(
        self, unit_env
    ):
        """Existing subscriptions do not change the self-reference outcome."""
        # Arrange
        service = await unit_env.get(RelationshipService)
        user_repo = await unit_env.get(UserRepository)
        user = await make_user(user_repo, "narcissus")
        friend = await make_user(user_repo, "friend")
        await service.toggle_subscription(friend.id, user.id, True)
        await service.toggle_subscription(user.id, friend.id, True)

        # Act & Assert
        with pytest.raises(SelfReferenceRejectedError):
            await service.toggle_subscription(user.id, user.id, True)

    @pytest.mark.asyncio
    async def test_subscribing_to_missing_user_raises_not_found(self, unit_env):
        """An unknown publisher fails with NotFound(User, id)."""
        # Arrange
        service = await unit_env.get(RelationshipService)
        user_repo = await unit_env.get(UserRepository)
        subscriber = await make_user(user_repo, "subscriber")
        missing_id = UserId(uuid4())

        # Act & Assert
        with pytest.raises(NotFoundError) as exc_info:
            await service.toggle_subscription(missing_id, subscriber.id, True)

        assert exc_info.value.resource == "User"
        assert exc_info.value.identifier == str(missing_id)


class TestSymmetry:
    """Forward and inverse sets agree after arbitrary toggle sequences."""

    @staticmethod
    async def _assert_symmetric(user_repo, article_repo, users, articles) -> None:
        stored_users = {u.id: await user_repo.find_by_id(u.id) for u in users}
        stored_articles = {a.id: await article_repo.find_by_id(a.id) for a in articles}

        for user in stored_users.values():
            assert user.id not in user.subscriber_ids
            for article in stored_articles.values():
                assert (user.id in article.reactor_ids) == (
                    article.id in user.reacted_article_ids
                )
                assert (user.id in article.saved_by_ids) == (
                    article.id in user.saved_article_ids
                )
            for other in stored_users.values():
                assert (user.id in other.subscriber_ids) == (
                    other.id in user.subscription_ids
                )

    @pytest.mark.asyncio
    async def test_random_toggle_sequence_keeps_sets_symmetric(self, unit_env):
        """Every accepted or rejected toggle leaves both sides consistent."""
        # Arrange
        service = await unit_env.get(RelationshipService)
        user_repo = await unit_env.get(UserRepository)
        article_repo = await unit_env.get(ArticleRepository)
        category_repo = await unit_env.get(CategoryRepository)

        users = [await make_user(user_repo, f"user{i}") for i in range(4)]
        category = await make_category(category_repo)
        articles = [
            await make_article(article_repo, users[i % 2], category, title=f"Guide {i}")
            for i in range(3)
        ]
        rng = random.Random(20261019)

        # Act & Assert
        for _ in range(120):
            kind = rng.choice(list(RelationKind))
            actor = rng.choice(users)
            if RELATIONS[kind].target_type == EntityType.ARTICLE:
                target_id = rng.choice(articles).id
            else:
                target_id = rng.choice(users).id

            try:
                await service.toggle(actor.id, target_id, rng.random() < 0.5, kind)
            except (InvalidTransitionError, SelfReferenceRejectedError):
                pass

            await self._assert_symmetric(user_repo, article_repo, users, articles)

    @pytest.mark.asyncio
    async def test_reaction_count_tracks_reactor_set(self, unit_env):
        """The count is the size of the reactor set after every step."""
        # Arrange
        service = await unit_env.get(RelationshipService)
        aggregation = await unit_env.get(AggregationService)
        user_repo = await unit_env.get(UserRepository)
        article_repo = await unit_env.get(ArticleRepository)
        category_repo = await unit_env.get(CategoryRepository)

        users = [await make_user(user_repo, f"fan{i}") for i in range(5)]
        category = await make_category(category_repo)
        article = await make_article(article_repo, users[0], category)

        # Act & Assert
        steps = [(0, True), (1, True), (2, True), (1, False), (3, True), (0, False)]
        for index, present in steps:
            await service.toggle_reaction(article.id, users[index].id, present)
            stored = await article_repo.find_by_id(article.id)
            assert await aggregation.reaction_count(article.id) == len(
                stored.reactor_ids
            )

        assert await aggregation.reaction_count(article.id) == 2


class FailingUserRepository(InMemoryUserRepository):
    """User repository that fails to save one chosen user."""

    def __init__(self) -> None:
        super().__init__()
        self.fail_for: UserId | None = None

    async def save(self, user: User) -> User:
        if user.id == self.fail_for:
            raise RuntimeError("store unavailable")
        return await super().save(user)


class TestCompensation:
    """A failed second write never leaves a half-applied toggle behind."""

    @staticmethod
    def _build_service():
        user_repo = FailingUserRepository()
        article_repo = InMemoryArticleRepository()
        category_repo = InMemoryCategoryRepository()
        lookup = LookupService(user_repo, article_repo, category_repo)
        service = RelationshipService(lookup, user_repo, article_repo)
        return service, user_repo, article_repo, category_repo

    @pytest.mark.asyncio
    async def test_reaction_target_restored_when_actor_write_fails(self):
        """The article's reactor set is rolled back and the error propagates."""
        # Arrange
        service, user_repo, article_repo, category_repo = self._build_service()
        author = await make_user(user_repo, "author")
        reader = await make_user(user_repo, "reader")
        category = await make_category(category_repo)
        article = await make_article(article_repo, author, category)
        user_repo.fail_for = reader.id

        # Act & Assert
        with pytest.raises(RuntimeError, match="store unavailable"):
            await service.toggle_reaction(article.id, reader.id, True)

        stored_article = await article_repo.find_by_id(article.id)
        stored_reader = await user_repo.find_by_id(reader.id)
        assert stored_article.reactor_ids == frozenset()
        assert stored_reader.reacted_article_ids == frozenset()

    @pytest.mark.asyncio
    async def test_subscription_target_restored_when_actor_write_fails(self):
        """The publisher's subscriber set is rolled back."""
        # Arrange
        service, user_repo, _, _ = self._build_service()
        publisher = await make_user(user_repo, "publisher")
        subscriber = await make_user(user_repo, "subscriber")
        user_repo.fail_for = subscriber.id

        # Act & Assert
        with pytest.raises(RuntimeError):
            await service.toggle_subscription(publisher.id, subscriber.id, True)

        stored_publisher = await user_repo.find_by_id(publisher.id)
        assert stored_publisher.subscriber_ids == frozenset()

        # A retry after recovery still works
        user_repo.fail_for = None
        result = await service.toggle_subscription(publisher.id, subscriber.id, True)
        assert result.target.subscriber_ids == {subscriber.id}
        assert result.actor.subscription_ids == {publisher.id}

    @pytest.mark.asyncio
    async def test_first_written_user_restored_when_second_write_fails(self):
        """Whichever user is written first is put back if the other write fails."""
        # Arrange
        service, user_repo, _, _ = self._build_service()
        publisher = await make_user(user_repo, "publisher")
        subscriber = await make_user(user_repo, "subscriber")
        written_first, written_second = sorted(
            [publisher, subscriber], key=lambda u: u.id
        )
        user_repo.fail_for = written_second.id

        # Act
        with pytest.raises(RuntimeError, match="store unavailable"):
            await service.toggle_subscription(publisher.id, subscriber.id, True)

        # Assert
        restored = await user_repo.find_by_id(written_first.id)
        assert restored.subscriber_ids == frozenset()
        assert restored.subscription_ids == frozenset()
        assert restored.version > written_first.version


class RecordingUserRepository(InMemoryUserRepository):
    """User repository that remembers the order users were written in."""

    def __init__(self) -> None:
        super().__init__()
        self.written: list[UserId] = []

    async def save(self, user: User) -> User:
        self.written.append(user.id)
        return await super().save(user)


class TestWriteOrder:
    """Two users are always written lowest id first."""

    @pytest.mark.asyncio
    async def test_reciprocal_subscriptions_write_in_the_same_order(self):
        # Arrange
        user_repo = RecordingUserRepository()
        article_repo = InMemoryArticleRepository()
        lookup = LookupService(user_repo, article_repo, InMemoryCategoryRepository())
        service = RelationshipService(lookup, user_repo, article_repo)
        first = await make_user(user_repo, "first")
        second = await make_user(user_repo, "second")
        expected = sorted([first.id, second.id])

        # Act & Assert - each direction writes the pair in ascending id order
        user_repo.written.clear()
        await service.toggle_subscription(first.id, second.id, True)
        assert user_repo.written == expected

        user_repo.written.clear()
        await service.toggle_subscription(second.id, first.id, True)
        assert user_repo.written == expected

    @pytest.mark.asyncio
    async def test_result_sides_do_not_depend_on_write_order(self):
        user_repo = RecordingUserRepository()
        article_repo = InMemoryArticleRepository()
        lookup = LookupService(user_repo, article_repo, InMemoryCategoryRepository())
        service = RelationshipService(lookup, user_repo, article_repo)
        first = await make_user(user_repo, "first")
        second = await make_user(user_repo, "second")

        for publisher, subscriber in ((first, second), (second, first)):
            result = await service.toggle_subscription(
                publisher.id, subscriber.id, True
            )
            assert result.target.id == publisher.id
            assert result.actor.id == subscriber.id
            assert subscriber.id in result.target.subscriber_ids
            assert publisher.id in result.actor.subscription_ids


class TestConcurrentModification:
    """Stale writes are rejected by the version check."""

    @pytest.mark.asyncio
    async def test_stale_target_write_is_rejected(self):
        """A toggle based on an outdated article read fails without changes."""
        # Arrange
        user_repo = InMemoryUserRepository()
        article_repo = InMemoryArticleRepository()
        category_repo = InMemoryCategoryRepository()
        author = await make_user(user_repo, "author")
        reader = await make_user(user_repo, "reader")
        category = await make_category(category_repo)
        article = await make_article(article_repo, author, category)

        class StaleLookupService(LookupService):
            """Hands out the article as it was before a concurrent edit."""

            async def article(self, article_id):
                return article

        lookup = StaleLookupService(user_repo, article_repo, category_repo)
        service = RelationshipService(lookup, user_repo, article_repo)

        # Someone else's write lands after our read
        await article_repo.save(article.model_copy(update={"title": "Edited"}))

        # Act & Assert
        with pytest.raises(ConcurrentModificationError):
            await service.toggle_reaction(article.id, reader.id, True)

        stored_reader = await user_repo.find_by_id(reader.id)
        assert stored_reader.reacted_article_ids == frozenset()


class TestIsMember:
    """Tests for the is_member helper."""

    @pytest.mark.asyncio
    async def test_is_member_reads_forward_set(self, unit_env):
        # Arrange
        service = await unit_env.get(RelationshipService)
        user_repo = await unit_env.get(UserRepository)
        publisher = await make_user(user_repo, "publisher")
        subscriber = await make_user(user_repo, "subscriber")

        # Act
        result = await service.toggle_subscription(publisher.id, subscriber.id, True)

        # Assert
        assert is_member(RelationKind.SUBSCRIPTION, result.target, subscriber.id)
        assert not is_member(RelationKind.SUBSCRIPTION, result.actor, publisher.id)
