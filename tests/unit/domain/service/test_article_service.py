"""Unit tests for ArticleService."""

from uuid import uuid4

import pytest

from guide.domain.error import NotFoundError
from guide.domain.repository import (
    ArticleRepository,
    CategoryRepository,
    UserRepository,
)
from guide.domain.service import ArticleService
from guide.domain.value import CategoryId, CategoryName
from tests.factories import make_article, make_category, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCreateArticle:
    """Tests for create_article."""

    @pytest.mark.asyncio
    async def test_create_article_in_existing_category(self, unit_env):
        # Arrange
        article_service = await unit_env.get(ArticleService)
        user_repo = await unit_env.get(UserRepository)
        article_repo = await unit_env.get(ArticleRepository)
        category_repo = await unit_env.get(CategoryRepository)

        author = await make_user(user_repo, "author")
        category = await make_category(category_repo, "hiking")

        # Act
        article = await article_service.create_article(
            author=author,
            category_name=CategoryName("hiking"),
            title="Crossing the Dolomites",
            text="Day one: Cortina.",
            description="Eight days on the Alta Via 1",
        )

        # Assert
        assert article.author_id == author.id
        assert article.category_id == category.id
        assert article.reactor_ids == frozenset()
        assert article.saved_by_ids == frozenset()
        assert article.is_draft is False

        stored = await article_repo.find_by_id(article.id)
        assert stored is not None
        assert stored.title == "Crossing the Dolomites"

    @pytest.mark.asyncio
    async def test_unknown_category_persists_nothing(self, unit_env):
        """An unregistered category fails with NotFound(Category, name)."""
        # Arrange
        article_service = await unit_env.get(ArticleService)
        user_repo = await unit_env.get(UserRepository)
        article_repo = await unit_env.get(ArticleRepository)
        category_repo = await unit_env.get(CategoryRepository)

        author = await make_user(user_repo, "author")
        category = await make_category(category_repo, "hiking")

        # Act & Assert
        with pytest.raises(NotFoundError) as exc_info:
            await article_service.create_article(
                author=author,
                category_name=CategoryName("nonexistent"),
                title="Lost",
                text="Nowhere",
            )

        assert exc_info.value.resource == "Category"
        assert exc_info.value.identifier == "nonexistent"
        assert await article_repo.find_by_category(category.id) == []


class TestListByCategory:
    """Tests for list_by_category."""

    @pytest.mark.asyncio
    async def test_lists_published_articles_newest_first(self, unit_env):
        # Arrange
        article_service = await unit_env.get(ArticleService)
        user_repo = await unit_env.get(UserRepository)
        article_repo = await unit_env.get(ArticleRepository)
        category_repo = await unit_env.get(CategoryRepository)

        author = await make_user(user_repo, "author")
        travel = await make_category(category_repo, "travel")
        food = await make_category(category_repo, "food")
        older = await make_article(article_repo, author, travel, title="Older")
        newer = await make_article(
            article_repo, author, travel, title="Newer", created_offset=5
        )
        await make_article(article_repo, author, travel, title="Draft", is_draft=True)
        await make_article(article_repo, author, food, title="Elsewhere")

        # Act
        articles = await article_service.list_by_category(travel.id)

        # Assert
        assert [a.id for a in articles] == [newer.id, older.id]

    @pytest.mark.asyncio
    async def test_missing_category_raises_not_found(self, unit_env):
        article_service = await unit_env.get(ArticleService)

        with pytest.raises(NotFoundError, match="Category not found"):
            await article_service.list_by_category(CategoryId(uuid4()))
