"""Unit tests for article use cases."""

from uuid import uuid4

import pytest

from guide.application.usecase.article import (
    CreateArticleRequest,
    CreateArticleUseCase,
    GetArticleRequest,
    GetArticleUseCase,
    ListCategoryArticlesRequest,
    ListCategoryArticlesUseCase,
)
from guide.domain.error import NotFoundError
from guide.domain.repository import (
    ArticleRepository,
    CategoryRepository,
    UserRepository,
)
from guide.domain.service import RelationshipService
from tests.factories import make_article, make_category, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreateArticleUseCase:
    """Tests for CreateArticleUseCase."""

    @pytest.mark.asyncio
    async def test_create_article(self, unit_env):
        """Author and category are resolved and the view starts empty."""
        # Arrange
        use_case = await unit_env.get(CreateArticleUseCase)
        user_repo = await unit_env.get(UserRepository)
        category_repo = await unit_env.get(CategoryRepository)

        author = await make_user(user_repo, "author")
        category = await make_category(category_repo, "museums")

        request = CreateArticleRequest(
            viewer_id=str(author.id),
            category_name="museums",
            title="The Prado in a day",
            text="Start with Goya.",
            description="A one-day route",
        )

        # Act
        response = await use_case.execute(request)

        # Assert
        article = response.article
        assert article.author_id == str(author.id)
        assert article.category_id == str(category.id)
        assert article.category_name == "museums"
        assert article.reaction_count == 0
        assert article.reacted is False
        assert article.saved is False

    @pytest.mark.asyncio
    async def test_unknown_category(self, unit_env):
        use_case = await unit_env.get(CreateArticleUseCase)
        user_repo = await unit_env.get(UserRepository)
        author = await make_user(user_repo, "author")

        request = CreateArticleRequest(
            viewer_id=str(author.id),
            category_name="nonexistent",
            title="Lost",
            text="Nowhere",
        )

        with pytest.raises(NotFoundError) as exc_info:
            await use_case.execute(request)

        assert exc_info.value.resource == "Category"
        assert exc_info.value.identifier == "nonexistent"

    @pytest.mark.asyncio
    async def test_unknown_author(self, unit_env):
        use_case = await unit_env.get(CreateArticleUseCase)
        category_repo = await unit_env.get(CategoryRepository)
        await make_category(category_repo, "museums")

        request = CreateArticleRequest(
            viewer_id=str(uuid4()),
            category_name="museums",
            title="Ghost writer",
            text="Boo",
        )

        with pytest.raises(NotFoundError, match="User not found"):
            await use_case.execute(request)


class TestGetArticleUseCase:
    """Tests for GetArticleUseCase."""

    @pytest.mark.asyncio
    async def test_flags_are_relative_to_viewer(self, unit_env):
        # Arrange
        use_case = await unit_env.get(GetArticleUseCase)
        relationships = await unit_env.get(RelationshipService)
        user_repo = await unit_env.get(UserRepository)
        article_repo = await unit_env.get(ArticleRepository)
        category_repo = await unit_env.get(CategoryRepository)

        author = await make_user(user_repo, "author")
        reader = await make_user(user_repo, "reader")
        category = await make_category(category_repo)
        article = await make_article(article_repo, author, category)
        await relationships.toggle_reaction(article.id, reader.id, True)
        await relationships.toggle_saved_article(article.id, reader.id, True)

        # Act
        as_reader = await use_case.execute(
            GetArticleRequest(viewer_id=str(reader.id), article_id=str(article.id))
        )
        as_author = await use_case.execute(
            GetArticleRequest(viewer_id=str(author.id), article_id=str(article.id))
        )

        # Assert
        assert as_reader.article.reacted is True
        assert as_reader.article.saved is True
        assert as_author.article.reacted is False
        assert as_author.article.saved is False
        assert as_author.article.reaction_count == 1

    @pytest.mark.asyncio
    async def test_missing_article(self, unit_env):
        use_case = await unit_env.get(GetArticleUseCase)
        user_repo = await unit_env.get(UserRepository)
        reader = await make_user(user_repo, "reader")

        with pytest.raises(NotFoundError, match="Article not found"):
            await use_case.execute(
                GetArticleRequest(viewer_id=str(reader.id), article_id=str(uuid4()))
            )


class TestListCategoryArticlesUseCase:
    """Tests for ListCategoryArticlesUseCase."""

    @pytest.mark.asyncio
    async def test_lists_published_articles(self, unit_env):
        # Arrange
        use_case = await unit_env.get(ListCategoryArticlesUseCase)
        user_repo = await unit_env.get(UserRepository)
        article_repo = await unit_env.get(ArticleRepository)
        category_repo = await unit_env.get(CategoryRepository)

        author = await make_user(user_repo, "author")
        category = await make_category(category_repo, "islands")
        published = await make_article(article_repo, author, category, title="Madeira")
        await make_article(article_repo, author, category, title="Draft", is_draft=True)

        # Act
        response = await use_case.execute(
            ListCategoryArticlesRequest(
                viewer_id=str(author.id), category_id=str(category.id)
            )
        )

        # Assert
        assert response.category_name == "islands"
        assert response.total == 1
        assert [a.article_id for a in response.articles] == [str(published.id)]
