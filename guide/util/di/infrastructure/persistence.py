"""Persistence component: PostgreSQL in production, in-memory in tests."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from guide.config import Settings
from guide.domain.repository import (
    ArticleRepository,
    CategoryRepository,
    CommentRepository,
    UserRepository,
)
from guide.persistence.database import (
    create_engine,
    create_session_factory,
    transactional_session,
)
from guide.persistence.repository import (
    PostgresArticleRepository,
    PostgresCategoryRepository,
    PostgresCommentRepository,
    PostgresUserRepository,
)
from guide.util.di.base import ProviderBase
from guide.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Mockable persistence component; see tests/di/persistence.py for the mock."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """PostgreSQL repositories sharing one transactional session per request."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Provide database engine, disposed when the container closes."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide the session factory shared by all requests."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide the request session; both sides of a toggle commit together."""
        async with transactional_session(session_factory) as session:
            yield session

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, session: AsyncSession) -> UserRepository:
        """Provide the Postgres User repository."""
        return PostgresUserRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_article_repository(self, session: AsyncSession) -> ArticleRepository:
        """Provide the Postgres Article repository."""
        return PostgresArticleRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_category_repository(self, session: AsyncSession) -> CategoryRepository:
        """Provide the Postgres Category repository."""
        return PostgresCategoryRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, session: AsyncSession) -> CommentRepository:
        """Provide the Postgres Comment repository."""
        return PostgresCommentRepository(session)
