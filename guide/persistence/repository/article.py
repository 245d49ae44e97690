"""PostgreSQL implementation of Article repository."""

from typing import Optional, Sequence
from uuid import UUID

import logfire
from sqlalchemy import desc, select
from sqlalchemy.ext.asyncio import AsyncSession

from guide.domain.error import ConcurrentModificationError
from guide.domain.model import Article
from guide.domain.repository import ArticleRepository
from guide.domain.value import ArticleId, CategoryId
from guide.persistence.mappers import article_to_dict, row_to_article
from guide.persistence.repository.links import load_links, sync_links
from guide.persistence.tables import (
    article_reactions_table,
    articles_table,
    saved_articles_table,
)


class PostgresArticleRepository(ArticleRepository):
    """PostgreSQL implementation of ArticleRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _hydrate(self, rows: list[dict]) -> list[Article]:
        """Attach reactor and saved-by sets to article rows."""
        ids = [row["id"] for row in rows]

        reactors = await load_links(
            self.session,
            article_reactions_table,
            article_reactions_table.c.article_id,
            article_reactions_table.c.user_id,
            ids,
        )
        savers = await load_links(
            self.session,
            saved_articles_table,
            saved_articles_table.c.article_id,
            saved_articles_table.c.user_id,
            ids,
        )

        return [
            row_to_article(
                row,
                reactor_ids=reactors.get(row["id"], ()),
                saved_by_ids=savers.get(row["id"], ()),
            )
            for row in rows
        ]

    async def find_by_id(self, article_id: ArticleId) -> Optional[Article]:
        """Find an article by ID."""
        with logfire.span("article_repository.find_by_id", article_id=str(article_id)):
            stmt = select(articles_table).where(articles_table.c.id == article_id)
            result = await self.session.execute(stmt)
            row = result.mappings().first()

            if not row:
                return None
            return (await self._hydrate([dict(row)]))[0]

    async def find_by_ids(self, article_ids: Sequence[ArticleId]) -> list[Article]:
        """Find several articles, ordered by creation time."""
        if not article_ids:
            return []

        stmt = (
            select(articles_table)
            .where(articles_table.c.id.in_(list(article_ids)))
            .order_by(articles_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        rows = [dict(row) for row in result.mappings().all()]
        return await self._hydrate(rows)

    async def find_by_category(self, category_id: CategoryId) -> list[Article]:
        """Find published articles in a category, newest first."""
        with logfire.span(
            "article_repository.find_by_category", category_id=str(category_id)
        ):
            stmt = (
                select(articles_table)
                .where(articles_table.c.category_id == category_id)
                .where(articles_table.c.is_draft.is_(False))
                .order_by(desc(articles_table.c.created_at))
            )

            result = await self.session.execute(stmt)
            rows = [dict(row) for row in result.mappings().all()]
            return await self._hydrate(rows)

    async def save(self, article: Article) -> Article:
        """Save an article (create or update).

        Updates only apply when the stored version equals ``article.version``.

        Raises:
            ConcurrentModificationError: If the stored version differs
        """
        with logfire.span("article_repository.save", article_id=str(article.id)):
            stored_version = await self._stored_version(article.id)
            article_dict = article_to_dict(article)
            new_version = article.version + 1

            if stored_version is None:
                logfire.info(
                    "Inserting new article",
                    article_id=str(article.id),
                    author_id=str(article.author_id),
                )
                stmt = articles_table.insert().values(
                    **article_dict, version=new_version
                )
                await self.session.execute(stmt)
            else:
                stmt = (
                    articles_table.update()
                    .where(articles_table.c.id == article.id)
                    .where(articles_table.c.version == article.version)
                    .values(**article_dict, version=new_version)
                )
                result = await self.session.execute(stmt)
                if result.rowcount == 0:
                    logfire.warn(
                        "Stale article version",
                        article_id=str(article.id),
                        expected=article.version,
                        stored=stored_version,
                    )
                    raise ConcurrentModificationError("Article", str(article.id))

            await sync_links(
                self.session,
                article_reactions_table,
                article_reactions_table.c.article_id,
                article_reactions_table.c.user_id,
                article.id,
                article.reactor_ids,
            )
            await sync_links(
                self.session,
                saved_articles_table,
                saved_articles_table.c.article_id,
                saved_articles_table.c.user_id,
                article.id,
                article.saved_by_ids,
            )
            await self.session.flush()
            return article.model_copy(update={"version": new_version})

    async def _stored_version(self, article_id: UUID) -> Optional[int]:
        stmt = select(articles_table.c.version).where(articles_table.c.id == article_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()
