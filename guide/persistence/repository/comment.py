"""PostgreSQL implementation of Comment repository."""

import logfire
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from guide.domain.model import Comment
from guide.domain.repository import CommentRepository
from guide.domain.value import ArticleId
from guide.persistence.mappers import comment_to_dict, row_to_comment
from guide.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_article(self, article_id: ArticleId) -> list[Comment]:
        """Find all comments on an article, oldest first."""
        with logfire.span(
            "comment_repository.find_by_article", article_id=str(article_id)
        ):
            stmt = (
                select(comments_table)
                .where(comments_table.c.article_id == article_id)
                .order_by(comments_table.c.created_at)
            )
            result = await self.session.execute(stmt)
            return [row_to_comment(dict(row)) for row in result.mappings().all()]

    async def save(self, comment: Comment) -> Comment:
        """Save a comment. Comments are never edited, so this always inserts."""
        stmt = comments_table.insert().values(**comment_to_dict(comment))
        await self.session.execute(stmt)
        await self.session.flush()
        return comment
