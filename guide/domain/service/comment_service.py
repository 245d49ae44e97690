"""Comment domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from guide.domain.model import Comment, User
from guide.domain.repository import CommentRepository
from guide.domain.value import ArticleId, CommentId

from .base import Service
from .lookup_service import LookupService


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self, comment_repository: CommentRepository, lookup_service: LookupService
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            lookup_service: Lookup domain service
        """
        self.comment_repository = comment_repository
        self.lookup_service = lookup_service

    async def create_comment(
        self, article_id: ArticleId, author: User, text: str
    ) -> Comment:
        """Create a comment on an article.

        Args:
            article_id: Article ID
            author: Resolved acting user
            text: Comment text

        Returns:
            Created comment

        Raises:
            NotFoundError: If article not found
        """
        with logfire.span(
            "comment_service.create_comment",
            article_id=str(article_id),
            author_id=str(author.id),
        ):
            article = await self.lookup_service.article(article_id)

            comment = Comment(
                id=CommentId(uuid4()),
                article_id=article.id,
                author_id=author.id,
                text=text,
                created_at=datetime.now(),
            )

            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                article_id=str(article.id),
                author_id=str(author.id),
            )
            return saved

    async def list_for_article(self, article_id: ArticleId) -> list[Comment]:
        """Get all comments on an article, oldest first.

        Raises:
            NotFoundError: If article not found
        """
        with logfire.span(
            "comment_service.list_for_article", article_id=str(article_id)
        ):
            await self.lookup_service.article(article_id)
            comments = await self.comment_repository.find_by_article(article_id)
            logfire.info(
                "Comments retrieved for article",
                article_id=str(article_id),
                count=len(comments),
            )
            return comments
