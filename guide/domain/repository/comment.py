"""Comment repository interface."""

from abc import ABC, abstractmethod

from guide.domain.model.comment import Comment
from guide.domain.value import ArticleId


class CommentRepository(ABC):
    """Repository for Comment entity."""

    @abstractmethod
    async def find_by_article(self, article_id: ArticleId) -> list[Comment]:
        """Find all comments on an article, oldest first.

        Args:
            article_id: The article's ID

        Returns:
            List of comments
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment.

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass
