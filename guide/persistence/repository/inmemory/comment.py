"""In-memory comment repository for testing."""

from guide.domain.model.comment import Comment
from guide.domain.repository.comment import CommentRepository
from guide.domain.value import ArticleId, CommentId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    async def find_by_article(self, article_id: ArticleId) -> list[Comment]:
        """Find all comments on an article, oldest first."""
        comments = [c for c in self._comments.values() if c.article_id == article_id]
        comments.sort(key=lambda c: c.created_at)
        return comments

    async def save(self, comment: Comment) -> Comment:
        """Save a comment."""
        self._comments[comment.id] = comment
        return comment
