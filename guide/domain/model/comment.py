"""Comment entity."""

from datetime import datetime

from pydantic import Field

from guide.domain.model.common import DomainModel
from guide.domain.value import ArticleId, CommentId, UserId


class Comment(DomainModel):
    """Comment on an article. Leaf entity with no inverse relationships."""

    id: CommentId
    article_id: ArticleId
    author_id: UserId
    text: str = Field(min_length=1, max_length=10000)
    created_at: datetime = Field(default_factory=datetime.now)
