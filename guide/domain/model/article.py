"""Article aggregate root."""

from datetime import datetime

from pydantic import Field

from guide.domain.model.common import DomainModel
from guide.domain.value import ArticleId, CategoryId, UserId


class Article(DomainModel):
    """Article aggregate root.

    The author is fixed at creation. ``reactor_ids`` and ``saved_by_ids`` are
    the mirrors of ``User.reacted_article_ids`` and ``User.saved_article_ids``;
    the reaction count is always derived from ``reactor_ids``.
    """

    id: ArticleId
    author_id: UserId
    category_id: CategoryId
    title: str = Field(min_length=1, max_length=300)
    text: str = Field(min_length=1)
    description: str = Field(default="", max_length=1000)
    is_draft: bool = False
    reactor_ids: frozenset[UserId] = frozenset()
    saved_by_ids: frozenset[UserId] = frozenset()
    created_at: datetime = Field(default_factory=datetime.now)
    version: int = Field(default=0, ge=0)  # Optimistic concurrency counter
