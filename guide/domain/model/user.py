"""User aggregate root.

A user owns their outgoing relationship sets (saved articles, subscriptions,
reactions). The ``subscriber_ids`` set is the denormalized mirror of other
users' ``subscription_ids``.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from guide.domain.model.common import DomainModel
from guide.domain.value import ArticleId, Login, UserId


class User(DomainModel):
    """User aggregate root.

    Relationship sets hold identifiers only, never embedded entities:
    - saved_article_ids: articles this user saved (mirror: Article.saved_by_ids)
    - subscriber_ids: users following this user (mirror: User.subscription_ids)
    - subscription_ids: users this user follows (mirror: User.subscriber_ids)
    - reacted_article_ids: articles this user reacted to (mirror: Article.reactor_ids)
    """

    id: UserId
    login: Login
    username: Optional[str] = Field(default=None, max_length=100)
    avatar: Optional[str] = None
    profile: Optional[str] = Field(default=None, max_length=1000)
    card_details: Optional[str] = Field(default=None, max_length=100)
    saved_article_ids: frozenset[ArticleId] = frozenset()
    subscriber_ids: frozenset[UserId] = frozenset()
    subscription_ids: frozenset[UserId] = frozenset()
    reacted_article_ids: frozenset[ArticleId] = frozenset()
    created_at: datetime = Field(default_factory=datetime.now)
    version: int = Field(default=0, ge=0)  # Optimistic concurrency counter
