"""Response views shared by use cases.

Views are flat, viewer-relative projections of domain entities. Membership
flags (``reacted``, ``saved``, ``subscribed``) are computed for the viewer
passed in, and counts are always derived from the relationship sets.
"""

from datetime import datetime
from typing import Sequence

from pydantic import BaseModel

from guide.domain.model import Article, Category, Comment, User
from guide.domain.service import AggregationService, LookupService
from guide.domain.value import CategoryId, UserId


class ArticleView(BaseModel):
    """Article as seen by a viewer."""

    article_id: str
    author_id: str
    category_id: str
    category_name: str
    title: str
    text: str
    description: str
    is_draft: bool
    created_at: datetime
    reaction_count: int
    reacted: bool
    saved: bool

    @classmethod
    def from_domain(
        cls, article: Article, category: Category, viewer_id: UserId
    ) -> "ArticleView":
        return cls(
            article_id=str(article.id),
            author_id=str(article.author_id),
            category_id=str(category.id),
            category_name=category.name.root,
            title=article.title,
            text=article.text,
            description=article.description,
            is_draft=article.is_draft,
            created_at=article.created_at,
            reaction_count=len(article.reactor_ids),
            reacted=AggregationService.has_reacted(article, viewer_id),
            saved=AggregationService.has_saved(article, viewer_id),
        )


class UserView(BaseModel):
    """Public user summary as seen by a viewer."""

    user_id: str
    login: str
    username: str | None
    avatar: str | None
    subscribed: bool

    @classmethod
    def from_domain(cls, user: User, viewer_id: UserId) -> "UserView":
        return cls(
            user_id=str(user.id),
            login=user.login.root,
            username=user.username,
            avatar=user.avatar,
            subscribed=AggregationService.is_subscribed(user, viewer_id),
        )


class ProfileView(UserView):
    """Full user profile with relationship counts."""

    profile: str | None
    card_details: str | None
    subscriber_count: int
    subscription_count: int
    created_at: datetime

    @classmethod
    def from_domain(cls, user: User, viewer_id: UserId) -> "ProfileView":
        # Card details are private to their owner
        is_owner = user.id == viewer_id
        return cls(
            user_id=str(user.id),
            login=user.login.root,
            username=user.username,
            avatar=user.avatar,
            subscribed=AggregationService.is_subscribed(user, viewer_id),
            profile=user.profile,
            card_details=user.card_details if is_owner else None,
            subscriber_count=len(user.subscriber_ids),
            subscription_count=len(user.subscription_ids),
            created_at=user.created_at,
        )


class CommentView(BaseModel):
    """Comment on an article."""

    comment_id: str
    article_id: str
    author_id: str
    text: str
    created_at: datetime

    @classmethod
    def from_domain(cls, comment: Comment) -> "CommentView":
        return cls(
            comment_id=str(comment.id),
            article_id=str(comment.article_id),
            author_id=str(comment.author_id),
            text=comment.text,
            created_at=comment.created_at,
        )


async def build_article_views(
    articles: Sequence[Article], lookup_service: LookupService, viewer_id: UserId
) -> list[ArticleView]:
    """Build views for several articles, resolving each category once.

    Args:
        articles: Articles to project
        lookup_service: Lookup domain service (for category names)
        viewer_id: Viewer the membership flags are computed for

    Returns:
        Views in the same order as ``articles``
    """
    categories: dict[CategoryId, Category] = {}
    for article in articles:
        if article.category_id not in categories:
            categories[article.category_id] = await lookup_service.category(
                article.category_id
            )

    return [
        ArticleView.from_domain(article, categories[article.category_id], viewer_id)
        for article in articles
    ]
