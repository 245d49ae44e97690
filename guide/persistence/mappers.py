"""Mappers for converting between database rows and domain models.

Domain models are immutable pydantic models, so mapping is manual. Relationship
sets live in junction tables and are passed in separately by the repositories.
"""

from typing import Any, Dict, Iterable
from uuid import UUID

from guide.domain.model import Article, Category, Comment, User
from guide.domain.value import (
    ArticleId,
    CategoryId,
    CategoryName,
    CommentId,
    Login,
    UserId,
)

# Set fields that are persisted through junction tables, not entity columns
USER_LINK_FIELDS = {
    "saved_article_ids",
    "subscriber_ids",
    "subscription_ids",
    "reacted_article_ids",
}
ARTICLE_LINK_FIELDS = {"reactor_ids", "saved_by_ids"}


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(
    row: Dict[str, Any],
    saved_article_ids: Iterable[UUID] = (),
    subscriber_ids: Iterable[UUID] = (),
    subscription_ids: Iterable[UUID] = (),
    reacted_article_ids: Iterable[UUID] = (),
) -> User:
    """Convert database row and its junction sets to a User domain model.

    Args:
        row: Database row as dict
        saved_article_ids: Article IDs from saved_articles
        subscriber_ids: Subscriber IDs from subscriptions (user as publisher)
        subscription_ids: Publisher IDs from subscriptions (user as subscriber)
        reacted_article_ids: Article IDs from article_reactions

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        login=Login(row["login"]),
        username=row.get("username"),
        avatar=row.get("avatar"),
        profile=row.get("profile"),
        card_details=row.get("card_details"),
        saved_article_ids=frozenset(ArticleId(_uuid(i)) for i in saved_article_ids),
        subscriber_ids=frozenset(UserId(_uuid(i)) for i in subscriber_ids),
        subscription_ids=frozenset(UserId(_uuid(i)) for i in subscription_ids),
        reacted_article_ids=frozenset(
            ArticleId(_uuid(i)) for i in reacted_article_ids
        ),
        created_at=row["created_at"],
        version=row["version"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to a users-table dict.

    Relationship sets and the version counter are excluded; the repository
    writes those itself.
    """
    data = user.model_dump(exclude=USER_LINK_FIELDS | {"version"})
    data["login"] = user.login.root
    return data


def row_to_article(
    row: Dict[str, Any],
    reactor_ids: Iterable[UUID] = (),
    saved_by_ids: Iterable[UUID] = (),
) -> Article:
    """Convert database row and its junction sets to an Article domain model."""
    return Article(
        id=ArticleId(_uuid(row["id"])),
        author_id=UserId(_uuid(row["author_id"])),
        category_id=CategoryId(_uuid(row["category_id"])),
        title=row["title"],
        text=row["text"],
        description=row.get("description") or "",
        is_draft=row["is_draft"],
        reactor_ids=frozenset(UserId(_uuid(i)) for i in reactor_ids),
        saved_by_ids=frozenset(UserId(_uuid(i)) for i in saved_by_ids),
        created_at=row["created_at"],
        version=row["version"],
    )


def article_to_dict(article: Article) -> Dict[str, Any]:
    """Convert Article domain model to an articles-table dict."""
    return article.model_dump(exclude=ARTICLE_LINK_FIELDS | {"version"})


def row_to_category(row: Dict[str, Any]) -> Category:
    """Convert database row to Category domain model."""
    return Category(
        id=CategoryId(_uuid(row["id"])),
        name=CategoryName(row["name"]),
    )


def category_to_dict(category: Category) -> Dict[str, Any]:
    """Convert Category domain model to database dict."""
    return {"id": category.id, "name": category.name.root}


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model."""
    return Comment(
        id=CommentId(_uuid(row["id"])),
        article_id=ArticleId(_uuid(row["article_id"])),
        author_id=UserId(_uuid(row["author_id"])),
        text=row["text"],
        created_at=row["created_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict."""
    return comment.model_dump()
