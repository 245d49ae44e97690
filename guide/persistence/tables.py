"""SQLAlchemy table definitions for Guidepedia.

Relationship sets are stored once, in junction tables. Both sides of a
relationship (e.g. ``Article.reactor_ids`` and ``User.reacted_article_ids``)
are read from the same rows. They match the schema in the Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    PrimaryKeyConstraint,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("login", String(50), nullable=False, unique=True),
    Column("username", String(100), nullable=True),
    Column("avatar", Text, nullable=True),
    Column("profile", Text, nullable=True),
    Column("card_details", String(100), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("version", Integer, nullable=False, server_default="1"),
)

Index("idx_users_created_at", users_table.c.created_at)

# ============================================================================
# CATEGORIES TABLE
# ============================================================================
categories_table = Table(
    "categories",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("name", String(100), nullable=False, unique=True),
)

# ============================================================================
# ARTICLES TABLE
# ============================================================================
articles_table = Table(
    "articles",
    metadata,
    Column("id", UUID, primary_key=True),
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "category_id",
        UUID,
        ForeignKey("categories.id", ondelete="RESTRICT"),
        nullable=False,
    ),
    Column("title", String(300), nullable=False),
    Column("text", Text, nullable=False),
    Column("description", Text, nullable=False, server_default=""),
    Column("is_draft", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("version", Integer, nullable=False, server_default="1"),
)

Index("idx_articles_category_id", articles_table.c.category_id)
Index("idx_articles_author_id", articles_table.c.author_id)
Index("idx_articles_created_at", articles_table.c.created_at.desc())

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True),
    Column(
        "article_id",
        UUID,
        ForeignKey("articles.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("text", Text, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_comments_article_id", comments_table.c.article_id)

# ============================================================================
# ARTICLE_REACTIONS TABLE (User.reacted_article_ids <-> Article.reactor_ids)
# ============================================================================
article_reactions_table = Table(
    "article_reactions",
    metadata,
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column(
        "article_id",
        UUID,
        ForeignKey("articles.id", ondelete="CASCADE"),
        nullable=False,
    ),
    PrimaryKeyConstraint("user_id", "article_id", name="pk_article_reactions"),
)

Index("idx_article_reactions_article_id", article_reactions_table.c.article_id)

# ============================================================================
# SAVED_ARTICLES TABLE (User.saved_article_ids <-> Article.saved_by_ids)
# ============================================================================
saved_articles_table = Table(
    "saved_articles",
    metadata,
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column(
        "article_id",
        UUID,
        ForeignKey("articles.id", ondelete="CASCADE"),
        nullable=False,
    ),
    PrimaryKeyConstraint("user_id", "article_id", name="pk_saved_articles"),
)

Index("idx_saved_articles_article_id", saved_articles_table.c.article_id)

# ============================================================================
# SUBSCRIPTIONS TABLE (User.subscription_ids <-> User.subscriber_ids)
# ============================================================================
subscriptions_table = Table(
    "subscriptions",
    metadata,
    Column(
        "subscriber_id",
        UUID,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "publisher_id",
        UUID,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    PrimaryKeyConstraint("subscriber_id", "publisher_id", name="pk_subscriptions"),
    CheckConstraint("subscriber_id <> publisher_id", name="no_self_subscription"),
)

Index("idx_subscriptions_publisher_id", subscriptions_table.c.publisher_id)
