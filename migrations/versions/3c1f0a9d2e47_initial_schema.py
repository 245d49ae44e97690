"""initial_schema

Create the Guidepedia schema:
- Users (login, profile, optimistic version counter)
- Categories (unique names, provisioned by operators)
- Articles (author, category, draft flag, version counter)
- Comments (flat, per article)
- Relationship junction tables: article_reactions, saved_articles,
  subscriptions (both sides of each relationship read the same rows)

Revision ID: 3c1f0a9d2e47
Revises:
Create Date: 2026-10-19 10:12:44.518203

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3c1f0a9d2e47"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("login", sa.String(50), nullable=False),
        sa.Column("username", sa.String(100), nullable=True),
        sa.Column("avatar", sa.Text(), nullable=True),
        sa.Column("profile", sa.Text(), nullable=True),
        sa.Column("card_details", sa.String(100), nullable=True),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column("version", sa.Integer(), nullable=False, server_default="1"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("login", name="uq_users_login"),
    )
    op.create_index("idx_users_created_at", "users", ["created_at"])

    # ========================================================================
    # CATEGORIES table
    # ========================================================================
    op.create_table(
        "categories",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name", name="uq_categories_name"),
    )

    # ========================================================================
    # ARTICLES table
    # ========================================================================
    op.create_table(
        "articles",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("category_id", sa.UUID(), nullable=False),
        sa.Column("title", sa.String(300), nullable=False),
        sa.Column("text", sa.Text(), nullable=False),
        sa.Column("description", sa.Text(), nullable=False, server_default=""),
        sa.Column("is_draft", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column("version", sa.Integer(), nullable=False, server_default="1"),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(
            ["category_id"], ["categories.id"], ondelete="RESTRICT"
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_articles_category_id", "articles", ["category_id"])
    op.create_index("idx_articles_author_id", "articles", ["author_id"])
    op.create_index(
        "idx_articles_created_at", "articles", [sa.text("created_at DESC")]
    )

    # ========================================================================
    # COMMENTS table
    # ========================================================================
    op.create_table(
        "comments",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("article_id", sa.UUID(), nullable=False),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("text", sa.Text(), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["article_id"], ["articles.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_comments_article_id", "comments", ["article_id"])

    # ========================================================================
    # Relationship junction tables
    # ========================================================================
    op.create_table(
        "article_reactions",
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("article_id", sa.UUID(), nullable=False),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["article_id"], ["articles.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("user_id", "article_id", name="pk_article_reactions"),
    )
    op.create_index(
        "idx_article_reactions_article_id", "article_reactions", ["article_id"]
    )

    op.create_table(
        "saved_articles",
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("article_id", sa.UUID(), nullable=False),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["article_id"], ["articles.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("user_id", "article_id", name="pk_saved_articles"),
    )
    op.create_index("idx_saved_articles_article_id", "saved_articles", ["article_id"])

    op.create_table(
        "subscriptions",
        sa.Column("subscriber_id", sa.UUID(), nullable=False),
        sa.Column("publisher_id", sa.UUID(), nullable=False),
        sa.ForeignKeyConstraint(["subscriber_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["publisher_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint(
            "subscriber_id", "publisher_id", name="pk_subscriptions"
        ),
        sa.CheckConstraint(
            "subscriber_id <> publisher_id", name="no_self_subscription"
        ),
    )
    op.create_index(
        "idx_subscriptions_publisher_id", "subscriptions", ["publisher_id"]
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("subscriptions")
    op.drop_table("saved_articles")
    op.drop_table("article_reactions")
    op.drop_table("comments")
    op.drop_table("articles")
    op.drop_table("categories")
    op.drop_table("users")
