"""PostgreSQL implementation of User repository."""

from typing import Optional, Sequence
from uuid import UUID

import logfire
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from guide.domain.error import ConcurrentModificationError
from guide.domain.model import User
from guide.domain.repository import UserRepository
from guide.domain.value import UserId
from guide.persistence.mappers import row_to_user, user_to_dict
from guide.persistence.repository.links import load_links, sync_links
from guide.persistence.tables import (
    article_reactions_table,
    saved_articles_table,
    subscriptions_table,
    users_table,
)


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _hydrate(self, rows: list[dict]) -> list[User]:
        """Attach relationship sets from the junction tables to user rows."""
        ids = [row["id"] for row in rows]

        saved = await load_links(
            self.session,
            saved_articles_table,
            saved_articles_table.c.user_id,
            saved_articles_table.c.article_id,
            ids,
        )
        reacted = await load_links(
            self.session,
            article_reactions_table,
            article_reactions_table.c.user_id,
            article_reactions_table.c.article_id,
            ids,
        )
        subscriptions = await load_links(
            self.session,
            subscriptions_table,
            subscriptions_table.c.subscriber_id,
            subscriptions_table.c.publisher_id,
            ids,
        )
        subscribers = await load_links(
            self.session,
            subscriptions_table,
            subscriptions_table.c.publisher_id,
            subscriptions_table.c.subscriber_id,
            ids,
        )

        return [
            row_to_user(
                row,
                saved_article_ids=saved.get(row["id"], ()),
                subscriber_ids=subscribers.get(row["id"], ()),
                subscription_ids=subscriptions.get(row["id"], ()),
                reacted_article_ids=reacted.get(row["id"], ()),
            )
            for row in rows
        ]

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: User ID to look up

        Returns:
            User if found, None otherwise
        """
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        if not row:
            return None
        return (await self._hydrate([dict(row)]))[0]

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> list[User]:
        """Find several users, ordered by creation time."""
        if not user_ids:
            return []

        stmt = (
            select(users_table)
            .where(users_table.c.id.in_(list(user_ids)))
            .order_by(users_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        rows = [dict(row) for row in result.mappings().all()]
        return await self._hydrate(rows)

    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Updates only apply when the stored version equals ``user.version``.
        The user's outgoing sets and its subscriber set are synced to the
        junction tables.

        Args:
            user: User to save

        Returns:
            Saved user with its version bumped

        Raises:
            ConcurrentModificationError: If the stored version differs
        """
        with logfire.span("user_repository.save", user_id=str(user.id)):
            stored_version = await self._stored_version(user.id)
            user_dict = user_to_dict(user)
            new_version = user.version + 1

            if stored_version is None:
                stmt = users_table.insert().values(**user_dict, version=new_version)
                await self.session.execute(stmt)
            else:
                stmt = (
                    users_table.update()
                    .where(users_table.c.id == user.id)
                    .where(users_table.c.version == user.version)
                    .values(**user_dict, version=new_version)
                )
                result = await self.session.execute(stmt)
                if result.rowcount == 0:
                    logfire.warn(
                        "Stale user version",
                        user_id=str(user.id),
                        expected=user.version,
                        stored=stored_version,
                    )
                    raise ConcurrentModificationError("User", str(user.id))

            await self._sync_sets(user)
            await self.session.flush()
            return user.model_copy(update={"version": new_version})

    async def _stored_version(self, user_id: UUID) -> Optional[int]:
        stmt = select(users_table.c.version).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def _sync_sets(self, user: User) -> None:
        await sync_links(
            self.session,
            saved_articles_table,
            saved_articles_table.c.user_id,
            saved_articles_table.c.article_id,
            user.id,
            user.saved_article_ids,
        )
        await sync_links(
            self.session,
            article_reactions_table,
            article_reactions_table.c.user_id,
            article_reactions_table.c.article_id,
            user.id,
            user.reacted_article_ids,
        )
        await sync_links(
            self.session,
            subscriptions_table,
            subscriptions_table.c.subscriber_id,
            subscriptions_table.c.publisher_id,
            user.id,
            user.subscription_ids,
        )
        await sync_links(
            self.session,
            subscriptions_table,
            subscriptions_table.c.publisher_id,
            subscriptions_table.c.subscriber_id,
            user.id,
            user.subscriber_ids,
        )
