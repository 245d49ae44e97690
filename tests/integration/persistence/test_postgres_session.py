"""Integration tests for transactional_session."""

from datetime import datetime
from uuid import uuid4

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from guide.domain.model import User
from guide.domain.value import Login, UserId
from guide.persistence.database import transactional_session
from guide.persistence.repository import PostgresUserRepository
from tests.harness import create_database_fixture

database = create_database_fixture()


def new_user(login: str) -> User:
    return User(
        id=UserId(uuid4()),
        login=Login(login),
        username=login.title(),
        created_at=datetime.now(),
    )


class TestTransactionalSession:
    """Writes in one session commit together or not at all."""

    @pytest.mark.asyncio
    async def test_commits_when_block_exits(self, database):
        # Arrange
        session_factory = await database.get(async_sessionmaker[AsyncSession])
        user = new_user("kept")

        # Act
        async with transactional_session(session_factory) as session:
            await PostgresUserRepository(session).save(user)

        # Assert
        async with transactional_session(session_factory) as session:
            stored = await PostgresUserRepository(session).find_by_id(user.id)
        assert stored is not None
        assert stored.version == 1

    @pytest.mark.asyncio
    async def test_rolls_back_every_write_when_block_raises(self, database):
        # Arrange
        session_factory = await database.get(async_sessionmaker[AsyncSession])
        first = new_user("first")
        second = new_user("second")

        # Act
        with pytest.raises(RuntimeError, match="abort"):
            async with transactional_session(session_factory) as session:
                user_repo = PostgresUserRepository(session)
                await user_repo.save(first)
                await user_repo.save(second)
                raise RuntimeError("abort")

        # Assert
        async with transactional_session(session_factory) as session:
            found = await PostgresUserRepository(session).find_by_ids(
                [first.id, second.id]
            )
        assert found == []
