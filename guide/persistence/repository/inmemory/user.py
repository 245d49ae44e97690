"""In-memory user repository for testing."""

from typing import Optional, Sequence

from guide.domain.error import ConcurrentModificationError
from guide.domain.model.user import User
from guide.domain.repository.user import UserRepository
from guide.domain.value import UserId


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> list[User]:
        """Find several users, ordered by creation time."""
        users = [self._users[uid] for uid in set(user_ids) if uid in self._users]
        users.sort(key=lambda u: u.created_at)
        return users

    async def save(self, user: User) -> User:
        """Save or update a user, checking the stored version."""
        existing = self._users.get(user.id)
        if existing and existing.version != user.version:
            raise ConcurrentModificationError("User", str(user.id))

        stored = user.model_copy(update={"version": user.version + 1})
        self._users[user.id] = stored
        return stored
