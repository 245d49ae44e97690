"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from guide.domain.model.user import User
from guide.domain.value import UserId


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: Sequence[UserId]) -> list[User]:
        """Find several users in one query.

        Args:
            user_ids: Identifiers to look up

        Returns:
            Found users ordered by creation time (missing ids are skipped)
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Relationship sets are written together with the user row.
        The stored version must equal ``user.version``; the returned user
        carries the incremented version.

        Args:
            user: The user to save

        Returns:
            The saved user

        Raises:
            ConcurrentModificationError: If the stored version has moved on
        """
        pass
