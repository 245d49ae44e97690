"""User domain service."""

import logfire

from guide.domain.model import User
from guide.domain.repository import UserRepository
from guide.domain.value import UserId

from .base import Service
from .lookup_service import LookupService


class UserService(Service):
    """Domain service for user profile operations."""

    def __init__(
        self, user_repository: UserRepository, lookup_service: LookupService
    ) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            lookup_service: Lookup domain service
        """
        self.user_repository = user_repository
        self.lookup_service = lookup_service

    async def update_profile(
        self,
        user_id: UserId,
        username: str | None = None,
        avatar: str | None = None,
        profile: str | None = None,
        card_details: str | None = None,
    ) -> User:
        """Update a user's profile fields.

        Only fields that are not None are changed. Login and relationship
        sets cannot be changed here.

        Args:
            user_id: User ID
            username: New display name
            avatar: New avatar URL
            profile: New profile text
            card_details: New payment card reference

        Returns:
            Saved user

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.update_profile", user_id=str(user_id)):
            user = await self.lookup_service.user(user_id)

            changes = {
                field: value
                for field, value in {
                    "username": username,
                    "avatar": avatar,
                    "profile": profile,
                    "card_details": card_details,
                }.items()
                if value is not None
            }
            updated = User.model_validate({**user.model_dump(), **changes})

            saved = await self.user_repository.save(updated)
            logfire.info(
                "Profile updated", user_id=str(user_id), fields=sorted(changes)
            )
            return saved
