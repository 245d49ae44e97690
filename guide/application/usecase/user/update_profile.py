"""Update profile use case."""

from uuid import UUID

from pydantic import BaseModel

from guide.application.usecase.base import BaseUseCase
from guide.application.view import ProfileView
from guide.domain.service import UserService
from guide.domain.value import UserId


class UpdateProfileRequest(BaseModel):
    """Update profile request. Fields left as None are not changed."""

    viewer_id: str
    username: str | None = None
    avatar: str | None = None
    profile: str | None = None
    card_details: str | None = None


class UpdateProfileResponse(BaseModel):
    """Update profile response."""

    profile: ProfileView


class UpdateProfileUseCase(BaseUseCase):
    """Use case for editing the viewer's own profile."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: UpdateProfileRequest) -> UpdateProfileResponse:
        """Execute update profile flow.

        Raises:
            NotFoundError: If the viewer does not exist
            pydantic.ValidationError: If a field exceeds its length limit
        """
        user = await self.user_service.update_profile(
            user_id=UserId(UUID(request.viewer_id)),
            username=request.username,
            avatar=request.avatar,
            profile=request.profile,
            card_details=request.card_details,
        )

        return UpdateProfileResponse(profile=ProfileView.from_domain(user, user.id))
