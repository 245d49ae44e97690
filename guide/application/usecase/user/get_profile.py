"""Get profile use case."""

from uuid import UUID

from pydantic import BaseModel

from guide.application.usecase.base import BaseUseCase
from guide.application.view import ProfileView
from guide.domain.service import LookupService
from guide.domain.value import UserId


class GetProfileRequest(BaseModel):
    """Get profile request.

    Without ``user_id`` the viewer's own profile is returned.
    """

    viewer_id: str
    user_id: str | None = None


class GetProfileResponse(BaseModel):
    """Get profile response."""

    profile: ProfileView


class GetProfileUseCase(BaseUseCase):
    """Use case for reading a user's profile."""

    def __init__(self, lookup_service: LookupService) -> None:
        self.lookup_service = lookup_service

    async def execute(self, request: GetProfileRequest) -> GetProfileResponse:
        """Execute get profile flow.

        Raises:
            NotFoundError: If the viewer or the target user does not exist
        """
        viewer = await self.lookup_service.user(UserId(UUID(request.viewer_id)))

        if request.user_id:
            user = await self.lookup_service.user(UserId(UUID(request.user_id)))
        else:
            user = viewer

        return GetProfileResponse(profile=ProfileView.from_domain(user, viewer.id))
