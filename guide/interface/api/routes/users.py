"""User profile routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel, Field

from guide.application.usecase.user import (
    GetProfileRequest,
    GetProfileResponse,
    GetProfileUseCase,
    UpdateProfileRequest,
    UpdateProfileResponse,
    UpdateProfileUseCase,
)
from guide.interface.api.auth import ViewerId

router = APIRouter(tags=["users"], route_class=DishkaRoute)


class UpdateProfileAPIRequest(BaseModel):
    """API request for updating the viewer's profile."""

    username: str | None = Field(default=None, max_length=100)
    avatar: str | None = None
    profile: str | None = Field(default=None, max_length=1000)
    card_details: str | None = Field(default=None, max_length=100)


@router.get("/me", response_model=GetProfileResponse)
async def get_my_profile(
    viewer_id: ViewerId,
    get_profile_use_case: FromDishka[GetProfileUseCase],
) -> GetProfileResponse:
    """Get the viewer's own profile."""
    return await get_profile_use_case.execute(GetProfileRequest(viewer_id=viewer_id))


@router.patch("/me", response_model=UpdateProfileResponse)
async def update_my_profile(
    request: UpdateProfileAPIRequest,
    viewer_id: ViewerId,
    update_profile_use_case: FromDishka[UpdateProfileUseCase],
) -> UpdateProfileResponse:
    """Update the viewer's profile. Omitted fields are left unchanged."""
    return await update_profile_use_case.execute(
        UpdateProfileRequest(
            viewer_id=viewer_id,
            username=request.username,
            avatar=request.avatar,
            profile=request.profile,
            card_details=request.card_details,
        )
    )


@router.get("/users/{user_id}", response_model=GetProfileResponse)
async def get_profile(
    user_id: UUID,
    viewer_id: ViewerId,
    get_profile_use_case: FromDishka[GetProfileUseCase],
) -> GetProfileResponse:
    """Get a user's profile, with the viewer's subscription flag."""
    return await get_profile_use_case.execute(
        GetProfileRequest(viewer_id=viewer_id, user_id=str(user_id))
    )
