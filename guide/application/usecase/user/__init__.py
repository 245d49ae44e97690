"""User use cases."""

from .get_profile import GetProfileRequest, GetProfileResponse, GetProfileUseCase
from .update_profile import (
    UpdateProfileRequest,
    UpdateProfileResponse,
    UpdateProfileUseCase,
)

__all__ = [
    "GetProfileRequest",
    "GetProfileResponse",
    "GetProfileUseCase",
    "UpdateProfileRequest",
    "UpdateProfileResponse",
    "UpdateProfileUseCase",
]
