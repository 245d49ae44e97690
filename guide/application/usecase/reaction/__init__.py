"""Reaction use cases."""

from .get_reaction_count import (
    GetReactionCountRequest,
    GetReactionCountResponse,
    GetReactionCountUseCase,
)
from .toggle_reaction import (
    ToggleReactionRequest,
    ToggleReactionResponse,
    ToggleReactionUseCase,
)

__all__ = [
    "GetReactionCountRequest",
    "GetReactionCountResponse",
    "GetReactionCountUseCase",
    "ToggleReactionRequest",
    "ToggleReactionResponse",
    "ToggleReactionUseCase",
]
