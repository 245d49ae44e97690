"""Reaction routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from guide.application.usecase.reaction import (
    GetReactionCountRequest,
    GetReactionCountResponse,
    GetReactionCountUseCase,
    ToggleReactionRequest,
    ToggleReactionResponse,
    ToggleReactionUseCase,
)
from guide.interface.api.auth import ViewerId

router = APIRouter(prefix="/articles", tags=["reactions"], route_class=DishkaRoute)


class ToggleAPIRequest(BaseModel):
    """Desired membership state for a toggle."""

    present: bool


@router.put("/{article_id}/reaction", response_model=ToggleReactionResponse)
async def toggle_reaction(
    article_id: UUID,
    request: ToggleAPIRequest,
    viewer_id: ViewerId,
    toggle_reaction_use_case: FromDishka[ToggleReactionUseCase],
) -> ToggleReactionResponse:
    """Set whether the viewer reacts to an article.

    Asking for the state the reaction is already in returns 409.
    """
    return await toggle_reaction_use_case.execute(
        ToggleReactionRequest(
            viewer_id=viewer_id,
            article_id=str(article_id),
            desired_present=request.present,
        )
    )


@router.get("/{article_id}/reactions/count", response_model=GetReactionCountResponse)
async def get_reaction_count(
    article_id: UUID,
    viewer_id: ViewerId,
    get_reaction_count_use_case: FromDishka[GetReactionCountUseCase],
) -> GetReactionCountResponse:
    """Count reactions on an article."""
    return await get_reaction_count_use_case.execute(
        GetReactionCountRequest(viewer_id=viewer_id, article_id=str(article_id))
    )
