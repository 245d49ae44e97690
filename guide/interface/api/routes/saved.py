"""Saved article routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from guide.application.usecase.saved import (
    ListSavedArticlesRequest,
    ListSavedArticlesResponse,
    ListSavedArticlesUseCase,
    ToggleSavedArticleRequest,
    ToggleSavedArticleResponse,
    ToggleSavedArticleUseCase,
)
from guide.interface.api.auth import ViewerId

router = APIRouter(prefix="/saved", tags=["saved"], route_class=DishkaRoute)


class ToggleSavedAPIRequest(BaseModel):
    """Desired saved state."""

    present: bool


@router.get("", response_model=ListSavedArticlesResponse)
async def list_saved_articles(
    viewer_id: ViewerId,
    list_saved_articles_use_case: FromDishka[ListSavedArticlesUseCase],
) -> ListSavedArticlesResponse:
    """List the articles the viewer saved."""
    return await list_saved_articles_use_case.execute(
        ListSavedArticlesRequest(viewer_id=viewer_id)
    )


@router.put("/{article_id}", response_model=ToggleSavedArticleResponse)
async def toggle_saved_article(
    article_id: UUID,
    request: ToggleSavedAPIRequest,
    viewer_id: ViewerId,
    toggle_saved_article_use_case: FromDishka[ToggleSavedArticleUseCase],
) -> ToggleSavedArticleResponse:
    """Save an article for later or remove it from the saved list."""
    return await toggle_saved_article_use_case.execute(
        ToggleSavedArticleRequest(
            viewer_id=viewer_id,
            article_id=str(article_id),
            desired_present=request.present,
        )
    )
