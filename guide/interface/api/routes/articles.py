"""Article routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status
from pydantic import BaseModel, Field

from guide.application.usecase.article import (
    CreateArticleRequest,
    CreateArticleResponse,
    CreateArticleUseCase,
    GetArticleRequest,
    GetArticleResponse,
    GetArticleUseCase,
)
from guide.interface.api.auth import ViewerId

router = APIRouter(prefix="/articles", tags=["articles"], route_class=DishkaRoute)


class CreateArticleAPIRequest(BaseModel):
    """API request for creating an article."""

    category_name: str = Field(min_length=1, max_length=100)
    title: str = Field(min_length=1, max_length=300)
    text: str = Field(min_length=1)
    description: str = Field(default="", max_length=1000)
    is_draft: bool = False


@router.post(
    "", response_model=CreateArticleResponse, status_code=status.HTTP_201_CREATED
)
async def create_article(
    request: CreateArticleAPIRequest,
    viewer_id: ViewerId,
    create_article_use_case: FromDishka[CreateArticleUseCase],
) -> CreateArticleResponse:
    """Create an article authored by the viewer.

    Returns 404 if the category is not registered.
    """
    return await create_article_use_case.execute(
        CreateArticleRequest(
            viewer_id=viewer_id,
            category_name=request.category_name,
            title=request.title,
            text=request.text,
            description=request.description,
            is_draft=request.is_draft,
        )
    )


@router.get("/{article_id}", response_model=GetArticleResponse)
async def get_article(
    article_id: UUID,
    viewer_id: ViewerId,
    get_article_use_case: FromDishka[GetArticleUseCase],
) -> GetArticleResponse:
    """Get an article with the viewer's reaction and save flags."""
    return await get_article_use_case.execute(
        GetArticleRequest(viewer_id=viewer_id, article_id=str(article_id))
    )
