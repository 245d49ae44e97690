"""Comment routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status
from pydantic import BaseModel, Field

from guide.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
)
from guide.interface.api.auth import ViewerId

router = APIRouter(prefix="/articles", tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    text: str = Field(min_length=1, max_length=10000)


@router.post(
    "/{article_id}/comments",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    article_id: UUID,
    request: CreateCommentAPIRequest,
    viewer_id: ViewerId,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
) -> CreateCommentResponse:
    """Comment on an article as the viewer."""
    return await create_comment_use_case.execute(
        CreateCommentRequest(
            viewer_id=viewer_id, article_id=str(article_id), text=request.text
        )
    )


@router.get("/{article_id}/comments", response_model=GetCommentsResponse)
async def get_comments(
    article_id: UUID,
    viewer_id: ViewerId,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
) -> GetCommentsResponse:
    """Get all comments on an article, oldest first."""
    return await get_comments_use_case.execute(
        GetCommentsRequest(viewer_id=viewer_id, article_id=str(article_id))
    )
