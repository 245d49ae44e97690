"""Category routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from guide.application.usecase.article import (
    ListCategoryArticlesRequest,
    ListCategoryArticlesResponse,
    ListCategoryArticlesUseCase,
)
from guide.application.usecase.category import (
    ListCategoriesRequest,
    ListCategoriesResponse,
    ListCategoriesUseCase,
)
from guide.interface.api.auth import ViewerId

router = APIRouter(prefix="/categories", tags=["categories"], route_class=DishkaRoute)


@router.get("", response_model=ListCategoriesResponse)
async def list_categories(
    viewer_id: ViewerId,
    list_categories_use_case: FromDishka[ListCategoriesUseCase],
) -> ListCategoriesResponse:
    """List all categories by name."""
    return await list_categories_use_case.execute(
        ListCategoriesRequest(viewer_id=viewer_id)
    )


@router.get("/{category_id}/articles", response_model=ListCategoryArticlesResponse)
async def list_category_articles(
    category_id: UUID,
    viewer_id: ViewerId,
    list_category_articles_use_case: FromDishka[ListCategoryArticlesUseCase],
) -> ListCategoryArticlesResponse:
    """List published articles in a category, newest first."""
    return await list_category_articles_use_case.execute(
        ListCategoryArticlesRequest(viewer_id=viewer_id, category_id=str(category_id))
    )
