"""List categories use case."""

from uuid import UUID

from pydantic import BaseModel

from guide.application.usecase.base import BaseUseCase
from guide.domain.service import CategoryService, LookupService
from guide.domain.value import UserId


class CategoryItem(BaseModel):
    """Category item in response."""

    category_id: str
    name: str


class ListCategoriesRequest(BaseModel):
    """List categories request."""

    viewer_id: str


class ListCategoriesResponse(BaseModel):
    """List categories response."""

    categories: list[CategoryItem]


class ListCategoriesUseCase(BaseUseCase):
    """Use case for listing all categories by name."""

    def __init__(
        self, category_service: CategoryService, lookup_service: LookupService
    ) -> None:
        self.category_service = category_service
        self.lookup_service = lookup_service

    async def execute(self, request: ListCategoriesRequest) -> ListCategoriesResponse:
        await self.lookup_service.user(UserId(UUID(request.viewer_id)))
        categories = await self.category_service.get_all_categories()

        return ListCategoriesResponse(
            categories=[
                CategoryItem(category_id=str(c.id), name=c.name.root)
                for c in categories
            ]
        )
