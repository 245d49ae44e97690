"""List articles in a category use case."""

from uuid import UUID

from pydantic import BaseModel

from guide.application.usecase.base import BaseUseCase
from guide.application.view import ArticleView, build_article_views
from guide.domain.service import ArticleService, LookupService
from guide.domain.value import CategoryId, UserId


class ListCategoryArticlesRequest(BaseModel):
    """List category articles request."""

    viewer_id: str
    category_id: str


class ListCategoryArticlesResponse(BaseModel):
    """List category articles response."""

    category_id: str
    category_name: str
    articles: list[ArticleView]
    total: int


class ListCategoryArticlesUseCase(BaseUseCase):
    """Use case for listing the published articles of a category."""

    def __init__(
        self, article_service: ArticleService, lookup_service: LookupService
    ) -> None:
        """Initialize list category articles use case.

        Args:
            article_service: Article domain service
            lookup_service: Lookup domain service
        """
        self.article_service = article_service
        self.lookup_service = lookup_service

    async def execute(
        self, request: ListCategoryArticlesRequest
    ) -> ListCategoryArticlesResponse:
        """Execute list category articles flow.

        Raises:
            NotFoundError: If the viewer or category does not exist
        """
        viewer = await self.lookup_service.user(UserId(UUID(request.viewer_id)))
        category_id = CategoryId(UUID(request.category_id))
        category = await self.lookup_service.category(category_id)

        articles = await self.article_service.list_by_category(category_id)
        views = await build_article_views(articles, self.lookup_service, viewer.id)

        return ListCategoryArticlesResponse(
            category_id=str(category.id),
            category_name=category.name.root,
            articles=views,
            total=len(views),
        )
