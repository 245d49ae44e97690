"""List saved articles use case."""

from uuid import UUID

from pydantic import BaseModel

from guide.application.usecase.base import BaseUseCase
from guide.application.view import ArticleView, build_article_views
from guide.domain.service import AggregationService, LookupService
from guide.domain.value import UserId


class ListSavedArticlesRequest(BaseModel):
    """List saved articles request."""

    viewer_id: str


class ListSavedArticlesResponse(BaseModel):
    """List saved articles response."""

    articles: list[ArticleView]
    total: int


class ListSavedArticlesUseCase(BaseUseCase):
    """Use case for listing the articles the viewer saved."""

    def __init__(
        self,
        aggregation_service: AggregationService,
        lookup_service: LookupService,
    ) -> None:
        self.aggregation_service = aggregation_service
        self.lookup_service = lookup_service

    async def execute(
        self, request: ListSavedArticlesRequest
    ) -> ListSavedArticlesResponse:
        viewer_id = UserId(UUID(request.viewer_id))

        articles = await self.aggregation_service.list_saved_articles(viewer_id)
        views = await build_article_views(articles, self.lookup_service, viewer_id)

        return ListSavedArticlesResponse(articles=views, total=len(views))
