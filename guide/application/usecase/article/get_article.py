"""Get article use case."""

from uuid import UUID

from pydantic import BaseModel

from guide.application.usecase.base import BaseUseCase
from guide.application.view import ArticleView
from guide.domain.service import LookupService
from guide.domain.value import ArticleId, UserId


class GetArticleRequest(BaseModel):
    """Get article request."""

    viewer_id: str
    article_id: str


class GetArticleResponse(BaseModel):
    """Get article response."""

    article: ArticleView


class GetArticleUseCase(BaseUseCase):
    """Use case for reading one article with the viewer's reaction and save flags."""

    def __init__(self, lookup_service: LookupService) -> None:
        self.lookup_service = lookup_service

    async def execute(self, request: GetArticleRequest) -> GetArticleResponse:
        """Execute get article flow.

        Raises:
            NotFoundError: If the viewer or article does not exist
        """
        viewer = await self.lookup_service.user(UserId(UUID(request.viewer_id)))
        article = await self.lookup_service.article(ArticleId(UUID(request.article_id)))
        category = await self.lookup_service.category(article.category_id)

        return GetArticleResponse(
            article=ArticleView.from_domain(article, category, viewer.id)
        )
