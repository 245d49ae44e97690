"""Get comments use case."""

from uuid import UUID

from pydantic import BaseModel

from guide.application.usecase.base import BaseUseCase
from guide.application.view import CommentView
from guide.domain.service import CommentService, LookupService
from guide.domain.value import ArticleId, UserId


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    viewer_id: str
    article_id: str


class GetCommentsResponse(BaseModel):
    """Get comments response."""

    article_id: str
    comments: list[CommentView]
    total: int


class GetCommentsUseCase(BaseUseCase):
    """Use case for getting all comments on an article, oldest first."""

    def __init__(
        self, comment_service: CommentService, lookup_service: LookupService
    ) -> None:
        self.comment_service = comment_service
        self.lookup_service = lookup_service

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        await self.lookup_service.user(UserId(UUID(request.viewer_id)))
        article_id = ArticleId(UUID(request.article_id))

        comments = await self.comment_service.list_for_article(article_id)

        return GetCommentsResponse(
            article_id=str(article_id),
            comments=[CommentView.from_domain(c) for c in comments],
            total=len(comments),
        )
