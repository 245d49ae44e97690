"""Create comment use case."""

from uuid import UUID

from pydantic import BaseModel

from guide.application.usecase.base import BaseUseCase
from guide.application.view import CommentView
from guide.domain.service import CommentService, LookupService
from guide.domain.value import ArticleId, UserId


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    viewer_id: str  # Author, from authenticated user
    article_id: str
    text: str


class CreateCommentResponse(BaseModel):
    """Create comment response."""

    comment: CommentView


class CreateCommentUseCase(BaseUseCase):
    """Use case for commenting on an article."""

    def __init__(
        self, comment_service: CommentService, lookup_service: LookupService
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            lookup_service: Lookup domain service
        """
        self.comment_service = comment_service
        self.lookup_service = lookup_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Steps:
        1. Resolve the author
        2. Create the comment (resolves the article)

        Raises:
            NotFoundError: If the author or article does not exist
        """
        author = await self.lookup_service.user(UserId(UUID(request.viewer_id)))

        comment = await self.comment_service.create_comment(
            article_id=ArticleId(UUID(request.article_id)),
            author=author,
            text=request.text,
        )

        return CreateCommentResponse(comment=CommentView.from_domain(comment))
