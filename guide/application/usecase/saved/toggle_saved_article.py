"""Toggle saved article use case."""

from uuid import UUID

from pydantic import BaseModel

from guide.application.usecase.base import BaseUseCase
from guide.application.view import UserView
from guide.domain.service import RelationshipService
from guide.domain.value import ArticleId, UserId


class ToggleSavedArticleRequest(BaseModel):
    """Toggle saved article request."""

    viewer_id: str
    article_id: str
    desired_present: bool


class ToggleSavedArticleResponse(BaseModel):
    """Toggle saved article response."""

    user: UserView
    article_id: str
    saved: bool
    saved_count: int


class ToggleSavedArticleUseCase(BaseUseCase):
    """Use case for saving an article for later or removing it from the list."""

    def __init__(self, relationship_service: RelationshipService) -> None:
        self.relationship_service = relationship_service

    async def execute(
        self, request: ToggleSavedArticleRequest
    ) -> ToggleSavedArticleResponse:
        """Execute toggle saved article flow.

        Returns:
            The viewer's user view with the new saved state

        Raises:
            NotFoundError: If the viewer or article does not exist
            InvalidTransitionError: If the article is already in the requested state
        """
        result = await self.relationship_service.toggle_saved_article(
            article_id=ArticleId(UUID(request.article_id)),
            user_id=UserId(UUID(request.viewer_id)),
            desired_present=request.desired_present,
        )
        viewer = result.actor

        return ToggleSavedArticleResponse(
            user=UserView.from_domain(viewer, viewer.id),
            article_id=str(result.target.id),
            saved=result.present,
            saved_count=len(viewer.saved_article_ids),
        )
