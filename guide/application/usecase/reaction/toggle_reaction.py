"""Toggle reaction use case."""

from uuid import UUID

from pydantic import BaseModel

from guide.application.usecase.base import BaseUseCase
from guide.application.view import ArticleView
from guide.domain.service import LookupService, RelationshipService
from guide.domain.value import ArticleId, UserId


class ToggleReactionRequest(BaseModel):
    """Toggle reaction request."""

    viewer_id: str
    article_id: str
    desired_present: bool


class ToggleReactionResponse(BaseModel):
    """Toggle reaction response."""

    article: ArticleView


class ToggleReactionUseCase(BaseUseCase):
    """Use case for adding or removing the viewer's reaction to an article."""

    def __init__(
        self,
        relationship_service: RelationshipService,
        lookup_service: LookupService,
    ) -> None:
        """Initialize toggle reaction use case.

        Args:
            relationship_service: Relationship domain service
            lookup_service: Lookup domain service
        """
        self.relationship_service = relationship_service
        self.lookup_service = lookup_service

    async def execute(self, request: ToggleReactionRequest) -> ToggleReactionResponse:
        """Execute toggle reaction flow.

        Returns:
            Updated article view; ``reacted`` equals ``desired_present``

        Raises:
            NotFoundError: If the viewer or article does not exist
            InvalidTransitionError: If the reaction is already in the requested state
        """
        result = await self.relationship_service.toggle_reaction(
            article_id=ArticleId(UUID(request.article_id)),
            user_id=UserId(UUID(request.viewer_id)),
            desired_present=request.desired_present,
        )
        category = await self.lookup_service.category(result.target.category_id)

        return ToggleReactionResponse(
            article=ArticleView.from_domain(result.target, category, result.actor.id)
        )
