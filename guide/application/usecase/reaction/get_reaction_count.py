"""Get reaction count use case."""

from uuid import UUID

from pydantic import BaseModel

from guide.application.usecase.base import BaseUseCase
from guide.domain.service import AggregationService, LookupService
from guide.domain.value import ArticleId, UserId


class GetReactionCountRequest(BaseModel):
    """Get reaction count request."""

    viewer_id: str
    article_id: str


class GetReactionCountResponse(BaseModel):
    """Get reaction count response."""

    article_id: str
    reaction_count: int


class GetReactionCountUseCase(BaseUseCase):
    """Use case for counting reactions on an article."""

    def __init__(
        self,
        aggregation_service: AggregationService,
        lookup_service: LookupService,
    ) -> None:
        self.aggregation_service = aggregation_service
        self.lookup_service = lookup_service

    async def execute(
        self, request: GetReactionCountRequest
    ) -> GetReactionCountResponse:
        await self.lookup_service.user(UserId(UUID(request.viewer_id)))
        article_id = ArticleId(UUID(request.article_id))

        count = await self.aggregation_service.reaction_count(article_id)

        return GetReactionCountResponse(
            article_id=str(article_id), reaction_count=count
        )
