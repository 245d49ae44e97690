"""List subscriptions use case."""

from uuid import UUID

from pydantic import BaseModel

from guide.application.usecase.base import BaseUseCase
from guide.application.view import UserView
from guide.domain.service import AggregationService, LookupService
from guide.domain.value import UserId


class ListSubscriptionsRequest(BaseModel):
    """List subscriptions request.

    Without ``user_id`` the viewer's own subscriptions are listed.
    """

    viewer_id: str
    user_id: str | None = None


class ListSubscriptionsResponse(BaseModel):
    """List subscriptions response."""

    user_id: str
    users: list[UserView]
    total: int


class ListSubscriptionsUseCase(BaseUseCase):
    """Use case for listing the users a user is subscribed to."""

    def __init__(
        self,
        aggregation_service: AggregationService,
        lookup_service: LookupService,
    ) -> None:
        self.aggregation_service = aggregation_service
        self.lookup_service = lookup_service

    async def execute(
        self, request: ListSubscriptionsRequest
    ) -> ListSubscriptionsResponse:
        viewer = await self.lookup_service.user(UserId(UUID(request.viewer_id)))
        user_id = UserId(UUID(request.user_id)) if request.user_id else viewer.id

        publishers = await self.aggregation_service.list_subscriptions(user_id)

        return ListSubscriptionsResponse(
            user_id=str(user_id),
            users=[UserView.from_domain(u, viewer.id) for u in publishers],
            total=len(publishers),
        )
