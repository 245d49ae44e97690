"""List subscribers use case."""

from uuid import UUID

from pydantic import BaseModel

from guide.application.usecase.base import BaseUseCase
from guide.application.view import UserView
from guide.domain.service import AggregationService, LookupService
from guide.domain.value import UserId


class ListSubscribersRequest(BaseModel):
    """List subscribers request.

    Without ``user_id`` the viewer's own subscribers are listed.
    """

    viewer_id: str
    user_id: str | None = None


class ListSubscribersResponse(BaseModel):
    """List subscribers response."""

    user_id: str
    users: list[UserView]
    total: int


class ListSubscribersUseCase(BaseUseCase):
    """Use case for listing the users subscribed to a user."""

    def __init__(
        self,
        aggregation_service: AggregationService,
        lookup_service: LookupService,
    ) -> None:
        """Initialize list subscribers use case.

        Args:
            aggregation_service: Aggregation domain service
            lookup_service: Lookup domain service
        """
        self.aggregation_service = aggregation_service
        self.lookup_service = lookup_service

    async def execute(self, request: ListSubscribersRequest) -> ListSubscribersResponse:
        """Execute list subscribers flow.

        Raises:
            NotFoundError: If the viewer or the target user does not exist
        """
        viewer = await self.lookup_service.user(UserId(UUID(request.viewer_id)))
        user_id = UserId(UUID(request.user_id)) if request.user_id else viewer.id

        subscribers = await self.aggregation_service.list_subscribers(user_id)

        return ListSubscribersResponse(
            user_id=str(user_id),
            users=[UserView.from_domain(u, viewer.id) for u in subscribers],
            total=len(subscribers),
        )
