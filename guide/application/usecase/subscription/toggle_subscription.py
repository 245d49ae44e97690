"""Toggle subscription use case."""

from uuid import UUID

from pydantic import BaseModel

from guide.application.usecase.base import BaseUseCase
from guide.application.view import UserView
from guide.domain.service import RelationshipService
from guide.domain.value import UserId


class ToggleSubscriptionRequest(BaseModel):
    """Toggle subscription request."""

    viewer_id: str  # Subscriber
    publisher_id: str
    desired_present: bool


class ToggleSubscriptionResponse(BaseModel):
    """Toggle subscription response."""

    user: UserView  # Publisher, as seen by the subscriber
    subscriber_count: int


class ToggleSubscriptionUseCase(BaseUseCase):
    """Use case for subscribing to or unsubscribing from another user."""

    def __init__(self, relationship_service: RelationshipService) -> None:
        self.relationship_service = relationship_service

    async def execute(
        self, request: ToggleSubscriptionRequest
    ) -> ToggleSubscriptionResponse:
        """Execute toggle subscription flow.

        Raises:
            NotFoundError: If the viewer or publisher does not exist
            SelfReferenceRejectedError: If the viewer targets themselves
            InvalidTransitionError: If the subscription is already in the
                requested state
        """
        result = await self.relationship_service.toggle_subscription(
            publisher_id=UserId(UUID(request.publisher_id)),
            subscriber_id=UserId(UUID(request.viewer_id)),
            desired_present=request.desired_present,
        )
        publisher = result.target

        return ToggleSubscriptionResponse(
            user=UserView.from_domain(publisher, result.actor.id),
            subscriber_count=len(publisher.subscriber_ids),
        )
