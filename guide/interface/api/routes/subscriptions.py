"""Subscription routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from guide.application.usecase.subscription import (
    ListSubscribersRequest,
    ListSubscribersResponse,
    ListSubscribersUseCase,
    ListSubscriptionsRequest,
    ListSubscriptionsResponse,
    ListSubscriptionsUseCase,
    ToggleSubscriptionRequest,
    ToggleSubscriptionResponse,
    ToggleSubscriptionUseCase,
)
from guide.interface.api.auth import ViewerId

router = APIRouter(tags=["subscriptions"], route_class=DishkaRoute)


class ToggleSubscriptionAPIRequest(BaseModel):
    """Desired subscription state."""

    present: bool


@router.put("/users/{user_id}/subscription", response_model=ToggleSubscriptionResponse)
async def toggle_subscription(
    user_id: UUID,
    request: ToggleSubscriptionAPIRequest,
    viewer_id: ViewerId,
    toggle_subscription_use_case: FromDishka[ToggleSubscriptionUseCase],
) -> ToggleSubscriptionResponse:
    """Subscribe the viewer to a user, or unsubscribe.

    Subscribing to yourself returns 422.
    """
    return await toggle_subscription_use_case.execute(
        ToggleSubscriptionRequest(
            viewer_id=viewer_id,
            publisher_id=str(user_id),
            desired_present=request.present,
        )
    )


@router.get("/me/subscribers", response_model=ListSubscribersResponse)
async def list_my_subscribers(
    viewer_id: ViewerId,
    list_subscribers_use_case: FromDishka[ListSubscribersUseCase],
) -> ListSubscribersResponse:
    """List the viewer's subscribers."""
    return await list_subscribers_use_case.execute(
        ListSubscribersRequest(viewer_id=viewer_id)
    )


@router.get("/me/subscriptions", response_model=ListSubscriptionsResponse)
async def list_my_subscriptions(
    viewer_id: ViewerId,
    list_subscriptions_use_case: FromDishka[ListSubscriptionsUseCase],
) -> ListSubscriptionsResponse:
    """List the users the viewer subscribes to."""
    return await list_subscriptions_use_case.execute(
        ListSubscriptionsRequest(viewer_id=viewer_id)
    )


@router.get("/users/{user_id}/subscribers", response_model=ListSubscribersResponse)
async def list_subscribers(
    user_id: UUID,
    viewer_id: ViewerId,
    list_subscribers_use_case: FromDishka[ListSubscribersUseCase],
) -> ListSubscribersResponse:
    """List a user's subscribers."""
    return await list_subscribers_use_case.execute(
        ListSubscribersRequest(viewer_id=viewer_id, user_id=str(user_id))
    )


@router.get("/users/{user_id}/subscriptions", response_model=ListSubscriptionsResponse)
async def list_subscriptions(
    user_id: UUID,
    viewer_id: ViewerId,
    list_subscriptions_use_case: FromDishka[ListSubscriptionsUseCase],
) -> ListSubscriptionsResponse:
    """List the users a user subscribes to."""
    return await list_subscriptions_use_case.execute(
        ListSubscriptionsRequest(viewer_id=viewer_id, user_id=str(user_id))
    )
