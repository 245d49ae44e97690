"""Subscription use cases."""

from .list_subscribers import (
    ListSubscribersRequest,
    ListSubscribersResponse,
    ListSubscribersUseCase,
)
from .list_subscriptions import (
    ListSubscriptionsRequest,
    ListSubscriptionsResponse,
    ListSubscriptionsUseCase,
)
from .toggle_subscription import (
    ToggleSubscriptionRequest,
    ToggleSubscriptionResponse,
    ToggleSubscriptionUseCase,
)

__all__ = [
    "ListSubscribersRequest",
    "ListSubscribersResponse",
    "ListSubscribersUseCase",
    "ListSubscriptionsRequest",
    "ListSubscriptionsResponse",
    "ListSubscriptionsUseCase",
    "ToggleSubscriptionRequest",
    "ToggleSubscriptionResponse",
    "ToggleSubscriptionUseCase",
]
