"""Provider base class."""

from typing import ClassVar, Literal

from dishka import Provider

# Components with a production and a mock implementation
Component = Literal["persistence"]


class ProviderBase(Provider):
    """Base for all providers.

    ``__mock_component__`` names the component on a mockable base class and is
    inherited by its implementations; ``__is_mock__`` marks the test one.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
