"""Base class for value objects."""

from typing import Generic, TypeVar

from pydantic import ConfigDict, RootModel

T = TypeVar("T")


class RootValueObject(RootModel[T], Generic[T]):
    """Base class for value objects that wrap a single primitive value.

    The wrapped value is accessed via ``.root`` and ``model_dump()`` returns
    the primitive itself, so these serialize transparently in views and rows.
    """

    model_config = ConfigDict(
        frozen=True,  # Hashable, usable as dict keys
    )

    def __str__(self) -> str:
        """Return string representation of the root value."""
        return str(self.root)
