"""Category repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from guide.domain.model.category import Category
from guide.domain.value import CategoryId, CategoryName


class CategoryRepository(ABC):
    """Repository interface for Category entity."""

    @abstractmethod
    async def save(self, category: Category) -> Category:
        """Save or update a category."""
        pass

    @abstractmethod
    async def find_by_id(self, category_id: CategoryId) -> Optional[Category]:
        """Find category by ID."""
        pass

    @abstractmethod
    async def find_by_name(self, name: CategoryName) -> Optional[Category]:
        """Find category by its unique name."""
        pass

    @abstractmethod
    async def find_all(self) -> list[Category]:
        """Find all categories ordered by name."""
        pass
