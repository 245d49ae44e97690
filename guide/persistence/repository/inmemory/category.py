"""In-memory implementation of Category repository for testing."""

from typing import Optional

from guide.domain.model.category import Category
from guide.domain.repository.category import CategoryRepository
from guide.domain.value import CategoryId, CategoryName


class InMemoryCategoryRepository(CategoryRepository):
    """In-memory implementation of CategoryRepository for testing."""

    def __init__(self) -> None:
        """Initialize empty repository."""
        self._categories: dict[CategoryId, Category] = {}
        self._name_index: dict[str, CategoryId] = {}

    async def save(self, category: Category) -> Category:
        """Save or update a category."""
        self._categories[category.id] = category
        self._name_index[category.name.root] = category.id
        return category

    async def find_by_id(self, category_id: CategoryId) -> Optional[Category]:
        """Find category by ID."""
        return self._categories.get(category_id)

    async def find_by_name(self, name: CategoryName) -> Optional[Category]:
        """Find category by name."""
        category_id = self._name_index.get(name.root)
        if category_id:
            return self._categories.get(category_id)
        return None

    async def find_all(self) -> list[Category]:
        """Find all categories ordered by name."""
        return sorted(self._categories.values(), key=lambda c: c.name.root)
