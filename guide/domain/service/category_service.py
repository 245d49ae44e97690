"""Category domain service."""

import logfire

from guide.domain.model import Category
from guide.domain.repository import CategoryRepository

from .base import Service


class CategoryService(Service):
    """Domain service for category operations."""

    def __init__(self, category_repository: CategoryRepository) -> None:
        """Initialize category service.

        Args:
            category_repository: Category repository
        """
        self.category_repository = category_repository

    async def get_all_categories(self) -> list[Category]:
        """Get all registered categories ordered by name."""
        with logfire.span("category_service.get_all_categories"):
            categories = await self.category_repository.find_all()
            logfire.info("Categories retrieved", count=len(categories))
            return categories
