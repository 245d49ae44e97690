"""Category use cases."""

from .list_categories import (
    CategoryItem,
    ListCategoriesRequest,
    ListCategoriesResponse,
    ListCategoriesUseCase,
)

__all__ = [
    "CategoryItem",
    "ListCategoriesRequest",
    "ListCategoriesResponse",
    "ListCategoriesUseCase",
]
