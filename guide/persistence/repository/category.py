"""PostgreSQL implementation of Category repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from guide.domain.model import Category
from guide.domain.repository import CategoryRepository
from guide.domain.value import CategoryId, CategoryName
from guide.persistence.mappers import category_to_dict, row_to_category
from guide.persistence.tables import categories_table


class PostgresCategoryRepository(CategoryRepository):
    """PostgreSQL implementation of CategoryRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def save(self, category: Category) -> Category:
        """Save or update a category."""
        stmt = insert(categories_table).values(**category_to_dict(category))
        stmt = stmt.on_conflict_do_update(
            index_elements=[categories_table.c.id],
            set_={"name": stmt.excluded.name},
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return category

    async def find_by_id(self, category_id: CategoryId) -> Optional[Category]:
        """Find category by ID."""
        stmt = select(categories_table).where(categories_table.c.id == category_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_category(dict(row)) if row else None

    async def find_by_name(self, name: CategoryName) -> Optional[Category]:
        """Find category by name."""
        stmt = select(categories_table).where(categories_table.c.name == name.root)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_category(dict(row)) if row else None

    async def find_all(self) -> list[Category]:
        """Find all categories ordered by name."""
        stmt = select(categories_table).order_by(categories_table.c.name)
        result = await self.session.execute(stmt)
        return [row_to_category(dict(row)) for row in result.mappings().all()]
