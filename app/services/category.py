"""Category service — CRUD for categories; knows nothing about vendors.

Rule: No FastAPI here. Pure Python business logic over the repository.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import NotFoundError, ValidationError
from app.domain.category import NAME_MAX_LENGTH, Category
from app.repositories.category import CategoryRepository
from app.schemas.category import CategoryCreate, CategoryUpdate
from app.schemas.common import bounded_text

logger = logging.getLogger(__name__)


def _validated_name(name: str) -> str:
    try:
        return bounded_text(name, "Name", NAME_MAX_LENGTH)
    except ValueError as exc:
        raise ValidationError(str(exc)) from exc


class CategoryService:
    def __init__(self, session: AsyncSession):
        self._repo = CategoryRepository(session)

    async def list_categories(self) -> list[Category]:
        return await self._repo.list(order_by="name")

    async def get_category(self, category_id: str) -> Category:
        category = await self._repo.get_by_id(category_id)
        if not category:
            raise NotFoundError("Category", category_id)
        return category

    async def create_category(self, data: CategoryCreate) -> Category:
        category = await self._repo.create(name=_validated_name(data.name))
        logger.info("Created category %s (%s)", category.id, category.name)
        return category

    async def update_category(self, category_id: str, data: CategoryUpdate) -> Category:
        name = _validated_name(data.name)
        category = await self.get_category(category_id)  # raises 404 if missing
        return await self._repo.update(category, name=name)

    async def delete_category(self, category_id: str) -> None:
        """Delete a category; its vendor associations go with it (FK cascade)."""
        deleted = await self._repo.delete(category_id)
        if not deleted:
            raise NotFoundError("Category", category_id)
        logger.info("Deleted category %s", category_id)
