"""Junction-table repository: vendor id <-> category id pairs."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable

from sqlalchemy import delete, insert, select

from app.domain.category import Category
from app.domain.vendor_category import VendorCategory
from app.repositories.base import GuardedRepository


class VendorCategoryRepository(GuardedRepository[VendorCategory]):
    """Bulk operations on ``vendor_categories`` (composite key, no id-based CRUD)."""

    model = VendorCategory

    async def vendor_ids_for_category(self, category_id: str) -> list[str]:
        q = select(VendorCategory.vendor_id).where(VendorCategory.category_id == category_id)
        async with self._guard("vendor_ids_for_category"):
            rows = (await self._session.execute(q)).scalars().all()
        return list(rows)

    async def categories_by_vendor(self, vendor_ids: Iterable[str]) -> dict[str, list[Category]]:
        """Map each vendor id to its categories (ordered by name). Missing ids map to nothing."""
        ids = list(vendor_ids)
        grouped: dict[str, list[Category]] = defaultdict(list)
        if not ids:
            return grouped

        q = (
            select(VendorCategory.vendor_id, Category)
            .join(Category, Category.id == VendorCategory.category_id)
            .where(VendorCategory.vendor_id.in_(ids))
            .order_by(Category.name.asc(), Category.id.asc())
        )
        async with self._guard("categories_by_vendor"):
            rows = (await self._session.execute(q)).all()

        for vendor_id, category in rows:
            grouped[vendor_id].append(category)
        return grouped

    async def add_many(self, vendor_id: str, category_ids: Iterable[str]) -> None:
        rows = [{"vendor_id": vendor_id, "category_id": cid} for cid in category_ids]
        if not rows:
            return
        async with self._guard("add_many"):
            await self._session.execute(insert(VendorCategory), rows)
            await self._session.flush()

    async def delete_for_vendor(self, vendor_id: str) -> int:
        """Remove every association of ``vendor_id``; returns the number of rows deleted."""
        async with self._guard("delete_for_vendor"):
            result = await self._session.execute(
                delete(VendorCategory).where(VendorCategory.vendor_id == vendor_id)
            )
            await self._session.flush()
        return result.rowcount
