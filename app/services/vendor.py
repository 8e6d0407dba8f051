"""Vendor service — vendor CRUD, category association upkeep, and filtered listing.

A vendor's ``categories`` are never stored on the vendor row. Every read
fetches the vendor rows, then one junction+category query for all of them,
and groups the result by vendor id.

Writes that touch both ``vendors`` and ``vendor_categories`` are issued on the
caller's session. Under the HTTP layer that session is one transaction per
request, so a failed association write rolls the vendor write back too.

Rule: No FastAPI here. Pure Python business logic.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import NotFoundError, ValidationError
from app.domain.category import Category
from app.domain.vendor import CITY_MAX_LENGTH, NAME_MAX_LENGTH, Vendor
from app.repositories.vendor import VendorRepository
from app.repositories.vendor_category import VendorCategoryRepository
from app.schemas.category import CategoryOut
from app.schemas.common import bounded_text
from app.schemas.vendor import VendorCreate, VendorFilters, VendorOut, VendorUpdate

logger = logging.getLogger(__name__)


def _unique(ids: Iterable[str]) -> list[str]:
    """Drop repeated ids, keeping first-seen order."""
    return list(dict.fromkeys(ids))


def _check(value: str, label: str, max_length: int) -> str:
    try:
        return bounded_text(value, label, max_length)
    except ValueError as exc:
        raise ValidationError(str(exc)) from exc


def _hydrate(vendor: Vendor, categories: Sequence[Category]) -> VendorOut:
    return VendorOut(
        id=vendor.id,
        name=vendor.name,
        city=vendor.city,
        created_at=vendor.created_at,
        categories=[CategoryOut.model_validate(c) for c in categories],
    )


class VendorService:
    def __init__(self, session: AsyncSession):
        self._vendors = VendorRepository(session)
        self._links = VendorCategoryRepository(session)

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    async def _with_categories(self, vendors: Sequence[Vendor]) -> list[VendorOut]:
        by_vendor = await self._links.categories_by_vendor(v.id for v in vendors)
        return [_hydrate(v, by_vendor.get(v.id, [])) for v in vendors]

    async def list_vendors(self, filters: VendorFilters | None = None) -> list[VendorOut]:
        """Vendors sorted by name, each with its categories.

        ``city`` is a case-insensitive substring match done in SQL. ``category_id``
        is resolved to a vendor id set through the junction table first; an
        empty set returns ``[]`` without querying vendors at all.
        """
        filters = filters or VendorFilters()

        vendor_ids: list[str] | None = None
        if filters.category_id:
            vendor_ids = await self._links.vendor_ids_for_category(filters.category_id)
            if not vendor_ids:
                return []

        vendors = await self._vendors.search(city=filters.city, vendor_ids=vendor_ids)
        return await self._with_categories(vendors)

    async def _get_row(self, vendor_id: str) -> Vendor:
        vendor = await self._vendors.get_by_id(vendor_id)
        if not vendor:
            raise NotFoundError("Vendor", vendor_id)
        return vendor

    async def get_vendor(self, vendor_id: str) -> VendorOut:
        vendor = await self._get_row(vendor_id)
        return (await self._with_categories([vendor]))[0]

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    async def create_vendor(self, data: VendorCreate) -> VendorOut:
        name = _check(data.name, "Name", NAME_MAX_LENGTH)
        city = _check(data.city, "City", CITY_MAX_LENGTH)
        category_ids = _unique(data.category_ids)
        if not category_ids:
            raise ValidationError("Select at least one category")

        vendor = await self._vendors.create(name=name, city=city)
        await self._links.add_many(vendor.id, category_ids)
        logger.info(
            "Created vendor %s (%s) with %d categories", vendor.id, vendor.name, len(category_ids)
        )
        return await self.get_vendor(vendor.id)

    async def update_vendor(self, vendor_id: str, data: VendorUpdate) -> VendorOut:
        vendor = await self._get_row(vendor_id)  # raises 404 if missing

        changes: dict[str, str] = {}
        if data.name is not None:
            changes["name"] = _check(data.name, "Name", NAME_MAX_LENGTH)
        if data.city is not None:
            changes["city"] = _check(data.city, "City", CITY_MAX_LENGTH)
        if changes:
            await self._vendors.update(vendor, **changes)

        if data.replaces_categories:
            # Full replacement, not a merge. Not atomic against a concurrent
            # update of the same vendor unless the session is one transaction.
            category_ids = _unique(data.category_ids or [])
            await self._links.delete_for_vendor(vendor_id)
            await self._links.add_many(vendor_id, category_ids)
            logger.info("Replaced categories of vendor %s (%d)", vendor_id, len(category_ids))

        return await self.get_vendor(vendor_id)

    async def delete_vendor(self, vendor_id: str) -> None:
        """Remove the vendor's associations, then the vendor. Categories are kept."""
        await self._links.delete_for_vendor(vendor_id)
        deleted = await self._vendors.delete(vendor_id)
        if not deleted:
            raise NotFoundError("Vendor", vendor_id)
        logger.info("Deleted vendor %s", vendor_id)
