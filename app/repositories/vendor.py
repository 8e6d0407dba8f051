"""Vendor repository — vendor rows only; associations live in vendor_category.py."""

from __future__ import annotations

from collections.abc import Collection

from app.domain.vendor import Vendor
from app.repositories.base import BaseRepository

_LIKE_ESCAPE = "\\"


def _contains_pattern(term: str) -> str:
    """Build a LIKE pattern matching ``term`` anywhere, with wildcards taken literally."""
    escaped = (
        term.replace(_LIKE_ESCAPE, _LIKE_ESCAPE * 2)
        .replace("%", _LIKE_ESCAPE + "%")
        .replace("_", _LIKE_ESCAPE + "_")
    )
    return f"%{escaped}%"


class VendorRepository(BaseRepository[Vendor]):
    model = Vendor

    async def search(
        self,
        *,
        city: str | None = None,
        vendor_ids: Collection[str] | None = None,
    ) -> list[Vendor]:
        """Vendors ordered by name, optionally narrowed by city substring and/or id set."""
        q = self._base_query()
        if city:
            q = q.where(Vendor.city.ilike(_contains_pattern(city), escape=_LIKE_ESCAPE))
        if vendor_ids is not None:
            q = q.where(Vendor.id.in_(list(vendor_ids)))
        q = q.order_by(Vendor.name.asc(), Vendor.id.asc())

        async with self._guard("search"):
            items = (await self._session.execute(q)).scalars().all()
        return list(items)
