"""Load the demo categories and vendors.

Usage:
    # Load seed data into the configured DATABASE_URL
    python -m app.scripts.seed load

    # Load seed data (clear existing first)
    python -m app.scripts.seed load --clear
"""

import asyncio
import sys

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.base import transaction
from app.domain import Category, Vendor, VendorCategory

SEED_CATEGORIES = [
    {"id": "11111111-1111-1111-1111-111111111111", "name": "Luxury Hotel"},
    {"id": "22222222-2222-2222-2222-222222222222", "name": "Tour Operator"},
    {"id": "33333333-3333-3333-3333-333333333333", "name": "Transportation"},
    {"id": "44444444-4444-4444-4444-444444444444", "name": "Restaurant"},
    {"id": "55555555-5555-5555-5555-555555555555", "name": "Activity Provider"},
]

SEED_VENDORS = [
    {
        "id": "aaaaaaaa-aaaa-aaaa-aaaa-aaaaaaaaaaaa",
        "name": "The Ritz Paris",
        "city": "Paris",
        "category_ids": ["11111111-1111-1111-1111-111111111111"],
    },
    {
        "id": "bbbbbbbb-bbbb-bbbb-bbbb-bbbbbbbbbbbb",
        "name": "Tokyo Adventures",
        "city": "Tokyo",
        "category_ids": [
            "22222222-2222-2222-2222-222222222222",
            "55555555-5555-5555-5555-555555555555",
        ],
    },
    {
        "id": "cccccccc-cccc-cccc-cccc-cccccccccccc",
        "name": "Alpine Express",
        "city": "Zurich",
        "category_ids": ["33333333-3333-3333-3333-333333333333"],
    },
    {
        "id": "dddddddd-dddd-dddd-dddd-dddddddddddd",
        "name": "Bella Italia Tours",
        "city": "Rome",
        "category_ids": [
            "22222222-2222-2222-2222-222222222222",
            "44444444-4444-4444-4444-444444444444",
        ],
    },
    {
        "id": "eeeeeeee-eeee-eeee-eeee-eeeeeeeeeeee",
        "name": "NYC Food Tours",
        "city": "New York",
        "category_ids": [
            "22222222-2222-2222-2222-222222222222",
            "44444444-4444-4444-4444-444444444444",
        ],
    },
]


async def load_seed_data(session: AsyncSession, clear_existing: bool = False) -> dict:
    """Insert seed rows that are not there yet.

    A seed category is skipped when its id or its name is already taken. Links
    to categories that do not exist (skipped or deleted) are left out.

    Args:
        session: Session to write with; the caller commits
        clear_existing: If True, delete all vendors and categories first

    Returns:
        Dict with counts of loaded items
    """
    if clear_existing:
        print("Clearing existing data...")
        await session.execute(delete(VendorCategory))
        await session.execute(delete(Vendor))
        await session.execute(delete(Category))

    stats = {"categories": 0, "vendors": 0, "skipped": 0}

    existing = (await session.execute(select(Category.id, Category.name))).all()
    taken_ids = {row.id for row in existing}
    taken_names = {row.name for row in existing}
    for c_data in SEED_CATEGORIES:
        if c_data["id"] in taken_ids or c_data["name"] in taken_names:
            stats["skipped"] += 1
            continue
        session.add(Category(id=c_data["id"], name=c_data["name"]))
        taken_ids.add(c_data["id"])
        stats["categories"] += 1
    await session.flush()

    existing_vendor_ids = set((await session.execute(select(Vendor.id))).scalars())
    for v_data in SEED_VENDORS:
        if v_data["id"] in existing_vendor_ids:
            stats["skipped"] += 1
            continue
        session.add(Vendor(id=v_data["id"], name=v_data["name"], city=v_data["city"]))
        await session.flush()
        for cid in v_data["category_ids"]:
            if cid not in taken_ids:
                stats["skipped"] += 1
                continue
            session.add(VendorCategory(vendor_id=v_data["id"], category_id=cid))
        stats["vendors"] += 1
    await session.flush()

    return stats


async def _load(clear: bool) -> None:
    async with transaction() as session:
        stats = await load_seed_data(session, clear_existing=clear)
    print("Loaded seed data")
    print(f"  Categories: {stats['categories']} new")
    print(f"  Vendors: {stats['vendors']} new, {stats['skipped']} rows or links skipped")


def main():
    """CLI entry point."""
    if len(sys.argv) < 2 or sys.argv[1] != "load":
        print(__doc__)
        sys.exit(1)

    asyncio.run(_load(clear="--clear" in sys.argv))


if __name__ == "__main__":
    main()
