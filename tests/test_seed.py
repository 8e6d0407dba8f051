from app.schemas.category import CategoryCreate
from app.schemas.vendor import VendorFilters
from app.scripts.seed import SEED_CATEGORIES, SEED_VENDORS, load_seed_data
from app.services.category import CategoryService
from app.services.vendor import VendorService

TOUR_OPERATOR = "22222222-2222-2222-2222-222222222222"


async def test_load_seed_data_is_idempotent(session):
    first = await load_seed_data(session)
    await session.commit()
    second = await load_seed_data(session)

    assert first == {"categories": len(SEED_CATEGORIES), "vendors": len(SEED_VENDORS), "skipped": 0}
    assert second["categories"] == 0
    assert second["vendors"] == 0


async def test_seeded_tour_operators(session):
    await load_seed_data(session)

    vendors = await VendorService(session).list_vendors(VendorFilters(category_id=TOUR_OPERATOR))

    assert [v.name for v in vendors] == ["Bella Italia Tours", "NYC Food Tours", "Tokyo Adventures"]
    assert len(await CategoryService(session).list_categories()) == 5


async def test_seed_skips_category_whose_name_is_taken(session):
    restaurant = await CategoryService(session).create_category(CategoryCreate(name="Restaurant"))
    await session.commit()

    stats = await load_seed_data(session)

    # the seed Restaurant plus the two vendor links pointing at its seed id
    assert stats == {"categories": 4, "vendors": 5, "skipped": 3}
    categories = await CategoryService(session).list_categories()
    assert [c.id for c in categories if c.name == "Restaurant"] == [restaurant.id]
    nyc = [v for v in await VendorService(session).list_vendors() if v.name == "NYC Food Tours"][0]
    assert [c.name for c in nyc.categories] == ["Tour Operator"]


async def test_seed_skips_links_to_missing_category(session):
    await load_seed_data(session)
    await session.commit()
    await VendorService(session).delete_vendor("cccccccc-cccc-cccc-cccc-cccccccccccc")
    await CategoryService(session).delete_category("33333333-3333-3333-3333-333333333333")
    await CategoryService(session).create_category(CategoryCreate(name="Transportation"))
    await session.commit()

    stats = await load_seed_data(session)

    assert stats["vendors"] == 1
    alpine = await VendorService(session).get_vendor("cccccccc-cccc-cccc-cccc-cccccccccccc")
    assert alpine.categories == []
