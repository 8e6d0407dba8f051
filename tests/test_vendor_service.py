import pytest

from app.core.exceptions import NotFoundError, StoreError, ValidationError
from app.repositories.vendor_category import VendorCategoryRepository
from app.schemas.category import CategoryCreate
from app.schemas.vendor import VendorCreate, VendorUpdate
from app.services.category import CategoryService
from app.services.vendor import VendorService


def _names(vendor) -> set[str]:
    return {c.name for c in vendor.categories}


async def _ritz(session, categories, *names):
    ids = [categories[n].id for n in (names or ("Luxury Hotel",))]
    return await VendorService(session).create_vendor(
        VendorCreate(name="Ritz", city="Paris", category_ids=ids)
    )


async def test_create_then_get_round_trip(session, categories):
    svc = VendorService(session)
    ids = [categories["Tour Operator"].id, categories["Luxury Hotel"].id]

    created = await svc.create_vendor(VendorCreate(name="Ritz", city="Paris", category_ids=ids))
    fetched = await svc.get_vendor(created.id)

    assert fetched.name == "Ritz"
    assert fetched.city == "Paris"
    assert {c.id for c in fetched.categories} == set(ids)
    # categories come back ordered by name regardless of input order
    assert [c.name for c in fetched.categories] == ["Luxury Hotel", "Tour Operator"]


async def test_create_collapses_duplicate_category_ids(session, categories):
    luxury_id = categories["Luxury Hotel"].id

    vendor = await VendorService(session).create_vendor(
        VendorCreate(name="Ritz", city="Paris", category_ids=[luxury_id, luxury_id])
    )

    assert [c.id for c in vendor.categories] == [luxury_id]


async def test_create_requires_a_category(session):
    bypassed = VendorCreate.model_construct(name="Ritz", city="Paris", category_ids=[])

    with pytest.raises(ValidationError) as exc_info:
        await VendorService(session).create_vendor(bypassed)

    assert exc_info.value.message == "Select at least one category"


async def test_create_with_unknown_category_is_store_error_and_leaves_nothing(session, categories):
    svc = VendorService(session)

    with pytest.raises(StoreError) as exc_info:
        await svc.create_vendor(
            VendorCreate(name="Ghost", city="Nowhere", category_ids=["missing-category"])
        )

    assert exc_info.value.message == "Database operation failed"
    assert await svc.list_vendors() == []


async def test_get_missing_vendor_raises_not_found(session):
    with pytest.raises(NotFoundError):
        await VendorService(session).get_vendor("nope")


async def test_update_replaces_category_set(session, categories):
    svc = VendorService(session)
    vendor = await _ritz(session, categories, "Luxury Hotel", "Tour Operator")
    restaurant = await CategoryService(session).create_category(CategoryCreate(name="Restaurant"))

    updated = await svc.update_vendor(vendor.id, VendorUpdate(category_ids=[restaurant.id]))

    assert _names(updated) == {"Restaurant"}
    assert _names(await svc.get_vendor(vendor.id)) == {"Restaurant"}


async def test_update_without_category_ids_keeps_them(session, categories):
    svc = VendorService(session)
    vendor = await _ritz(session, categories, "Luxury Hotel", "Tour Operator")

    updated = await svc.update_vendor(vendor.id, VendorUpdate(name="X"))

    assert updated.name == "X"
    assert updated.city == "Paris"
    assert _names(updated) == {"Luxury Hotel", "Tour Operator"}


async def test_update_with_empty_category_ids_clears_them(session, categories):
    svc = VendorService(session)
    vendor = await _ritz(session, categories, "Luxury Hotel", "Tour Operator")

    updated = await svc.update_vendor(vendor.id, VendorUpdate(category_ids=[]))

    assert updated.categories == []


async def test_update_city_only(session, categories):
    vendor = await _ritz(session, categories)

    updated = await VendorService(session).update_vendor(vendor.id, VendorUpdate(city="Lyon"))

    assert updated.name == "Ritz"
    assert updated.city == "Lyon"


async def test_update_missing_vendor_raises_not_found(session, categories):
    with pytest.raises(NotFoundError):
        await VendorService(session).update_vendor(
            "nope", VendorUpdate(category_ids=[categories["Luxury Hotel"].id])
        )


async def test_delete_vendor_keeps_categories(session, categories):
    svc = VendorService(session)
    vendor = await _ritz(session, categories)

    await svc.delete_vendor(vendor.id)

    with pytest.raises(NotFoundError):
        await svc.get_vendor(vendor.id)
    links = await VendorCategoryRepository(session).categories_by_vendor([vendor.id])
    assert vendor.id not in links
    luxury = await CategoryService(session).get_category(categories["Luxury Hotel"].id)
    assert luxury.name == "Luxury Hotel"


async def test_delete_missing_vendor_raises_not_found(session):
    with pytest.raises(NotFoundError):
        await VendorService(session).delete_vendor("nope")


async def test_category_delete_cascades_to_vendor(session, categories):
    svc = VendorService(session)
    vendor = await _ritz(session, categories, "Luxury Hotel", "Tour Operator")
    await session.commit()

    await CategoryService(session).delete_category(categories["Luxury Hotel"].id)

    assert _names(await svc.get_vendor(vendor.id)) == {"Tour Operator"}


async def test_replacement_window_exposes_empty_category_set(session, categories):
    """Replacing categories is delete-then-insert; a read in between sees none.

    Two concurrent updates of one vendor can interleave the same way. The
    request transaction is what hides the gap from other readers.
    """
    svc = VendorService(session)
    links = VendorCategoryRepository(session)
    vendor = await _ritz(session, categories)

    await links.delete_for_vendor(vendor.id)
    assert (await svc.get_vendor(vendor.id)).categories == []

    await links.add_many(vendor.id, [categories["Tour Operator"].id])
    assert _names(await svc.get_vendor(vendor.id)) == {"Tour Operator"}


async def test_update_rechecks_unvalidated_input(session, categories):
    vendor = await _ritz(session, categories)
    bypassed = VendorUpdate.model_construct(name="")

    with pytest.raises(ValidationError) as exc_info:
        await VendorService(session).update_vendor(vendor.id, bypassed)

    assert exc_info.value.message == "Name is required"


async def test_create_rechecks_name_length(session, categories):
    bypassed = VendorCreate.model_construct(
        name="x" * 101, city="Paris", category_ids=[categories["Luxury Hotel"].id]
    )

    with pytest.raises(ValidationError) as exc_info:
        await VendorService(session).create_vendor(bypassed)

    assert exc_info.value.message == "Name is too long"
