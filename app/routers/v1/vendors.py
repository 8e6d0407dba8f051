"""Vendor CRUD router.

Pattern:
  1. Declare a router with prefix, tags, and the auth dependency
  2. Inject the DB session via Depends
  3. Instantiate the service with the session
  4. Call service methods and wrap result in response envelope
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.response import DataResponse, ListResponse, listed
from app.core.security import get_current_user
from app.db.base import get_db
from app.schemas.vendor import VendorCreate, VendorFilters, VendorOut, VendorUpdate
from app.services.vendor import VendorService

router = APIRouter(
    prefix="/vendors",
    tags=["Vendors"],
    dependencies=[Depends(get_current_user)],
)


# ------------------------------------------------------------------
# Endpoints
# ------------------------------------------------------------------

@router.get("", response_model=ListResponse[VendorOut])
async def list_vendors(
    city: Optional[str] = Query(default=None, description="Case-insensitive substring of the city"),
    category_id: Optional[str] = Query(default=None, alias="categoryId", description="Only vendors in this category"),
    session: AsyncSession = Depends(get_db, scope="function"),
):
    """List all vendors sorted by name. Filter by ?city=par&categoryId=<id>."""
    filters = VendorFilters(city=city, category_id=category_id)
    return listed(await VendorService(session).list_vendors(filters))


@router.post("", response_model=DataResponse[VendorOut], status_code=status.HTTP_201_CREATED)
async def create_vendor(
    body: VendorCreate,
    session: AsyncSession = Depends(get_db, scope="function"),
):
    """Create a vendor with at least one category."""
    return {"data": await VendorService(session).create_vendor(body)}


@router.get("/{vendor_id}", response_model=DataResponse[VendorOut])
async def get_vendor(
    vendor_id: str,
    session: AsyncSession = Depends(get_db, scope="function"),
):
    return {"data": await VendorService(session).get_vendor(vendor_id)}


@router.put("/{vendor_id}", response_model=DataResponse[VendorOut])
async def update_vendor(
    vendor_id: str,
    body: VendorUpdate,
    session: AsyncSession = Depends(get_db, scope="function"),
):
    """Partial update. Send `categoryIds` to replace the whole category set; omit it to keep it."""
    return {"data": await VendorService(session).update_vendor(vendor_id, body)}


@router.delete("/{vendor_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_vendor(
    vendor_id: str,
    session: AsyncSession = Depends(get_db, scope="function"),
):
    await VendorService(session).delete_vendor(vendor_id)
