"""Category CRUD router."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.response import DataResponse, ListResponse, listed
from app.core.security import get_current_user
from app.db.base import get_db
from app.schemas.category import CategoryCreate, CategoryOut, CategoryUpdate
from app.services.category import CategoryService

router = APIRouter(
    prefix="/categories",
    tags=["Categories"],
    dependencies=[Depends(get_current_user)],
)


@router.get("", response_model=ListResponse[CategoryOut])
async def list_categories(session: AsyncSession = Depends(get_db, scope="function")):
    """List all categories sorted by name."""
    items = await CategoryService(session).list_categories()
    return listed([CategoryOut.model_validate(c) for c in items])


@router.post("", response_model=DataResponse[CategoryOut], status_code=status.HTTP_201_CREATED)
async def create_category(
    body: CategoryCreate,
    session: AsyncSession = Depends(get_db, scope="function"),
):
    category = await CategoryService(session).create_category(body)
    return {"data": CategoryOut.model_validate(category)}


@router.get("/{category_id}", response_model=DataResponse[CategoryOut])
async def get_category(
    category_id: str,
    session: AsyncSession = Depends(get_db, scope="function"),
):
    category = await CategoryService(session).get_category(category_id)
    return {"data": CategoryOut.model_validate(category)}


@router.put("/{category_id}", response_model=DataResponse[CategoryOut])
async def update_category(
    category_id: str,
    body: CategoryUpdate,
    session: AsyncSession = Depends(get_db, scope="function"),
):
    category = await CategoryService(session).update_category(category_id, body)
    return {"data": CategoryOut.model_validate(category)}


@router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_category(
    category_id: str,
    session: AsyncSession = Depends(get_db, scope="function"),
):
    """Delete a category. Vendors keep existing; they just lose this category."""
    await CategoryService(session).delete_category(category_id)
