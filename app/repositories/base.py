"""Generic async repository plus translation of store faults into app exceptions."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any, Generic, TypeVar

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import ConflictError, StoreError
from app.db.base import Base

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


class GuardedRepository(Generic[ModelT]):
    """Session holder whose queries run inside :meth:`_guard`.

    Callers only ever see ``StoreError`` / ``ConflictError``; raw driver
    messages go to the log. Tables without a single ``id`` column (the
    junction table) build on this directly.
    """

    model: type[ModelT]
    # Message raised instead of StoreError when an IntegrityError hits this table
    conflict_message: str | None = None

    def __init__(self, session: AsyncSession):
        self._session = session

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    @asynccontextmanager
    async def _guard(self, operation: str) -> AsyncIterator[None]:
        """Roll back and re-raise store faults as sanitized app exceptions."""
        try:
            yield
        except IntegrityError as exc:
            logger.error("%s.%s integrity error: %s", self.model.__tablename__, operation, exc.orig)
            await self._session.rollback()
            if self.conflict_message:
                raise ConflictError(self.conflict_message) from exc
            raise StoreError() from exc
        except SQLAlchemyError as exc:
            logger.error("%s.%s failed: %s", self.model.__tablename__, operation, exc)
            await self._session.rollback()
            raise StoreError() from exc

    def _base_query(self):
        return select(self.model)


class BaseRepository(GuardedRepository[ModelT]):
    """Generic CRUD repository for tables keyed by ``id``."""

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    async def get_by_id(self, entity_id: str) -> ModelT | None:
        async with self._guard("get_by_id"):
            result = await self._session.execute(
                self._base_query().where(self.model.id == entity_id)
            )
            return result.scalars().first()

    async def list(self, *, order_by: str = "name") -> list[ModelT]:
        """Return every row, ascending on ``order_by`` with id as tie-breaker."""
        q = self._base_query()
        col = getattr(self.model, order_by, None)
        if col is not None:
            q = q.order_by(col.asc(), self.model.id.asc())
        async with self._guard("list"):
            items = (await self._session.execute(q)).scalars().all()
        return list(items)

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    async def create(self, **kwargs: Any) -> ModelT:
        instance = self.model(**kwargs)
        async with self._guard("create"):
            self._session.add(instance)
            await self._session.flush()  # populate id
            await self._session.refresh(instance)
        return instance

    async def update(self, instance: ModelT, **kwargs: Any) -> ModelT:
        kwargs.pop("id", None)
        async with self._guard("update"):
            for field, value in kwargs.items():
                setattr(instance, field, value)
            await self._session.flush()
            await self._session.refresh(instance)
        return instance

    async def delete(self, entity_id: str) -> bool:
        """Hard-delete one row. Returns False when nothing matched."""
        async with self._guard("delete"):
            result = await self._session.execute(
                delete(self.model).where(self.model.id == entity_id)
            )
            await self._session.flush()
        return result.rowcount > 0
