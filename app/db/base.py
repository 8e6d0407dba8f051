"""Async SQLAlchemy engine, session factory, declarative Base, and FastAPI dependency."""


import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from sqlalchemy import event
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from app.core.config import settings
from app.core.exceptions import StoreError

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------

def build_engine(database_url: str, **kwargs) -> AsyncEngine:
    """Create an async engine; SQLite connections get foreign keys switched on."""
    engine_kwargs: dict = {"pool_pre_ping": True, **kwargs}

    is_sqlite = database_url.startswith("sqlite")
    # SQLite (local dev) doesn't support connection pooling parameters
    if is_sqlite:
        engine_kwargs["connect_args"] = {"check_same_thread": False}

    new_engine = create_async_engine(database_url, **engine_kwargs)

    if is_sqlite:
        # ON DELETE CASCADE on vendor_categories is a no-op without this pragma
        @event.listens_for(new_engine.sync_engine, "connect")
        def _enable_foreign_keys(dbapi_connection, _record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return new_engine


engine = build_engine(settings.database_url, echo=False)

# ---------------------------------------------------------------------------
# Session factory
# ---------------------------------------------------------------------------

def build_session_factory(bind: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        bind=bind,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
        autocommit=False,
    )


async_session_factory = build_session_factory(engine)

# ---------------------------------------------------------------------------
# Declarative Base
# ---------------------------------------------------------------------------
class Base(DeclarativeBase):
    """All ORM models inherit from this base."""

# ---------------------------------------------------------------------------
# Scoped transaction
# ---------------------------------------------------------------------------
@asynccontextmanager
async def transaction(
    factory: async_sessionmaker[AsyncSession] | None = None,
) -> AsyncGenerator[AsyncSession, None]:
    """Open a session, commit when the block exits cleanly, roll back otherwise."""
    async with (factory or async_session_factory)() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
        try:
            await session.commit()
        except SQLAlchemyError as exc:
            logger.error("Commit failed: %s", exc)
            await session.rollback()
            raise StoreError() from exc

# ---------------------------------------------------------------------------
# FastAPI dependency
# ---------------------------------------------------------------------------
async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Yield a request-scoped session; every write in the request commits or rolls back together.

    Routers depend on it with ``scope="function"`` so the commit runs before
    the response is sent and a failed commit surfaces as ``StoreError``.
    """
    async with transaction() as session:
        yield session
