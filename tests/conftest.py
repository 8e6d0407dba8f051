"""Shared fixtures: a fresh in-memory SQLite database per test."""

from __future__ import annotations

import time

import pytest
from httpx import ASGITransport, AsyncClient
from jose import jwt
from sqlalchemy.pool import StaticPool

import app.domain  # noqa: F401  (register models on Base.metadata)
from app.core.config import settings
from app.db.base import Base, build_engine, build_session_factory, get_db, transaction
from app.schemas.category import CategoryCreate
from app.services.category import CategoryService

TEST_JWT_SECRET = "test-secret"


@pytest.fixture
async def engine():
    engine = build_engine("sqlite+aiosqlite:///:memory:", poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return build_session_factory(engine)


@pytest.fixture
async def session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
async def categories(session):
    """Two committed categories keyed by name."""
    svc = CategoryService(session)
    luxury = await svc.create_category(CategoryCreate(name="Luxury Hotel"))
    tours = await svc.create_category(CategoryCreate(name="Tour Operator"))
    await session.commit()
    return {"Luxury Hotel": luxury, "Tour Operator": tours}


# ---------------------------------------------------------------------------
# HTTP
# ---------------------------------------------------------------------------

def make_token(sub: str = "user-1", email: str = "admin@example.com", **claims) -> str:
    payload = {
        "sub": sub,
        "email": email,
        "aud": settings.auth_jwt_audience,
        "exp": int(time.time()) + 3600,
        **claims,
    }
    return jwt.encode(payload, TEST_JWT_SECRET, algorithm="HS256")


@pytest.fixture
def auth_headers() -> dict[str, str]:
    return {"Authorization": f"Bearer {make_token()}"}


@pytest.fixture
async def client(session_factory, monkeypatch):
    from app.main import create_app

    monkeypatch.setattr(settings, "auth_jwt_secret", TEST_JWT_SECRET)

    api = create_app()

    async def _test_db():
        async with transaction(session_factory) as session:
            yield session

    api.dependency_overrides[get_db] = _test_db

    async with AsyncClient(transport=ASGITransport(app=api), base_url="http://test") as ac:
        yield ac
