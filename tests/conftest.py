"""Shared fixtures: a throwaway SQLite file per test, seeded with a small catalog."""

import asyncio

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from cafe_pos.config import settings
from cafe_pos.db.session import configure_sqlite, get_async_session, init_models
from cafe_pos.main import create_app
from cafe_pos.models import MenuItem

CATALOG = [
    dict(id="latte", name="Latte", unit="cup", category="coffee", price_here=500, price_away=450),
    dict(id="espresso", name="Espresso", unit="cup", category="coffee", price_here=300, price_away=250),
    dict(id="croissant", name="Croissant", unit="pc", category="bakery", price_here=350, price_away=350),
]


def _make_engine(path):
    # NullPool: every connection is opened inside the loop that uses it
    engine = create_async_engine(f"sqlite+aiosqlite:///{path}", poolclass=NullPool)
    configure_sqlite(engine)
    return engine


async def _prepare(engine) -> async_sessionmaker:
    await init_models(engine)
    session_factory = async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)
    async with session_factory() as session:
        session.add_all([MenuItem(**row) for row in CATALOG])
        await session.commit()
    return session_factory


@pytest_asyncio.fixture
async def session_factory(tmp_path):
    engine = _make_engine(tmp_path / "cafe_pos.sqlite")
    yield await _prepare(engine)
    await engine.dispose()


@pytest_asyncio.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def admin_headers():
    return {"Authorization": f"Bearer {settings.ADMIN_PASS}"}


@pytest.fixture
def client(tmp_path):
    factory = asyncio.run(_prepare(_make_engine(tmp_path / "api.sqlite")))

    async def override_session():
        async with factory() as session:
            yield session

    app = create_app()
    app.dependency_overrides[get_async_session] = override_session
    return TestClient(app)
