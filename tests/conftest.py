"""Shared fixtures: an in-memory SQLite store with foreign keys on and seeded lookups."""

import pytest
from sqlalchemy import event
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from cleanups.config.settings import AppSettings
from cleanups.container import build_services
from cleanups.infrastructure.database.models import create_all, seed_lookups
from cleanups.infrastructure.database.session import build_session_factory


@pytest.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    @event.listens_for(engine.sync_engine, "connect")
    def _enable_foreign_keys(dbapi_connection, _connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    await create_all(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
async def session_factory(engine):
    factory = build_session_factory(engine)
    async with factory() as session:
        await seed_lookups(session)
    return factory


@pytest.fixture
async def session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def settings():
    return AppSettings(
        environment="test",
        database_url="sqlite+aiosqlite:///:memory:",
        soft_delete_retention_days=30,
        password_reset_token_ttl_minutes=60,
    )


@pytest.fixture
def services(session, settings):
    return build_services(session, settings)


