"""Pytest configuration and fixtures.

The blacklist table only uses portable column types, so the tests run
against an in-memory SQLite database through aiosqlite.
"""

import os
from collections.abc import AsyncGenerator
from datetime import datetime, timedelta

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

# Set test environment variables before importing app modules
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"
os.environ["DATABASE_URL"] = TEST_DATABASE_URL
os.environ["SECRET_KEY"] = "test-secret-key-" + "0" * 32
os.environ["ENVIRONMENT"] = "testing"
os.environ["TOKEN_CLEANUP_ENABLED"] = "false"

# Monday 14 October 2024, 10:00 (semester 1 of 2024-2025)
MONDAY_10AM = datetime(2024, 10, 14, 10, 0)


# --- Database Fixtures ---


@pytest_asyncio.fixture(scope="function")
async def db_engine():
    """Create an isolated in-memory database with every table."""
    from lms.adapters.outbound.persistence.models import Base

    engine = create_async_engine(
        TEST_DATABASE_URL,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def db_session(db_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create a database session for testing."""
    async_session = async_sessionmaker(
        db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session() as session:
        yield session
        await session.rollback()


# --- API Fixtures ---


@pytest.fixture
def frozen_now() -> datetime:
    """Moment used by the schedule endpoints; override per test."""
    return MONDAY_10AM


@pytest_asyncio.fixture(scope="function")
async def async_client(db_session: AsyncSession, frozen_now: datetime) -> AsyncGenerator[AsyncClient, None]:
    """Create an async test client with database and clock overrides."""
    from lms.adapters.inbound.api.deps import get_schedule_use_cases
    from lms.adapters.outbound.persistence.database import get_db
    from lms.application.use_cases.schedule_use_cases import ScheduleUseCases
    from lms.main import app

    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_schedule_use_cases] = lambda: ScheduleUseCases(clock=lambda: frozen_now)

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


# --- Auth Fixtures ---


@pytest.fixture
def access_token() -> str:
    from lms.adapters.outbound.security.auth_user_manager import UserAuthManager

    return UserAuthManager.create_access_token(
        subject="64f1c2a9e4b0a1b2c3d4e5f6",
        roles=["student"],
        expires_delta=timedelta(minutes=30),
    )


@pytest.fixture
def auth_headers(access_token: str) -> dict:
    return {"Authorization": f"Bearer {access_token}"}
