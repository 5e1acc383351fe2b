"""
Pytest configuration and fixtures.
Provides test app client, async DB session replacement and signed-in callers.
"""

import os

# Settings are read at import time, so the test environment goes in first
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")
os.environ.setdefault("OIDC_SIGNING_KEY", "test-identity-signing-key")
os.environ.setdefault("OIDC_CLIENT_ID", "portal-test")
os.environ.setdefault("OIDC_ISSUER", "https://id.example.test")
os.environ.setdefault("ADMIN_EMAILS", '["owner@example.com"]')

import secrets
from datetime import datetime, timedelta

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import StaticPool

import app.models  # noqa: F401  registers tables on Base.metadata
from app.core.security import create_access_token
from app.db.base import Base
from app.db.session import get_db
from app.db.storage import Storage
from app.main import app
from app.models import UserRole


# Test database URL (in-memory SQLite for testing)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

# Storage operations watched by the spy fixture
STORAGE_OPERATIONS = [
    "get_session",
    "get_user",
    "upsert_user",
    "get_clients",
    "get_client",
    "get_client_by_user_id",
    "find_or_create_client_for_user",
    "create_client",
    "get_contact_forms",
    "create_contact_form",
    "update_contact_form_status",
    "get_all_messages",
    "get_messages_by_client_id",
    "create_message",
    "get_all_documents",
    "get_documents_by_client_id",
    "get_admin_stats",
]


@pytest.fixture(scope="function")
async def test_db_session():
    """
    Create a test database session.
    Uses in-memory SQLite for fast tests.
    """
    test_engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    test_session_maker = async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with test_session_maker() as session:
        yield session

    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await test_engine.dispose()


@pytest.fixture(scope="function")
async def storage(test_db_session):
    return Storage(test_db_session)


@pytest.fixture(scope="function")
async def test_client(test_db_session):
    """
    Create a test HTTP client bound to the test database session.
    """
    async def override_get_db():
        yield test_db_session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
def make_headers(storage):
    """Open a session for a user and return the bearer header for it."""
    async def _make_headers(user_id: str, ttl: timedelta = timedelta(hours=1)) -> dict:
        sid = secrets.token_urlsafe(16)
        await storage.create_session(sid, {"user_id": user_id}, datetime.utcnow() + ttl)
        token = create_access_token({"sub": user_id, "sid": sid})
        return {"Authorization": f"Bearer {token}"}

    return _make_headers


@pytest.fixture
async def admin_user(storage):
    return await storage.upsert_user({
        "id": "admin-1",
        "email": "owner@example.com",
        "first_name": "Ada",
        "last_name": "Admin",
        "role": UserRole.ADMIN,
    })


@pytest.fixture
async def client_user(storage):
    return await storage.upsert_user({
        "id": "u1",
        "email": "jane@x.com",
        "first_name": "Jane",
        "last_name": "Doe",
        "role": UserRole.CLIENT,
    })


@pytest.fixture
async def admin_headers(admin_user, make_headers):
    return await make_headers(admin_user.id)


@pytest.fixture
async def client_headers(client_user, make_headers):
    return await make_headers(client_user.id)


@pytest.fixture
def storage_calls(monkeypatch):
    """
    Record every Storage operation made while the test runs.
    Calls go through to the real implementation.
    """
    calls = []

    def make_spy(name, original):
        async def spy(self, *args, **kwargs):
            calls.append(name)
            return await original(self, *args, **kwargs)
        return spy

    for name in STORAGE_OPERATIONS:
        monkeypatch.setattr(Storage, name, make_spy(name, getattr(Storage, name)))

    return calls
