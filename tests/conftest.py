# =============================================================================
# SUPPLIER MINIMAL API - TEST CONFIGURATION
# =============================================================================
# File: tests/conftest.py
# Description: Pytest fixtures for testing with in-memory SQLite
# =============================================================================

import os

# Settings are read once at import time; configure them before the app loads
os.environ["APP_ENV"] = "development"
os.environ["DB_TYPE"] = "sqlite"
os.environ["SQLITE_PATH"] = ":memory:"
os.environ["JWT_SECRET_KEY"] = "test-secret-key-for-the-supplier-api-suite-0123456789"
os.environ["ARGON2_MEMORY_COST"] = "1024"
os.environ["ARGON2_TIME_COST"] = "1"
os.environ["ARGON2_PARALLELISM"] = "1"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["LOG_LEVEL"] = "WARNING"

from typing import AsyncGenerator, Dict
import uuid

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession

from auth.dependencies import REMOVE_SUPPLIER_CLAIM
from core.security import jwt_manager
from db.adapters.sqlite_adapter import SQLiteAdapter
from db.factory import DBFactory, get_db_session
from main import app


# =============================================================================
# DATABASE FIXTURES
# =============================================================================

@pytest_asyncio.fixture
async def db_adapter() -> AsyncGenerator[SQLiteAdapter, None]:
    """
    Create in-memory SQLite adapter for testing.

    Yields fresh database for each test.
    """
    adapter = SQLiteAdapter.create_for_testing()
    await adapter.connect()
    await adapter.create_tables()
    DBFactory.set_db_adapter(adapter)

    yield adapter

    await adapter.disconnect()
    DBFactory.reset()


@pytest_asyncio.fixture
async def db_session(db_adapter: SQLiteAdapter) -> AsyncGenerator[AsyncSession, None]:
    """Session on the test database, committed on exit."""
    async with db_adapter.get_session() as session:
        yield session


# =============================================================================
# APPLICATION FIXTURES
# =============================================================================

@pytest_asyncio.fixture
async def async_client(db_adapter: SQLiteAdapter) -> AsyncGenerator[AsyncClient, None]:
    """
    Async client bound to the ASGI app, with request sessions drawn from
    the in-memory test database.
    """
    async def override_get_db_session() -> AsyncGenerator[AsyncSession, None]:
        async with db_adapter.get_session() as session:
            yield session

    app.dependency_overrides[get_db_session] = override_get_db_session

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


# =============================================================================
# USER FIXTURES
# =============================================================================

@pytest.fixture
def user_data() -> Dict[str, str]:
    """Registration payload with a unique e-mail."""
    return {
        "email": f"user_{uuid.uuid4().hex[:8]}@example.com",
        "password": "SecurePass123!",
        "confirmPassword": "SecurePass123!",
    }


@pytest.fixture
def supplier_data() -> Dict[str, object]:
    return {
        "name": "ACME Industrial Ltda",
        "document": "12345678000199",
        "isActive": True,
    }


# =============================================================================
# TOKEN FIXTURES
# =============================================================================

@pytest.fixture
def auth_headers() -> Dict[str, str]:
    """Bearer header for an authenticated caller without claims."""
    token = jwt_manager.create_access_token(
        user_id=str(uuid.uuid4()),
        email="reader@example.com",
    )
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def remover_headers() -> Dict[str, str]:
    """Bearer header for a caller holding the RemoveSupplier claim."""
    token = jwt_manager.create_access_token(
        user_id=str(uuid.uuid4()),
        email="remover@example.com",
        claims={REMOVE_SUPPLIER_CLAIM: [""]},
    )
    return {"Authorization": f"Bearer {token}"}
