"""Test fixtures for ticketing-auth integration tests."""

import os
import tempfile
import uuid

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from ticketing_auth import TicketingAuth, install_error_handlers

# Defaults to a temp SQLite file for the test session.
# Set DATABASE_URL to a postgresql+asyncpg:// URL to run against PostgreSQL.
_raw_url = os.environ.get("DATABASE_URL", "sqlite")

_sqlite_tmp = None
if _raw_url.startswith("sqlite"):
    _sqlite_tmp = tempfile.NamedTemporaryFile(suffix=".db", delete=False)
    _sqlite_tmp.close()
    TEST_DATABASE_URL = f"sqlite+aiosqlite:///{_sqlite_tmp.name}"
else:
    TEST_DATABASE_URL = _raw_url


@pytest.fixture(scope="session", autouse=True)
def _cleanup_sqlite():
    """Delete the temp SQLite file after all tests finish."""
    yield
    if _sqlite_tmp is not None and os.path.exists(_sqlite_tmp.name):
        os.remove(_sqlite_tmp.name)


def _build_app(auth: TicketingAuth) -> FastAPI:
    app = FastAPI()
    app.include_router(auth.fastapi_router(), prefix="/api/users")
    install_error_handlers(app)
    return app


@pytest_asyncio.fixture
async def auth():
    """Create a TicketingAuth instance for testing."""
    instance = TicketingAuth(database_url=TEST_DATABASE_URL)
    await instance.migrate()
    yield instance
    await instance.dispose()


@pytest_asyncio.fixture
async def client(auth: TicketingAuth):
    """Async HTTP client for testing against the FastAPI app."""
    async with AsyncClient(
        transport=ASGITransport(app=_build_app(auth)),
        base_url="http://test",
    ) as client:
        yield client


@pytest_asyncio.fixture
async def auth_no_signup():
    """TicketingAuth instance with signup disabled."""
    instance = TicketingAuth(database_url=TEST_DATABASE_URL, allow_signup=False)
    await instance.migrate()
    yield instance
    await instance.dispose()


@pytest_asyncio.fixture
async def client_no_signup(auth_no_signup: TicketingAuth):
    """HTTP client for testing with signup disabled."""
    async with AsyncClient(
        transport=ASGITransport(app=_build_app(auth_no_signup)),
        base_url="http://test",
    ) as client:
        yield client


def unique_email() -> str:
    """Generate a unique email for each test to avoid conflicts."""
    return f"test-{uuid.uuid4().hex[:8]}@example.com"
