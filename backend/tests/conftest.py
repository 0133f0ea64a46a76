"""
NoteKeeper Backend — Test Configuration (conftest.py)
======================================================

Fixture Hierarchy (all function-scoped):
    ├── test_settings: Settings with a known secret and an empty store
    ├── fixed_now: A fixed, timezone-aware "current time"
    ├── note_store / note_service / auth_service: Unit-level objects
    ├── app: A fresh FastAPI app per test (isolated note store)
    ├── test_client: HTTPX AsyncClient talking to that app over ASGI
    └── auth_headers: `Authorization: Bearer ...` for the admin user
"""

import os
from datetime import datetime, timezone

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

# Keep the module-level app (built on import of notekeeper.main) quiet
os.environ.setdefault("LOG_LEVEL", "WARNING")

from notekeeper.config import Settings
from notekeeper.main import create_app
from notekeeper.services.auth_service import AuthService
from notekeeper.services.note_service import NoteService
from notekeeper.store import NoteStore

TEST_SECRET = "test-secret-not-for-production"


class FakeClock:
    """Callable clock whose time only moves when a test says so."""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture
def fixed_now():
    return datetime(2024, 1, 15, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def clock(fixed_now):
    return FakeClock(fixed_now)


@pytest.fixture
def test_settings():
    return Settings(
        jwt_secret=TEST_SECRET,
        seed_notes=False,
        log_level="WARNING",
        cors_origins="http://localhost:3000",
    )


@pytest.fixture
def note_store():
    return NoteStore()


@pytest.fixture
def note_service(note_store, clock):
    return NoteService(note_store, clock=clock)


@pytest.fixture
def auth_service(clock):
    return AuthService(secret=TEST_SECRET, clock=clock)


@pytest.fixture
def app(test_settings):
    return create_app(test_settings)


@pytest_asyncio.fixture
async def test_client(app):
    """
    HTTPX AsyncClient routed straight into the ASGI app.

    App exceptions are not re-raised so the 500 handler can be asserted on.
    """
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def auth_headers(app):
    token = app.state.auth_service.login("admin", "password").token
    return {"Authorization": f"Bearer {token}"}
