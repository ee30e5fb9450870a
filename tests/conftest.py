"""
Portfolio Test Configuration and Fixtures
Shared pytest fixtures for all test modules.
"""
import os
import tempfile
from typing import Any, AsyncGenerator
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from portfolio.core.config import Settings
from portfolio.database import SqlSubmissionStore, build_async_engine, build_session_factory, init_db
from portfolio.main import create_app
from portfolio.services.container import Services
from portfolio.services.email import ContactEmailRenderer


ALLOWED_ORIGIN = "https://portfolio.example.com"


# =============================================================================
# Settings Fixtures
# =============================================================================


@pytest.fixture
def test_settings() -> Settings:
    """Settings isolated from the process environment and any .env file."""
    return Settings(
        _env_file=None,
        environment="test",
        cors_origins=f"{ALLOWED_ORIGIN},http://127.0.0.1:5500",
        from_email="noreply@portfolio.example.com",
        from_name="Portfolio Owner",
        admin_email="owner@portfolio.example.com",
        sendgrid_api_key="SG.test_key",
        anthropic_api_key="sk-ant-test",
    )


@pytest.fixture
def sample_contact_data() -> dict[str, Any]:
    """Sample contact form payload."""
    return {
        "name": "Jane Doe",
        "email": "jane@example.com",
        "message": "I'd like to talk about a project.",
    }


# =============================================================================
# Collaborator Fixtures
# =============================================================================


@pytest.fixture
def mock_store():
    """Submission store double."""
    store = MagicMock()
    store.save = AsyncMock(return_value=None)
    store.ping = AsyncMock(return_value={"status": "healthy", "database": "connected"})
    return store


@pytest.fixture
def mock_transport():
    """Mail transport double."""
    transport = MagicMock()
    transport.send = AsyncMock(return_value=None)
    transport.is_configured.return_value = True
    return transport


@pytest.fixture
def mock_generator():
    """Text generator double returning a well-formed result."""
    generator = MagicMock()
    generator.generate = AsyncMock(return_value={"text": "Hello!"})
    generator.is_configured.return_value = True
    return generator


@pytest.fixture
def renderer(test_settings) -> ContactEmailRenderer:
    return ContactEmailRenderer(test_settings)


@pytest.fixture
def services(mock_store, mock_transport, mock_generator, renderer) -> Services:
    return Services(
        store=mock_store,
        transport=mock_transport,
        generator=mock_generator,
        renderer=renderer,
    )


# =============================================================================
# Database Fixtures
# =============================================================================


@pytest_asyncio.fixture
async def async_engine():
    """Create an async SQLite engine for testing."""
    # Use a unique temp file for each test to ensure complete isolation
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    engine = build_async_engine(f"sqlite+aiosqlite:///{db_path}")
    await init_db(engine)

    yield engine

    await engine.dispose()

    try:
        os.unlink(db_path)
    except OSError:
        pass


@pytest.fixture
def session_factory(async_engine):
    return build_session_factory(async_engine)


@pytest.fixture
def sql_store(session_factory) -> SqlSubmissionStore:
    return SqlSubmissionStore(session_factory)


# =============================================================================
# HTTP Client Fixtures
# =============================================================================


@pytest.fixture
def app(test_settings, services):
    """Application wired to the collaborator doubles."""
    return create_app(settings=test_settings, services=services)


@pytest_asyncio.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client bound to the test application."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
