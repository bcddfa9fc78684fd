"""
Shared pytest fixtures for storefront tests.
"""
import asyncio
import os
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from storefront.core.config import reset_settings
from storefront.domain.repositories.user_store import UserStore
from storefront.infrastructure.db.in_memory_user_store import InMemoryUserStore


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "MONGO_URI": "mongodb://localhost:27017",
        "MONGO_DB_NAME": "test_community_store",
        "STORAGE_BACKEND": "memory",
        "ORDER_HISTORY_LIMIT": "100",
        "LOG_LEVEL": "DEBUG",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        reset_settings()
        yield env_vars
    reset_settings()


@pytest.fixture
def mock_settings():
    """Fixture providing a settings object for code that takes settings explicitly."""
    mock = MagicMock()
    mock.mongo_uri = "mongodb://localhost:27017"
    mock.mongo_database_name = "test_db"
    mock.mongo_connect_timeout_ms = 100
    mock.storage_backend = "auto"
    mock.order_history_limit = 100
    return mock


@pytest.fixture
def memory_store():
    """Fresh in-memory user store."""
    return InMemoryUserStore()


class YieldingUserStore(InMemoryUserStore):
    """In-memory store that hands control back to the event loop around reads and writes."""

    async def find_user_by_id(self, user_id):
        await asyncio.sleep(0)
        user = await super().find_user_by_id(user_id)
        await asyncio.sleep(0)
        return user

    async def update_user(self, user_id, user):
        await asyncio.sleep(0)
        return await super().update_user(user_id, user)


@pytest.fixture
def yielding_store():
    """In-memory store on which unlocked read-modify-write sequences interleave."""
    return YieldingUserStore()


@pytest.fixture
def mock_user_store():
    """Mock UserStore with async methods."""
    return AsyncMock(spec=UserStore)


@pytest.fixture
def app_client(mock_env):
    """TestClient running the full app lifespan on the in-memory backend."""
    from fastapi.testclient import TestClient
    from storefront.main import app

    with TestClient(app) as client:
        yield client
