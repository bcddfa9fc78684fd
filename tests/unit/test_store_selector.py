"""
Unit tests for storefront.infrastructure.db.store_selector
"""
from unittest.mock import AsyncMock, patch

import pytest
from storefront.infrastructure.db.in_memory_user_store import InMemoryUserStore
from storefront.infrastructure.db.store_selector import select_user_store


class TestSelectUserStore:
    """Tests for select_user_store"""

    @pytest.mark.asyncio
    async def test_memory_never_pings(self, mock_settings):
        mock_settings.storage_backend = "memory"
        with patch(
            "storefront.infrastructure.db.store_selector.ping_database", new=AsyncMock()
        ) as ping:
            store = await select_user_store(mock_settings)
        assert isinstance(store, InMemoryUserStore)
        ping.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_auto_uses_mongodb_when_reachable(self, mock_settings):
        mongo_store = AsyncMock()
        mongo_store.name = "mongodb"
        with patch(
            "storefront.infrastructure.db.store_selector.ping_database",
            new=AsyncMock(return_value=True),
        ), patch(
            "storefront.infrastructure.db.store_selector.MongoUserStore",
            return_value=mongo_store,
        ):
            store = await select_user_store(mock_settings)
        assert store is mongo_store
        mongo_store.ensure_indexes.assert_awaited_once()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("backend", ["auto", "mongodb"])
    async def test_falls_back_to_memory(self, mock_settings, backend):
        mock_settings.storage_backend = backend
        with patch(
            "storefront.infrastructure.db.store_selector.ping_database",
            new=AsyncMock(return_value=False),
        ):
            store = await select_user_store(mock_settings)
        assert isinstance(store, InMemoryUserStore)
        assert store.name == "memory"
