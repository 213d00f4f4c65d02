"""
Component Tests for CampaignServiceFactory

Wiring only; no requests are made.
"""

import pytest

from core.config import BackingStoreConfig
from campaign_service import factory as factory_module
from campaign_service.factory import CampaignServiceFactory, close_factory, get_factory
from campaign_service.handles import FileHandleStore, MemoryHandleStore


pytestmark = pytest.mark.component


class TestCampaignServiceFactory:
    """Component wiring"""

    def test_properties_require_initialize(self):
        factory = CampaignServiceFactory(BackingStoreConfig(handle_store_path=""))

        with pytest.raises(RuntimeError):
            factory.service

    @pytest.mark.asyncio
    async def test_wiring_shares_components(self, handle):
        store = MemoryHandleStore(handle)
        factory = CampaignServiceFactory(BackingStoreConfig(handle_store_path=""), store=store)
        await factory.initialize()

        try:
            assert factory.manager.store is store
            assert factory.gateway.manager is factory.manager
            assert factory.service.gateway is factory.gateway
            assert factory.crud_client.client is factory._http_client
            assert factory.manager.info().handle == handle
        finally:
            await factory.close()

    @pytest.mark.asyncio
    async def test_default_store_without_path(self):
        factory = CampaignServiceFactory(BackingStoreConfig(handle_store_path=""))
        await factory.initialize()

        try:
            store = factory.manager.store
            assert isinstance(store, FileHandleStore)
            assert not store.available
        finally:
            await factory.close()

    @pytest.mark.asyncio
    async def test_file_store_uses_configured_key(self, tmp_path):
        config = BackingStoreConfig(
            handle_store_path=str(tmp_path / "storage.json"),
            handle_storage_key="sandbox_id",
        )
        factory = CampaignServiceFactory(config)
        await factory.initialize()

        try:
            assert factory.manager.store.key == "sandbox_id"
            assert factory.manager.store.available
        finally:
            await factory.close()


class TestGlobalFactory:
    """Module-level factory instance"""

    @pytest.mark.asyncio
    async def test_get_and_close(self):
        first = await get_factory()
        try:
            assert await get_factory() is first
        finally:
            await close_factory()

        assert factory_module._factory is None
