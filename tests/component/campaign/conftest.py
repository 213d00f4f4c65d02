"""
Component Test Fixtures for Campaign Service

Wires the real handle lifecycle, gateway and campaign service on top of a
mocked HTTP client and an in-memory handle store.
"""

import pytest

from core.config import BackingStoreConfig
from campaign_service.campaign_service import CampaignService
from campaign_service.clients import CrudStoreClient, DiscoveryClient
from campaign_service.gateway import DataOperationGateway
from campaign_service.handles import (
    HandleLifecycleManager,
    HandleValidator,
    HtmlDiscoveryProvisioner,
    MemoryHandleStore,
)
from tests.component.mocks import API_ROOT, DISCOVERY_URL


# ====================
# Configuration
# ====================


@pytest.fixture
def store_config() -> BackingStoreConfig:
    """Backing store config with durable storage disabled"""
    return BackingStoreConfig(
        provider_root=API_ROOT,
        discovery_url=DISCOVERY_URL,
        handle_store_path="",
    )


# ====================
# Components
# ====================


@pytest.fixture
def crud_client(mock_http, store_config) -> CrudStoreClient:
    return CrudStoreClient(store_config, client=mock_http)


@pytest.fixture
def discovery_client(mock_http, store_config) -> DiscoveryClient:
    return DiscoveryClient(store_config, client=mock_http)


@pytest.fixture
def validator(crud_client, store_config) -> HandleValidator:
    return HandleValidator(crud_client, store_config.expired_statuses)


@pytest.fixture
def provisioner(discovery_client) -> HtmlDiscoveryProvisioner:
    return HtmlDiscoveryProvisioner(discovery_client)


@pytest.fixture
def memory_store() -> MemoryHandleStore:
    return MemoryHandleStore()


@pytest.fixture
def manager(memory_store, validator, provisioner) -> HandleLifecycleManager:
    return HandleLifecycleManager(memory_store, validator, provisioner)


@pytest.fixture
def gateway(manager, crud_client, validator, store_config) -> DataOperationGateway:
    return DataOperationGateway(manager, crud_client, validator, config=store_config)


@pytest.fixture
def service(gateway) -> CampaignService:
    return CampaignService(gateway)
