"""
Campaign Service Factory

Factory for creating campaign service instances with proper dependency injection.
"""

import logging
from typing import Optional

import httpx

from core.config import BackingStoreConfig
from core.http_client_base import build_default_headers

from .campaign_service import CampaignService
from .clients.crud_store_client import CrudStoreClient
from .clients.discovery_client import DiscoveryClient
from .gateway import DataOperationGateway
from .handles.manager import HandleLifecycleManager
from .handles.provisioner import HtmlDiscoveryProvisioner, build_extraction_patterns
from .handles.store import FileHandleStore
from .handles.validator import HandleValidator
from .protocols import HandleProvisionerProtocol, HandleStoreProtocol

logger = logging.getLogger(__name__)


class CampaignServiceFactory:
    """Factory for creating campaign service components"""

    def __init__(
        self,
        config: Optional[BackingStoreConfig] = None,
        store: Optional[HandleStoreProtocol] = None,
        provisioner: Optional[HandleProvisionerProtocol] = None,
    ):
        self.config = config or BackingStoreConfig.from_env()
        self._store_override = store
        self._provisioner_override = provisioner
        self._http_client: Optional[httpx.AsyncClient] = None
        self._crud_client: Optional[CrudStoreClient] = None
        self._discovery_client: Optional[DiscoveryClient] = None
        self._manager: Optional[HandleLifecycleManager] = None
        self._gateway: Optional[DataOperationGateway] = None
        self._service: Optional[CampaignService] = None

    async def initialize(self) -> None:
        """Initialize all components"""
        logger.info("Initializing Campaign Service components...")

        # One connection pool shared by both endpoints
        self._http_client = httpx.AsyncClient(
            timeout=self.config.request_timeout,
            headers=build_default_headers(),
        )
        self._crud_client = CrudStoreClient(self.config, client=self._http_client)
        self._discovery_client = DiscoveryClient(self.config, client=self._http_client)

        validator = HandleValidator(self._crud_client, self.config.expired_statuses)
        provisioner = self._provisioner_override or HtmlDiscoveryProvisioner(
            self._discovery_client,
            patterns=build_extraction_patterns(self.config.provider_host),
        )
        store = self._store_override or FileHandleStore(
            self.config.handle_store_path or None,
            key=self.config.handle_storage_key,
        )

        self._manager = HandleLifecycleManager(store, validator, provisioner)
        self._gateway = DataOperationGateway(
            self._manager, self._crud_client, validator, config=self.config
        )
        self._service = CampaignService(self._gateway)

        logger.info("Campaign Service components initialized")

    async def close(self) -> None:
        """Close all components"""
        logger.info("Closing Campaign Service components...")

        if self._http_client:
            await self._http_client.aclose()
            self._http_client = None

        logger.info("Campaign Service components closed")

    @property
    def manager(self) -> HandleLifecycleManager:
        """Get handle lifecycle manager"""
        if not self._manager:
            raise RuntimeError("Factory not initialized. Call initialize() first.")
        return self._manager

    @property
    def gateway(self) -> DataOperationGateway:
        """Get data operation gateway"""
        if not self._gateway:
            raise RuntimeError("Factory not initialized. Call initialize() first.")
        return self._gateway

    @property
    def service(self) -> CampaignService:
        """Get campaign service"""
        if not self._service:
            raise RuntimeError("Factory not initialized. Call initialize() first.")
        return self._service

    @property
    def crud_client(self) -> CrudStoreClient:
        """Get backing store client"""
        if not self._crud_client:
            raise RuntimeError("Factory not initialized. Call initialize() first.")
        return self._crud_client


# Global factory instance
_factory: Optional[CampaignServiceFactory] = None


async def get_factory() -> CampaignServiceFactory:
    """Get or create factory instance"""
    global _factory
    if _factory is None:
        _factory = CampaignServiceFactory()
        await _factory.initialize()
    return _factory


async def close_factory() -> None:
    """Close factory instance"""
    global _factory
    if _factory:
        await _factory.close()
        _factory = None


__all__ = [
    "CampaignServiceFactory",
    "get_factory",
    "close_factory",
]
