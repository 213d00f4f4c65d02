"""
Discovery Client

Fetches the CrudCrud homepage, which embeds a freshly generated resource id.
"""

import logging
from typing import Optional

import httpx

from core.config import BackingStoreConfig
from core.http_client_base import BaseHttpClient

from ..protocols import ProvisionError

logger = logging.getLogger(__name__)


class DiscoveryClient(BaseHttpClient):
    """Client for the discovery endpoint"""

    client_name = "discovery"

    def __init__(
        self,
        config: Optional[BackingStoreConfig] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        if config is None:
            config = BackingStoreConfig.from_env()

        super().__init__(
            base_url=config.discovery_url,
            timeout=config.request_timeout,
            client=client,
        )

    async def fetch_document(self) -> str:
        """
        Get the discovery page body.

        Returns:
            HTML document text

        Raises:
            ProvisionError: Non-2xx response
            httpx.HTTPError: Transport failure
        """
        response = await self.get("/", headers={"Accept": "text/html"})

        if not response.is_success:
            raise ProvisionError(
                f"Discovery endpoint returned {response.status_code}"
            )

        return response.text


__all__ = ["DiscoveryClient"]
