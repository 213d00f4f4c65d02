"""
Base HTTP Client for the CrudCrud backing store

Thin wrapper over httpx.AsyncClient shared by the discovery and scoped CRUD
clients. Several clients can share one AsyncClient; only a client that
created its own AsyncClient closes it.
"""

import httpx
import logging
from typing import Optional, Dict, Any
from abc import ABC

logger = logging.getLogger(__name__)

USER_AGENT = "jamloop-campaigns/1.0"


def build_default_headers() -> Dict[str, str]:
    """
    Default request headers for the backing store.

    Returns:
        Headers dict
    """
    return {
        "Content-Type": "application/json",
        "Accept": "application/json",
        "User-Agent": USER_AGENT,
    }


class BaseHttpClient(ABC):
    """
    Backing store client base.

    Handles:
    1. Base URL normalisation
    2. Default headers
    3. HTTP client ownership
    4. Timeout control

    Example:
        class DiscoveryClient(BaseHttpClient):
            client_name = "discovery"

            async def fetch_document(self) -> str:
                response = await self.get("/")
                return response.text
    """

    # Subclasses set this
    client_name: str = None

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize the client

        Args:
            base_url: Base URL every path is appended to
            timeout: Request timeout in seconds (ignored for a shared client)
            client: Shared AsyncClient; a private one is created if omitted
        """
        if not self.client_name:
            raise ValueError(f"{self.__class__.__name__} must define 'client_name'")

        self.base_url = base_url.rstrip('/')
        self.timeout = timeout

        if client is None:
            self.client = httpx.AsyncClient(
                timeout=timeout,
                headers=build_default_headers(),
            )
            self._owns_client = True
        else:
            self.client = client
            self._owns_client = False

        logger.debug(
            f"Initialized {self.client_name} client: {self.base_url} "
            f"(shared_client={'no' if self._owns_client else 'yes'})"
        )

    async def close(self):
        """Close the HTTP client if this instance created it"""
        if self._owns_client:
            await self.client.aclose()
            logger.debug(f"Closed {self.client_name} client")

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    # ========================================
    # HTTP verbs
    # ========================================

    async def get(
        self,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None
    ) -> httpx.Response:
        """GET request"""
        url = f"{self.base_url}{path}"
        return await self.client.get(url, params=params, headers=headers)

    async def post(
        self,
        path: str,
        json: Optional[Any] = None,
        headers: Optional[Dict[str, str]] = None
    ) -> httpx.Response:
        """POST request"""
        url = f"{self.base_url}{path}"
        return await self.client.post(url, json=json, headers=headers)

    async def put(
        self,
        path: str,
        json: Optional[Any] = None,
        headers: Optional[Dict[str, str]] = None
    ) -> httpx.Response:
        """PUT request"""
        url = f"{self.base_url}{path}"
        return await self.client.put(url, json=json, headers=headers)

    async def delete(
        self,
        path: str,
        headers: Optional[Dict[str, str]] = None
    ) -> httpx.Response:
        """DELETE request"""
        url = f"{self.base_url}{path}"
        return await self.client.delete(url, headers=headers)


__all__ = ["BaseHttpClient", "build_default_headers", "USER_AGENT"]
