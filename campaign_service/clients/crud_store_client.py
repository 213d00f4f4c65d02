"""
CrudCrud Store Client

Client for the handle-scoped CRUD endpoint:
<provider-root>/<handle>/<collection>[/<record_id>]
"""

import logging
from typing import Any, Optional

import httpx

from core.config import BackingStoreConfig
from core.http_client_base import BaseHttpClient

logger = logging.getLogger(__name__)


class CrudStoreClient(BaseHttpClient):
    """Client for the scoped CRUD endpoint"""

    client_name = "crud_store"

    def __init__(
        self,
        config: Optional[BackingStoreConfig] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        if config is None:
            config = BackingStoreConfig.from_env()

        super().__init__(
            base_url=config.provider_root,
            timeout=config.request_timeout,
            client=client,
        )
        self.default_collection = config.collection

    def scoped_path(
        self,
        handle: str,
        collection: Optional[str] = None,
        record_id: Optional[str] = None,
    ) -> str:
        """Path of a collection, or of one record in it, inside a handle's bucket"""
        path = f"/{handle}/{collection or self.default_collection}"
        if record_id:
            path = f"{path}/{record_id}"
        return path

    async def send(
        self,
        method: str,
        handle: str,
        collection: Optional[str] = None,
        record_id: Optional[str] = None,
        payload: Optional[Any] = None,
    ) -> httpx.Response:
        """
        Issue one scoped request.

        Args:
            method: GET, POST, PUT or DELETE
            handle: Resource handle scoping the request
            collection: Collection name (defaults to the configured one)
            record_id: Record id for single-record requests
            payload: JSON body for POST/PUT

        Returns:
            Raw response; status classification is left to the caller
        """
        path = self.scoped_path(handle, collection, record_id)
        logger.debug(f"{method} {self.base_url}{path}")

        if method == "GET":
            return await self.get(path)
        if method == "POST":
            return await self.post(path, json=payload)
        if method == "PUT":
            return await self.put(path, json=payload)
        if method == "DELETE":
            return await self.delete(path)
        raise ValueError(f"Unsupported method: {method}")


__all__ = ["CrudStoreClient"]
