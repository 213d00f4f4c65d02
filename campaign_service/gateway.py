"""
Data Operation Gateway

Wraps every create/read/update/delete against the backing store with handle
management. Per operation:

    ATTEMPT_1 -> DONE
              -> expired-class failure -> invalidate -> ATTEMPT_2 -> DONE
                                                                 -> FAILED

An expired-class failure is a configured expired status (404/410 by default)
or, when enabled, a transport failure. After a transport failure the handle
is probed and only discarded if the probe confirms it expired; otherwise the
retry reuses it. A second expired-class failure is surfaced; there is never
a third attempt. Other failures surface immediately.
"""

import logging
from typing import Any, Dict, List, Optional

import httpx
from tenacity import AsyncRetrying, RetryCallState, retry_if_exception_type, stop_after_attempt

from core.config import BackingStoreConfig

from .clients.crud_store_client import CrudStoreClient
from .models import ProbeResult
from .protocols import (
    BackingStoreError,
    BadRequestError,
    ExpiredResourceError,
    HandleManagerProtocol,
    HandleValidatorProtocol,
    NetworkError,
    NotFoundError,
    ServiceUnavailableError,
    UnauthorizedError,
)

logger = logging.getLogger(__name__)


class DataOperationGateway:
    """Handle-scoped CRUD with one expiry retry"""

    MAX_ATTEMPTS = 2

    def __init__(
        self,
        manager: HandleManagerProtocol,
        crud_client: CrudStoreClient,
        validator: HandleValidatorProtocol,
        config: Optional[BackingStoreConfig] = None,
    ):
        self.manager = manager
        self.crud_client = crud_client
        self.validator = validator
        self.config = config or BackingStoreConfig.from_env()

    # ====================
    # Operations
    # ====================

    async def create(self, payload: Dict[str, Any], collection: Optional[str] = None) -> Dict[str, Any]:
        """Create a record; returns it with its store-assigned _id"""
        return await self._execute("create", "POST", collection, payload=payload)

    async def read(self, collection: Optional[str] = None) -> List[Dict[str, Any]]:
        """Read every record in the collection"""
        records = await self._execute("read", "GET", collection)
        if not records:
            return []
        if not isinstance(records, list):
            raise ServiceUnavailableError(
                "Expected a list of records from the backing store", operation="read"
            )
        return records

    async def read_one(self, record_id: str, collection: Optional[str] = None) -> Dict[str, Any]:
        """Read one record by id"""
        return await self._execute("read_one", "GET", collection, record_id=record_id)

    async def update(
        self,
        record_id: str,
        payload: Dict[str, Any],
        collection: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Replace a record; the store answers with an empty body"""
        return await self._execute("update", "PUT", collection, record_id=record_id, payload=payload)

    async def delete(self, record_id: str, collection: Optional[str] = None) -> Dict[str, Any]:
        """Delete a record; success is an empty acknowledgment"""
        return await self._execute("delete", "DELETE", collection, record_id=record_id)

    # ====================
    # Retry loop
    # ====================

    def _retryable(self) -> tuple:
        if self.config.retry_on_network_error:
            return (ExpiredResourceError, NetworkError)
        return (ExpiredResourceError,)

    def _log_retry(self, retry_state: RetryCallState) -> None:
        error = retry_state.outcome.exception()
        logger.warning(
            f"Attempt {retry_state.attempt_number} failed ({error}); "
            f"retrying once"
        )

    async def _execute(
        self,
        operation: str,
        method: str,
        collection: Optional[str] = None,
        record_id: Optional[str] = None,
        payload: Optional[Dict[str, Any]] = None,
    ) -> Any:
        retrying = AsyncRetrying(
            stop=stop_after_attempt(self.MAX_ATTEMPTS),
            retry=retry_if_exception_type(self._retryable()),
            before_sleep=self._log_retry,
            reraise=True,
        )

        async for attempt in retrying:
            with attempt:
                result = await self._attempt(
                    operation,
                    method,
                    collection,
                    record_id,
                    payload,
                    final=attempt.retry_state.attempt_number >= self.MAX_ATTEMPTS,
                )
        return result

    async def _attempt(
        self,
        operation: str,
        method: str,
        collection: Optional[str],
        record_id: Optional[str],
        payload: Optional[Dict[str, Any]],
        final: bool,
    ) -> Any:
        handle = await self.manager.get_handle()

        try:
            response = await self.crud_client.send(method, handle, collection, record_id, payload)
        except httpx.HTTPError as e:
            if self.config.retry_on_network_error and not final:
                # Only a confirmed expiry discards the handle; otherwise retry on it
                scope = await self.validator.probe(handle)
                if scope is ProbeResult.EXPIRED:
                    self.manager.invalidate(handle)
            raise NetworkError(
                f"Network error during {operation}: {e!r}", operation=operation
            ) from e

        status_code = response.status_code

        if response.is_success:
            return self._parse(response, operation, method)

        if status_code in self.config.expired_statuses:
            if record_id and self.config.disambiguate_not_found:
                scope = await self.validator.probe(handle)
                if scope.usable:
                    raise NotFoundError(
                        f"Record {record_id} not found", operation=operation, status_code=status_code
                    )
            self.manager.invalidate(handle)
            raise ExpiredResourceError(
                f"Resource id {handle} has expired (status: {status_code})",
                operation=operation,
                status_code=status_code,
            )

        raise self._error_for_status(response, operation)

    @staticmethod
    def _parse(response: httpx.Response, operation: str, method: str) -> Any:
        if method == "DELETE" or response.status_code == 204 or not response.content:
            return {}
        try:
            return response.json()
        except ValueError as e:
            raise ServiceUnavailableError(
                f"Malformed response from backing store during {operation}",
                operation=operation,
                status_code=response.status_code,
            ) from e

    @staticmethod
    def _error_for_status(response: httpx.Response, operation: str) -> BackingStoreError:
        status_code = response.status_code
        message = f"API request failed: {status_code} - {response.text}"

        if status_code in (401, 403):
            error_cls = UnauthorizedError
        elif status_code == 429 or status_code >= 500:
            error_cls = ServiceUnavailableError
        elif 400 <= status_code < 500:
            error_cls = BadRequestError
        else:
            error_cls = BackingStoreError

        logger.error(f"{operation} failed: {message}")
        return error_cls(message, operation=operation, status_code=status_code)


__all__ = ["DataOperationGateway"]
