"""
Handle Lifecycle Manager

Produces a usable handle for every data operation:

1. Load the stored handle
2. If present, probe it; LIVE or INDETERMINATE -> use it, EXPIRED -> clear it
3. Otherwise provision a new one, store it and use it

There is no cache beyond the store, so every call costs one probe. Concurrent
callers that all need a new handle share a single in-flight provisioning.
"""

import asyncio
import logging
from typing import Optional

from ..models import HandleInfo, ProbeResult, is_valid_handle
from ..protocols import (
    HandleProvisionerProtocol,
    HandleStoreProtocol,
    HandleValidatorProtocol,
    InvalidHandleError,
    ProvisionError,
    UnavailableError,
)
from .store import DEFAULT_STORAGE_KEY

logger = logging.getLogger(__name__)


class HandleLifecycleManager:
    """Orchestrates store, validator and provisioner"""

    def __init__(
        self,
        store: HandleStoreProtocol,
        validator: HandleValidatorProtocol,
        provisioner: HandleProvisionerProtocol,
    ):
        self.store = store
        self.validator = validator
        self.provisioner = provisioner
        self._provisioning: Optional[asyncio.Task] = None

    async def get_handle(self) -> str:
        """
        Return a handle believed to be usable.

        Raises:
            UnavailableError: Provisioning was needed and failed
        """
        stored = self.store.load()

        if stored and not is_valid_handle(stored):
            logger.warning(f"Discarding malformed stored resource id: {stored!r}")
            self.store.clear()
            stored = None

        if stored:
            logger.debug(f"Testing stored resource id: {stored}")
            result = await self.validator.probe(stored)
            if result.usable:
                return stored

            logger.warning(f"Stored resource id is expired: {stored}")
            self.invalidate(stored)
        else:
            logger.info("No resource id in storage, fetching new one...")

        return await self._provision_shared()

    async def initialize(self) -> str:
        """Validate or acquire a handle ahead of the first data operation"""
        return await self.get_handle()

    async def _provision_shared(self) -> str:
        task = self._provisioning
        if task is None:
            task = asyncio.create_task(self._provision())
            task.add_done_callback(self._provisioning_done)
            self._provisioning = task
        else:
            logger.debug("Joining in-flight resource id provisioning")
        # Shielded so one cancelled caller does not cancel the others
        return await asyncio.shield(task)

    def _provisioning_done(self, task: asyncio.Task) -> None:
        if self._provisioning is task:
            self._provisioning = None
        # Mark the exception retrieved even if every awaiting caller was cancelled
        if not task.cancelled():
            task.exception()

    async def _provision(self) -> str:
        try:
            handle = await self.provisioner.provision()
            self.store.save(handle)
        except (ProvisionError, InvalidHandleError) as e:
            logger.error(f"Failed to obtain a new CrudCrud resource id: {e}")
            raise UnavailableError(
                "Failed to obtain a new CrudCrud resource id. "
                "Please check your internet connection and try again."
            ) from e
        return handle

    # ====================
    # Administrative interface
    # ====================

    def invalidate(self, handle: Optional[str] = None) -> None:
        """
        Clear the stored handle.

        Args:
            handle: Only clear if this is still the stored handle, so a
                handle provisioned by a concurrent operation survives
        """
        if handle is not None and self.store.load() != handle:
            logger.debug(f"Resource id {handle} already replaced; not clearing")
            return
        self.store.clear()

    def override(self, handle: str) -> None:
        """Manually set the handle; raises InvalidHandleError on a bad format"""
        handle = (handle or "").strip()
        self.store.save(handle)
        logger.info(f"Resource id updated manually: {handle}")

    def info(self) -> Optional[HandleInfo]:
        """Stored handle without a network round trip"""
        handle = self.store.load()
        if not handle:
            return None
        return HandleInfo(
            handle=handle,
            storage_key=getattr(self.store, "key", DEFAULT_STORAGE_KEY),
        )

    async def test(self, handle: Optional[str] = None) -> ProbeResult:
        """Probe a handle (the stored one by default)"""
        if handle is None:
            handle = self.store.load()
        if not handle:
            raise InvalidHandleError("No resource id to test")
        return await self.validator.probe(handle)

    async def refresh(self) -> str:
        """Discard the stored handle and provision a fresh one"""
        self.store.clear()
        return await self._provision_shared()


__all__ = ["HandleLifecycleManager"]
