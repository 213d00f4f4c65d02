"""
Handle Validator

One live probe per call: a read of the configured collection inside the
handle's bucket. Only the configured expired statuses mark a handle as
expired; anything else that is not a success is indeterminate and the
handle stays in use.
"""

import logging
from typing import FrozenSet, Iterable, Optional

import httpx

from core.config import DEFAULT_EXPIRED_STATUSES

from ..clients.crud_store_client import CrudStoreClient
from ..models import ProbeResult

logger = logging.getLogger(__name__)


def classify_status(
    status_code: int,
    expired_statuses: Iterable[int] = DEFAULT_EXPIRED_STATUSES,
) -> ProbeResult:
    """
    Map an HTTP status to a probe result.

    Args:
        status_code: Response status
        expired_statuses: Statuses meaning the bucket is gone

    Returns:
        LIVE for 2xx, EXPIRED for an expired status, INDETERMINATE otherwise
    """
    if 200 <= status_code < 300:
        return ProbeResult.LIVE
    if status_code in expired_statuses:
        return ProbeResult.EXPIRED
    return ProbeResult.INDETERMINATE


class HandleValidator:
    """Probes a handle against the backing store"""

    def __init__(
        self,
        crud_client: CrudStoreClient,
        expired_statuses: Optional[FrozenSet[int]] = None,
    ):
        self.crud_client = crud_client
        self.expired_statuses = (
            frozenset(expired_statuses) if expired_statuses is not None
            else DEFAULT_EXPIRED_STATUSES
        )

    async def probe(self, handle: str) -> ProbeResult:
        """
        Probe a handle once, no retries.

        Args:
            handle: Candidate handle

        Returns:
            ProbeResult; transport failures are INDETERMINATE
        """
        try:
            response = await self.crud_client.send("GET", handle)
        except httpx.HTTPError as e:
            logger.warning(
                f"Network error when testing resource id {handle}: {e!r}; "
                f"keeping it in use"
            )
            return ProbeResult.INDETERMINATE

        result = classify_status(response.status_code, self.expired_statuses)

        if result is ProbeResult.LIVE:
            logger.debug(f"Resource id {handle} is valid")
        elif result is ProbeResult.EXPIRED:
            logger.warning(
                f"Resource id {handle} is expired or invalid (status: {response.status_code})"
            )
        else:
            logger.warning(
                f"Unexpected status {response.status_code} when testing resource id "
                f"{handle}; assuming valid"
            )
        return result


__all__ = ["HandleValidator", "classify_status"]
