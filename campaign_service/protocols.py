"""
Campaign Service Protocols

Defines interfaces for dependency injection and testing.
Following the protocol-based architecture pattern.
"""

from typing import Optional, Protocol

from .models import HandleInfo, ProbeResult


# ====================
# Handle Lifecycle Protocols
# ====================


class HandleStoreProtocol(Protocol):
    """Durable persistence for the current handle. No validation beyond the
    format check on save, no network calls."""

    def load(self) -> Optional[str]:
        """Return the stored handle or None"""
        ...

    def save(self, handle: str) -> None:
        """Persist a handle; raises InvalidHandleError on a malformed value"""
        ...

    def clear(self) -> None:
        """Remove the stored handle"""
        ...


class HandleValidatorProtocol(Protocol):
    """Single live probe of a handle against the backing store"""

    async def probe(self, handle: str) -> ProbeResult:
        """Classify a handle as live, expired or indeterminate"""
        ...


class HandleProvisionerProtocol(Protocol):
    """Acquires a brand-new handle"""

    async def provision(self) -> str:
        """Return a fresh handle; raises ProvisionError on failure"""
        ...


class HandleManagerProtocol(Protocol):
    """Produces a usable handle on demand"""

    async def get_handle(self) -> str:
        """Return a usable handle; raises UnavailableError when provisioning fails"""
        ...

    def invalidate(self, handle: Optional[str] = None) -> None:
        """Drop the stored handle"""
        ...

    def info(self) -> Optional[HandleInfo]:
        """Stored handle without a network round trip"""
        ...


# ====================
# Custom Exceptions
# ====================


class CampaignServiceError(Exception):
    """Base exception for campaign service errors"""
    pass


class InvalidHandleError(CampaignServiceError, ValueError):
    """Raised when a value does not match the handle format"""

    def __init__(self, message: str, handle: Optional[str] = None):
        super().__init__(message)
        self.handle = handle


class ProvisionError(CampaignServiceError):
    """Raised when no handle could be obtained from the discovery endpoint"""
    pass


class UnavailableError(ProvisionError):
    """Raised by the lifecycle manager when provisioning was required and failed"""
    pass


class BackingStoreError(CampaignServiceError):
    """Base for failures of a scoped CRUD operation"""

    def __init__(
        self,
        message: str,
        operation: Optional[str] = None,
        status_code: Optional[int] = None,
    ):
        super().__init__(message)
        self.operation = operation
        self.status_code = status_code


class ExpiredResourceError(BackingStoreError):
    """Raised when the handle's bucket is gone and the retry was used up"""
    pass


class NotFoundError(BackingStoreError):
    """Raised when a record does not exist inside a live bucket"""
    pass


class ServiceUnavailableError(BackingStoreError):
    """Raised on server-side failures of the backing store"""
    pass


class NetworkError(BackingStoreError):
    """Raised on transport failures (connect, read, timeout)"""
    pass


class BadRequestError(BackingStoreError):
    """Raised when the backing store rejects the request"""
    pass


class UnauthorizedError(BackingStoreError):
    """Raised on 401/403 from the backing store"""
    pass


class CampaignValidationError(CampaignServiceError):
    """Raised when campaign validation fails"""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class CampaignAccessError(CampaignServiceError):
    """Raised when a user touches a campaign they do not own"""

    def __init__(self, message: str, campaign_id: Optional[str] = None):
        super().__init__(message)
        self.campaign_id = campaign_id


__all__ = [
    "HandleStoreProtocol",
    "HandleValidatorProtocol",
    "HandleProvisionerProtocol",
    "HandleManagerProtocol",
    "CampaignServiceError",
    "InvalidHandleError",
    "ProvisionError",
    "UnavailableError",
    "BackingStoreError",
    "ExpiredResourceError",
    "NotFoundError",
    "ServiceUnavailableError",
    "NetworkError",
    "BadRequestError",
    "UnauthorizedError",
    "CampaignValidationError",
    "CampaignAccessError",
]
