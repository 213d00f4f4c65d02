#!/usr/bin/env python3
"""Backing store configuration

Endpoints, timeouts and the expiry classification table for the public
CrudCrud sandbox that holds campaign records.
"""
import os
from dataclasses import dataclass, field
from typing import FrozenSet

DEFAULT_EXPIRED_STATUSES: FrozenSet[int] = frozenset({404, 410})


def _bool(val: str) -> bool:
    return val.lower() == "true"

def _float(val: str, default: float) -> float:
    try:
        return float(val) if val else default
    except ValueError:
        return default

def _status_set(val: str, default: FrozenSet[int]) -> FrozenSet[int]:
    """Parse a comma separated list of HTTP status codes"""
    if not val:
        return default
    try:
        codes = frozenset(int(part) for part in val.split(",") if part.strip())
    except ValueError:
        return default
    return codes or default


@dataclass
class BackingStoreConfig:
    """CrudCrud sandbox endpoints and handle lifecycle settings"""

    # ===========================================
    # Endpoints
    # ===========================================
    provider_root: str = "https://crudcrud.com/api"
    discovery_url: str = "https://crudcrud.com/"
    collection: str = "campaigns"

    # ===========================================
    # Request behaviour
    # ===========================================
    request_timeout: float = 30.0

    # Statuses that mean "this handle's bucket is gone". The provider has used
    # 400, 404 and 410 at different times, so this is overridable.
    expired_statuses: FrozenSet[int] = field(default_factory=lambda: DEFAULT_EXPIRED_STATUSES)
    retry_on_network_error: bool = True
    disambiguate_not_found: bool = True

    # ===========================================
    # Durable handle storage
    # ===========================================
    # Empty string disables durable storage entirely
    handle_store_path: str = "~/.jamloop/storage.json"
    handle_storage_key: str = "crudcrud_resource_id"

    @property
    def provider_host(self) -> str:
        """Host part of the provider root, e.g. ``crudcrud.com``"""
        without_scheme = self.provider_root.split("://", 1)[-1]
        return without_scheme.split("/", 1)[0]

    @classmethod
    def from_env(cls) -> 'BackingStoreConfig':
        """Load backing store config from environment variables"""
        return cls(
            provider_root=os.getenv("CRUDCRUD_API_ROOT", "https://crudcrud.com/api"),
            discovery_url=os.getenv("CRUDCRUD_DISCOVERY_URL", "https://crudcrud.com/"),
            collection=os.getenv("CRUDCRUD_COLLECTION", "campaigns"),
            request_timeout=_float(os.getenv("CRUDCRUD_TIMEOUT", "30"), 30.0),
            expired_statuses=_status_set(
                os.getenv("CRUDCRUD_EXPIRED_STATUSES", ""), DEFAULT_EXPIRED_STATUSES
            ),
            retry_on_network_error=_bool(os.getenv("CRUDCRUD_RETRY_ON_NETWORK_ERROR", "true")),
            disambiguate_not_found=_bool(os.getenv("CRUDCRUD_DISAMBIGUATE_NOT_FOUND", "true")),
            handle_store_path=os.getenv("HANDLE_STORE_PATH", "~/.jamloop/storage.json"),
            handle_storage_key=os.getenv("HANDLE_STORAGE_KEY", "crudcrud_resource_id"),
        )
