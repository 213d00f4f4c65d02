"""
Campaign Service Clients

Clients for the CrudCrud backing store.
"""

from .crud_store_client import CrudStoreClient
from .discovery_client import DiscoveryClient

__all__ = [
    "CrudStoreClient",
    "DiscoveryClient",
]
