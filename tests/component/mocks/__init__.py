"""
Component Test Mocks

Shared mock implementations for component testing.
These mocks replace real I/O dependencies (HTTP, provisioning).
"""

from .http_mock import MockHttpClient, MockHttpResponse
from .handle_mocks import (
    API_ROOT,
    DISCOVERY_URL,
    StubProvisioner,
    collection_url,
    record_url,
)

__all__ = [
    'MockHttpClient',
    'MockHttpResponse',
    'API_ROOT',
    'DISCOVERY_URL',
    'StubProvisioner',
    'collection_url',
    'record_url',
]
