"""
Component Test Layer Configuration

Structure:
    tests/component/
    ├── campaign/    Handle lifecycle, gateway and campaign service
    └── mocks/       Mock implementations

Usage:
    pytest tests/component -v
    pytest tests/component/campaign -v
"""
import os
import sys

import pytest

# Set testing environment BEFORE any imports
os.environ["ENV"] = "testing"
os.environ["ENVIRONMENT"] = "testing"

# Add project root
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from tests.component.mocks import MockHttpClient


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Configure custom markers"""
    config.addinivalue_line(
        "markers", "component: marks tests as component tests"
    )


# =============================================================================
# HTTP Mocks
# =============================================================================

@pytest.fixture
def mock_http() -> MockHttpClient:
    """Mock httpx.AsyncClient shared by the CrudCrud clients"""
    return MockHttpClient()
