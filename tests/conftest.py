"""
Root conftest.py - Global fixtures and configuration for all test layers.

Test Layers:
    - component/  : Component tests (mocked HTTP, in-memory or tmp-file storage)
    - unit/       : Unit tests (pure functions, no I/O)
"""
import os
import sys
from typing import Any, Dict

import pytest

# Keep tests away from the developer's real storage file
os.environ["ENV"] = "testing"
os.environ["ENVIRONMENT"] = "testing"
os.environ["HANDLE_STORE_PATH"] = ""

# Add project root to path
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, PROJECT_ROOT)

from tests.fixtures import (
    make_handle,
    make_user_id,
    make_record_id,
    make_discovery_page,
    make_campaign_data,
    make_campaign_record,
)


# =============================================================================
# Sample Data Fixtures
# =============================================================================

@pytest.fixture
def handle() -> str:
    """A well-formed resource id"""
    return make_handle()


@pytest.fixture
def other_handle() -> str:
    """A second, different well-formed resource id"""
    return make_handle()


@pytest.fixture
def campaign_data() -> Dict[str, Any]:
    """Valid campaign fields"""
    return make_campaign_data()


@pytest.fixture
def campaign_record() -> Dict[str, Any]:
    """Stored campaign owned by user_A"""
    return make_campaign_record(user_id="user_A")
