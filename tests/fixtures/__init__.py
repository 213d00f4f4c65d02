"""
Shared Test Fixtures

Centralized factories used across all test layers.

Structure:
    - common.py: Resource ids, user ids, record ids, discovery pages
    - campaign_fixtures.py: Campaign payloads and stored records
"""

from .common import (
    make_handle,
    make_user_id,
    make_record_id,
    make_discovery_page,
)

from .campaign_fixtures import (
    make_campaign_data,
    make_campaign_record,
)

__all__ = [
    "make_handle",
    "make_user_id",
    "make_record_id",
    "make_discovery_page",
    "make_campaign_data",
    "make_campaign_record",
]
