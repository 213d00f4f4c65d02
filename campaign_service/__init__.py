"""
Campaign Service

Ad campaign management for JamLoop users, backed by the public CrudCrud
sandbox:
- Owner-scoped campaign CRUD (list, get, create, update, delete)
- Resource handle lifecycle (probe, expiry detection, auto-provisioning)
- One transparent retry when a bucket expires mid-operation
- Manual administration of the stored resource id
"""

from .campaign_service import CampaignService
from .factory import CampaignServiceFactory, close_factory, get_factory
from .gateway import DataOperationGateway
from .handles import HandleLifecycleManager
from .messages import user_message
from .models import Campaign, CampaignData, HandleInfo, ProbeResult, is_valid_handle

__version__ = "1.0.0"
__service__ = "campaign_service"

__all__ = [
    "CampaignService",
    "CampaignServiceFactory",
    "get_factory",
    "close_factory",
    "DataOperationGateway",
    "HandleLifecycleManager",
    "user_message",
    "Campaign",
    "CampaignData",
    "HandleInfo",
    "ProbeResult",
    "is_valid_handle",
]
