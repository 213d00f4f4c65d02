"""
Campaign Service - Business Logic Layer

Owner-scoped campaign operations over the data operation gateway. The
backing store has no notion of users, so isolation happens here: every
write carries the owner and every read is filtered or checked by owner.
"""

import logging
from typing import List

from pydantic import ValidationError

from .gateway import DataOperationGateway
from .models import Campaign, CampaignData
from .protocols import CampaignAccessError, CampaignValidationError

logger = logging.getLogger(__name__)


class CampaignService:
    """Campaign CRUD for a signed-in user"""

    def __init__(self, gateway: DataOperationGateway):
        self.gateway = gateway

    @staticmethod
    def _require_user(user_id: str) -> str:
        if not user_id or not user_id.strip():
            raise CampaignValidationError("User not authenticated", field="user_id")
        return user_id

    @staticmethod
    def _to_campaign(record: dict) -> Campaign:
        try:
            return Campaign.model_validate(record)
        except ValidationError as e:
            raise CampaignValidationError(
                f"Stored campaign {record.get('_id')} is malformed: {e}"
            ) from e

    async def list_campaigns(self, user_id: str) -> List[Campaign]:
        """
        Campaigns owned by a user.

        Records owned by other users are filtered out; malformed records are
        skipped with a warning.
        """
        self._require_user(user_id)
        records = await self.gateway.read()

        campaigns = []
        for record in records:
            if record.get("user_id") != user_id:
                continue
            try:
                campaigns.append(Campaign.model_validate(record))
            except ValidationError as e:
                logger.warning(f"Skipping malformed campaign {record.get('_id')}: {e}")

        logger.debug(f"Loaded {len(campaigns)} of {len(records)} campaigns for {user_id}")
        return campaigns

    async def get_campaign(self, campaign_id: str, user_id: str) -> Campaign:
        """
        Get one campaign owned by the user.

        Raises:
            NotFoundError: No such campaign
            CampaignAccessError: Campaign belongs to another user
        """
        self._require_user(user_id)
        record = await self.gateway.read_one(campaign_id)

        if record.get("user_id") != user_id:
            logger.warning(f"User {user_id} denied access to campaign {campaign_id}")
            raise CampaignAccessError(
                "You do not have permission to edit this campaign", campaign_id=campaign_id
            )
        return self._to_campaign(record)

    async def create_campaign(self, data: CampaignData, user_id: str) -> Campaign:
        """Create a campaign tagged with its owner"""
        self._require_user(user_id)
        campaign = Campaign(**data.model_dump(), user_id=user_id)

        record = await self.gateway.create(campaign.to_payload())
        created = self._to_campaign(record)
        logger.info(f"Created campaign {created.id} for {user_id}")
        return created

    async def update_campaign(self, campaign_id: str, data: CampaignData, user_id: str) -> Campaign:
        """Replace a campaign the user owns"""
        await self.get_campaign(campaign_id, user_id)
        campaign = Campaign(**data.model_dump(), id=campaign_id, user_id=user_id)

        await self.gateway.update(campaign_id, campaign.to_payload())
        logger.info(f"Updated campaign {campaign_id} for {user_id}")
        return campaign

    async def delete_campaign(self, campaign_id: str, user_id: str) -> None:
        """Delete a campaign the user owns"""
        await self.get_campaign(campaign_id, user_id)
        await self.gateway.delete(campaign_id)
        logger.info(f"Deleted campaign {campaign_id} for {user_id}")


__all__ = ["CampaignService"]
