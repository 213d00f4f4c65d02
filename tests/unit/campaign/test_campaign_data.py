"""
Unit Tests for Campaign Models

Field validation mirrors the campaign form rules.
"""

import pytest
from pydantic import ValidationError

from campaign_service.models import Campaign, CampaignData, TargetGender
from tests.fixtures import make_campaign_data, make_campaign_record


pytestmark = pytest.mark.unit


class TestCampaignDataValid:
    """Well-formed campaign fields"""

    def test_valid_data(self):
        data = CampaignData(**make_campaign_data())

        assert data.name == "Holiday Push"
        assert data.target_gender is TargetGender.ALL
        assert data.inventory == ["Hulu", "ABC"]

    def test_name_is_stripped(self):
        data = CampaignData(**make_campaign_data(name="  Spring Launch  "))
        assert data.name == "Spring Launch"

    def test_equal_ages_allowed(self):
        data = CampaignData(**make_campaign_data(target_age_min=30, target_age_max=30))
        assert data.target_age_min == data.target_age_max == 30


class TestCampaignDataInvalid:
    """Each rule rejects with a readable message"""

    @pytest.mark.parametrize("name, message", [
        ("   ", "Campaign name is required"),
        ("ab", "at least 3 characters"),
        ("x" * 101, "less than 100 characters"),
    ])
    def test_name_rules(self, name, message):
        with pytest.raises(ValidationError) as exc_info:
            CampaignData(**make_campaign_data(name=name))
        assert message in str(exc_info.value)

    @pytest.mark.parametrize("budget", [0, -10])
    def test_budget_must_be_positive(self, budget):
        with pytest.raises(ValidationError):
            CampaignData(**make_campaign_data(budget_goal_usd=budget))

    def test_end_date_after_start_date(self):
        with pytest.raises(ValidationError) as exc_info:
            CampaignData(**make_campaign_data(start_date="2026-11-10", end_date="2026-11-10"))
        assert "End date must be after start date" in str(exc_info.value)

    def test_max_age_not_below_min_age(self):
        with pytest.raises(ValidationError) as exc_info:
            CampaignData(**make_campaign_data(target_age_min=40, target_age_max=30))
        assert "Maximum age must be greater than or equal to minimum age" in str(exc_info.value)

    @pytest.mark.parametrize("age", [17, 100])
    def test_age_bounds(self, age):
        with pytest.raises(ValidationError):
            CampaignData(**make_campaign_data(target_age_min=age))

    @pytest.mark.parametrize("field", ["geo_countries", "inventory", "screens"])
    def test_selections_required(self, field):
        with pytest.raises(ValidationError):
            CampaignData(**make_campaign_data(**{field: []}))

    def test_unknown_publisher(self):
        with pytest.raises(ValidationError) as exc_info:
            CampaignData(**make_campaign_data(inventory=["Hulu", "Netflix"]))
        assert "Unknown publisher: Netflix" in str(exc_info.value)

    def test_unknown_gender(self):
        with pytest.raises(ValidationError):
            CampaignData(**make_campaign_data(target_gender="Other"))


class TestCampaignRecord:
    """Stored records and request payloads"""

    def test_parses_store_id_alias(self):
        record = make_campaign_record(user_id="user_B", record_id="abc123")
        campaign = Campaign.model_validate(record)

        assert campaign.id == "abc123"
        assert campaign.user_id == "user_B"

    def test_payload_has_owner_but_no_id(self):
        campaign = Campaign.model_validate(make_campaign_record(user_id="user_A"))
        payload = campaign.to_payload()

        assert "_id" not in payload
        assert "id" not in payload
        assert payload["user_id"] == "user_A"
        assert payload["start_date"] == "2026-11-01"
        assert payload["target_gender"] == "All"

    def test_data_strips_identity(self):
        campaign = Campaign.model_validate(make_campaign_record())
        data = campaign.data()

        assert isinstance(data, CampaignData)
        assert not isinstance(data, Campaign)
        assert data.name == campaign.name

    def test_owner_required(self):
        record = make_campaign_record()
        record["user_id"] = ""
        with pytest.raises(ValidationError):
            Campaign.model_validate(record)
