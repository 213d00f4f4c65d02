"""
Campaign Service Data Models

Pydantic models and enums for resource handles and campaign records.
"""

import re
from datetime import date
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, field_validator, model_validator


# =============================================================================
# RESOURCE HANDLE
# =============================================================================

# Case-insensitive hex, at least 32 characters
HANDLE_PATTERN = re.compile(r"^[a-f0-9]{32,}$", re.IGNORECASE)


def is_valid_handle(value: Optional[str]) -> bool:
    """Check a candidate handle against the format contract"""
    return bool(value) and isinstance(value, str) and HANDLE_PATTERN.match(value) is not None


class ProbeResult(str, Enum):
    """Outcome of a live handle probe"""
    LIVE = "live"
    EXPIRED = "expired"
    INDETERMINATE = "indeterminate"

    @property
    def usable(self) -> bool:
        """Indeterminate handles are kept in use"""
        return self is not ProbeResult.EXPIRED


# =============================================================================
# CAMPAIGN OPTIONS
# =============================================================================

INVENTORY_OPTIONS = (
    "Hulu",
    "Discovery",
    "ABC",
    "A&E",
    "TLC",
    "Fox News",
    "Fox Sports",
)

SCREEN_OPTIONS = (
    "CTV",
    "Mobile Device",
    "Web Browser",
)

COUNTRY_OPTIONS = (
    "United States",
    "Canada",
    "United Kingdom",
    "Australia",
    "Germany",
    "France",
    "Japan",
    "Mexico",
)

MIN_TARGET_AGE = 18
MAX_TARGET_AGE = 99


class TargetGender(str, Enum):
    """Audience gender targeting"""
    MALE = "Male"
    FEMALE = "Female"
    ALL = "All"


# =============================================================================
# BASE MODELS
# =============================================================================

class BaseContract(BaseModel):
    """Base model for all contracts"""

    model_config = {
        "from_attributes": True,
        "populate_by_name": True,
    }


class HandleInfo(BaseContract):
    """Currently stored handle, read without touching the network"""
    handle: str = Field(..., description="Stored resource handle")
    storage_key: str = Field(..., description="Durable storage key holding the handle")


# =============================================================================
# CAMPAIGN MODELS
# =============================================================================

def _check_options(values: List[str], allowed: tuple, label: str) -> List[str]:
    unknown = [v for v in values if v not in allowed]
    if unknown:
        raise ValueError(f"Unknown {label}: {', '.join(unknown)}")
    return values


class CampaignData(BaseContract):
    """Campaign fields supplied by the user (no id, no owner)"""
    name: str = Field(..., description="Campaign name")
    budget_goal_usd: float = Field(..., gt=0, description="Budget goal in USD")
    start_date: date
    end_date: date
    target_age_min: int = Field(..., ge=MIN_TARGET_AGE, le=MAX_TARGET_AGE)
    target_age_max: int = Field(..., ge=MIN_TARGET_AGE, le=MAX_TARGET_AGE)
    target_gender: TargetGender = TargetGender.ALL
    geo_countries: List[str] = Field(..., min_length=1, description="At least one country")
    geo_states: str = ""
    geo_cities: str = ""
    geo_zip_codes: str = ""
    inventory: List[str] = Field(..., min_length=1, description="Publishers")
    screens: List[str] = Field(..., min_length=1, description="Screen types")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Campaign name is required")
        if len(v) < 3:
            raise ValueError("Campaign name must be at least 3 characters")
        if len(v) > 100:
            raise ValueError("Campaign name must be less than 100 characters")
        return v

    @field_validator("geo_countries")
    @classmethod
    def validate_countries(cls, v: List[str]) -> List[str]:
        return _check_options(v, COUNTRY_OPTIONS, "country")

    @field_validator("inventory")
    @classmethod
    def validate_inventory(cls, v: List[str]) -> List[str]:
        return _check_options(v, INVENTORY_OPTIONS, "publisher")

    @field_validator("screens")
    @classmethod
    def validate_screens(cls, v: List[str]) -> List[str]:
        return _check_options(v, SCREEN_OPTIONS, "screen type")

    @model_validator(mode="after")
    def validate_ranges(self) -> "CampaignData":
        if self.end_date <= self.start_date:
            raise ValueError("End date must be after start date")
        if self.target_age_min > self.target_age_max:
            raise ValueError("Maximum age must be greater than or equal to minimum age")
        return self


class Campaign(CampaignData):
    """Campaign record as stored in the backing store"""
    id: Optional[str] = Field(None, alias="_id", description="Assigned by the backing store")
    user_id: str = Field(..., min_length=1, description="Owning user")

    def data(self) -> CampaignData:
        """Strip identity and ownership"""
        return CampaignData.model_validate(self.model_dump(exclude={"id", "user_id"}))

    def to_payload(self) -> Dict[str, Any]:
        """JSON body for create/update; the store rejects bodies carrying _id"""
        return self.model_dump(mode="json", exclude={"id"})


__all__ = [
    "HANDLE_PATTERN",
    "is_valid_handle",
    "ProbeResult",
    "INVENTORY_OPTIONS",
    "SCREEN_OPTIONS",
    "COUNTRY_OPTIONS",
    "MIN_TARGET_AGE",
    "MAX_TARGET_AGE",
    "TargetGender",
    "BaseContract",
    "HandleInfo",
    "CampaignData",
    "Campaign",
]
