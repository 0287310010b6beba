"""
Pydantic schema for node records received from the upstream rankings feed
"""

from typing import Dict, Optional

from pydantic import BaseModel, Field, field_validator

INT32_MAX = 2**31 - 1
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class ExternalNode(BaseModel):
    """
    One element of the feed's JSON array.
    
    Field names follow the feed's camelCase keys; unknown keys are ignored.
    """
    
    public_key: str = Field(..., alias="publicKey", min_length=1)
    alias: str = ""
    # bounded to the widths of the stored INTEGER columns
    channels: int = Field(..., ge=0, le=INT32_MAX)
    capacity: int = Field(..., ge=0, le=INT64_MAX)  # satoshis
    first_seen: int = Field(..., alias="firstSeen", ge=INT64_MIN, le=INT64_MAX)
    updated_at: int = Field(..., alias="updatedAt", ge=INT64_MIN, le=INT64_MAX)
    
    # locale code -> localized name, e.g. {"en": "Berlin", "de": "Berlin"}
    city: Optional[Dict[str, str]] = None
    country: Optional[Dict[str, str]] = None
    
    @field_validator("alias", mode="before")
    @classmethod
    def default_alias(cls, v):
        """Nodes without an alias are sent as null"""
        return "" if v is None else v
    
    class Config:
        populate_by_name = True
        extra = "ignore"
